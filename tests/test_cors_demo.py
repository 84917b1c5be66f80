def test_test1_has_no_cors_headers(client):
    resp = client.get("/test1")

    assert resp.json() == {"message": "test1 worked"}
    assert "access-control-allow-origin" not in resp.headers


def test_test2_allows_any_origin(client):
    resp = client.get("/test2")

    assert resp.json() == {"message": "test2 worked"}
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-methods" not in resp.headers


def test_test3_wildcards(client):
    resp = client.get("/test3")

    assert resp.headers["access-control-allow-headers"] == "*"
    assert resp.headers["access-control-allow-methods"] == "*"


def test_test4_explicit_lists(client):
    resp = client.get("/test4")

    assert resp.json() == {"message": "test4 worked"}
    assert resp.headers["access-control-allow-methods"] == "OPTIONS, POST, GET, PUT"
    assert resp.headers["vary"] == "Origin"


def test_test5_preflight_and_get(client):
    preflight = client.options("/test5")
    resp = client.get("/test5")

    assert preflight.status_code == 204
    assert "POST" in preflight.headers["access-control-allow-methods"]
    assert resp.json() == {"message": "test5 worked"}


BROWSER_ORIGIN = {"Origin": "https://example.org"}


def test_test1_has_no_cors_headers_from_browser(client):
    resp = client.get("/test1", headers=BROWSER_ORIGIN)

    assert resp.json() == {"message": "test1 worked"}
    assert "access-control-allow-origin" not in resp.headers


def test_test2_only_sends_its_own_header_from_browser(client):
    resp = client.get("/test2", headers=BROWSER_ORIGIN)

    assert resp.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-methods" not in resp.headers
    assert "vary" not in resp.headers


def test_test4_headers_unchanged_from_browser(client):
    resp = client.get("/test4", headers=BROWSER_ORIGIN)

    assert resp.headers["access-control-allow-methods"] == "OPTIONS, POST, GET, PUT"
    assert resp.headers["vary"] == "Origin"


def test_test5_preflight_handled_by_route(client):
    resp = client.options(
        "/test5",
        headers={**BROWSER_ORIGIN, "Access-Control-Request-Method": "GET"},
    )

    assert resp.status_code == 204
    assert resp.headers["access-control-allow-methods"] == "GET,HEAD,PUT,PATCH,POST,DELETE"
