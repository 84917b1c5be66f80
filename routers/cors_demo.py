# Endpoints that show how each CORS header combination behaves from a browser.
from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

cors_demo_router = APIRouter(tags=["cors-demo"], include_in_schema=False)

TEST4_ALLOW_METHODS = "OPTIONS, POST, GET, PUT"
TEST4_ALLOW_HEADERS = "Access-Control-Allow-Origin, Origin, X-Requested-With, Content-type, Accept, Vary"


@cors_demo_router.get("/test1")
async def test1():
    # no CORS headers
    return JSONResponse({"message": "test1 worked"})


@cors_demo_router.get("/test2")
async def test2():
    return JSONResponse(
        {"message": "test2 worked"},
        headers={"Access-Control-Allow-Origin": "*"},
    )


@cors_demo_router.get("/test3")
async def test3():
    return JSONResponse(
        {"message": "test3 worked"},
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "*",
            "Access-Control-Allow-Methods": "*",
        },
    )


@cors_demo_router.get("/test4")
async def test4():
    return JSONResponse(
        {"message": "test4 worked"},
        headers={
            "Access-Control-Allow-Methods": TEST4_ALLOW_METHODS,
            "Access-Control-Allow-Headers": TEST4_ALLOW_HEADERS,
            "Access-Control-Allow-Origin": "*",
            "Vary": "Origin",
        },
    )


def _preflight_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET,HEAD,PUT,PATCH,POST,DELETE",
        "Access-Control-Allow-Headers": TEST4_ALLOW_HEADERS,
        "Vary": "Origin",
    }


@cors_demo_router.options("/test5")
async def test5_preflight():
    return Response(status_code=204, headers=_preflight_headers())


@cors_demo_router.get("/test5")
async def test5():
    return JSONResponse({"message": "test5 worked"}, headers={"Access-Control-Allow-Origin": "*"})


# Served without the app-wide CORS middleware
CORS_DEMO_PATHS = frozenset(route.path for route in cors_demo_router.routes)
