from html import escape

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
  </head>
  <body>
    <h1>{title}</h1>
    {body}
  </body>
</html>
"""

INDEX_BODY = """<p>Join a room with <code>GET /room/&lt;name&gt;</code>.</p>
    <p>Archives: <code>POST /archive/start</code>, <code>POST /archive/&lt;id&gt;/stop</code>,
    <code>GET /archive/&lt;id&gt;</code>, <code>GET /archive</code>.</p>"""

PENDING_BODY = """<p>The archive is not available yet. Refresh this page in a few moments.</p>"""


def render_page(title: str, body: str = "") -> str:
    return PAGE_TEMPLATE.format(title=escape(title), body=body)


def index_page() -> str:
    return render_page("Room Archive Server", INDEX_BODY)


def archive_pending_page() -> str:
    return render_page("Archiving Pending", PENDING_BODY)
