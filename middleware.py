from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class APICORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves some paths alone.

    The CORS demo endpoints set their own headers and answer their own
    preflight, so requests to `exclude_paths` bypass the middleware.
    """

    def __init__(self, app: ASGIApp, exclude_paths=(), **kwargs):
        super().__init__(app, **kwargs)
        self.exclude_paths = frozenset(exclude_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"] in self.exclude_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
