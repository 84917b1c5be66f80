from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend import OpenTokBackend, ProviderError
from constants import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_ORIGINS,
    LOG_FILE,
    LOG_LEVEL,
    MEDIA_MODE,
)
from logging_config import get_logger, setup_logging
from middleware import APICORSMiddleware
from registry import RoomSessionRegistry
from routers.archives import archives_router
from routers.cors_demo import CORS_DEMO_PATHS, cors_demo_router
from routers.rooms import rooms_router

setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)


def create_app(backend=None, media_mode: str = MEDIA_MODE) -> FastAPI:
    """Build the application.

    `backend` is the provider facade; when omitted it is built from the
    environment at startup, which stops the process if credentials are missing.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.backend = backend if backend is not None else OpenTokBackend.from_env()
        # Room mappings live as long as this process and are lost on restart
        app.state.registry = RoomSessionRegistry(app.state.backend, media_mode=media_mode)
        logger.info(f"Room registry ready (media mode: {media_mode})")
        yield
        logger.info(f"Shutting down with {len(app.state.registry)} rooms in memory")

    app = FastAPI(title="Room Archive Server", lifespan=lifespan)

    app.add_middleware(
        APICORSMiddleware,
        exclude_paths=CORS_DEMO_PATHS,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.error(f"Error in {exc.operation} for {request.url.path}: {exc.cause}", exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(rooms_router)
    app.include_router(archives_router)
    app.include_router(cors_demo_router)

    logger.info("FastAPI application initialized")
    return app


app = create_app()
