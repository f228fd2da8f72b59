"""
Application factory for the Songs API.

``create_app`` wires one ``SongStore`` into the songs controller, mounts
the route table picked by the settings and installs middleware and error
handlers. A module-level ``app`` is created for uvicorn::

    uvicorn songs_api.main:app --reload
"""
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from .api.endpoints import health
from .api.endpoints.songs import SongsController
from .api.routes import build_songs_router, select_song_routes
from .core.config import Settings, settings
from .core.errors import SongsError, error_response
from .core.logging import setup_logging
from .core.middleware import request_logging_middleware
from .services.song_service import SongStore
import logging

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    # Anything not handled here becomes a 500 in request_logging_middleware
    @app.exception_handler(SongsError)
    async def songs_error_handler(request: Request, exc: SongsError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return error_response(request, exc.status_code, str(exc), getattr(exc, "fields", None))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(request, 422, "Request validation failed", jsonable_encoder(exc.errors()))

def create_app(app_settings: Optional[Settings] = None, store: Optional[SongStore] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings (Optional[Settings]): Settings to use, defaults to the global settings
        store (Optional[SongStore]): Store shared with the songs controller, a new one by default.
            A given store keeps its own ``strict`` flag; ``STRICT_VALIDATION`` only applies
            to the store created here.

    Returns:
        FastAPI: Configured application
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.DEBUG, app_settings.ENVIRONMENT)

    if store is None:
        store = SongStore(strict=app_settings.STRICT_VALIDATION)
    elif store.strict != app_settings.STRICT_VALIDATION:
        logger.warning(
            f"Given store has strict={store.strict}, ignoring STRICT_VALIDATION={app_settings.STRICT_VALIDATION}"
        )

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Songs resource served from an in-memory store",
        version=app_settings.VERSION
    )
    app.state.settings = app_settings
    app.state.song_store = store

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=app_settings.CORS_METHODS,
        allow_headers=app_settings.CORS_HEADERS,
    )
    app.middleware("http")(request_logging_middleware)
    register_exception_handlers(app)

    # Include routers
    routes = select_song_routes(
        store_enabled=app_settings.SONGS_STORE_ENABLED,
        accept_body=app_settings.SONGS_ACCEPT_BODY
    )
    controller = SongsController(store)
    app.include_router(health.router, tags=["health"])
    app.include_router(build_songs_router(controller, routes), prefix=app_settings.SONGS_PREFIX, tags=["songs"])

    logger.info(
        "Songs API ready",
        extra={
            "songs_prefix": app_settings.SONGS_PREFIX,
            "store_enabled": app_settings.SONGS_STORE_ENABLED,
            "accept_body": app_settings.SONGS_ACCEPT_BODY,
            "strict_validation": app_settings.STRICT_VALIDATION
        }
    )
    return app

app = create_app()
