import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, settings as default_settings
from avatar_api.dependencies import require_api_key
from avatar_api.models.web_schemas import HealthResponse
from avatar_api.plugins.cache import CacheManager
from avatar_api.routers import avatars, styles

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"{app.state.settings.SERVICE_NAME} ready")
    yield
    logger.info(f"Shutting down {app.state.settings.SERVICE_NAME}, {app.state.cache_manager.stats()}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as an ``{error}`` body."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        # Any unmatched method and path pair is simply not found
        return JSONResponse(content={"error": "Not found"}, status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(
        content=content, status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log and render request validation errors."""
    exc_str = f"{exc}".replace("\n", " ").replace("   ", " ")
    logger.error(f"{request.method} {request.url.path}: {exc_str}")
    content = {"error": "Invalid request", "message": exc_str}
    return JSONResponse(content=content, status_code=422)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Hide unexpected failures behind a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        content={"error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(
    settings: Optional[Settings] = None, cache_manager: Optional[CacheManager] = None
) -> FastAPI:
    """Build the avatar API application.

    Args:
        settings: Settings to run with, defaults to the environment settings
        cache_manager: Caches to serve from, a fresh manager is created when omitted

    Returns:
        The FastAPI application
    """
    settings = settings or default_settings

    app = FastAPI(title=settings.PROJECT_TITLE, version=settings.PROJECT_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.cache_manager = cache_manager or CacheManager(settings.CACHE_MAX_ENTRIES)

    # Added first so CORS wraps it and preflight requests need no key
    app.middleware("http")(require_api_key)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", tags=["Server"], response_model=HealthResponse)
    async def health():
        """Server status endpoint."""
        return HealthResponse(status="ok", service=settings.SERVICE_NAME)

    app.include_router(avatars.router)
    app.include_router(styles.router)

    logger.info(
        f"Created {settings.SERVICE_NAME}: "
        f"auth {'enabled' if settings.AVATAR_API_KEY else 'disabled'}, "
        f"cache max {app.state.cache_manager.max_entries} entries"
    )
    return app


app = create_app()
