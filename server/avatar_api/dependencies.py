"""Common FastAPI dependencies."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from config import Settings
from avatar_api.plugins.cache import CacheManager

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
API_KEY_QUERY = "apiKey"

# Reachable without a key so liveness probes need no secret
PUBLIC_PATHS = ("/health",)


def api_key_is_valid(request: Request) -> bool:
    """Check the API key from the HTTP header or the query parameters.

    Authentication is skipped when no key is configured.

    Args:
        request: The incoming request.

    Returns:
        Whether the request may proceed.
    """
    expected = request.app.state.settings.AVATAR_API_KEY
    if not expected:
        return True

    api_key = request.headers.get(API_KEY_HEADER) or request.query_params.get(API_KEY_QUERY)
    return api_key == expected


async def require_api_key(request: Request, call_next):
    """Reject every request but the public ones when the API key is wrong or missing."""
    if request.url.path in PUBLIC_PATHS or api_key_is_valid(request):
        return await call_next(request)

    logger.warning(f"Rejected API key for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": "Unauthorized", "message": "Invalid or missing API key"},
    )


def get_cache_manager(request: Request) -> CacheManager:
    """Get the cache manager owned by the application."""
    return request.app.state.cache_manager


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings
