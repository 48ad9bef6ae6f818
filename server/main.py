"""Main entry point for the server."""

import logging

import uvicorn

from config import settings

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info(f"Avatar API listening on port {settings.PORT}")
    uvicorn.run(
        "avatar_api:app",
        host="0.0.0.0",
        port=settings.PORT,
        workers=settings.WORKERS,
        reload=False,
    )
