"""App configuration."""

import logging
import os
from typing import Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))


class Settings(BaseSettings):
    """App settings."""

    PROJECT_TITLE: str = "Terreta Avatar API"
    PROJECT_VERSION: str = "v1"
    SERVICE_NAME: str = "avatar-api"

    PORT: int = int(os.getenv("PORT", "3001"))
    # Caches live in process memory, one worker keeps every user on a single cache
    WORKERS: int = int(os.getenv("APP_WORKERS", "1"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Shared secret, open mode when unset or empty
    AVATAR_API_KEY: Union[str, None] = os.environ.get("AVATAR_API_KEY") or None

    AVATAR_BASE_URL: str = os.environ.get(
        "AVATAR_BASE_URL", "https://api.dicebear.com/7.x/avataaars/svg"
    )
    CACHE_MAX_ENTRIES: int = int(os.getenv("CACHE_MAX_ENTRIES", "10000"))

    # Used by the outbound client only
    AVATAR_API_URL: Union[str, None] = os.environ.get("AVATAR_API_URL") or None


settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
