"""Client for the avatar API, used by services that render member profiles."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from config import settings
from avatar_api.elements import to_terreta_slug

logger = logging.getLogger(__name__)


class AvatarApiClient:
    """Avatar API client.

    Lookups never raise for remote failures; they log and return None so that
    profile rendering can fall back to a default avatar.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client."""
        base_url = base_url if base_url is not None else settings.AVATAR_API_URL
        self.base_url = (base_url or "").strip().rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        """Whether a base URL is set."""
        return bool(self.base_url)

    def _get(self, path: str, user_id: str) -> Optional[dict]:
        if not self.configured or not user_id:
            return None

        url = f"{self.base_url}/{path}/{quote(user_id, safe='')}"
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        try:
            r = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Avatar API request failed: {url}: {e}")
            return None

        if not 200 <= r.status_code < 300:
            logger.warning(f"Avatar API returned {r.status_code} for {url}")
            return None

        try:
            data = r.json()
        except ValueError:
            logger.warning(f"Unexpected response from avatar API: {r.text}")
            return None
        return data if isinstance(data, dict) else None

    def fetch_avatar_and_element(self, user_id: str) -> Optional[dict]:
        """Fetch the avatar URL and element slug of a user."""
        data = self._get("avatar", user_id)
        if data is None:
            return None
        return {
            "avatarUrl": data.get("avatarUrl") or "",
            "element": to_terreta_slug(data.get("element")),
        }

    def fetch_element(self, user_id: str) -> Optional[str]:
        """Fetch the element slug of a user."""
        data = self._get("element", user_id)
        if data is None:
            return None
        return to_terreta_slug(data.get("element"))
