"""In-memory response caches."""

import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional

from config import settings
from avatar_api.elements import Element
from avatar_api.models.avatar import AvatarResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10000


class BoundedCache:
    """Size-capped cache with first-in first-out eviction.

    When a new key would push the cache past ``max_entries``, the entry that was
    inserted longest ago is dropped. Reads never refresh an entry, so this is
    not an LRU. There is no time-based expiry.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES, name: str = "cache"):
        """Initialize the cache."""
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.name = name
        self.max_entries = max_entries
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None when absent."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        """Store a value, evicting the oldest entries when full."""
        with self._lock:
            if key in self._entries:
                # Replaced in place, insertion position is kept
                self._entries[key] = value
                return
            while len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"{self.name}: evicted {evicted!r}")
            self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheManager:
    """Owns the per-user element and avatar response caches."""

    def __init__(self, max_entries: Optional[int] = None):
        """Initialize the caches."""
        self.max_entries = settings.CACHE_MAX_ENTRIES if max_entries is None else max_entries
        self.elements = BoundedCache(self.max_entries, name="elements")
        self.avatars = BoundedCache(self.max_entries, name="avatars")

    def get_element(self, user_id: str) -> Optional[Element]:
        """Get a cached element."""
        return self.elements.get(user_id)

    def set_element(self, user_id: str, element: Element) -> None:
        """Cache an element."""
        self.elements.set(user_id, element)

    def get_avatar(self, user_id: str) -> Optional[AvatarResponse]:
        """Get a cached avatar response."""
        return self.avatars.get(user_id)

    def set_avatar(self, user_id: str, response: AvatarResponse) -> None:
        """Cache an avatar response."""
        self.avatars.set(user_id, response)

    def stats(self) -> Dict[str, int]:
        """Current entry counts."""
        return {
            "elements": len(self.elements),
            "avatars": len(self.avatars),
            "max_entries": self.max_entries,
        }

    def clear(self) -> None:
        """Drop every cached entry."""
        self.elements.clear()
        self.avatars.clear()
