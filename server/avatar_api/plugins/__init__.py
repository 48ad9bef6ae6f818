from .cache import BoundedCache, CacheManager
from .client import AvatarApiClient

__all__ = ["BoundedCache", "CacheManager", "AvatarApiClient"]
