from __future__ import annotations

from fetchcache.models.cache import CacheEntryInfo
from fetchcache.models.request import MethodType, RequestError, RequestResult

__all__ = [
    # request
    "MethodType",
    "RequestError",
    "RequestResult",
    # cache
    "CacheEntryInfo",
]
