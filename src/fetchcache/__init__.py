"""Async HTTP request helper with a disk-backed response cache."""

from __future__ import annotations

__version__ = "0.1.0"

from fetchcache.cache import (  # noqa: E402
    DiskCache,
    fetch_with_cache,
    file_exists_with_expiry,
    hash_key,
)
from fetchcache.client import ApiClient  # noqa: E402
from fetchcache.errors import ErrorCode, FetchCacheError, NetworkError  # noqa: E402
from fetchcache.fetcher import HttpFetcher, build_http_client  # noqa: E402
from fetchcache.models import MethodType, RequestError, RequestResult  # noqa: E402
from fetchcache.storage import LocalStorage  # noqa: E402

__all__ = [
    "__version__",
    # cache
    "DiskCache",
    "fetch_with_cache",
    "file_exists_with_expiry",
    "hash_key",
    "LocalStorage",
    # http
    "ApiClient",
    "HttpFetcher",
    "build_http_client",
    "MethodType",
    "RequestError",
    "RequestResult",
    # errors
    "ErrorCode",
    "FetchCacheError",
    "NetworkError",
]
