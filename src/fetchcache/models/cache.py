from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CacheEntryInfo(BaseModel):
    """Description of one on-disk cache entry, as seen by a given TTL."""

    url: str
    key: str  # SHA-256 hex digest of url
    path: str
    modified_at: datetime  # File mtime, UTC
    ttl_seconds: int
    fresh: bool
