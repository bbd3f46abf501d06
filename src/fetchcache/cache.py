"""Disk cache for response bodies, keyed by URL hash with TTL-based freshness.

Each entry is a plain file ``<cache_dir>/<sha256(url)>`` holding the raw body
text. Its modification time is the only metadata: an entry is fresh while
``mtime + ttl`` lies in the future. The TTL belongs to the lookup, not to the
entry, so two callers with different TTLs may disagree about the same file.

Error handling is deliberately lopsided. The freshness probe swallows every
filesystem error and reports "not fresh", so an unreadable cache behaves like
an empty one. Once the orchestrator commits to reading, fetching, or writing,
failures propagate to the caller unchanged.

There is no locking: concurrent misses for one URL each fetch and write, and
the last write wins.
"""

from __future__ import annotations

import hashlib
import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from fetchcache.config import DEFAULT_CACHE_DIR, DEFAULT_TTL_SECONDS
from fetchcache.models.cache import CacheEntryInfo
from fetchcache.storage import LocalStorage

if TYPE_CHECKING:
    from fetchcache.config import Settings
    from fetchcache.protocols import BodyFetcher, Storage

log = structlog.get_logger()

Clock = Callable[[], float]


def hash_key(url: str) -> str:
    """SHA-256 hex digest of *url*, used as the cache file name."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


def _check_ttl(ttl: int) -> None:
    if ttl < 0:
        raise ValueError(f"ttl must be non-negative, got {ttl}")


async def file_exists_with_expiry(
    path: str | Path,
    ttl: int = DEFAULT_TTL_SECONDS,
    *,
    storage: Storage | None = None,
    clock: Clock = time.time,
) -> bool:
    """Return True if *path* exists and was modified less than *ttl* seconds ago.

    Any error while probing (missing file, permission denied, bad path) yields
    False. Callers cannot tell "never cached" from "cache unreadable".
    """
    if storage is None:
        storage = LocalStorage()
    try:
        modified = await storage.mtime(Path(path))
    except (OSError, ValueError) as exc:
        log.debug("cache_probe_miss", path=str(path), reason=type(exc).__name__)
        return False
    return modified + ttl > clock()


async def fetch_with_cache(
    url: str,
    cache_dir: str | Path = DEFAULT_CACHE_DIR,
    ttl: int = DEFAULT_TTL_SECONDS,
    *,
    fetcher: BodyFetcher,
    storage: Storage | None = None,
    clock: Clock = time.time,
) -> str:
    """Return the body for *url*, from disk when fresh, otherwise from *fetcher*.

    On a miss the fetched body replaces the cache file, creating *cache_dir*
    (and parents) if needed. Read, fetch, mkdir and write errors propagate.
    """
    _check_ttl(ttl)
    if storage is None:
        storage = LocalStorage()

    key = hash_key(url)
    directory = Path(cache_dir)
    path = directory / key

    if await file_exists_with_expiry(path, ttl, storage=storage, clock=clock):
        log.debug("cache_hit", url=url, key=key)
        return await storage.read_text(path)

    log.debug("cache_miss", url=url, key=key)
    body = await fetcher.fetch_body(url)

    await storage.make_dirs(directory)
    await storage.write_text(path, body)
    log.debug("cache_write", url=url, key=key, size=len(body))
    return body


class DiskCache:
    """A cache directory, default TTL, and collaborators bound together.

    Instances share nothing, so separate caches with different directories or
    TTLs can live side by side in one process.

    Example::

        async with build_http_client() as client:
            cache = DiskCache(HttpFetcher(client), cache_dir="/tmp/pages", ttl=300)
            body = await cache.fetch("https://example.com/data.json")
    """

    def __init__(
        self,
        fetcher: BodyFetcher,
        *,
        cache_dir: str | Path = DEFAULT_CACHE_DIR,
        ttl: int = DEFAULT_TTL_SECONDS,
        storage: Storage | None = None,
        clock: Clock = time.time,
    ) -> None:
        _check_ttl(ttl)
        self._fetcher = fetcher
        self._cache_dir = Path(cache_dir)
        self._ttl = ttl
        self._storage = storage if storage is not None else LocalStorage()
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, fetcher: BodyFetcher) -> DiskCache:
        return cls(
            fetcher,
            cache_dir=settings.cache.cache_dir,
            ttl=settings.cache.ttl_seconds,
        )

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def ttl(self) -> int:
        return self._ttl

    def path_for(self, url: str) -> Path:
        return self._cache_dir / hash_key(url)

    async def is_fresh(self, url: str, ttl: int | None = None) -> bool:
        return await file_exists_with_expiry(
            self.path_for(url),
            self._ttl if ttl is None else ttl,
            storage=self._storage,
            clock=self._clock,
        )

    async def fetch(self, url: str, ttl: int | None = None) -> str:
        return await fetch_with_cache(
            url,
            self._cache_dir,
            self._ttl if ttl is None else ttl,
            fetcher=self._fetcher,
            storage=self._storage,
            clock=self._clock,
        )

    async def inspect(self, url: str, ttl: int | None = None) -> CacheEntryInfo | None:
        """Describe the entry for *url*, or None if there is none (or it cannot be probed)."""
        ttl = self._ttl if ttl is None else ttl
        _check_ttl(ttl)
        path = self.path_for(url)
        try:
            modified = await self._storage.mtime(path)
        except (OSError, ValueError):
            return None
        return CacheEntryInfo(
            url=url,
            key=path.name,
            path=str(path),
            modified_at=datetime.fromtimestamp(modified, UTC),
            ttl_seconds=ttl,
            fresh=modified + ttl > self._clock(),
        )
