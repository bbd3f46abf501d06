"""Capabilities injected into the cache orchestrator.

Both are structural: any object with matching async methods qualifies, so
tests can pass in-memory fakes instead of the network or the disk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class BodyFetcher(Protocol):
    async def fetch_body(self, url: str) -> str:
        """Return the full response body for *url*.

        Raises ``NetworkError`` on transport failure or a non-success status.
        """
        ...


@runtime_checkable
class Storage(Protocol):
    async def mtime(self, path: Path) -> float:
        """Last-modified time of *path* in epoch seconds. Raises ``OSError``."""
        ...

    async def read_text(self, path: Path) -> str: ...

    async def write_text(self, path: Path, text: str) -> None:
        """Replace the whole content of *path* with *text*."""
        ...

    async def make_dirs(self, path: Path) -> None:
        """Create *path* and any missing parents; no error if it exists."""
        ...
