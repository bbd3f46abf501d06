"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


class MemoryStorage:
    """In-memory Storage with modification times taken from the given clock."""

    def __init__(self, clock: Callable[[], float]) -> None:
        self.files: dict[Path, tuple[str, float]] = {}
        self.dirs: set[Path] = set()
        self.writes: list[Path] = []
        self._clock = clock

    async def mtime(self, path: Path) -> float:
        try:
            return self.files[path][1]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    async def read_text(self, path: Path) -> str:
        try:
            return self.files[path][0]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    async def write_text(self, path: Path, text: str) -> None:
        if path.parent not in self.dirs:
            raise FileNotFoundError(str(path.parent))
        self.files[path] = (text, self._clock())
        self.writes.append(path)

    async def make_dirs(self, path: Path) -> None:
        self.dirs.add(path)


@pytest.fixture()
def memory_storage(clock) -> MemoryStorage:
    return MemoryStorage(clock)
