"""Local filesystem storage for cache entries.

Blocking ``os``/``pathlib`` calls run in a worker thread so the event loop
keeps serving other tasks while the disk is busy.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path


class LocalStorage:
    """Filesystem-backed implementation of the ``Storage`` protocol."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def mtime(self, path: Path) -> float:
        stat = await asyncio.to_thread(os.stat, path)
        return stat.st_mtime

    async def read_text(self, path: Path) -> str:
        return await asyncio.to_thread(self._read, path)

    async def write_text(self, path: Path, text: str) -> None:
        await asyncio.to_thread(self._write_atomic, path, text)

    async def make_dirs(self, path: Path) -> None:
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)

    def _read(self, path: Path) -> str:
        with open(path, encoding=self._encoding, newline="") as handle:
            return handle.read()

    def _write_atomic(self, path: Path, text: str) -> None:
        # Temp file lives beside the target so os.replace stays on one filesystem.
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=self._encoding, newline="") as handle:
                handle.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
