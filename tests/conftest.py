"""Fixtures shared by unit and integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

if TYPE_CHECKING:
    from pathlib import Path

# Fixed epoch for clock-controlled tests (2023-11-14T22:13:20Z)
T0 = 1_700_000_000.0


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Undo configure_logging after each test.

    The CLI binds structlog to the sys.stderr of its invocation. CliRunner
    closes that stream afterwards, so later log calls would fail on it.
    """
    yield
    structlog.reset_defaults()


class RecordingFetcher:
    """BodyFetcher fake that returns queued bodies and records requested URLs."""

    def __init__(self, *bodies: str) -> None:
        self.bodies = list(bodies)
        self.calls: list[str] = []

    async def fetch_body(self, url: str) -> str:
        self.calls.append(url)
        return self.bodies.pop(0)


class FakeClock:
    """Controllable replacement for time.time."""

    def __init__(self, now: float) -> None:
        self.start = now
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def make_fetcher() -> type[RecordingFetcher]:
    return RecordingFetcher


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(T0)


@pytest.fixture()
def cache_dir(tmp_path: Path) -> Path:
    """A cache directory that does not exist yet."""
    return tmp_path / "cache"
