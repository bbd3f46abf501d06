"""Integration test fixtures.

CLI tests run ``python -m fetchcache`` in a subprocess with a scrubbed
environment so a developer's own FETCHCACHE__* variables or fetchcache.yaml
cannot leak in.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    env = {k: v for k, v in os.environ.items() if not k.startswith("FETCHCACHE__")}
    env["HOME"] = str(tmp_path / "home")
    env["XDG_CONFIG_HOME"] = str(tmp_path / "config")
    env["FETCHCACHE__LOGGING__LEVEL"] = "DEBUG"
    return env
