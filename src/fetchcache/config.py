"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (FETCHCACHE__CACHE__TTL_SECONDS=60)
  3. fetchcache.yaml        (searched in cwd, then the platform config dir)
  4. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from fetchcache import __version__

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("fetchcache")

DEFAULT_CACHE_DIR = "cache/"
DEFAULT_TTL_SECONDS = 1800


def _find_config_file() -> str | None:
    """Return the path of the first fetchcache.yaml found, or None."""
    candidates = [
        Path("fetchcache.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "fetchcache.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cache_dir: str = DEFAULT_CACHE_DIR
    ttl_seconds: int = Field(default=DEFAULT_TTL_SECONDS, ge=0)


class HttpSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    user_agent: str = f"fetchcache/{__version__}"


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: FETCHCACHE__CACHE__TTL_SECONDS=60
        env_prefix="FETCHCACHE__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    cache: CacheSettings = CacheSettings()
    http: HttpSettings = HttpSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
