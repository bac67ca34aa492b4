"""
geotargets/config.py

Runtime settings read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _get_bool_env(name: str, default: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_log_level_env(name: str, default: str) -> str:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    level = raw_value.strip().upper()
    return level if level in _LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    """
    Dataset ingestion settings.
    """

    require_header: bool = True
    max_upload_bytes: int = 64 * 1048576
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached settings from environment variables.
    """

    return Settings(
        require_header=_get_bool_env("GEOTARGETS_REQUIRE_HEADER", True),
        max_upload_bytes=max(1, _get_int_env("GEOTARGETS_MAX_UPLOAD_MB", 64)) * 1048576,
        log_level=_get_log_level_env("GEOTARGETS_LOG_LEVEL", "INFO"),
    )
