"""Configuration for release_search (env-overridable)."""

from __future__ import annotations

import os
from pathlib import Path


def _env_path(key: str) -> Path | None:
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


# Tokens longer than this never go through the edit-distance table.
MAX_TOKEN_LENGTH = _env_int("RS_MAX_TOKEN_LENGTH", 64)
DEFAULT_LIMIT = _env_int("RS_DEFAULT_LIMIT", 0)
MAX_FEED_BYTES = _env_int("RS_MAX_FEED_BYTES", 10_000_000)
SCORING_WEIGHTS_PATH = _env_path("RS_SCORING_WEIGHTS")

LOG_LEVEL = os.getenv("RS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
LOG_SEARCHES = _env_bool("RS_LOG_SEARCHES", True)
