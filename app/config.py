"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from db.config import load_env_files

DEFAULT_CSV_FILE_PATH = "./uploads/users.csv"


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class UserIngestionSettings:
    """
    Runtime settings for user CSV ingestion.
    """

    csv_file_path: Path = Path(DEFAULT_CSV_FILE_PATH)
    batch_size: int = 1000
    log_skipped_rows: bool = True


@lru_cache(maxsize=1)
def get_user_ingestion_settings() -> UserIngestionSettings:
    """
    Return cached user ingestion settings from environment variables.
    """

    return UserIngestionSettings(
        csv_file_path=Path(_get_str_env("CSV_FILE_PATH", DEFAULT_CSV_FILE_PATH)).resolve(),
        batch_size=max(1, _get_int_env("CSV_INGEST_BATCH_SIZE", 1000)),
        log_skipped_rows=_get_bool_env("CSV_INGEST_LOG_SKIPPED_ROWS", True),
    )
