"""
app/api/dependencies.py

Shared FastAPI dependencies.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends

from app.config import UserIngestionSettings, get_user_ingestion_settings


def get_csv_file_path(
    settings: UserIngestionSettings = Depends(get_user_ingestion_settings),
) -> Path:
    """
    Resolve the configured CSV path consumed by the upload endpoint.
    """

    return settings.csv_file_path
