"""
app/api/routers/users.py

User CSV ingestion, listing, distribution and clear endpoints.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_csv_file_path
from app.domain.errors import (
    EmptyInputError,
    FileReadError,
    InvalidAgeError,
    MissingFieldError,
    NoDataError,
    StoreWriteError,
)
from app.schemas.users import (
    AgeDistributionResponse,
    ClearUsersResponse,
    SkippedRowResponse,
    UploadResponse,
    UserListResponse,
    UserResponse,
)
from app.services.age_distribution_service import AgeDistributionService
from app.services.user_ingestion_service import UserIngestionService, get_user_ingestion_service
from db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


def _error_detail(exc: Exception) -> dict[str, object]:
    payload: dict[str, object] = {"success": False, "error": str(exc)}
    context = getattr(exc, "context", None)
    if context:
        payload["context"] = context
    return payload


@router.post("/upload", response_model=UploadResponse)
def upload_users(
    csv_path: Path = Depends(get_csv_file_path),
    db: Session = Depends(get_db),
    ingestion_service: UserIngestionService = Depends(get_user_ingestion_service),
) -> UploadResponse:
    """
    Ingest the configured CSV file and report the resulting age distribution.
    """

    try:
        summary = ingestion_service.ingest_file(db=db, path=csv_path)
    except (FileReadError, EmptyInputError) as exc:
        logger.error("Upload rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_error_detail(exc),
        ) from exc
    except (MissingFieldError, InvalidAgeError) as exc:
        logger.error("Upload rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_error_detail(exc),
        ) from exc
    except StoreWriteError as exc:
        logger.error("Upload failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail(exc),
        ) from exc

    distribution = summary.age_distribution
    return UploadResponse(
        message="CSV processed successfully",
        records_processed=summary.records_processed,
        rows_skipped=summary.rows_skipped,
        skipped_rows=[
            SkippedRowResponse(
                line_number=skipped.line_number,
                expected_fields=skipped.expected,
                actual_fields=skipped.actual,
            )
            for skipped in summary.skipped_rows
        ],
        age_distribution=dict(distribution.percentages) if distribution is not None else None,
    )


@router.get("/users", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    ingestion_service: UserIngestionService = Depends(get_user_ingestion_service),
) -> UserListResponse:
    try:
        users = ingestion_service.list_users(db=db)
    except StoreWriteError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail(exc),
        ) from exc

    return UserListResponse(
        count=len(users),
        users=[UserResponse.model_validate(user) for user in users],
    )


@router.get("/age-distribution", response_model=AgeDistributionResponse)
def get_age_distribution(db: Session = Depends(get_db)) -> AgeDistributionResponse:
    try:
        distribution = AgeDistributionService().calculate(db)
    except NoDataError as exc:
        return AgeDistributionResponse(success=False, message=exc.message)
    except StoreWriteError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail(exc),
        ) from exc

    return AgeDistributionResponse.from_distribution(distribution)


@router.delete("/users", response_model=ClearUsersResponse)
def clear_users(
    db: Session = Depends(get_db),
    ingestion_service: UserIngestionService = Depends(get_user_ingestion_service),
) -> ClearUsersResponse:
    try:
        ingestion_service.clear_users(db=db)
    except StoreWriteError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail(exc),
        ) from exc

    return ClearUsersResponse(message="All users cleared successfully")
