"""
app/schemas/users.py

Response schemas for user ingestion and reporting endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.domain.user_record import AgeDistribution


class SkippedRowResponse(BaseModel):
    """
    One data row dropped because its width differs from the header's.
    """

    line_number: int = Field(..., ge=2)
    expected_fields: int = Field(..., ge=0)
    actual_fields: int = Field(..., ge=0)


class UploadResponse(BaseModel):
    """
    API response model for one ingestion run.
    """

    success: bool = True
    message: str
    records_processed: int = Field(..., ge=0)
    rows_skipped: int = Field(default=0, ge=0)
    skipped_rows: list[SkippedRowResponse] = Field(default_factory=list)
    age_distribution: dict[str, Decimal] | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    age: int
    address: str | None = None
    additional_info: str | None = None

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    success: bool = True
    count: int = Field(..., ge=0)
    users: list[UserResponse] = Field(default_factory=list)


class AgeDistributionResponse(BaseModel):
    """
    Distribution report, or the no-data signal when success is False.
    """

    success: bool
    message: str | None = None
    total_users: int = Field(default=0, ge=0)
    age_distribution: dict[str, Decimal] | None = None
    counts: dict[str, int] | None = None

    @classmethod
    def from_distribution(cls, distribution: AgeDistribution) -> "AgeDistributionResponse":
        return cls(
            success=True,
            total_users=distribution.total,
            age_distribution=dict(distribution.percentages),
            counts=dict(distribution.counts),
        )


class ClearUsersResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
