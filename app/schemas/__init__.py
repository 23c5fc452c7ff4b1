"""
app/schemas package marker.
"""

from app.schemas.users import (
    AgeDistributionResponse,
    ClearUsersResponse,
    HealthResponse,
    SkippedRowResponse,
    UploadResponse,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "AgeDistributionResponse",
    "ClearUsersResponse",
    "HealthResponse",
    "SkippedRowResponse",
    "UploadResponse",
    "UserListResponse",
    "UserResponse",
]
