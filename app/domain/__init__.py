"""
app/domain package marker.
"""

from app.domain.errors import (
    EmptyInputError,
    FileReadError,
    InvalidAgeError,
    MissingFieldError,
    NoDataError,
    RowShapeMismatchError,
    StoreWriteError,
    UserIngestionError,
)
from app.domain.user_record import AgeDistribution, IngestionSummary, ParsedCSV, Record, UserRow

__all__ = [
    "AgeDistribution",
    "EmptyInputError",
    "FileReadError",
    "IngestionSummary",
    "InvalidAgeError",
    "MissingFieldError",
    "NoDataError",
    "ParsedCSV",
    "Record",
    "RowShapeMismatchError",
    "StoreWriteError",
    "UserIngestionError",
    "UserRow",
]
