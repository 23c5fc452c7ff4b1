"""
app/domain/errors.py

Error taxonomy for the user CSV ingestion pipeline.

Only RowShapeMismatchError is absorbed by the pipeline (the row is skipped).
Every other error aborts the whole run and rolls back its transaction.
"""

from __future__ import annotations

from typing import Any


class UserIngestionError(Exception):
    """Base exception for ingestion and reporting failures."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = {key: value for key, value in context.items() if value is not None}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class FileReadError(UserIngestionError):
    """Raised when the input file cannot be read or decoded."""


class EmptyInputError(UserIngestionError):
    """Raised when no usable lines remain after blank-line removal."""


class RowShapeMismatchError(UserIngestionError):
    """
    A data row whose field count differs from the header's.

    Non-fatal: the parser logs it, keeps it as a diagnostic and moves on.
    """

    def __init__(self, *, line_number: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Line {line_number} has mismatched columns. Skipping.",
            line_number=line_number,
            expected=expected,
            actual=actual,
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual


class MissingFieldError(UserIngestionError):
    """Raised when a record lacks name.firstName, name.lastName or age."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing mandatory field: {field}", field=field)
        self.field = field


class InvalidAgeError(UserIngestionError):
    """Raised when age cannot be coerced to an integer."""

    def __init__(self, value: Any) -> None:
        super().__init__("Age must be a valid number", field="age", value=repr(value))
        self.value = value


class StoreWriteError(UserIngestionError):
    """Raised when the relational store rejects a read or write."""


class NoDataError(UserIngestionError):
    """Raised when an age distribution is requested over zero users."""

    def __init__(self, message: str = "No users found") -> None:
        super().__init__(message)
