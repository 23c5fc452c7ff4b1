"""
app/domain/user_record.py

Domain models used by the user ingestion flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union

from app.domain.errors import RowShapeMismatchError

Scalar = Union[None, int, float, bool, str]
Record = dict[str, Any]


@dataclass(frozen=True)
class ParsedCSV:
    """
    Tokenized CSV content: the header row plus data rows of matching width.
    """

    headers: tuple[str, ...]
    rows: list[list[str]]
    skipped_rows: list[RowShapeMismatchError] = field(default_factory=list)


@dataclass(frozen=True)
class UserRow:
    """
    Storage-shaped user ready for insertion into `users`.
    """

    name: str
    age: int
    address: str | None
    additional_info: str | None

    def as_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "address": self.address,
            "additional_info": self.additional_info,
        }


@dataclass(frozen=True)
class AgeDistribution:
    """
    Bucketed age counts and two-decimal percentages over the whole population.
    """

    total: int
    counts: dict[str, int]
    percentages: dict[str, Decimal]


@dataclass(frozen=True)
class IngestionSummary:
    """
    End-of-run ingestion summary.
    """

    records_processed: int
    rows_skipped: int
    skipped_rows: list[RowShapeMismatchError] = field(default_factory=list)
    age_distribution: AgeDistribution | None = None
