"""
app/validators/record_validator.py

Mandatory-field validation and age coercion for reconstructed user records.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from app.domain.errors import InvalidAgeError, MissingFieldError
from app.domain.user_record import Record

_LEADING_INTEGER = re.compile(r"[+-]?\d+")


class RecordValidator:
    """
    Checks that a record carries name.firstName, name.lastName and age.
    """

    def validate(self, record: Record) -> tuple[str, str, int]:
        """
        Return (first_name, last_name, age) or raise on the first violation.
        """

        name = record.get("name")
        if not isinstance(name, Mapping):
            raise MissingFieldError("name.firstName or name.lastName")

        first_name = self._leaf_text(name.get("firstName"))
        last_name = self._leaf_text(name.get("lastName"))
        if not first_name or not last_name:
            raise MissingFieldError("name.firstName or name.lastName")

        if record.get("age") is None:
            raise MissingFieldError("age")

        return first_name, last_name, self.coerce_age(record["age"])

    @staticmethod
    def coerce_age(value: Any) -> int:
        """
        Coerce a parsed age to int.

        Finite floats truncate toward zero. Strings use their leading integer
        ("34 years" -> 34) and are invalid when they do not start with one.
        """

        if isinstance(value, bool):
            raise InvalidAgeError(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        if isinstance(value, str):
            match = _LEADING_INTEGER.match(value.strip())
            if match:
                return int(match.group())
        raise InvalidAgeError(value)

    @staticmethod
    def _leaf_text(value: Any) -> str | None:
        """
        Render a name leaf as text. False, zero, empty and nested values count as missing.
        """

        if not value or isinstance(value, Mapping):
            return None
        if value is True:
            return "true"
        return str(value)
