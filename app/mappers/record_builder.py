"""
app/mappers/record_builder.py

Rebuilds nested records from dot-notation CSV headers.

    name.firstName,name.lastName,age
    Rohit,Prasad,34

becomes ``{"name": {"firstName": "Rohit", "lastName": "Prasad"}, "age": 34}``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from app.domain.user_record import Record, Scalar

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."

# Decimal literal with optional sign, fraction and exponent. Anchored by fullmatch.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
# Whole floats at or above this keep float form, like 1e21 in JSON.stringify.
_MAX_PLAIN_INTEGER = 1e21


def split_header_path(header: str) -> tuple[str, ...] | None:
    """
    Split a header into trimmed path segments.

    Returns None for headers that are empty or contain an empty segment.
    """

    stripped = header.strip()
    if not stripped:
        return None
    segments = tuple(segment.strip() for segment in stripped.split(PATH_SEPARATOR))
    if any(not segment for segment in segments):
        return None
    return segments


def convert_value(raw: str | None) -> Scalar:
    """
    Infer a scalar type: null, then number, then boolean, else the trimmed string.

    Whole-valued decimals such as "3.0" or "1e3" become ints. Literals that
    overflow to infinity stay strings.
    """

    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None

    if _NUMBER_PATTERN.fullmatch(value):
        if _INTEGER_PATTERN.fullmatch(value):
            return int(value)
        number = float(value)
        if not math.isfinite(number):
            return value
        if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
            return int(number)
        return number

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    return value


class RecordBuilder:
    """
    Builds one nested record per data row.
    """

    def build(self, headers: Sequence[str], values: Sequence[str]) -> Record:
        """
        Assign each value at its header path, creating intermediate mappings.

        An intermediate segment already holding a scalar is replaced by a
        fresh mapping.
        """

        record: Record = {}
        for header, raw_value in zip(headers, values):
            segments = split_header_path(header)
            if segments is None:
                continue

            current = record
            for key in segments[:-1]:
                node = current.get(key)
                if not isinstance(node, dict):
                    node = {}
                    current[key] = node
                current = node
            current[segments[-1]] = convert_value(raw_value)

        return record

    def build_all(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[Record]:
        for header in headers:
            if header.strip() and split_header_path(header) is None:
                logger.warning("Ignoring CSV header with an empty path segment: %r", header)
        return [self.build(headers, row) for row in rows]
