"""
app/mappers/schema_mapper.py

Maps reconstructed user records onto the `users` storage row shape.
"""

from __future__ import annotations

import json
from typing import Any

from app.domain.user_record import Record, UserRow
from app.validators.record_validator import RecordValidator

PRIMARY_FIELDS: tuple[str, ...] = ("name", "age", "address")


def serialize_structure(value: Any) -> str:
    """
    Compact JSON text for a nested structure.
    """

    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class SchemaMapper:
    """
    Validates a record and flattens it into name, age, address, additional_info.
    """

    def __init__(self, *, validator: RecordValidator | None = None) -> None:
        self._validator = validator or RecordValidator()

    def map_record(self, record: Record) -> UserRow:
        first_name, last_name, age = self._validator.validate(record)

        address_value = record.get("address")
        address = serialize_structure(address_value) if address_value is not None else None

        extra = {key: value for key, value in record.items() if key not in PRIMARY_FIELDS}
        additional_info = serialize_structure(extra) if extra else None

        return UserRow(
            name=f"{first_name} {last_name}",
            age=age,
            address=address,
            additional_info=additional_info,
        )
