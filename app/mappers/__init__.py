"""
app/mappers package marker.
"""

from app.mappers.record_builder import RecordBuilder, convert_value, split_header_path
from app.mappers.schema_mapper import SchemaMapper, serialize_structure

__all__ = [
    "RecordBuilder",
    "SchemaMapper",
    "convert_value",
    "serialize_structure",
    "split_header_path",
]
