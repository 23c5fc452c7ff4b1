"""
app/parsers package marker.
"""

from app.parsers.csv_parser import CSVParser, parse_csv_line

__all__ = [
    "CSVParser",
    "parse_csv_line",
]
