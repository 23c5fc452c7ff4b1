"""
app/parsers/csv_parser.py

Delimited-text tokenizer for user CSV files.

Quoting is a plain toggle: a double quote flips "inside quoted field" mode and
is never copied into the field, so a literal quote cannot be represented.
Fields may not span lines.
"""

from __future__ import annotations

import logging
from pathlib import Path

from app.domain.errors import EmptyInputError, FileReadError, RowShapeMismatchError
from app.domain.user_record import ParsedCSV

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE_CHAR = '"'


def parse_csv_line(line: str, *, delimiter: str = DELIMITER, quote_char: str = QUOTE_CHAR) -> list[str]:
    """
    Split one line into trimmed fields, honouring quoted delimiters.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == quote_char:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


class CSVParser:
    """
    Turns raw CSV text into a header row and shape-checked data rows.
    """

    def __init__(self, *, delimiter: str = DELIMITER, log_skipped_rows: bool = True) -> None:
        self._delimiter = delimiter
        self._log_skipped_rows = log_skipped_rows

    def parse_file(self, path: str | Path) -> ParsedCSV:
        """
        Read the whole file into memory and parse it.
        """

        file_path = Path(path)
        logger.info("Reading CSV file from %s", file_path.resolve())
        try:
            content = file_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise FileReadError("CSV must be UTF-8 encoded.", path=str(file_path)) from exc
        except OSError as exc:
            raise FileReadError(f"Error reading CSV file: {exc}", path=str(file_path)) from exc
        return self.parse_content(content)

    def parse_content(self, content: str) -> ParsedCSV:
        """
        Parse CSV text.

        Blank lines are dropped before anything else, so line numbers in
        skip diagnostics count non-blank lines only (the header is line 1).
        """

        lines = [line for line in content.split("\n") if line.strip()]
        if not lines:
            raise EmptyInputError("CSV file is empty")

        headers = tuple(parse_csv_line(lines[0], delimiter=self._delimiter))
        rows: list[list[str]] = []
        skipped: list[RowShapeMismatchError] = []

        for index in range(1, len(lines)):
            values = parse_csv_line(lines[index], delimiter=self._delimiter)
            try:
                self._check_shape(values, headers=headers, line_number=index + 1)
            except RowShapeMismatchError as exc:
                if self._log_skipped_rows:
                    logger.warning(
                        "%s expected=%d actual=%d",
                        exc.message,
                        exc.expected,
                        exc.actual,
                    )
                skipped.append(exc)
                continue
            rows.append(values)

        logger.info("Parsed %d records from CSV (%d skipped)", len(rows), len(skipped))
        return ParsedCSV(headers=headers, rows=rows, skipped_rows=skipped)

    @staticmethod
    def _check_shape(values: list[str], *, headers: tuple[str, ...], line_number: int) -> None:
        if len(values) != len(headers):
            raise RowShapeMismatchError(
                line_number=line_number,
                expected=len(headers),
                actual=len(values),
            )
