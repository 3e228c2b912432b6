# csv_helper/csv_writer.py
"""
CSV serialization

Writes a row matrix back to CSV text. Cells are quoted only when they contain
a quote, a delimiter or a line break; rows are joined with CRLF.
"""
from datetime import datetime
from typing import Any, Iterable, Optional, Sequence

from urlsheet.core.processor.csv_helper.csv_constants import (
    EXPORT_FILENAME_FORMAT,
    FIELD_DELIMITER,
    QUOTE_CHAR,
    QUOTE_TRIGGERS,
    ROW_TERMINATOR,
)


def escape_cell(value: Any) -> str:
    """
    Escape a single cell value.

    Args:
        value: Cell value (None becomes an empty string, non-strings are str()-ed)

    Returns:
        CSV-safe cell text
    """
    if value is None:
        return ""

    text = value if isinstance(value, str) else str(value)
    if any(char in QUOTE_TRIGGERS for char in text):
        return QUOTE_CHAR + text.replace(QUOTE_CHAR, QUOTE_CHAR * 2) + QUOTE_CHAR
    return text


def serialize_row(row: Iterable[Any]) -> str:
    return FIELD_DELIMITER.join(escape_cell(cell) for cell in row)


def serialize_rows(rows: Sequence[Iterable[Any]]) -> str:
    """
    Serialize rows to CSV text.

    Args:
        rows: Row matrix

    Returns:
        CSV text with CRLF between rows and no trailing terminator
    """
    return ROW_TERMINATOR.join(serialize_row(row) for row in rows)


def build_export_filename(now: Optional[datetime] = None) -> str:
    """
    Build a timestamped export filename.

    Args:
        now: Timestamp to use (default: current local time)

    Returns:
        Filename like "2024-03-07_09-05-01.csv"
    """
    return (now or datetime.now()).strftime(EXPORT_FILENAME_FORMAT)


__all__ = [
    'build_export_filename',
    'escape_cell',
    'serialize_row',
    'serialize_rows',
]
