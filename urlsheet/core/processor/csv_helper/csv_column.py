# csv_helper/csv_column.py
"""
Spreadsheet column addressing

Converts between spreadsheet column labels (A, B, ..., Z, AA, AB, ...) and
zero-based column indexes. The labels use bijective base-26 numbering, so
there is no zero digit: 0 -> "A", 25 -> "Z", 26 -> "AA".

Usage:
    from urlsheet.core.processor.csv_helper.csv_column import (
        column_to_index,
        index_to_column,
        parse_column_label,
    )

    index_to_column(27)       # "AB"
    column_to_index("ab")     # 27

    result = parse_column_label("B2")
    if not result.ok:
        print(result.error)
"""
import string
from dataclasses import dataclass
from typing import Optional

from urlsheet.core.processor.csv_helper.csv_constants import ALPHABET_SIZE


class InvalidColumnLabel(ValueError):
    """Raised when a column label is empty or contains non-letter characters."""

    def __init__(self, label: str, reason: str):
        self.label = label
        self.reason = reason
        super().__init__(f"Invalid column label {label!r}: {reason}")


@dataclass(frozen=True)
class ColumnLabelResult:
    """
    Result of validating a column label.

    Attributes:
        label: The label as given by the caller
        index: Zero-based column index, or None if the label is invalid
        error: Reason the label was rejected, or None on success
    """
    label: str
    index: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def index_to_column(index: int) -> str:
    """
    Convert a zero-based column index to its spreadsheet label.

    Args:
        index: Zero-based column index

    Returns:
        Column label (e.g., 0 -> "A", 26 -> "AA")

    Raises:
        ValueError: If index is negative or not an integer
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Column index must be an integer, got {index!r}")
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    letters = []
    while index >= 0:
        letters.append(chr(ord("A") + index % ALPHABET_SIZE))
        index = index // ALPHABET_SIZE - 1

    return "".join(reversed(letters))


def column_to_index(label: str) -> int:
    """
    Convert a spreadsheet column label to a zero-based index.

    Case-insensitive. Only the letters A-Z are accepted.

    Args:
        label: Column label (e.g., "B", "aa")

    Returns:
        Zero-based column index

    Raises:
        InvalidColumnLabel: If label is empty or has a non-letter character
    """
    if not isinstance(label, str):
        raise InvalidColumnLabel(repr(label), "label must be a string")
    if not label:
        raise InvalidColumnLabel(label, "label is empty")

    value = 0
    for char in label:
        if char not in string.ascii_letters:
            raise InvalidColumnLabel(label, f"unexpected character {char!r}")
        value = value * ALPHABET_SIZE + (ord(char.upper()) - ord("A") + 1)

    return value - 1


def parse_column_label(label: str) -> ColumnLabelResult:
    """
    Validate a column label without raising.

    Args:
        label: Column label supplied by the caller

    Returns:
        ColumnLabelResult with either index or error set
    """
    try:
        return ColumnLabelResult(label=label, index=column_to_index(label))
    except InvalidColumnLabel as e:
        return ColumnLabelResult(label=label, error=e.reason)


__all__ = [
    'InvalidColumnLabel',
    'ColumnLabelResult',
    'index_to_column',
    'column_to_index',
    'parse_column_label',
]
