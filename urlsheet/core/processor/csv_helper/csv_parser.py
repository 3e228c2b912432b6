# csv_helper/csv_parser.py
"""
CSV parsing

Parses spreadsheet CSV exports into a row matrix with a single left-to-right
scan. The scanner is a two-state machine (NORMAL / QUOTED) driven by a fixed
transition table keyed on (state, character class).

Parsing is lenient: an unterminated quoted field at end of input is flushed
as-is instead of raising.
"""
import logging
from typing import Callable, Dict, List, Tuple

from urlsheet.core.processor.csv_helper.csv_constants import (
    CHAR_CLASSES,
    QUOTE_CHAR,
    LINE_FEED,
    CharClass,
    ScanState,
)

logger = logging.getLogger("urlsheet.csv.parser")


class CSVScanner:
    """
    Character-level CSV scanner.

    Each transition handler receives the current position and returns the
    number of characters it consumed.

    Example:
        >>> CSVScanner('"a\\nb",c\\r\\nd,e').scan()
        [['a\\nb', 'c'], ['d', 'e']]
    """

    def __init__(self, text: str):
        self._text = text
        self._state = ScanState.NORMAL
        self._field: List[str] = []
        self._row: List[str] = []
        self._rows: List[List[str]] = []

        self._transitions: Dict[Tuple[ScanState, CharClass], Callable[[int], int]] = {
            (ScanState.NORMAL, CharClass.QUOTE): self._open_quote,
            (ScanState.NORMAL, CharClass.DELIMITER): self._end_field,
            (ScanState.NORMAL, CharClass.LINE_FEED): self._end_row,
            (ScanState.NORMAL, CharClass.CARRIAGE_RETURN): self._end_row_cr,
            (ScanState.NORMAL, CharClass.OTHER): self._append,
            (ScanState.QUOTED, CharClass.QUOTE): self._quote_in_quoted,
            (ScanState.QUOTED, CharClass.DELIMITER): self._append,
            (ScanState.QUOTED, CharClass.LINE_FEED): self._append,
            (ScanState.QUOTED, CharClass.CARRIAGE_RETURN): self._append,
            (ScanState.QUOTED, CharClass.OTHER): self._append,
        }

    @property
    def state(self) -> ScanState:
        return self._state

    def scan(self) -> List[List[str]]:
        """
        Scan the whole text.

        Returns:
            Parsed rows (2-D list of raw cell strings)
        """
        text = self._text
        pos = 0
        length = len(text)

        while pos < length:
            char_class = CHAR_CLASSES.get(text[pos], CharClass.OTHER)
            pos += self._transitions[(self._state, char_class)](pos)

        if self._state is ScanState.QUOTED:
            logger.debug("Unterminated quoted field at end of input, flushing as-is")

        self._flush_field()
        self._flush_row()

        # A trailing terminator leaves one empty field behind; it is not a row
        if self._rows and self._rows[-1] == [""]:
            self._rows.pop()

        return self._rows

    # === Transition handlers ===

    def _append(self, pos: int) -> int:
        self._field.append(self._text[pos])
        return 1

    def _open_quote(self, pos: int) -> int:
        self._state = ScanState.QUOTED
        return 1

    def _quote_in_quoted(self, pos: int) -> int:
        if self._peek(pos + 1) == QUOTE_CHAR:
            self._field.append(QUOTE_CHAR)
            return 2
        self._state = ScanState.NORMAL
        return 1

    def _end_field(self, pos: int) -> int:
        self._flush_field()
        return 1

    def _end_row(self, pos: int) -> int:
        self._flush_field()
        self._flush_row()
        return 1

    def _end_row_cr(self, pos: int) -> int:
        self._flush_field()
        self._flush_row()
        return 2 if self._peek(pos + 1) == LINE_FEED else 1

    # === Helpers ===

    def _peek(self, pos: int) -> str:
        return self._text[pos] if pos < len(self._text) else ""

    def _flush_field(self) -> None:
        self._row.append("".join(self._field))
        self._field = []

    def _flush_row(self) -> None:
        self._rows.append(self._row)
        self._row = []


def parse_csv_content(content: str) -> List[List[str]]:
    """
    Parse CSV text into rows.

    Args:
        content: CSV text (comma delimited, double-quote quoting)

    Returns:
        Parsed rows. Empty input returns an empty list.
    """
    rows = CSVScanner(content).scan()
    logger.debug(f"Parsed CSV content: {len(rows)} rows")
    return rows


__all__ = [
    'CSVScanner',
    'parse_csv_content',
]
