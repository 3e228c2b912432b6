# urlsheet/core/functions/utils.py
"""
Common utility module for sheet conversion
"""
import re
from typing import Any, Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: Optional[str]) -> str:
    """Collapse every whitespace run into one space and trim the ends."""
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def cell_text(row: Any, index: int) -> str:
    """
    Read a cell as stripped text.

    Missing cells (short rows) and None read as an empty string.
    """
    if row is None or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()
