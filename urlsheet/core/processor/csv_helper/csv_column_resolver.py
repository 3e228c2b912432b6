# csv_helper/csv_column_resolver.py
"""
URL column detection

Picks the column holding URLs from the header row and the first data row.

Detection order (first match wins):
1. A header cell named "url" (case-insensitive, surrounding whitespace ignored)
2. The first cell of the sample row containing http:// or https://
3. The fixed fallback column (B)
"""
import logging
import re
from typing import Iterable, Optional, Sequence

from urlsheet.core.processor.csv_helper.csv_constants import DEFAULT_URL_COLUMN, URL_HEADER_NAMES

logger = logging.getLogger("urlsheet.csv.resolver")

URL_SCHEME_PATTERN = re.compile(r"https?://", re.IGNORECASE)


def find_header_column(header: Sequence[str], names: Iterable[str] = URL_HEADER_NAMES) -> Optional[int]:
    wanted = {name.strip().lower() for name in names}
    for idx, cell in enumerate(header):
        if str(cell).strip().lower() in wanted:
            return idx
    return None


def find_url_cell(sample_row: Sequence[str]) -> Optional[int]:
    for idx, cell in enumerate(sample_row):
        if URL_SCHEME_PATTERN.search(str(cell)):
            return idx
    return None


def resolve_url_column(
    header: Optional[Sequence[str]],
    sample_row: Optional[Sequence[str]],
    default_index: int = DEFAULT_URL_COLUMN,
    header_names: Iterable[str] = URL_HEADER_NAMES,
) -> int:
    """
    Resolve the index of the URL column.

    Args:
        header: First row of the matrix (may be empty or None)
        sample_row: Second row of the matrix (may be empty or None)
        default_index: Column used when nothing matches
        header_names: Header names that identify the URL column

    Returns:
        Zero-based column index
    """
    idx = find_header_column(header or [], header_names)
    if idx is not None:
        logger.debug(f"URL column matched by header name: {idx}")
        return idx

    idx = find_url_cell(sample_row or [])
    if idx is not None:
        logger.debug(f"URL column matched by sample content: {idx}")
        return idx

    logger.debug(f"URL column not detected, using default: {default_index}")
    return default_index


__all__ = [
    'URL_SCHEME_PATTERN',
    'find_header_column',
    'find_url_cell',
    'resolve_url_column',
]
