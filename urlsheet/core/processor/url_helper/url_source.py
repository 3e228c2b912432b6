# url_helper/url_source.py
"""
Spreadsheet source links

Validates the link a user pastes as the data source and rewrites Google
Sheets links into their CSV export URL. Nothing here performs network I/O;
fetching the export is left to the caller.
"""
import logging
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from urlsheet.core.processor.url_helper.url_constants import (
    AUTHORITY_SCHEMES,
    CSV_PATH_SUFFIX,
    GOOGLE_SHEETS_DOC_PATH,
    GOOGLE_SHEETS_EXPORT_URL,
    GOOGLE_SHEETS_HOST,
    GOOGLE_SHEETS_PATH,
    MSG_INVALID_FORMAT,
    MSG_INVALID_SCHEME,
    MSG_UNSUPPORTED_SOURCE,
    PATH_SEPARATOR,
    SOURCE_SCHEMES,
)

logger = logging.getLogger("urlsheet.url.source")


def _split_source(url: str):
    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()
    if not scheme or (scheme in AUTHORITY_SCHEMES and not parts.netloc):
        raise ValueError(f"Not an absolute URL: {url!r}")
    return parts, parts.hostname or ""


def is_google_sheets_url(url: str) -> bool:
    try:
        parts, host = _split_source(url)
    except ValueError:
        return False
    return GOOGLE_SHEETS_HOST in host and GOOGLE_SHEETS_PATH in parts.path


def validate_source_url(url: str) -> Optional[str]:
    """
    Validate a data source link.

    Accepts a Google Sheets link or a direct link to a .csv file.

    Args:
        url: Link supplied by the user

    Returns:
        Error message, or None if the link is acceptable
    """
    try:
        parts, host = _split_source(url)
    except ValueError:
        return MSG_INVALID_FORMAT

    if parts.scheme.lower() not in SOURCE_SCHEMES:
        return MSG_INVALID_SCHEME

    is_sheet = GOOGLE_SHEETS_HOST in host and GOOGLE_SHEETS_PATH in parts.path
    if not is_sheet and not parts.path.endswith(CSV_PATH_SUFFIX):
        return MSG_UNSUPPORTED_SOURCE

    return None


def _first_param(query: str, name: str) -> Optional[str]:
    values = parse_qs(query).get(name)
    return values[0] if values else None


def to_csv_export_url(url: str) -> str:
    """
    Rewrite a Google Sheets link into its CSV export URL.

    The sheet tab ("gid") is taken from the fragment first, then the query.
    Links that are not Google Sheets documents are returned unchanged.

    Args:
        url: Sheet link (e.g. https://docs.google.com/spreadsheets/d/<ID>/edit#gid=<GID>)

    Returns:
        Export URL, or the input unchanged
    """
    try:
        parts, host = _split_source(url)
    except ValueError:
        return url

    if GOOGLE_SHEETS_HOST not in host or GOOGLE_SHEETS_DOC_PATH not in parts.path:
        return url

    segments = [seg for seg in parts.path.split(PATH_SEPARATOR) if seg]
    id_index = segments.index("d")
    sheet_id = segments[id_index + 1] if id_index + 1 < len(segments) else ""

    if "gid=" in parts.fragment:
        gid = _first_param(parts.fragment, "gid")
    else:
        gid = _first_param(parts.query, "gid")

    export_url = GOOGLE_SHEETS_EXPORT_URL.format(sheet_id=sheet_id)
    if gid:
        export_url = f"{export_url}&gid={gid}"

    logger.debug(f"Sheet export URL: {export_url}")
    return export_url


__all__ = [
    'is_google_sheets_url',
    'validate_source_url',
    'to_csv_export_url',
]
