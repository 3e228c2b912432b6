# url_helper/url_metadata.py
"""
URL Metadata Extraction Module

Decomposes a single URL into the fields shown in the export table:

- domain: host without a leading "www."
- channel: first path segment
- id: first path segment made only of digits
- title: readable form of the last meaningful path segment

Extraction never raises. An unparsable URL yields a UrlMetadata whose
fields are all empty strings.

Usage:
    extractor = UrlMetadataExtractor()
    meta = extractor.extract("https://example.com/news/123/breaking-story.html")
    # UrlMetadata(domain='example.com', channel='news', id='123', title='breaking story')
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import unquote, urlsplit

from urlsheet.core.functions.utils import collapse_whitespace
from urlsheet.core.processor.url_helper.url_constants import (
    AUTHORITY_SCHEMES,
    EXTENSION_SUFFIX,
    INVALID_HOST_CHARS,
    MALFORMED_ESCAPE,
    NUMERIC_SEGMENT,
    PATH_SEPARATOR,
    SLUG_SEPARATORS,
    WWW_PREFIX,
)

logger = logging.getLogger("urlsheet.url")


@dataclass(frozen=True)
class UrlMetadata:
    """
    Fields extracted from one URL.

    Every field is a string; missing values are empty strings, never None.
    """
    domain: str = ""
    channel: str = ""
    id: str = ""
    title: str = ""

    @classmethod
    def empty(cls) -> "UrlMetadata":
        return cls()

    def is_empty(self) -> bool:
        return not (self.domain or self.channel or self.id or self.title)


def split_path_segments(path: str) -> List[str]:
    """Split a URL path on "/" and drop empty segments."""
    return [seg for seg in path.split(PATH_SEPARATOR) if seg]


def is_numeric_segment(segment: str) -> bool:
    return NUMERIC_SEGMENT.fullmatch(segment) is not None


def strip_www(host: str) -> str:
    if host.startswith(WWW_PREFIX):
        return host[len(WWW_PREFIX):]
    return host


def decode_segment(segment: str) -> str:
    """
    Percent-decode a path segment.

    The segment is kept raw when any escape is malformed or the decoded
    bytes are not valid UTF-8; it is never partially decoded.
    """
    if MALFORMED_ESCAPE.search(segment):
        return segment
    try:
        return unquote(segment, errors="strict")
    except UnicodeDecodeError:
        return segment


def derive_title(segments: List[str]) -> str:
    """
    Derive a readable title from path segments.

    The last segment is percent-decoded and loses its file extension. When
    what remains is purely numeric and a preceding segment exists, the
    preceding (raw) segment is used instead. Dashes and underscores become
    spaces; the result is whitespace-collapsed and lower-cased.

    Examples:
        >>> derive_title(["news", "123", "breaking-story.html"])
        'breaking story'
        >>> derive_title(["videos", "42"])
        'videos'
    """
    raw = segments[-1] if segments else ""
    raw = decode_segment(raw)
    raw = EXTENSION_SUFFIX.sub("", raw)

    if is_numeric_segment(raw) and len(segments) >= 2:
        raw = segments[-2]

    return collapse_whitespace(SLUG_SEPARATORS.sub(" ", raw)).lower()


class UrlMetadataExtractor:
    """
    URL Metadata Extractor.

    Stateless; a single instance can be shared.
    """

    def __init__(self):
        self.logger = logger

    def extract(self, url: str) -> UrlMetadata:
        """
        Extract metadata from a URL.

        Args:
            url: Absolute URL string

        Returns:
            UrlMetadata (all fields empty if the URL cannot be parsed)
        """
        parsed = self._split(url)
        if parsed is None:
            self.logger.debug(f"Unparsable URL, using empty metadata: {url!r}")
            return UrlMetadata.empty()

        host, path = parsed
        segments = split_path_segments(path)

        return UrlMetadata(
            domain=strip_www(host),
            channel=segments[0] if segments else "",
            id=next((seg for seg in segments if is_numeric_segment(seg)), ""),
            title=derive_title(segments),
        )

    def _split(self, url: str) -> Optional[Tuple[str, str]]:
        """Return (host, path) or None if the URL is not parsable."""
        if not isinstance(url, str):
            return None

        try:
            parts = urlsplit(url.strip())
            host = parts.hostname or ""
            # raises ValueError for a non-numeric or out-of-range port
            parts.port
        except ValueError:
            return None

        scheme = parts.scheme.lower()
        if not scheme:
            return None
        if scheme in AUTHORITY_SCHEMES and not host:
            return None
        if INVALID_HOST_CHARS.search(parts.netloc):
            return None

        return host, parts.path


_default_extractor = UrlMetadataExtractor()


def extract_url_metadata(url: str) -> UrlMetadata:
    """Extract metadata from a URL with the shared extractor."""
    return _default_extractor.extract(url)


__all__ = [
    'UrlMetadata',
    'UrlMetadataExtractor',
    'extract_url_metadata',
    'split_path_segments',
    'derive_title',
    'decode_segment',
]
