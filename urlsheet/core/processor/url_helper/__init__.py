# url_helper/__init__.py
"""
URL Helper module

Modules:
- url_constants: Patterns and fixed strings
- url_metadata: URL -> domain / channel / id / title
- url_source: Source link validation and Google Sheets export URLs
"""

from urlsheet.core.processor.url_helper.url_metadata import (
    UrlMetadata,
    UrlMetadataExtractor,
    extract_url_metadata,
)

from urlsheet.core.processor.url_helper.url_source import (
    is_google_sheets_url,
    validate_source_url,
    to_csv_export_url,
)

__all__ = [
    # Metadata
    "UrlMetadata",
    "UrlMetadataExtractor",
    "extract_url_metadata",
    # Source links
    "is_google_sheets_url",
    "validate_source_url",
    "to_csv_export_url",
]
