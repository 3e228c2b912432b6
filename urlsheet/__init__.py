# urlsheet/__init__.py
"""
urlsheet Library

Converts a spreadsheet CSV export holding a column of URLs into a table of
URL records (domain, channel, numeric id, readable title) and a
re-exportable CSV.

Package Structure:
- core: Conversion core module
    - UrlSheetConverter: Main conversion class
    - processor: CSV and URL helpers
    - functions: Shared building blocks

Usage:
    from urlsheet import UrlSheetConverter

    converter = UrlSheetConverter()
    result = converter.convert(csv_text)
    print(result.export_text)
"""

__version__ = "0.1.0"

# Expose core classes at top level
from urlsheet.core import (
    UrlSheetConverter,
    ConversionResult,
    UrlRecord,
    convert,
)
from urlsheet.core.processor.csv_helper import (
    InvalidColumnLabel,
    column_to_index,
    index_to_column,
    parse_csv_content,
    serialize_rows,
)
from urlsheet.core.processor.url_helper import (
    UrlMetadata,
    extract_url_metadata,
)

# Explicit subpackages
from urlsheet import core

__all__ = [
    "__version__",
    # Core classes
    "UrlSheetConverter",
    "ConversionResult",
    "UrlRecord",
    "convert",
    # CSV
    "InvalidColumnLabel",
    "column_to_index",
    "index_to_column",
    "parse_csv_content",
    "serialize_rows",
    # URL
    "UrlMetadata",
    "extract_url_metadata",
    # Subpackages
    "core",
]
