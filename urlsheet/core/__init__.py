# urlsheet/core/__init__.py
"""
Core - Sheet Conversion Core Module

Module Structure:
- sheet_converter: Main UrlSheetConverter class and result types
- processor/: Format-specific helpers
    - csv_helper: CSV parsing/serialization, column addressing, URL column detection
    - url_helper: URL metadata extraction, source link handling
- functions/: Shared building blocks
    - utils: Whitespace and cell helpers
    - file_converter / preprocessor: Pipeline base classes

Usage:
    from urlsheet import UrlSheetConverter
    from urlsheet.core.processor.csv_helper import parse_csv_content, serialize_rows
    from urlsheet.core.processor.url_helper import extract_url_metadata
"""

# === Main Class ===
from urlsheet.core.sheet_converter import (
    UrlSheetConverter,
    ConversionResult,
    ConverterConfig,
    UrlRecord,
    convert,
)

# === Explicit Subpackage Imports ===
from urlsheet.core import processor
from urlsheet.core import functions

__all__ = [
    # Main Class
    "UrlSheetConverter",
    "ConversionResult",
    "ConverterConfig",
    "UrlRecord",
    "convert",
    # Subpackages
    "processor",
    "functions",
]
