# csv_helper/__init__.py
"""
CSV Helper module

Functional building blocks used by UrlSheetConverter.

Modules:
- csv_constants: Constants, scanner states and character classes
- csv_encoding: BOM/encoding detection for raw payloads
- csv_parser: CSV scanning (text -> rows)
- csv_writer: CSV serialization (rows -> text)
- csv_column: Column label <-> index conversion
- csv_column_resolver: URL column detection
- csv_file_converter: Payload converter (bytes -> text)
- csv_preprocessor: Text cleanup before parsing
"""

# Constants
from urlsheet.core.processor.csv_helper.csv_constants import (
    ENCODING_CANDIDATES,
    DEFAULT_URL_COLUMN,
    URL_HEADER_NAMES,
    EXPORT_HEADER,
    ScanState,
    CharClass,
)

# Encoding
from urlsheet.core.processor.csv_helper.csv_encoding import (
    detect_bom,
    decode_csv_bytes,
)

# Parser / Writer
from urlsheet.core.processor.csv_helper.csv_parser import (
    CSVScanner,
    parse_csv_content,
)
from urlsheet.core.processor.csv_helper.csv_writer import (
    build_export_filename,
    escape_cell,
    serialize_row,
    serialize_rows,
)

# Columns
from urlsheet.core.processor.csv_helper.csv_column import (
    InvalidColumnLabel,
    ColumnLabelResult,
    index_to_column,
    column_to_index,
    parse_column_label,
)
from urlsheet.core.processor.csv_helper.csv_column_resolver import (
    resolve_url_column,
)

# Converter / Preprocessor
from urlsheet.core.processor.csv_helper.csv_file_converter import CSVFileConverter
from urlsheet.core.processor.csv_helper.csv_preprocessor import CSVPreprocessor

__all__ = [
    # Constants
    "ENCODING_CANDIDATES",
    "DEFAULT_URL_COLUMN",
    "URL_HEADER_NAMES",
    "EXPORT_HEADER",
    "ScanState",
    "CharClass",
    # Encoding
    "detect_bom",
    "decode_csv_bytes",
    # Parser / Writer
    "CSVScanner",
    "parse_csv_content",
    "build_export_filename",
    "escape_cell",
    "serialize_row",
    "serialize_rows",
    # Columns
    "InvalidColumnLabel",
    "ColumnLabelResult",
    "index_to_column",
    "column_to_index",
    "parse_column_label",
    "resolve_url_column",
    # Converter / Preprocessor
    "CSVFileConverter",
    "CSVPreprocessor",
]
