# csv_helper/csv_constants.py
"""
CSV Helper constants and type definitions

Defines the constants, scanner states and character classes used when
reading and writing spreadsheet CSV exports.
"""
from enum import Enum


# === Encoding constants ===

# Encodings to try in order (after BOM and chardet detection)
ENCODING_CANDIDATES = [
    "utf-8",
    "cp1252",     # Windows Western (spreadsheet exports)
]

# Minimum chardet confidence before trusting its guess
CHARDET_MIN_CONFIDENCE = 0.7

# Bytes handed to chardet for detection
CHARDET_SAMPLE_SIZE = 10000

# Byte order mark as it appears in decoded text
TEXT_BOM = "\ufeff"


# === Syntax constants ===

FIELD_DELIMITER = ","
QUOTE_CHAR = '"'
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"

# Row terminator used when serializing (CSV interchange convention)
ROW_TERMINATOR = "\r\n"

# Characters that force a cell to be quoted on output
QUOTE_TRIGGERS = frozenset([QUOTE_CHAR, FIELD_DELIMITER, LINE_FEED, CARRIAGE_RETURN])


# === Column constants ===

ALPHABET_SIZE = 26

# Column used when neither the header nor the sample row identifies URLs ("B")
DEFAULT_URL_COLUMN = 1

# Header names that mark the URL column (compared stripped, lower-cased)
URL_HEADER_NAMES = ("url",)


# === Export constants ===

EXPORT_HEADER = ("#", "URL", "Domain", "Channel", "ID", "Title")

EXPORT_FILENAME_FORMAT = "%Y-%m-%d_%H-%M-%S.csv"


# === Scanner states ===

class ScanState(Enum):
    """CSV scanner states."""
    NORMAL = "normal"
    QUOTED = "quoted"


class CharClass(Enum):
    """Character classes the scanner dispatches on."""
    QUOTE = "quote"
    DELIMITER = "delimiter"
    LINE_FEED = "line_feed"
    CARRIAGE_RETURN = "carriage_return"
    OTHER = "other"


CHAR_CLASSES = {
    QUOTE_CHAR: CharClass.QUOTE,
    FIELD_DELIMITER: CharClass.DELIMITER,
    LINE_FEED: CharClass.LINE_FEED,
    CARRIAGE_RETURN: CharClass.CARRIAGE_RETURN,
}
