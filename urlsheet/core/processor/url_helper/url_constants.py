# url_helper/url_constants.py
"""
URL Helper constants

Patterns and fixed strings used when decomposing URLs and validating
spreadsheet source links.
"""
import re


# === Metadata extraction ===

# Schemes that cannot be parsed without a host
AUTHORITY_SCHEMES = frozenset(["http", "https", "ftp", "ws", "wss"])

WWW_PREFIX = "www."

PATH_SEPARATOR = "/"

# Segment made only of ASCII digits
NUMERIC_SEGMENT = re.compile(r"[0-9]+")

# Trailing file extension (".html", ".php5")
EXTENSION_SUFFIX = re.compile(r"\.[A-Za-z0-9]+\Z")

# Runs of word separators in a slug
SLUG_SEPARATORS = re.compile(r"[-_]+")

# "%" not followed by two hex digits
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters never allowed in a host
INVALID_HOST_CHARS = re.compile(r"\s")


# === Source links ===

SOURCE_SCHEMES = frozenset(["http", "https"])

GOOGLE_SHEETS_HOST = "docs.google.com"
GOOGLE_SHEETS_PATH = "/spreadsheets/"
GOOGLE_SHEETS_DOC_PATH = "/spreadsheets/d/"
GOOGLE_SHEETS_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"

CSV_PATH_SUFFIX = ".csv"

# Validation messages
MSG_INVALID_FORMAT = "Invalid URL format."
MSG_INVALID_SCHEME = "URL must start with http(s)."
MSG_UNSUPPORTED_SOURCE = "Provide a public Google Sheets link or a direct CSV URL."
