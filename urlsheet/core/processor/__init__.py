# urlsheet/core/processor/__init__.py
"""
Processor - format-specific helpers

Subpackages:
- csv_helper: CSV parsing/serialization, column addressing, URL column detection
- url_helper: URL metadata extraction and source link handling
"""

from urlsheet.core.processor import csv_helper
from urlsheet.core.processor import url_helper

__all__ = [
    "csv_helper",
    "url_helper",
]
