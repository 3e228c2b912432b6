# urlsheet/core/processor/csv_helper/csv_file_converter.py
"""
CSVFileConverter - CSV payload converter

Converts a raw CSV byte payload to a text string with encoding detection.
"""
from typing import Optional, Tuple

from urlsheet.core.functions.file_converter import BaseFileConverter
from urlsheet.core.processor.csv_helper.csv_encoding import decode_csv_bytes


class CSVFileConverter(BaseFileConverter):
    """
    CSV payload converter.

    Decodes bytes using BOM detection, chardet and an encoding candidate list.
    """

    def __init__(self):
        """Initialize CSVFileConverter."""
        self._detected_encoding: Optional[str] = None

    def convert(
        self,
        file_data: bytes,
        encoding: Optional[str] = None,
        **kwargs
    ) -> Tuple[str, str]:
        """
        Convert a CSV payload to a text string.

        Args:
            file_data: Raw CSV bytes
            encoding: Encoding to try first (None for auto-detect)
            **kwargs: Additional options

        Returns:
            Tuple of (decoded text, detected encoding)
        """
        text, detected = decode_csv_bytes(bytes(file_data), preferred_encoding=encoding)
        self._detected_encoding = detected
        return text, detected

    def get_format_name(self) -> str:
        """Return format name."""
        enc = self._detected_encoding or 'unknown'
        return f"CSV ({enc})"

    @property
    def detected_encoding(self) -> Optional[str]:
        """Return the encoding detected during last conversion."""
        return self._detected_encoding


__all__ = ['CSVFileConverter']
