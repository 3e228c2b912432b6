# urlsheet/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for payload conversion

Defines the interface for converting a raw byte payload (an already fetched
spreadsheet export) into a workable format.

This is the FIRST step in the processing pipeline:
    Raw Bytes -> FileConverter -> Text -> Preprocessor -> Parsing

Usage:
    class CSVFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, encoding=None, **kwargs):
            ...
            return text, detected_encoding

        def get_format_name(self) -> str:
            return "CSV"
"""
from abc import ABC, abstractmethod
from typing import Any


class BaseFileConverter(ABC):
    """
    Abstract base class for payload converters.

    Subclasses must implement:
    - convert(): Convert raw bytes to a workable format
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def convert(self, file_data: bytes, **kwargs) -> Any:
        """
        Convert raw bytes to a workable format.

        Args:
            file_data: Raw payload bytes
            **kwargs: Additional format-specific options

        Returns:
            Format-specific object (text, tuple, ...)
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """
        Return human-readable format name.

        Returns:
            Format name string (e.g., "CSV (utf-8)")
        """
        pass

    def validate(self, file_data: bytes) -> bool:
        """
        Validate if the payload can be converted by this converter.

        Default implementation accepts any bytes-like object.
        """
        return isinstance(file_data, (bytes, bytearray, memoryview))


__all__ = [
    'BaseFileConverter',
]
