# urlsheet/core/functions/preprocessor.py
"""
BasePreprocessor - Abstract base class for content preprocessing

Defines the interface for cleaning converted content before it is parsed.

Processing Pipeline Position:
    1. FileConverter.convert() -> Text
    2. Preprocessor.preprocess() -> Cleaned text (THIS STEP)
    3. Parsing and extraction

Usage:
    class CSVPreprocessor(BasePreprocessor):
        def preprocess(self, converted_data: Any, **kwargs) -> PreprocessedData:
            return PreprocessedData(
                raw_content=converted_data,
                clean_content=converted_data.lstrip("\\ufeff"),
            )

        def get_format_name(self) -> str:
            return "CSV Preprocessor"
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PreprocessedData:
    """
    Result of preprocessing operation.

    Attributes:
        raw_content: Original input data (for reference)
        clean_content: Processed content ready for parsing - THIS IS THE TRUE SOURCE
        encoding: Detected or default encoding
        metadata: Any metadata discovered during preprocessing
    """
    raw_content: Any = None
    clean_content: Any = None  # TRUE SOURCE - The processed result
    encoding: str = "utf-8"
    metadata: Dict[str, Any] = field(default_factory=dict)


class BasePreprocessor(ABC):
    """
    Abstract base class for content preprocessors.

    Subclasses must implement:
    - preprocess(): Process converted data and return PreprocessedData
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def preprocess(
        self,
        converted_data: Any,
        **kwargs
    ) -> PreprocessedData:
        """
        Preprocess converted data.

        Args:
            converted_data: Data from FileConverter.convert() or caller-supplied text
            **kwargs: Additional format-specific options

        Returns:
            PreprocessedData containing cleaned content
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        pass

    def validate(self, data: Any) -> bool:
        """
        Validate if the data can be preprocessed by this preprocessor.

        Default implementation returns True.
        """
        _ = data  # Suppress unused argument warning
        return True


__all__ = [
    'BasePreprocessor',
    'PreprocessedData',
]
