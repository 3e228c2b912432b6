# urlsheet/core/processor/csv_helper/csv_preprocessor.py
"""
CSV Preprocessor - Clean CSV text before parsing.

Processing Pipeline Position:
    1. CSVFileConverter.convert() -> (content: str, encoding: str)
    2. CSVPreprocessor.preprocess() -> PreprocessedData (THIS STEP)
    3. parse_csv_content() -> rows

Current Implementation:
    - Removes one leading byte order mark so the first header cell compares cleanly
"""
import logging
from typing import Any, Dict

from urlsheet.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)
from urlsheet.core.processor.csv_helper.csv_constants import TEXT_BOM

logger = logging.getLogger("urlsheet.csv.preprocessor")


class CSVPreprocessor(BasePreprocessor):
    """CSV Content Preprocessor."""

    def preprocess(
        self,
        converted_data: Any,
        **kwargs
    ) -> PreprocessedData:
        """
        Preprocess CSV content.

        Args:
            converted_data: Tuple of (content, encoding) from CSVFileConverter, or a str
            **kwargs: Additional options

        Returns:
            PreprocessedData with the cleaned content and encoding
        """
        metadata: Dict[str, Any] = {}

        content = ""
        encoding = kwargs.get("encoding", "utf-8")

        if isinstance(converted_data, tuple) and len(converted_data) >= 2:
            content, encoding = converted_data[0], converted_data[1]
            metadata['detected_encoding'] = encoding
        elif isinstance(converted_data, str):
            content = converted_data

        clean = content
        if clean.startswith(TEXT_BOM):
            clean = clean[len(TEXT_BOM):]
            metadata['bom_removed'] = True

        logger.debug("CSV preprocessor: metadata=%s", metadata)

        return PreprocessedData(
            raw_content=content,
            clean_content=clean,  # TRUE SOURCE - string content for CSV
            encoding=encoding,
            metadata=metadata,
        )

    def get_format_name(self) -> str:
        """Return format name."""
        return "CSV Preprocessor"

    def validate(self, data: Any) -> bool:
        """Validate if data is CSV content."""
        if isinstance(data, tuple) and len(data) >= 2:
            return isinstance(data[0], str)
        return isinstance(data, str)


__all__ = ['CSVPreprocessor']
