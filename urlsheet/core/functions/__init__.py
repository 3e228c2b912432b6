# urlsheet/core/functions/__init__.py
"""
Functions - Common building blocks

Module Components:
- utils: Whitespace and cell text helpers
- file_converter: Payload converter base classes
- preprocessor: Preprocessor base class and result container
"""

from urlsheet.core.functions.utils import (
    cell_text,
    collapse_whitespace,
)

from urlsheet.core.functions.file_converter import (
    BaseFileConverter,
)

from urlsheet.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)

__all__ = [
    # Text utilities
    "cell_text",
    "collapse_whitespace",
    # Converters
    "BaseFileConverter",
    # Preprocessing
    "BasePreprocessor",
    "PreprocessedData",
]
