# urlsheet/core/sheet_converter.py
"""UrlSheetConverter - URL Sheet Conversion Class

Main conversion class for the urlsheet library.
Turns a spreadsheet CSV export containing a column of URLs into a table of
URL records (domain, channel, id, title) and a re-exportable CSV string.

Processing Pipeline:
    1. CSVPreprocessor.preprocess() - Remove a leading byte order mark
    2. parse_csv_content() - Text -> rows
    3. resolve_url_column() - Pick the URL column (unless given explicitly)
    4. UrlMetadataExtractor.extract() - One record per non-blank URL cell
    5. serialize_rows() - Records -> export CSV

Usage Example:
    from urlsheet import UrlSheetConverter

    converter = UrlSheetConverter()
    result = converter.convert(csv_text)
    for record in result:
        print(record.ordinal, record.domain, record.title)

    # Explicit column, by label or zero-based index
    result = converter.convert(csv_text, url_column="C")

    # Raw payload with encoding detection
    result = converter.convert_bytes(payload)
    data = result.to_bytes()  # UTF-8 with BOM, ready to save
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from urlsheet.core.functions.utils import cell_text
from urlsheet.core.processor.csv_helper.csv_column import column_to_index
from urlsheet.core.processor.csv_helper.csv_column_resolver import resolve_url_column
from urlsheet.core.processor.csv_helper.csv_constants import (
    DEFAULT_URL_COLUMN,
    EXPORT_HEADER,
    TEXT_BOM,
    URL_HEADER_NAMES,
)
from urlsheet.core.processor.csv_helper.csv_file_converter import CSVFileConverter
from urlsheet.core.processor.csv_helper.csv_parser import parse_csv_content
from urlsheet.core.processor.csv_helper.csv_preprocessor import CSVPreprocessor
from urlsheet.core.processor.csv_helper.csv_writer import build_export_filename, serialize_rows
from urlsheet.core.processor.url_helper.url_metadata import UrlMetadataExtractor

ColumnSelector = Union[int, str]


@dataclass(frozen=True)
class UrlRecord:
    """
    One converted table row.

    Attributes:
        ordinal: 1-based position among the emitted records
        url: URL as read from the sheet (stripped)
        domain: Host without "www."
        channel: First path segment
        id: First all-digit path segment
        title: Readable title from the last meaningful path segment
    """
    ordinal: int
    url: str
    domain: str = ""
    channel: str = ""
    id: str = ""
    title: str = ""

    def to_row(self) -> List[str]:
        """Return the export row for this record."""
        return [str(self.ordinal), self.url, self.domain, self.channel, self.id, self.title]


@dataclass(frozen=True)
class ConverterConfig:
    """
    UrlSheetConverter Configuration.

    Attributes:
        default_url_column: Column used when the URL column cannot be detected
        url_header_names: Header names that identify the URL column
    """
    default_url_column: int = DEFAULT_URL_COLUMN
    url_header_names: Tuple[str, ...] = URL_HEADER_NAMES


class ConversionResult:
    """
    Container for the outcome of one conversion.

    Attributes:
        records: Converted URL records in input order
        export_text: CSV text (CRLF rows, fixed header)
        url_column: Zero-based index of the column that was read
        header: Header row of the input (empty if the input had no rows)
        encoding: Detected payload encoding (None when converting text)

    Example:
        >>> result = converter.convert(text)
        >>> len(result)
        12
        >>> result.export_text.splitlines()[0]
        '#,URL,Domain,Channel,ID,Title'
    """

    def __init__(
        self,
        records: List[UrlRecord],
        export_text: str,
        url_column: int,
        header: Optional[List[str]] = None,
        encoding: Optional[str] = None
    ):
        self._records = records
        self._export_text = export_text
        self._url_column = url_column
        self._header = header or []
        self._encoding = encoding

    @property
    def records(self) -> List[UrlRecord]:
        return self._records

    @property
    def export_text(self) -> str:
        return self._export_text

    @property
    def url_column(self) -> int:
        return self._url_column

    @property
    def header(self) -> List[str]:
        return self._header

    @property
    def encoding(self) -> Optional[str]:
        return self._encoding

    def to_bytes(self, include_bom: bool = True) -> bytes:
        """
        Encode the export text as UTF-8.

        Args:
            include_bom: Prefix a byte order mark so spreadsheet apps detect UTF-8

        Returns:
            Export payload bytes
        """
        text = TEXT_BOM + self._export_text if include_bom else self._export_text
        return text.encode("utf-8")

    def suggested_filename(self, now: Optional[datetime] = None) -> str:
        """Return a timestamped filename for the export ("yyyy-mm-dd_hh-mm-ss.csv")."""
        return build_export_filename(now)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UrlRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> UrlRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"ConversionResult(records={len(self._records)}, url_column={self._url_column})"


class UrlSheetConverter:
    """
    urlsheet Main Conversion Class

    Stateless apart from its configuration; one instance may serve any
    number of conversions.

    Example:
        >>> converter = UrlSheetConverter()
        >>> result = converter.convert("Row,URL\\n1,https://a.com/ch/99/My-Title.html\\n")
        >>> result.records[0].title
        'my title'
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        default_url_column: Optional[int] = None,
        url_header_names: Optional[Sequence[str]] = None,
    ):
        """
        Initialize UrlSheetConverter.

        Args:
            config: Configuration dictionary
                   - default_url_column: Fallback column index (default: 1, column "B")
                   - url_header_names: Header names that mark the URL column (default: ("url",))
            default_url_column: Overrides config["default_url_column"]
            url_header_names: Overrides config["url_header_names"]

        Raises:
            ValueError: If the fallback column is negative
        """
        config = config or {}

        if default_url_column is None:
            default_url_column = config.get("default_url_column", DEFAULT_URL_COLUMN)
        if url_header_names is None:
            url_header_names = config.get("url_header_names", URL_HEADER_NAMES)
        if isinstance(url_header_names, str):
            url_header_names = (url_header_names,)

        self._config = ConverterConfig(
            default_url_column=self._check_index(default_url_column),
            url_header_names=tuple(url_header_names),
        )

        self._logger = logging.getLogger("urlsheet.converter")
        self._preprocessor = CSVPreprocessor()
        self._extractor = UrlMetadataExtractor()

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> ConverterConfig:
        """Current configuration."""
        return self._config

    @property
    def extractor(self) -> UrlMetadataExtractor:
        return self._extractor

    # =========================================================================
    # Public Methods
    # =========================================================================

    def convert(self, text: str, url_column: Optional[ColumnSelector] = None) -> ConversionResult:
        """
        Convert CSV text into URL records and an export CSV.

        Args:
            text: CSV text of the sheet (first row is the header)
            url_column: Column holding URLs, as a zero-based index or a label ("B").
                        None detects it from the header and the first data row.

        Returns:
            ConversionResult

        Raises:
            InvalidColumnLabel: If url_column is a malformed label
            ValueError: If url_column is a negative index
        """
        preprocessed = self._preprocessor.preprocess(text or "")
        return self._convert_preprocessed(preprocessed.clean_content, url_column)

    def convert_bytes(
        self,
        data: bytes,
        url_column: Optional[ColumnSelector] = None,
        encoding: Optional[str] = None
    ) -> ConversionResult:
        """
        Convert a raw CSV payload, detecting its encoding.

        Args:
            data: CSV bytes as fetched
            url_column: See convert()
            encoding: Encoding to try first (None for auto-detect)

        Returns:
            ConversionResult (with the detected encoding)
        """
        converted = self._create_file_converter().convert(data, encoding=encoding)
        preprocessed = self._preprocessor.preprocess(converted)
        self._logger.info(
            f"Decoded CSV payload: {len(data)} bytes, encoding={preprocessed.encoding}"
        )
        return self._convert_preprocessed(
            preprocessed.clean_content, url_column, encoding=preprocessed.encoding
        )

    # =========================================================================
    # Internal
    # =========================================================================

    def _convert_preprocessed(
        self,
        content: str,
        url_column: Optional[ColumnSelector],
        encoding: Optional[str] = None
    ) -> ConversionResult:
        rows = parse_csv_content(content)

        header = rows[0] if rows else []
        if url_column is None:
            column = resolve_url_column(
                header,
                rows[1] if len(rows) > 1 else [],
                default_index=self._config.default_url_column,
                header_names=self._config.url_header_names,
            )
        else:
            column = self._select_column(url_column)

        if not rows:
            self._logger.info("No rows in input, returning header-only export")

        records = self._build_records(rows[1:], column)
        export_text = self._build_export(records)

        self._logger.info(
            f"Converted {len(records)} URLs from {max(len(rows) - 1, 0)} data rows "
            f"(url_column={column})"
        )
        return ConversionResult(records, export_text, column, list(header), encoding)

    def _create_file_converter(self) -> CSVFileConverter:
        """Create a CSV payload converter."""
        return CSVFileConverter()

    def _build_records(self, data_rows: List[List[str]], column: int) -> List[UrlRecord]:
        records: List[UrlRecord] = []

        for row_number, row in enumerate(data_rows, start=2):
            url = cell_text(row, column)
            if not url:
                self._logger.debug(f"Row {row_number}: blank URL cell, skipped")
                continue

            meta = self._extractor.extract(url)
            records.append(UrlRecord(
                ordinal=len(records) + 1,
                url=url,
                domain=meta.domain,
                channel=meta.channel,
                id=meta.id,
                title=meta.title,
            ))

        return records

    def _build_export(self, records: List[UrlRecord]) -> str:
        matrix = [list(EXPORT_HEADER)]
        matrix.extend(record.to_row() for record in records)
        return serialize_rows(matrix)

    def _select_column(self, url_column: ColumnSelector) -> int:
        if isinstance(url_column, str):
            return column_to_index(url_column)
        return self._check_index(url_column)

    @staticmethod
    def _check_index(index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Column index must be an integer, got {index!r}")
        if index < 0:
            raise ValueError(f"Column index must be non-negative, got {index}")
        return index


_default_converter: Optional[UrlSheetConverter] = None


def convert(text: str, url_column: Optional[ColumnSelector] = None) -> ConversionResult:
    """
    Convert CSV text with a default UrlSheetConverter.

    See UrlSheetConverter.convert().
    """
    global _default_converter
    if _default_converter is None:
        _default_converter = UrlSheetConverter()
    return _default_converter.convert(text, url_column=url_column)


__all__ = [
    "UrlRecord",
    "ConverterConfig",
    "ConversionResult",
    "UrlSheetConverter",
    "convert",
]
