from datetime import datetime

from urlsheet.core.processor.csv_helper.csv_writer import (
    build_export_filename,
    escape_cell,
    serialize_row,
    serialize_rows,
)


def test_minimal_quoting():
    assert serialize_rows([["a,b", 'c"d', "plain"]]) == '"a,b","c""d",plain'


def test_rows_joined_with_crlf_without_trailing_terminator():
    assert serialize_rows([["a", "b"], ["c", "d"]]) == "a,b\r\nc,d"


def test_empty_matrix():
    assert serialize_rows([]) == ""


def test_line_breaks_force_quoting():
    assert escape_cell("x\ny") == '"x\ny"'
    assert escape_cell("x\ry") == '"x\ry"'


def test_none_and_non_string_cells():
    assert escape_cell(None) == ""
    assert serialize_row([1, None, "a"]) == "1,,a"


def test_plain_cell_is_untouched():
    assert escape_cell("  spaced  ") == "  spaced  "


def test_export_filename_is_zero_padded():
    assert build_export_filename(datetime(2024, 3, 7, 9, 5, 1)) == "2024-03-07_09-05-01.csv"


def test_export_filename_defaults_to_now():
    name = build_export_filename()
    assert name.endswith(".csv")
    assert len(name) == len("2024-03-07_09-05-01.csv")
