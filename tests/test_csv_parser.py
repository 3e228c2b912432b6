import pytest

from urlsheet.core.processor.csv_helper.csv_constants import ScanState
from urlsheet.core.processor.csv_helper.csv_parser import CSVScanner, parse_csv_content
from urlsheet.core.processor.csv_helper.csv_writer import serialize_rows


def test_embedded_newline_and_crlf():
    assert parse_csv_content('"a\nb",c\r\nd,e') == [["a\nb", "c"], ["d", "e"]]


def test_empty_input_has_no_rows():
    assert parse_csv_content("") == []


@pytest.mark.parametrize("text", ["a,b\n", "a,b\r\n", "a,b\r", "a,b"])
def test_trailing_terminator_is_not_a_row(text):
    assert parse_csv_content(text) == [["a", "b"]]


def test_only_last_empty_row_is_dropped():
    assert parse_csv_content("a\n\n") == [["a"], [""]]
    assert parse_csv_content("a\n\nb") == [["a"], [""], ["b"]]


def test_lone_carriage_return_ends_row():
    assert parse_csv_content("a\rb\r\nc") == [["a"], ["b"], ["c"]]


def test_doubled_quote_unescapes():
    assert parse_csv_content('"c""d",x') == [['c"d', "x"]]
    assert parse_csv_content('""""') == [['"']]


def test_quoted_delimiters_and_line_breaks_are_literal():
    assert parse_csv_content('"1,2","x\r\ny"\n') == [["1,2", "x\r\ny"]]


def test_trailing_delimiter_keeps_empty_cell():
    assert parse_csv_content("a,\n,b") == [["a", ""], ["", "b"]]


def test_quote_inside_unquoted_field_toggles_quoting():
    assert parse_csv_content('a"b,c"d') == [["ab,cd"]]


def test_unterminated_quote_is_flushed():
    scanner = CSVScanner('x,"abc,def\nghi')
    assert scanner.scan() == [["x", "abc,def\nghi"]]
    assert scanner.state is ScanState.QUOTED


def test_scanner_ends_in_normal_state_for_balanced_input():
    scanner = CSVScanner('"a",b')
    scanner.scan()
    assert scanner.state is ScanState.NORMAL


@pytest.mark.parametrize("matrix", [
    [["a", "b"], ["c", "d"]],
    [["#", "URL"], ["1", "https://a.com/x?q=1,2"]],
    [['say "hi"', ""], ["multi\nline", "crlf\r\ninside"]],
    [[""], ["a"]],
    [["", ""]],
])
def test_serialize_then_parse_preserves_matrix(matrix):
    assert parse_csv_content(serialize_rows(matrix)) == matrix
