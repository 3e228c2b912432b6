import pytest

from urlsheet.core.processor.url_helper.url_constants import (
    MSG_INVALID_FORMAT,
    MSG_INVALID_SCHEME,
    MSG_UNSUPPORTED_SOURCE,
)
from urlsheet.core.processor.url_helper.url_source import (
    is_google_sheets_url,
    to_csv_export_url,
    validate_source_url,
)

SHEET = "https://docs.google.com/spreadsheets/d/abc123/edit"
EXPORT = "https://docs.google.com/spreadsheets/d/abc123/export?format=csv"


@pytest.mark.parametrize("url", [SHEET, SHEET + "#gid=0", "http://example.com/files/data.csv"])
def test_accepted_sources(url):
    assert validate_source_url(url) is None


@pytest.mark.parametrize("url, message", [
    ("not a url", MSG_INVALID_FORMAT),
    ("", MSG_INVALID_FORMAT),
    ("ftp://example.com/data.csv", MSG_INVALID_SCHEME),
    ("mailto:x", MSG_INVALID_SCHEME),
    ("file:///tmp/data.csv", MSG_INVALID_SCHEME),
    ("http://", MSG_INVALID_FORMAT),
    ("https://example.com/page", MSG_UNSUPPORTED_SOURCE),
    ("https://docs.google.com/document/d/abc/edit", MSG_UNSUPPORTED_SOURCE),
])
def test_rejected_sources(url, message):
    assert validate_source_url(url) == message


def test_is_google_sheets_url():
    assert is_google_sheets_url(SHEET)
    assert not is_google_sheets_url("https://example.com/data.csv")
    assert not is_google_sheets_url("garbage")


def test_export_url_without_gid():
    assert to_csv_export_url(SHEET) == EXPORT


def test_export_url_gid_from_fragment():
    assert to_csv_export_url(SHEET + "#gid=456") == EXPORT + "&gid=456"


def test_export_url_gid_from_query():
    assert to_csv_export_url(SHEET + "?gid=7") == EXPORT + "&gid=7"


def test_fragment_gid_wins_over_query():
    assert to_csv_export_url(SHEET + "?gid=1#gid=2") == EXPORT + "&gid=2"


@pytest.mark.parametrize("url", ["https://example.com/data.csv", "not a url"])
def test_other_links_are_unchanged(url):
    assert to_csv_export_url(url) == url
