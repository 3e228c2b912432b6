from urlsheet.core.processor.csv_helper import csv_encoding
from urlsheet.core.processor.csv_helper.csv_encoding import decode_csv_bytes, detect_bom
from urlsheet.core.processor.csv_helper.csv_file_converter import CSVFileConverter
from urlsheet.core.processor.csv_helper.csv_preprocessor import CSVPreprocessor


def test_detect_bom():
    assert detect_bom(b"\xef\xbb\xbfRow") == "utf-8-sig"
    assert detect_bom(b"\xff\xfeR\x00") == "utf-16"
    assert detect_bom(b"\xfe\xff\x00R") == "utf-16"
    assert detect_bom(b"\xff\xfe\x00\x00") == "utf-32"
    assert detect_bom(b"Row,URL") is None


def test_utf8_bom_is_removed():
    text, encoding = decode_csv_bytes("Row,URL\n".encode("utf-8-sig"))
    assert text == "Row,URL\n"
    assert encoding == "utf-8-sig"


def test_utf16_with_bom():
    text, encoding = decode_csv_bytes("Row,URL\n1,https://a.com\n".encode("utf-16"))
    assert text == "Row,URL\n1,https://a.com\n"
    assert encoding == "utf-16"


def test_preferred_encoding():
    assert decode_csv_bytes(b"caf\xe9", preferred_encoding="latin-1") == ("café", "latin-1")


def test_unknown_preferred_encoding_falls_back():
    text, _ = decode_csv_bytes(b"a,b", preferred_encoding="no-such-codec")
    assert text == "a,b"


def test_plain_ascii():
    text, _ = decode_csv_bytes(b"Row,URL\n1,https://a.com/x\n")
    assert text == "Row,URL\n1,https://a.com/x\n"


def test_undecodable_bytes_fall_back_to_latin1(monkeypatch):
    monkeypatch.setattr(csv_encoding.chardet, "detect", lambda data: {"encoding": None, "confidence": 0.0})
    # 0x81 is undefined in cp1252
    assert decode_csv_bytes(b"a\x81b") == ("a\x81b", "latin-1")


def test_empty_payload():
    assert decode_csv_bytes(b"") == ("", "utf-8")


def test_file_converter_records_encoding():
    converter = CSVFileConverter()
    assert converter.get_format_name() == "CSV (unknown)"
    text, encoding = converter.convert("URL\n".encode("utf-8-sig"))
    assert text == "URL\n"
    assert converter.detected_encoding == encoding == "utf-8-sig"
    assert converter.get_format_name() == "CSV (utf-8-sig)"
    assert converter.validate(b"x")
    assert not converter.validate("x")


def test_preprocessor_strips_leading_bom():
    result = CSVPreprocessor().preprocess("\ufeffURL,Name\n")
    assert result.clean_content == "URL,Name\n"
    assert result.raw_content == "\ufeffURL,Name\n"
    assert result.metadata["bom_removed"] is True


def test_preprocessor_accepts_converter_tuple():
    result = CSVPreprocessor().preprocess(("a,b", "cp1252"))
    assert result.clean_content == "a,b"
    assert result.encoding == "cp1252"
    assert result.metadata == {"detected_encoding": "cp1252"}


def test_preprocessor_validate():
    preprocessor = CSVPreprocessor()
    assert preprocessor.validate("text")
    assert preprocessor.validate(("text", "utf-8"))
    assert not preprocessor.validate(b"bytes")
    assert preprocessor.get_format_name() == "CSV Preprocessor"
