from urlsheet.core.processor.csv_helper.csv_column_resolver import resolve_url_column


def test_header_name_match_is_trimmed_and_case_insensitive():
    assert resolve_url_column(["Row", " URL ", "Date"], ["1", "x", "y"]) == 1
    assert resolve_url_column(["url", "Link"], ["x", "https://a.com"]) == 0


def test_header_must_match_exactly():
    # "URLs" and "Link" are not "url"; falls through to the sample row
    header = ["Row", "URLs", "Link"]
    assert resolve_url_column(header, ["1", "x", "https://a.com"]) == 2


def test_sample_row_sniffing():
    header = ["Row", "Link", "Date"]
    assert resolve_url_column(header, ["1", "https://x.com/a", "2020"]) == 1
    assert resolve_url_column(header, ["1", "2020", "see HTTP://x.com"]) == 2


def test_first_matching_sample_cell_wins():
    assert resolve_url_column([], ["http://a.com", "https://b.com"]) == 0


def test_fallback_is_column_b():
    assert resolve_url_column(["Row", "Link"], ["1", "www.example.com"]) == 1
    assert resolve_url_column([], []) == 1
    assert resolve_url_column(None, None) == 1


def test_custom_fallback_and_names():
    assert resolve_url_column(["a"], ["b"], default_index=4) == 4
    assert resolve_url_column(["Row", "Link"], [], header_names=("link",)) == 1


def test_inputs_are_not_mutated():
    header = ["Row", "URL"]
    sample = ["1", "https://a.com"]
    resolve_url_column(header, sample)
    assert header == ["Row", "URL"]
    assert sample == ["1", "https://a.com"]
