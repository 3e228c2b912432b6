import pytest

from urlsheet.core.processor.csv_helper.csv_column import (
    InvalidColumnLabel,
    column_to_index,
    index_to_column,
    parse_column_label,
)


@pytest.mark.parametrize("index, label", [
    (0, "A"),
    (1, "B"),
    (25, "Z"),
    (26, "AA"),
    (27, "AB"),
    (51, "AZ"),
    (52, "BA"),
    (701, "ZZ"),
    (702, "AAA"),
])
def test_known_labels(index, label):
    assert index_to_column(index) == label
    assert column_to_index(label) == index


def test_index_label_bijection():
    labels = set()
    for i in range(1001):
        label = index_to_column(i)
        assert column_to_index(label) == i
        labels.add(label)
    assert len(labels) == 1001


def test_lowercase_labels():
    assert column_to_index("ab") == 27
    assert index_to_column(column_to_index("xfd")) == "XFD"


@pytest.mark.parametrize("label", ["", "A1", " B", "B ", "Ä", "ß", "A-B"])
def test_invalid_labels_raise(label):
    with pytest.raises(InvalidColumnLabel) as exc_info:
        column_to_index(label)
    assert exc_info.value.label == label


def test_invalid_label_is_value_error():
    with pytest.raises(ValueError):
        column_to_index("1")


def test_non_string_label_raises():
    with pytest.raises(InvalidColumnLabel):
        column_to_index(3)


@pytest.mark.parametrize("index", [-1, 1.5, "A", True])
def test_bad_indexes_raise(index):
    with pytest.raises(ValueError):
        index_to_column(index)


def test_parse_column_label_success():
    result = parse_column_label("c")
    assert result.ok
    assert result.index == 2
    assert result.error is None


def test_parse_column_label_failure():
    result = parse_column_label("B2")
    assert not result.ok
    assert result.index is None
    assert "'2'" in result.error
