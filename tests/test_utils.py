import pytest

from cardgrid.utils import parse_category_count, slot_name


@pytest.mark.parametrize("raw,expected", [
    (0, 0),
    (3, 3),
    ("7", 7),
    (" 2 ", 2),
    ("", 0),
    ("abc", 0),
    ("-1", 0),
    (-5, 0),
    ("1e3", 0),
    (None, 0),
    (True, 0),
])
def test_parse_category_count(raw, expected):
    assert parse_category_count(raw) == expected


def test_slot_name():
    assert slot_name(2, 7) == "2:7"
