import pytest

from event_repeater.helpers import parse_int, remove_value, try_parse_int


def test_parse_int_accepts_plain_decimal():
    assert parse_int("42") == 42
    assert parse_int("-7") == -7
    assert parse_int("+3") == 3
    assert parse_int(" 12 ") == 12


@pytest.mark.parametrize("raw", ["1_000", "1_0", "١٢", "12a", "", " ", "1.0", "0x10"])
def test_parse_int_rejects_non_decimal_text(raw):
    with pytest.raises(ValueError):
        parse_int(raw)
    assert try_parse_int(raw) is None


def test_remove_value_removes_every_copy():
    items = [1, 2, 1, 3, 1]
    assert remove_value(items, 1) == 3
    assert items == [2, 3]
    assert remove_value(items, 9) == 0
