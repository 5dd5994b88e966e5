import pytest

from jalali_calendar_core.api.months import (
    GREGORIAN_MONTH_NAMES,
    LATIN_MONTH_NAMES,
    PERSIAN_MONTH_NAMES,
    month_name,
    resolve_table,
)


@pytest.mark.parametrize(
    "month,names,expected",
    [
        (1, None, "فروردین"),
        (12, "persian", "اسفند"),
        (12, "latin", "Esfand"),
        (2, " Latin ", "Ordibehesht"),
        (3, GREGORIAN_MONTH_NAMES, "March"),
    ],
)
def test_month_name_lookup(month, names, expected):
    assert month_name(month, names) == expected


def test_tables_have_twelve_entries():
    assert len(PERSIAN_MONTH_NAMES) == len(LATIN_MONTH_NAMES) == len(GREGORIAN_MONTH_NAMES) == 12


def test_resolve_table_defaults_to_persian():
    assert resolve_table() == PERSIAN_MONTH_NAMES


def test_unknown_table_key_raises_value_error():
    with pytest.raises(ValueError):
        resolve_table("klingon")


def test_short_table_raises_value_error():
    with pytest.raises(ValueError):
        resolve_table(["Only", "three", "names"])


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range_raises_value_error(month):
    with pytest.raises(ValueError):
        month_name(month)
