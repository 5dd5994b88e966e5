from datetime import date

import pytest

from jalali_calendar_core.api.periods import Period, days_between, period_between
from jalali_calendar_core.exceptions import InvalidGregorianDateError


@pytest.mark.parametrize(
    "value,reference,expected",
    [
        (date(2024, 3, 20), date(2024, 3, 10), (10, True)),
        ("2024-03-10", "2024-03-20", (10, False)),
        ((2024, 3, 20), (2024, 3, 20), (0, False)),
        (date(2025, 3, 21), date(2024, 3, 20), (366, True)),
    ],
)
def test_days_between(value, reference, expected):
    assert days_between(value, reference) == expected


@pytest.mark.parametrize(
    "value,reference,expected",
    [
        (date(2020, 1, 31), date(2020, 3, 1), Period(0, 1, 1, False)),
        (date(2026, 10, 19), date(2000, 1, 1), Period(26, 9, 18, True)),
        (date(2021, 3, 21), date(2024, 3, 20), Period(2, 11, 28, False)),
        (date(2024, 5, 5), date(2024, 5, 5), Period(0, 0, 0, False)),
    ],
)
def test_period_between(value, reference, expected):
    assert period_between(value, reference) == expected


def test_invalid_gregorian_input_is_rejected():
    with pytest.raises(InvalidGregorianDateError):
        days_between((2023, 2, 29), date(2023, 1, 1))
