"""Distance between a Gregorian date and a caller-supplied reference day."""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .converter import GregorianInput, to_gregorian_date

__all__ = [
    "Period",
    "days_between",
    "period_between",
]


@dataclass(frozen=True)
class Period:
    """Calendar distance split into whole years, months and remaining days."""

    years: int
    months: int
    days: int
    is_future: bool


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def days_between(value: GregorianInput, reference: GregorianInput) -> Tuple[int, bool]:
    """Return the absolute day count between two days and whether ``value`` is after ``reference``."""

    given = to_gregorian_date(value)
    today = to_gregorian_date(reference)
    return abs((given - today).days), given > today


def period_between(value: GregorianInput, reference: GregorianInput) -> Period:
    """Return the years/months/days separating ``value`` from ``reference``.

    The earlier of the two days is the start. Months are added first and the
    day of month is clamped to the target month's length, so 01-31 plus one
    month is the last day of February.
    """

    given = to_gregorian_date(value)
    today = to_gregorian_date(reference)
    start, end = (given, today) if given <= today else (today, given)

    total_months = (end.year - start.year) * 12 + end.month - start.month
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - _add_months(start, total_months)).days

    return Period(
        years=total_months // 12,
        months=total_months % 12,
        days=days,
        is_future=given > today,
    )
