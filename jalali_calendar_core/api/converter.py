"""Gregorian ↔ Jalali conversion helpers.

Both directions are closed-form integer arithmetic anchored at Jalali
979-01-01 == Gregorian 1600-03-20. Dates before about 622 CE (Jalali year 1)
are outside the range the arithmetic is validated for; they are converted
without complaint but the results carry no calendrical meaning.
"""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Tuple, Union

from ..exceptions import (
    InvalidGregorianDateError,
    InvalidJalaliDateError,
    UnsupportedDateFormatError,
)
from .months import MonthNames, resolve_table

__all__ = [
    "JalaliDate",
    "JalaliMonth",
    "MonthOverlap",
    "coerce_gregorian",
    "coerce_jalali",
    "gregorian_month_to_jalali_months",
    "gregorian_to_jalali",
    "is_jalali_leap",
    "jalali_month_length",
    "jalali_to_gregorian",
    "jalali_week_number",
    "to_gregorian_date",
]

logger = logging.getLogger(__name__)

_GREGORIAN_CUMULATIVE_DAYS = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]
_GREGORIAN_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
_JALALI_MONTH_LENGTHS = [31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29]

_ANCHOR_JALALI_YEAR = 979
_ANCHOR_GREGORIAN_YEAR = 1600

GregorianInput = Union[str, date, datetime, Iterable[int]]
JalaliInput = Union[str, "JalaliDate", Iterable[int]]


@dataclass(frozen=True, order=True)
class JalaliDate:
    """Immutable representation of a Jalali (Persian) calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _validate_jalali(self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> date:
        return jalali_to_gregorian(self)

    def week_number(self) -> int:
        return jalali_week_number(self)


@dataclass(frozen=True, order=True)
class JalaliMonth:
    """A Jalali month of a given year, optionally labelled from a name table."""

    year: int
    month: int
    name: Optional[str] = None


@dataclass(frozen=True)
class MonthOverlap:
    """Jalali months touched by the first (``left``) and last (``right``) day of a Gregorian month."""

    left: JalaliMonth
    right: JalaliMonth

    @property
    def spans_two_months(self) -> bool:
        return self.left is not self.right

    @classmethod
    def from_dates(
        cls, first: "JalaliDate", last: "JalaliDate", names: Optional[MonthNames] = None
    ) -> "MonthOverlap":
        table = resolve_table(names)
        left = JalaliMonth(first.year, first.month, table[first.month - 1])
        right = JalaliMonth(last.year, last.month, table[last.month - 1])
        if left == right:
            right = left
        return cls(left, right)


def is_jalali_leap(year: int) -> bool:
    start = jalali_to_gregorian((year, 1, 1))
    next_start = jalali_to_gregorian((year + 1, 1, 1))
    return (next_start - start).days == 366


def jalali_month_length(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidJalaliDateError(year, month, None, "month must be in 1..12")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap(year) else 29


def _validate_jalali(year: int, month: int, day: int) -> None:
    if not (1 <= month <= 12):
        logger.debug("Rejected Jalali month %s in %s-%s-%s", month, year, month, day)
        raise InvalidJalaliDateError(year, month, day, "month must be in 1..12")
    max_day = jalali_month_length(year, month)
    if not (1 <= day <= max_day):
        logger.debug("Rejected Jalali day %s in %s-%s-%s", day, year, month, day)
        raise InvalidJalaliDateError(year, month, day, f"day must be in 1..{max_day} for month {month}")


def _split_date_string(value: str, kind: str) -> Tuple[int, int, int]:
    tokens = value.strip().replace("/", "-").split("-")
    if len(tokens) != 3:
        raise UnsupportedDateFormatError(f"Unsupported {kind} date string: {value!r}")
    try:
        year, month, day = (int(part) for part in tokens)
    except ValueError as exc:
        raise UnsupportedDateFormatError(f"Unsupported {kind} date string: {value!r}") from exc
    return year, month, day


def coerce_gregorian(value: GregorianInput) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_jalali(value: JalaliInput) -> Tuple[int, int, int]:
    if isinstance(value, JalaliDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Jalali")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a JalaliDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def to_gregorian_date(value: GregorianInput) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    gy, gm, gd = coerce_gregorian(value)
    try:
        return date(gy, gm, gd)
    except ValueError as exc:
        logger.debug("Rejected Gregorian date %s-%s-%s: %s", gy, gm, gd, exc)
        raise InvalidGregorianDateError(gy, gm, gd, str(exc)) from exc


def gregorian_to_jalali(value: GregorianInput) -> JalaliDate:
    target = to_gregorian_date(value)
    gy, gm, gd = target.year, target.month, target.day

    # Floor division keeps the leap counts exact for a negative base, so
    # years before the anchor share it instead of switching epochs.
    jy = _ANCHOR_JALALI_YEAR
    base = gy - _ANCHOR_GREGORIAN_YEAR
    adjusted = base + 1 if gm > 2 else base

    days = (
        365 * base
        + (adjusted + 3) // 4
        - (adjusted + 99) // 100
        + (adjusted + 399) // 400
        - 80
        + gd
        + _GREGORIAN_CUMULATIVE_DAYS[gm - 1]
    )

    jy += 33 * (days // 12053)
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < 186:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        days -= 186
        jm = 7 + days // 30
        jd = 1 + days % 30

    return JalaliDate(jy, jm, jd)


def jalali_to_gregorian(value: JalaliInput) -> date:
    jy, jm, jd = coerce_jalali(value)
    if not isinstance(value, JalaliDate):
        _validate_jalali(jy, jm, jd)

    jy -= _ANCHOR_JALALI_YEAR
    jm -= 1
    jd -= 1

    j_day_no = 365 * jy + jy // 33 * 8 + ((jy % 33) + 3) // 4
    for i in range(jm):
        j_day_no += _JALALI_MONTH_LENGTHS[i]
    j_day_no += jd

    g_day_no = j_day_no + 79

    # 146097 days per 400 years, 36524 per plain century, 1461 per 4 years.
    gy = _ANCHOR_GREGORIAN_YEAR + 400 * (g_day_no // 146097)
    g_day_no %= 146097

    leap = True
    if g_day_no >= 36525:
        g_day_no -= 1
        gy += 100 * (g_day_no // 36524)
        g_day_no %= 36524
        if g_day_no >= 365:
            g_day_no += 1
        else:
            leap = False

    gy += 4 * (g_day_no // 1461)
    g_day_no %= 1461

    if g_day_no >= 366:
        leap = False
        g_day_no -= 1
        gy += g_day_no // 365
        g_day_no %= 365

    for i, month_len in enumerate(_GREGORIAN_MONTH_LENGTHS):
        month_length = month_len
        if i == 1 and leap:
            month_length += 1
        if g_day_no < month_length:
            gm = i + 1
            gd = g_day_no + 1
            break
        g_day_no -= month_length
    else:  # pragma: no cover - unreachable for validated input
        raise ValueError("Failed to convert Jalali date to Gregorian")

    return date(gy, gm, gd)


def jalali_week_number(value: JalaliInput) -> int:
    """Return the 1-based week of the Jalali year that contains ``value``.

    Weeks are counted from 1 Farvardin in blocks of seven days. Esfand is
    always counted as 29 days, regardless of leap status, so the last days of
    the year may land in week 53.
    """

    if isinstance(value, JalaliDate):
        jalali = value
    else:
        jalali = JalaliDate(*coerce_jalali(value))
    days_passed = sum(_JALALI_MONTH_LENGTHS[: jalali.month - 1]) + jalali.day
    return (days_passed + 6) // 7


def gregorian_month_to_jalali_months(
    value: GregorianInput, names: Optional[MonthNames] = None
) -> MonthOverlap:
    """Return the Jalali months covering the Gregorian month of ``value``.

    The day of ``value`` is ignored. ``left`` belongs to the 1st of the
    month and ``right`` to its last day; when both fall in the same Jalali
    month they are the same :class:`JalaliMonth` object.
    """

    target = to_gregorian_date(value)
    last_day = calendar.monthrange(target.year, target.month)[1]
    first = gregorian_to_jalali(target.replace(day=1))
    last = gregorian_to_jalali(target.replace(day=last_day))
    return MonthOverlap.from_dates(first, last, names)
