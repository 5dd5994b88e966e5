"""Errors raised by the Jalali calendar helpers."""
from __future__ import annotations

from typing import Optional

__all__ = [
    "JalaliCoreError",
    "InvalidGregorianDateError",
    "InvalidJalaliDateError",
    "UnsupportedDateFormatError",
]


class JalaliCoreError(Exception):
    """Base class for every error raised by :mod:`jalali_calendar_core`."""


class InvalidJalaliDateError(JalaliCoreError, ValueError):
    """A Jalali year/month/day combination that is not a calendar date."""

    def __init__(self, year: int, month: int, day: Optional[int], reason: str) -> None:
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        shown = f"{year}-{month:02d}" if day is None else f"{year}-{month:02d}-{day:02d}"
        super().__init__(f"Invalid Jalali date {shown}: {reason}")


class InvalidGregorianDateError(JalaliCoreError, ValueError):
    """A Gregorian year/month/day combination rejected by :class:`datetime.date`."""

    def __init__(self, year: int, month: int, day: int, reason: str) -> None:
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        super().__init__(f"Invalid Gregorian date {year}-{month:02d}-{day:02d}: {reason}")


class UnsupportedDateFormatError(JalaliCoreError, ValueError):
    """A date string that does not split into three numeric parts."""
