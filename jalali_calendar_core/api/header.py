"""Calendar header values for a single day: both calendars, week numbers and month span.

The calendar mode decides which of the two header lines is primary. In
``"jalali"`` mode the Jalali week and month span lead; in ``"gregorian"``
mode the Gregorian month and ISO week lead.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Literal, Optional, Tuple

from . import converter
from .converter import GregorianInput, JalaliDate, MonthOverlap
from .months import GREGORIAN_MONTH_NAMES, MonthNames

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - plain Python callers
    frappe = None  # type: ignore

__all__ = [
    "CALENDAR_MODES",
    "DEFAULT_CALENDAR_MODE",
    "CalendarHeader",
    "build_header",
    "get_calendar_header",
]

CalendarMode = Literal["gregorian", "jalali"]

CALENDAR_MODES: Tuple[str, ...] = ("gregorian", "jalali")
DEFAULT_CALENDAR_MODE = "gregorian"


def _require_mode(mode: Optional[str]) -> str:
    normalized = (mode or DEFAULT_CALENDAR_MODE).strip().lower()
    if normalized not in CALENDAR_MODES:
        raise ValueError("calendar mode must be one of: {}".format(", ".join(CALENDAR_MODES)))
    return normalized


@dataclass(frozen=True)
class CalendarHeader:
    """Header lines for one Gregorian day, ordered by calendar mode."""

    gregorian: date
    jalali: JalaliDate
    jalali_week: int
    gregorian_week: int
    overlap: MonthOverlap
    mode: CalendarMode = DEFAULT_CALENDAR_MODE

    @property
    def jalali_text(self) -> str:
        left, right = self.overlap.left, self.overlap.right
        return f"week {self.jalali_week} - {left.name} - {right.name} {right.year}"

    @property
    def gregorian_text(self) -> str:
        month = GREGORIAN_MONTH_NAMES[self.gregorian.month - 1]
        return f"{month} {self.gregorian.year} - week {self.gregorian_week}"

    @property
    def primary(self) -> str:
        return self.jalali_text if self.mode == "jalali" else self.gregorian_text

    @property
    def secondary(self) -> str:
        return self.gregorian_text if self.mode == "jalali" else self.jalali_text

    def as_dict(self) -> Dict[str, object]:
        left, right = self.overlap.left, self.overlap.right
        return {
            "mode": self.mode,
            "primary": self.primary,
            "secondary": self.secondary,
            "gregorian": self.gregorian.isoformat(),
            "gregorian_week": self.gregorian_week,
            "jalali": self.jalali.isoformat(),
            "jalali_week": self.jalali_week,
            "left": {"month": left.month, "year": left.year, "name": left.name},
            "right": {"month": right.month, "year": right.year, "name": right.name},
            "spans_two_months": self.overlap.spans_two_months,
        }


def build_header(
    value: GregorianInput,
    names: Optional[MonthNames] = None,
    mode: Optional[str] = None,
) -> CalendarHeader:
    """Collect everything a month header shows for the Gregorian day ``value``."""

    selected = _require_mode(mode)
    gregorian = converter.to_gregorian_date(value)
    jalali = converter.gregorian_to_jalali(gregorian)
    return CalendarHeader(
        gregorian=gregorian,
        jalali=jalali,
        jalali_week=converter.jalali_week_number(jalali),
        gregorian_week=gregorian.isocalendar()[1],
        overlap=converter.gregorian_month_to_jalali_months(gregorian, names),
        mode=selected,  # type: ignore[arg-type]
    )


def get_calendar_header(
    value: GregorianInput, mode: Optional[str] = None, names: Optional[str] = None
) -> Dict[str, object]:
    return build_header(value, names, mode).as_dict()


if frappe and hasattr(frappe, "whitelist"):  # pragma: no cover - Frappe runtime only
    get_calendar_header = frappe.whitelist()(get_calendar_header)  # type: ignore[attr-defined]
