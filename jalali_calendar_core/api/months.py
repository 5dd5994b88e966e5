"""Month-name tables used to label Jalali and Gregorian months."""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple, Union

__all__ = [
    "DEFAULT_MONTH_NAMES",
    "GREGORIAN_MONTH_NAMES",
    "LATIN_MONTH_NAMES",
    "MONTH_NAME_TABLES",
    "PERSIAN_MONTH_NAMES",
    "month_name",
    "resolve_table",
]

PERSIAN_MONTH_NAMES: Tuple[str, ...] = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

LATIN_MONTH_NAMES: Tuple[str, ...] = (
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
)

GREGORIAN_MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_NAME_TABLES: Dict[str, Tuple[str, ...]] = {
    "persian": PERSIAN_MONTH_NAMES,
    "latin": LATIN_MONTH_NAMES,
}

DEFAULT_MONTH_NAMES = "persian"

MonthNames = Union[str, Sequence[str]]


def resolve_table(names: Optional[MonthNames] = None) -> Tuple[str, ...]:
    """Return a 12-entry name table for a table key or an explicit sequence.

    ``None`` selects :data:`DEFAULT_MONTH_NAMES`.
    """

    if names is None:
        names = DEFAULT_MONTH_NAMES
    if isinstance(names, str):
        key = names.strip().lower()
        if key not in MONTH_NAME_TABLES:
            raise ValueError(
                "month names must be one of: {}".format(", ".join(sorted(MONTH_NAME_TABLES)))
            )
        return MONTH_NAME_TABLES[key]
    table = tuple(names)
    if len(table) != 12:
        raise ValueError(f"a month-name table needs 12 entries, got {len(table)}")
    return table


def month_name(month: int, names: Optional[MonthNames] = None) -> str:
    if not (1 <= month <= 12):
        raise ValueError("month must be in 1..12")
    return resolve_table(names)[month - 1]
