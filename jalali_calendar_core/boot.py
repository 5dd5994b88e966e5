"""Hook implementations that integrate the Jalali calendar core with Frappe."""
from __future__ import annotations

from .api import header, months


def boot_context():
    """Return the calendar options the client needs before its first request."""

    return {
        "calendar_modes": list(header.CALENDAR_MODES),
        "default_calendar_mode": header.DEFAULT_CALENDAR_MODE,
        "month_name_tables": sorted(months.MONTH_NAME_TABLES),
        "default_month_names": months.DEFAULT_MONTH_NAMES,
    }


def boot_session(bootinfo):  # pragma: no cover - executed in Frappe runtime
    context = boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("jalali_calendar_core", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "jalali_calendar_core", context)
