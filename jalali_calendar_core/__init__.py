"""Gregorian ↔ Jalali calendar arithmetic packaged as a Frappe app."""

__version__ = "0.3.0"
