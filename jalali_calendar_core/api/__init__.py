"""Server-side helpers exposed by the Jalali calendar core package."""

from . import converter, header, months, periods

__all__ = [
    "converter",
    "header",
    "months",
    "periods",
]
