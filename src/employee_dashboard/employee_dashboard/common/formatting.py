"""Display helpers shared by templates and exports.

All functions are pure; they are registered as Jinja filters in ``main``.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

NOT_ASSIGNED = "Not assigned"
NOT_AVAILABLE = "N/A"

Number = Union[int, float, Decimal]


def initials(name: Optional[str]) -> str:
    """Avatar letter: first character of the name, upper-cased."""
    name = (name or "").strip()
    return name[0].upper() if name else "?"


def plain_number(value: Optional[Number]) -> str:
    """Render a number without trailing zeros or grouping (``50000``, ``1234.5``)."""
    if value is None:
        return ""
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    if d == d.to_integral_value():
        return str(d.quantize(Decimal(1)))
    return format(d.normalize(), "f")


def format_currency(value: Optional[Number]) -> str:
    if value is None:
        return NOT_AVAILABLE
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    if d == d.to_integral_value():
        return f"${int(d):,}"
    rounded = d.quantize(Decimal("0.001")).normalize()
    whole, _, frac = format(rounded, "f").partition(".")
    return f"${int(whole):,}.{frac}"


def format_date(value: Optional[Union[date, datetime, str]]) -> str:
    """US short date (``1/15/2024``)."""
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, str):
        value = datetime.strptime(value[:10], "%Y-%m-%d").date()
    return f"{value.month}/{value.day}/{value.year}"


def or_fallback(value: Any, fallback: str = NOT_AVAILABLE) -> Any:
    if value is None or value == "":
        return fallback
    return value
