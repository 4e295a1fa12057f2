from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _single_line(value: str, field_name: str) -> str:
    if "\r" in value or "\n" in value:
        raise ValidationError(f"{field_name} must not contain line breaks")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return _single_line(value.strip(), field_name)


def require_email(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def optional_text(value: Optional[str], field_name: str = "Value") -> Optional[str]:
    value = _single_line((value or "").strip(), field_name)
    return value or None


def optional_id(value: Optional[str], field_name: str) -> Optional[int]:
    value = (value or "").strip()
    if not value:
        return None
    if not value.isdigit():
        raise ValidationError(f"{field_name} is not valid")
    return int(value)


def optional_amount(value: Optional[str], field_name: str) -> Optional[Decimal]:
    """Parse a non-negative decimal amount; blank means NULL."""
    value = (value or "").strip()
    if not value:
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be zero or more")
    return amount
