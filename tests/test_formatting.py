from datetime import date, datetime
from decimal import Decimal

import pytest

from src.employee_dashboard.employee_dashboard.common.formatting import (
    format_currency,
    format_date,
    initials,
    or_fallback,
    plain_number,
)


@pytest.mark.parametrize(
    "name, expected",
    [("alice", "A"), ("  bob smith", "B"), ("", "?"), (None, "?")],
)
def test_initials(name, expected):
    assert initials(name) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("50000.00"), "$50,000"),
        (Decimal("1234.50"), "$1,234.5"),
        (0, "$0"),
        (None, "N/A"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_plain_number():
    assert plain_number(Decimal("50000.00")) == "50000"
    assert plain_number(Decimal("0")) == "0"
    assert plain_number(None) == ""


def test_format_date_accepts_dates_and_strings():
    assert format_date(date(2024, 1, 5)) == "1/5/2024"
    assert format_date(datetime(2024, 12, 25, 8, 30)) == "12/25/2024"
    assert format_date("2024-03-09T10:00:00") == "3/9/2024"
    assert format_date(None) == "N/A"


def test_or_fallback():
    assert or_fallback(None, "Not assigned") == "Not assigned"
    assert or_fallback("") == "N/A"
    assert or_fallback("Sales") == "Sales"
