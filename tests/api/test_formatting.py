"""Tests for rupee display formatting."""

from decimal import Decimal

import pytest

from taxrefund.api.formatting import format_inr, group_indian_digits


@pytest.mark.parametrize(
    ("digits", "expected"),
    [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("100000", "1,00,000"),
        ("1234567", "12,34,567"),
        ("123456789", "12,34,56,789"),
    ],
)
def test_group_indian_digits(digits: str, expected: str) -> None:
    assert group_indian_digits(digits) == expected


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("400000"), "₹4,00,000"),
        (Decimal("7500.05"), "₹7,500"),
        (Decimal("2499.5"), "₹2,500"),
        (Decimal("-184999.7"), "-₹1,85,000"),
        (Decimal("0"), "₹0"),
        (Decimal("-0.4"), "₹0"),
    ],
)
def test_format_inr(amount: Decimal, expected: str) -> None:
    assert format_inr(amount) == expected


def test_format_inr_beyond_default_precision() -> None:
    assert format_inr(Decimal("1e29")) == "₹1," + "00," * 13 + "000"
    assert format_inr(Decimal("-12345678901234567890123456789.5")) == (
        "-₹12,34,56,78,90,12,34,56,78,90,12,34,56,790"
    )
