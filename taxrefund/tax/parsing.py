"""Tolerant parsing of raw form values.

Form fields arrive as strings, numbers, booleans or not at all. The engine
never rejects input, so every numeric field is parsed strictly and falls back
to zero when it cannot be read. Partial values such as ``"12abc"`` are not
salvaged.

Example:
    >>> safe_decimal("1,25,000")
    Decimal('125000')
    >>> safe_decimal("n/a")
    Decimal('0')
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")

TRUTHY_STRINGS = frozenset({"true", "on", "yes", "1", "checked"})

# Largest accepted decimal exponent; amounts of 10**16 or more read as zero.
MAX_ADJUSTED_EXPONENT = 15


def safe_decimal(value: object) -> Decimal:
    """Parse a value as Decimal, defaulting to zero on failure.

    Args:
        value: Raw field value (str, int, float, Decimal, None, ...).

    Returns:
        Parsed Decimal, or Decimal("0") for missing, blank, unparseable,
        non-finite or out-of-range input.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float):
        # str() keeps floats at their shortest repr (0.1 -> "0.1")
        parsed = _to_decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return ZERO
        parsed = _to_decimal(text)
    else:
        return ZERO

    if not parsed.is_finite() or parsed.adjusted() > MAX_ADJUSTED_EXPONENT:
        return ZERO
    return parsed


def safe_int(value: object) -> int:
    """Parse a value as an integer, truncating toward zero.

    Args:
        value: Raw field value.

    Returns:
        Integer part of the parsed value, or 0 on failure.
    """
    return int(safe_decimal(value))


def safe_bool(value: object) -> bool:
    """Interpret a checkbox-style value.

    Args:
        value: Raw field value. Real booleans pass through; strings such as
            "on" or "true" count as checked.

    Returns:
        True only for a recognised truthy value.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    if isinstance(value, (int, Decimal)):
        return value == 1
    return False


def _to_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        return ZERO
