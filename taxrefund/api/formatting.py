"""Rupee formatting for display amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

RUPEE_SYMBOL = "₹"


def group_indian_digits(digits: str) -> str:
    """Insert separators using Indian grouping (last three, then pairs).

    Example:
        >>> group_indian_digits("1234567")
        '12,34,567'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def format_inr(amount: Decimal) -> str:
    """Format an amount as whole rupees.

    Halves round away from zero and negatives carry a leading minus sign.

    Example:
        >>> format_inr(Decimal("-7500.5"))
        '-₹7,501'
    """
    with localcontext() as ctx:
        # quantize needs every integer digit to fit in the context precision
        ctx.prec = max(ctx.prec, amount.adjusted() + 2)
        rounded = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{RUPEE_SYMBOL}{group_indian_digits(str(abs(int(rounded))))}"
