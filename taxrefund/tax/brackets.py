"""Progressive bracket tables by filing status.

Every filing status currently uses the same new-regime table: a zero-rate
band followed by five positive-rate bands, the top one unbounded at 30%.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from taxrefund.tax.models import BracketRow, FilingStatus

NEW_TAX_REGIME: tuple[BracketRow, ...] = (
    BracketRow(Decimal("0"), Decimal("300000"), Decimal("0")),
    BracketRow(Decimal("300001"), Decimal("600000"), Decimal("0.05")),
    BracketRow(Decimal("600001"), Decimal("900000"), Decimal("0.10")),
    BracketRow(Decimal("900001"), Decimal("1200000"), Decimal("0.15")),
    BracketRow(Decimal("1200001"), Decimal("1500000"), Decimal("0.20")),
    BracketRow(Decimal("1500001"), None, Decimal("0.30")),
)

TAX_BRACKETS: dict[FilingStatus, tuple[BracketRow, ...]] = {
    FilingStatus.SINGLE: NEW_TAX_REGIME,
    FilingStatus.MARRIED_JOINT: NEW_TAX_REGIME,
    FilingStatus.MARRIED_SEPARATE: NEW_TAX_REGIME,
    FilingStatus.HEAD: NEW_TAX_REGIME,
    FilingStatus.WIDOW: NEW_TAX_REGIME,
}


def brackets_for(filing_status: FilingStatus | str) -> tuple[BracketRow, ...]:
    """Get the bracket table for a filing status.

    Args:
        filing_status: Filing status member or raw string.

    Returns:
        Rows sorted ascending by min_income. Unrecognized statuses get the
        single table.

    Example:
        >>> brackets_for("widow")[1].rate
        Decimal('0.05')
    """
    status = FilingStatus.parse(filing_status)
    return TAX_BRACKETS.get(status, TAX_BRACKETS[FilingStatus.SINGLE])


def validate_table(rows: Sequence[BracketRow]) -> None:
    """Check that rows partition [0, unbounded) without gaps or overlaps.

    Args:
        rows: Candidate bracket table.

    Raises:
        ValueError: If the table is empty, does not start at zero, has a gap,
            overlap or inverted row, a rate outside [0, 1], or a bounded top row.
    """
    if not rows:
        raise ValueError("Bracket table is empty")
    if rows[0].min_income != Decimal("0"):
        raise ValueError(f"First bracket must start at 0, got {rows[0].min_income}")

    for index, row in enumerate(rows):
        if not Decimal("0") <= row.rate <= Decimal("1"):
            raise ValueError(f"Bracket {index} rate {row.rate} outside [0, 1]")

        is_last = index == len(rows) - 1
        if row.max_income is None:
            if not is_last:
                raise ValueError(f"Only the top bracket may be unbounded (row {index})")
            continue
        if is_last:
            raise ValueError("Top bracket must be unbounded")
        if row.max_income < row.min_income:
            raise ValueError(f"Bracket {index} upper bound is below its lower bound")

        next_min = rows[index + 1].min_income
        if next_min != row.max_income + 1:
            raise ValueError(
                f"Bracket {index + 1} starts at {next_min}, expected {row.max_income + 1}"
            )


for _rows in TAX_BRACKETS.values():
    validate_table(_rows)
