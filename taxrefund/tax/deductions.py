"""Standard vs itemized deduction selection."""

from __future__ import annotations

from decimal import Decimal

from taxrefund.tax.models import DeductionResult, FilingStatus, TaxInput

STANDARD_DEDUCTIONS: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("50000"),
    FilingStatus.MARRIED_JOINT: Decimal("50000"),
    FilingStatus.MARRIED_SEPARATE: Decimal("50000"),
    FilingStatus.HEAD: Decimal("50000"),
    FilingStatus.WIDOW: Decimal("50000"),
}


def standard_deduction_for(filing_status: FilingStatus | str) -> Decimal:
    """Get the standard deduction for a filing status.

    Args:
        filing_status: Filing status member or raw string.

    Returns:
        Standard deduction amount; the single amount for unrecognized statuses.

    Example:
        >>> standard_deduction_for("married_joint")
        Decimal('50000')
    """
    status = FilingStatus.parse(filing_status)
    return STANDARD_DEDUCTIONS.get(status, STANDARD_DEDUCTIONS[FilingStatus.SINGLE])


def itemized_total_for(tax_input: TaxInput) -> Decimal:
    """Sum the itemizable expenses of a submission.

    Student loan interest is included here and again in the education
    credit.
    """
    return (
        tax_input.student_loan_interest
        + tax_input.charitable_contributions
        + tax_input.medical_expenses
    )


def select_deduction(
    filing_status: FilingStatus | str,
    itemized_total: Decimal,
) -> DeductionResult:
    """Select the greater of the standard and itemized deduction.

    Itemized wins only when strictly greater than the standard amount.
    The itemized total is not capped.

    Args:
        filing_status: Filing status member or raw string.
        itemized_total: Sum of itemized expenses.

    Returns:
        DeductionResult with the winning method and amount.
    """
    standard_amount = standard_deduction_for(filing_status)

    if itemized_total > standard_amount:
        return DeductionResult(
            method="itemized",
            amount=itemized_total,
            standard_amount=standard_amount,
            itemized_amount=itemized_total,
        )
    return DeductionResult(
        method="standard",
        amount=standard_amount,
        standard_amount=standard_amount,
        itemized_amount=itemized_total,
    )


def resolve_deductions(filing_status: FilingStatus | str, itemized_total: Decimal) -> Decimal:
    """Return max(standard deduction, itemized_total)."""
    return select_deduction(filing_status, itemized_total).amount
