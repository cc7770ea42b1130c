"""Refund estimation.

Composes income aggregation, deduction selection, bracket tax and credits
into a single TaxResult:

1. total income = wages + self-employment + investment + other
2. deductions = max(standard, itemized)
3. taxable income = max(0, total income - deductions)
4. gross tax from the progressive brackets
5. liability = max(0, gross tax - credits)
6. refund = withheld - liability (negative means tax owed)

Everything here is pure; malformed input has already been coerced to zero
by TaxInput.from_form.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from taxrefund.tax.brackets import brackets_for
from taxrefund.tax.credits import aggregate_credits
from taxrefund.tax.deductions import itemized_total_for, select_deduction
from taxrefund.tax.models import BracketTax, FilingStatus, TaxInput, TaxResult
from taxrefund.tax.parsing import ZERO


def total_income_for(tax_input: TaxInput) -> Decimal:
    """Sum every income field of a submission."""
    return (
        tax_input.wages
        + tax_input.self_employment_income
        + tax_input.investment_income
        + tax_input.other_income
    )


def calculate_bracket_tax(
    taxable_income: Decimal,
    filing_status: FilingStatus | str,
) -> tuple[Decimal, tuple[BracketTax, ...]]:
    """Calculate tax on taxable income using the progressive brackets.

    Each band absorbs at most its width (max - min + 1, since both bounds are
    inclusive); the top band absorbs whatever remains. The walk stops as soon
    as nothing is left, so higher bands contribute nothing.

    Args:
        taxable_income: Income after deductions.
        filing_status: Filing status member or raw string.

    Returns:
        Tuple of (gross tax, per-band breakdown of bands that taxed income).

    Example:
        >>> tax, _ = calculate_bracket_tax(Decimal("600000"), "single")
        >>> tax
        Decimal('14999.95')
    """
    remaining_income = taxable_income
    gross_tax = ZERO
    breakdown: list[BracketTax] = []

    for row in brackets_for(filing_status):
        available = max(ZERO, remaining_income)
        width = row.width
        taxed_amount = available if width is None else min(available, width)

        tax_in_bracket = taxed_amount * row.rate
        gross_tax += tax_in_bracket
        if taxed_amount > ZERO:
            breakdown.append(
                BracketTax(row=row, taxed_amount=taxed_amount, tax=tax_in_bracket)
            )

        remaining_income -= taxed_amount
        if remaining_income <= ZERO:
            break

    return gross_tax, tuple(breakdown)


def compute_refund(tax_input: TaxInput) -> TaxResult:
    """Estimate the refund (or amount owed) for a submission.

    Args:
        tax_input: Parsed submission.

    Returns:
        TaxResult where estimated_refund == tax_withheld - tax_liability.

    Example:
        >>> result = compute_refund(TaxInput(wages=Decimal("400000"),
        ...                                  tax_withheld=Decimal("10000")))
        >>> result.tax_liability, result.estimated_refund
        (Decimal('2499.95'), Decimal('7500.05'))
    """
    total_income = total_income_for(tax_input)
    deduction = select_deduction(tax_input.filing_status, itemized_total_for(tax_input))
    taxable_income = max(ZERO, total_income - deduction.amount)

    gross_tax, breakdown = calculate_bracket_tax(taxable_income, tax_input.filing_status)

    credits = aggregate_credits(tax_input)
    final_liability = max(ZERO, gross_tax - credits.total_credits)

    return TaxResult(
        total_income=total_income,
        total_deductions=deduction.amount,
        tax_liability=final_liability,
        tax_withheld=tax_input.tax_withheld,
        total_credits=credits.total_credits,
        estimated_refund=tax_input.tax_withheld - final_liability,
        taxable_income=taxable_income,
        gross_tax=gross_tax,
        deduction_method=deduction.method,
        bracket_breakdown=breakdown,
        credits=credits.credits,
    )


def compute_refund_from_form(form: Mapping[str, object]) -> TaxResult:
    """Parse raw form fields and estimate the refund."""
    return compute_refund(TaxInput.from_form(form))
