"""Credit aggregation.

Two independent credits, each gated by its checkbox:

- Dependent credit: 25,000 per dependent, capped at 1,50,000 overall.
- Education credit: education loan interest, capped at 50,000.

The education credit reuses ``student_loan_interest``, which is already part
of the itemized deduction total. That double count is inherited behavior and
is kept as-is.
"""

from __future__ import annotations

from decimal import Decimal

from taxrefund.tax.models import CreditItem, CreditsResult, TaxInput
from taxrefund.tax.parsing import ZERO

DEPENDENT_CREDIT_PER_DEPENDENT = Decimal("25000")
DEPENDENT_CREDIT_CAP = Decimal("150000")
EDUCATION_CREDIT_CAP = Decimal("50000")

DEPENDENT_CREDIT_NAME = "Dependent Credit"
EDUCATION_CREDIT_NAME = "Education Loan Interest Credit"


def dependent_credit(tax_input: TaxInput) -> Decimal:
    """Credit for dependents, zero unless requested and dependents > 0."""
    if not tax_input.child_tax_credit_requested or tax_input.dependents <= 0:
        return ZERO
    return min(DEPENDENT_CREDIT_PER_DEPENDENT * tax_input.dependents, DEPENDENT_CREDIT_CAP)


def education_credit(tax_input: TaxInput) -> Decimal:
    """Credit for education loan interest, zero unless requested."""
    if not tax_input.education_credit_requested:
        return ZERO
    return max(ZERO, min(tax_input.student_loan_interest, EDUCATION_CREDIT_CAP))


def aggregate_credits(tax_input: TaxInput) -> CreditsResult:
    """Evaluate every credit and sum the active ones.

    Args:
        tax_input: Submission to evaluate.

    Returns:
        CreditsResult listing credits with a positive amount. There is no cap
        across components.

    Example:
        >>> result = aggregate_credits(TaxInput(dependents=2, child_tax_credit_requested=True))
        >>> result.total_credits
        Decimal('50000')
    """
    credits: list[CreditItem] = []

    dependent_amount = dependent_credit(tax_input)
    if dependent_amount > ZERO:
        credits.append(CreditItem(name=DEPENDENT_CREDIT_NAME, amount=dependent_amount))

    education_amount = education_credit(tax_input)
    if education_amount > ZERO:
        credits.append(CreditItem(name=EDUCATION_CREDIT_NAME, amount=education_amount))

    total_credits = sum((c.amount for c in credits), ZERO)
    return CreditsResult(credits=tuple(credits), total_credits=total_credits)


def total_credits_for(tax_input: TaxInput) -> Decimal:
    return aggregate_credits(tax_input).total_credits
