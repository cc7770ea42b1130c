"""Tax computation engine.

Components:
- Bracket table: progressive bands per filing status
- Deduction resolver: standard vs itemized selection
- Credit aggregator: dependent and education credits
- Engine: composes the above into a refund estimate
"""

from taxrefund.tax.brackets import NEW_TAX_REGIME, brackets_for, validate_table
from taxrefund.tax.credits import aggregate_credits, total_credits_for
from taxrefund.tax.deductions import (
    itemized_total_for,
    resolve_deductions,
    select_deduction,
    standard_deduction_for,
)
from taxrefund.tax.engine import (
    calculate_bracket_tax,
    compute_refund,
    compute_refund_from_form,
    total_income_for,
)
from taxrefund.tax.models import (
    BracketRow,
    BracketTax,
    CreditItem,
    CreditsResult,
    DeductionResult,
    FilingStatus,
    TaxInput,
    TaxResult,
)
from taxrefund.tax.parsing import safe_bool, safe_decimal, safe_int

__all__ = [
    # Data structures
    "FilingStatus",
    "TaxInput",
    "TaxResult",
    "BracketRow",
    "BracketTax",
    "DeductionResult",
    "CreditItem",
    "CreditsResult",
    # Tables
    "NEW_TAX_REGIME",
    "brackets_for",
    "validate_table",
    # Calculator functions
    "standard_deduction_for",
    "itemized_total_for",
    "select_deduction",
    "resolve_deductions",
    "aggregate_credits",
    "total_credits_for",
    "total_income_for",
    "calculate_bracket_tax",
    "compute_refund",
    "compute_refund_from_form",
    # Parsing
    "safe_decimal",
    "safe_int",
    "safe_bool",
]
