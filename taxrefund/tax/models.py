"""Value objects for the refund calculation.

All monetary values are Decimal. Every dataclass here is frozen: a TaxInput
is built fresh for each submission and a TaxResult is derived from it
without mutation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from taxrefund.tax.parsing import ZERO, safe_bool, safe_decimal, safe_int


class FilingStatus(str, Enum):
    """Household category selecting the deduction and bracket tables."""

    SINGLE = "single"
    MARRIED_JOINT = "married_joint"
    MARRIED_SEPARATE = "married_separate"
    HEAD = "head"
    WIDOW = "widow"

    @classmethod
    def parse(cls, value: object) -> FilingStatus:
        """Resolve a raw value to a filing status, falling back to SINGLE.

        Example:
            >>> FilingStatus.parse(" Head ")
            <FilingStatus.HEAD: 'head'>
            >>> FilingStatus.parse("divorced")
            <FilingStatus.SINGLE: 'single'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.SINGLE
        return cls.SINGLE


# Form field name -> TaxInput attribute. The camelCase names are the ones the
# calculator form posts; snake_case attribute names are accepted as well.
FORM_FIELD_ALIASES: dict[str, str] = {
    "filingStatus": "filing_status",
    "age": "age",
    "dependents": "dependents",
    "disability": "disability",
    "wages": "wages",
    "selfEmploymentIncome": "self_employment_income",
    "investmentIncome": "investment_income",
    "otherIncome": "other_income",
    "taxWithheld": "tax_withheld",
    "studentLoanInterest": "student_loan_interest",
    "charitableContributions": "charitable_contributions",
    "medicalExpenses": "medical_expenses",
    "childTaxCredit": "child_tax_credit_requested",
    "educationCredits": "education_credit_requested",
}

DECIMAL_FIELDS = (
    "wages",
    "self_employment_income",
    "investment_income",
    "other_income",
    "tax_withheld",
    "student_loan_interest",
    "charitable_contributions",
    "medical_expenses",
)
INT_FIELDS = ("age", "dependents")
BOOL_FIELDS = ("disability", "child_tax_credit_requested", "education_credit_requested")


@dataclass(frozen=True)
class TaxInput:
    """Figures submitted for one refund estimate.

    Attributes:
        filing_status: Filing status; unrecognized strings are tolerated and
            resolved to single wherever a table is looked up.
        age: Taxpayer age (validated by the form, not here).
        dependents: Number of dependents.
        disability: Disability flag. Collected by the form; no rule uses it.
        wages: Salary income.
        self_employment_income: Business or freelance income.
        investment_income: Interest, dividends and gains.
        other_income: Any other income.
        tax_withheld: Tax already deducted at source.
        student_loan_interest: Education loan interest paid.
        charitable_contributions: Donations.
        medical_expenses: Medical expenses.
        child_tax_credit_requested: Dependent credit checkbox.
        education_credit_requested: Education credit checkbox.
    """

    filing_status: FilingStatus | str = FilingStatus.SINGLE
    age: int = 0
    dependents: int = 0
    disability: bool = False
    wages: Decimal = ZERO
    self_employment_income: Decimal = ZERO
    investment_income: Decimal = ZERO
    other_income: Decimal = ZERO
    tax_withheld: Decimal = ZERO
    student_loan_interest: Decimal = ZERO
    charitable_contributions: Decimal = ZERO
    medical_expenses: Decimal = ZERO
    child_tax_credit_requested: bool = False
    education_credit_requested: bool = False

    @classmethod
    def from_form(cls, form: Mapping[str, object]) -> TaxInput:
        """Build a TaxInput from raw form fields.

        Args:
            form: Field values keyed by form name (``selfEmploymentIncome``)
                or attribute name (``self_employment_income``).

        Returns:
            TaxInput with every numeric field safely parsed.

        Example:
            >>> TaxInput.from_form({"wages": "400000", "otherIncome": "abc"}).other_income
            Decimal('0')
        """
        raw: dict[str, object] = {}
        for key, value in form.items():
            name = FORM_FIELD_ALIASES.get(key, key)
            raw[name] = value

        values: dict[str, object] = {
            "filing_status": FilingStatus.parse(raw.get("filing_status")),
        }
        for name in DECIMAL_FIELDS:
            values[name] = safe_decimal(raw.get(name))
        for name in INT_FIELDS:
            values[name] = safe_int(raw.get(name))
        for name in BOOL_FIELDS:
            values[name] = safe_bool(raw.get(name))
        return cls(**values)


@dataclass(frozen=True)
class BracketRow:
    """One progressive band.

    Attributes:
        min_income: Inclusive lower bound.
        max_income: Inclusive upper bound, None when unbounded.
        rate: Fraction of the band's income owed as tax.
    """

    min_income: Decimal
    max_income: Decimal | None
    rate: Decimal

    @property
    def width(self) -> Decimal | None:
        """Amount of income the band can absorb (None when unbounded).

        Both bounds are inclusive, hence the extra unit.
        """
        if self.max_income is None:
            return None
        return self.max_income - self.min_income + 1


@dataclass(frozen=True)
class BracketTax:
    """Tax charged within a single band."""

    row: BracketRow
    taxed_amount: Decimal
    tax: Decimal


@dataclass(frozen=True)
class DeductionResult:
    """Outcome of standard vs itemized deduction selection.

    Attributes:
        method: Either "standard" or "itemized".
        amount: The deduction amount to use.
        standard_amount: The standard deduction for the filing status.
        itemized_amount: The itemized total provided.
    """

    method: str
    amount: Decimal
    standard_amount: Decimal
    itemized_amount: Decimal


@dataclass(frozen=True)
class CreditItem:
    """Individual credit applied against liability."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class CreditsResult:
    """Active credits and their sum."""

    credits: tuple[CreditItem, ...]
    total_credits: Decimal


@dataclass(frozen=True)
class TaxResult:
    """Result of a refund estimate.

    Attributes:
        total_income: Sum of all income fields.
        total_deductions: Greater of standard and itemized deductions.
        tax_liability: Tax after credits (minimum 0).
        tax_withheld: Tax already collected.
        total_credits: Sum of active credits.
        estimated_refund: tax_withheld - tax_liability; negative means owed.
        taxable_income: Income left after deductions (minimum 0).
        gross_tax: Tax before credits.
        deduction_method: "standard" or "itemized".
        bracket_breakdown: Per-band taxed amounts, lowest band first.
        credits: Individual credits that were applied.
    """

    total_income: Decimal
    total_deductions: Decimal
    tax_liability: Decimal
    tax_withheld: Decimal
    total_credits: Decimal
    estimated_refund: Decimal
    taxable_income: Decimal = ZERO
    gross_tax: Decimal = ZERO
    deduction_method: str = "standard"
    bracket_breakdown: tuple[BracketTax, ...] = field(default_factory=tuple)
    credits: tuple[CreditItem, ...] = field(default_factory=tuple)

    @property
    def is_refund(self) -> bool:
        """True when withholding covers the liability."""
        return self.estimated_refund >= ZERO
