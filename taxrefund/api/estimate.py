"""Refund estimate endpoint.

Thin adapter between the calculator form and the tax engine. The form's
step-by-step checks run here so the engine only ever sees a submission the
wizard would have let through.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from taxrefund.api.formatting import format_inr
from taxrefund.core.logging import get_logger
from taxrefund.tax.engine import compute_refund
from taxrefund.tax.models import FilingStatus, TaxInput, TaxResult
from taxrefund.tax.parsing import ZERO, safe_decimal

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["estimate"])

RawAmount = str | int | float | None
RawFlag = bool | str | None

FORMATTED_FIELDS = (
    "total_income",
    "total_deductions",
    "tax_liability",
    "tax_withheld",
    "total_credits",
    "estimated_refund",
)


class EstimateRequest(BaseModel):
    """Calculator form submission.

    Field names follow the form (camelCase); snake_case is accepted too.
    Amounts may be strings or numbers and are parsed leniently.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    filing_status: str | None = None
    age: RawAmount = None
    dependents: RawAmount = None
    disability: RawFlag = None
    wages: RawAmount = None
    self_employment_income: RawAmount = None
    investment_income: RawAmount = None
    other_income: RawAmount = None
    tax_withheld: RawAmount = None
    student_loan_interest: RawAmount = None
    charitable_contributions: RawAmount = None
    medical_expenses: RawAmount = None
    child_tax_credit: RawFlag = None
    education_credits: RawFlag = None


class BracketBreakdownItem(BaseModel):
    """Tax charged in one band."""

    min_income: Decimal
    max_income: Decimal | None
    rate: Decimal
    taxed_amount: Decimal
    tax: Decimal


class CreditResponseItem(BaseModel):
    """Credit applied against liability."""

    name: str
    amount: Decimal


class EstimateResponse(BaseModel):
    """Refund estimate with display strings."""

    total_income: Decimal
    total_deductions: Decimal
    tax_liability: Decimal
    tax_withheld: Decimal
    total_credits: Decimal
    estimated_refund: Decimal
    taxable_income: Decimal
    gross_tax: Decimal
    deduction_method: str
    is_refund: bool
    bracket_breakdown: list[BracketBreakdownItem]
    credits: list[CreditResponseItem]
    formatted: dict[str, str]


class FormStepError(Exception):
    """A wizard step check failed."""

    def __init__(self, step: int, message: str) -> None:
        super().__init__(message)
        self.step = step
        self.message = message


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_submission(payload: EstimateRequest) -> None:
    """Apply the calculator's step checks in order.

    Args:
        payload: Raw submission.

    Raises:
        FormStepError: For the first step whose required field is missing.
    """
    # Step 1: personal information
    if _is_blank(payload.filing_status):
        raise FormStepError(1, "Please select your filing status")
    if safe_decimal(payload.age) <= ZERO:
        raise FormStepError(1, "Please enter a valid age")

    # Step 2: income
    if safe_decimal(payload.wages) <= ZERO:
        raise FormStepError(2, "Please enter your wages/salary")

    # Step 3: deductions and withholding
    if _is_blank(payload.tax_withheld):
        raise FormStepError(3, "Please enter the amount of tax withheld")


def build_response(result: TaxResult) -> EstimateResponse:
    """Convert a TaxResult into the API response model."""
    return EstimateResponse(
        total_income=result.total_income,
        total_deductions=result.total_deductions,
        tax_liability=result.tax_liability,
        tax_withheld=result.tax_withheld,
        total_credits=result.total_credits,
        estimated_refund=result.estimated_refund,
        taxable_income=result.taxable_income,
        gross_tax=result.gross_tax,
        deduction_method=result.deduction_method,
        is_refund=result.is_refund,
        bracket_breakdown=[
            BracketBreakdownItem(
                min_income=item.row.min_income,
                max_income=item.row.max_income,
                rate=item.row.rate,
                taxed_amount=item.taxed_amount,
                tax=item.tax,
            )
            for item in result.bracket_breakdown
        ],
        credits=[
            CreditResponseItem(name=credit.name, amount=credit.amount)
            for credit in result.credits
        ],
        formatted={
            name: format_inr(getattr(result, name)) for name in FORMATTED_FIELDS
        },
    )


@router.post("/estimate", response_model=EstimateResponse)
async def estimate_refund(payload: EstimateRequest) -> EstimateResponse:
    """Validate a calculator submission and estimate the refund."""
    try:
        validate_submission(payload)
    except FormStepError as exc:
        logger.info("estimate_rejected", step=exc.step, reason=exc.message)
        raise HTTPException(
            status_code=422,
            detail={"step": exc.step, "message": exc.message},
        ) from exc

    tax_input = TaxInput.from_form(payload.model_dump(by_alias=True))
    result = compute_refund(tax_input)

    logger.info(
        "estimate_computed",
        filing_status=FilingStatus.parse(tax_input.filing_status).value,
        deduction_method=result.deduction_method,
        credit_count=len(result.credits),
        is_refund=result.is_refund,
    )
    return build_response(result)
