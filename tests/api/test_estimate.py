"""Tests for the refund estimate endpoint."""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from taxrefund.api.estimate import EstimateRequest, FormStepError, validate_submission


def test_estimate_salaried_filer(
    client: TestClient, form_submission: dict[str, object]
) -> None:
    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_income"]) == Decimal("400000")
    assert Decimal(body["total_deductions"]) == Decimal("50000")
    assert Decimal(body["tax_liability"]) == Decimal("2499.95")
    assert Decimal(body["estimated_refund"]) == Decimal("7500.05")
    assert body["deduction_method"] == "standard"
    assert body["is_refund"] is True
    assert body["formatted"]["estimated_refund"] == "₹7,500"
    assert body["formatted"]["total_income"] == "₹4,00,000"
    assert len(body["bracket_breakdown"]) == 2
    assert body["credits"] == []


def test_estimate_with_credits(client: TestClient, form_submission: dict[str, object]) -> None:
    form_submission.update(
        {
            "dependents": "2",
            "childTaxCredit": True,
            "studentLoanInterest": "12000",
            "educationCredits": "on",
        }
    )

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_credits"]) == Decimal("62000")
    assert Decimal(body["tax_liability"]) == Decimal("0")
    assert [credit["name"] for credit in body["credits"]] == [
        "Dependent Credit",
        "Education Loan Interest Credit",
    ]


def test_estimate_accepts_numbers_and_unknown_status(
    client: TestClient, form_submission: dict[str, object]
) -> None:
    form_submission.update({"filingStatus": "other", "wages": 400000, "taxWithheld": 10000})

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    assert Decimal(response.json()["estimated_refund"]) == Decimal("7500.05")


def test_estimate_ignores_garbage_optional_fields(
    client: TestClient, form_submission: dict[str, object]
) -> None:
    form_submission.update({"investmentIncome": "lots", "medicalExpenses": "n/a"})

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    assert Decimal(response.json()["total_income"]) == Decimal("400000")


@pytest.mark.parametrize(
    ("overrides", "step", "message"),
    [
        ({"filingStatus": ""}, 1, "Please select your filing status"),
        ({"age": "0"}, 1, "Please enter a valid age"),
        ({"age": None}, 1, "Please enter a valid age"),
        ({"wages": ""}, 2, "Please enter your wages/salary"),
        ({"wages": "-5"}, 2, "Please enter your wages/salary"),
        ({"taxWithheld": "  "}, 3, "Please enter the amount of tax withheld"),
    ],
)
def test_estimate_rejects_incomplete_steps(
    client: TestClient,
    form_submission: dict[str, object],
    overrides: dict[str, object],
    step: int,
    message: str,
) -> None:
    form_submission.update(overrides)

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 422
    assert response.json()["detail"] == {"step": step, "message": message}


def test_zero_withholding_is_allowed(
    client: TestClient, form_submission: dict[str, object]
) -> None:
    form_submission["taxWithheld"] = "0"

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    assert Decimal(response.json()["estimated_refund"]) == Decimal("-2499.95")
    assert response.json()["formatted"]["estimated_refund"] == "-₹2,500"


def test_validate_submission_reports_first_failing_step() -> None:
    payload = EstimateRequest(filing_status="single", age="40")

    with pytest.raises(FormStepError) as exc_info:
        validate_submission(payload)

    assert exc_info.value.step == 2


@pytest.mark.asyncio
async def test_estimate_sets_request_id(
    api_client: AsyncClient, form_submission: dict[str, object]
) -> None:
    response = await api_client.post(
        "/api/estimate",
        json=form_submission,
        headers={"X-Request-ID": "req-123"},
    )

    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.parametrize("wages", ["1" + "0" * 29, "1e999999999"])
def test_estimate_rejects_out_of_range_wages(
    client: TestClient, form_submission: dict[str, object], wages: str
) -> None:
    form_submission["wages"] = wages

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "step": 2,
        "message": "Please enter your wages/salary",
    }


def test_estimate_largest_accepted_wage(
    client: TestClient, form_submission: dict[str, object]
) -> None:
    form_submission.update({"wages": "9999999999999999", "age": "1e2000000"})

    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 422
    assert response.json()["detail"]["message"] == "Please enter a valid age"

    form_submission["age"] = "35"
    response = client.post("/api/estimate", json=form_submission)

    assert response.status_code == 200
    assert response.json()["formatted"]["total_income"] == "₹9,99,99,99,99,99,99,999"
