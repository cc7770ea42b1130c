"""Pytest configuration and shared fixtures for tests."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from taxrefund.main import app
from taxrefund.tax.models import FilingStatus, TaxInput


@pytest.fixture
def client() -> TestClient:
    """Create a test client for API testing.

    Returns:
        FastAPI TestClient instance.
    """
    return TestClient(app)


@pytest_asyncio.fixture
async def api_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async API client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as async_client:
        yield async_client


@pytest.fixture
def salaried_input() -> TaxInput:
    """Single filer with 4 lakh wages and 10,000 withheld."""
    return TaxInput(
        filing_status=FilingStatus.SINGLE,
        age=35,
        wages=Decimal("400000"),
        tax_withheld=Decimal("10000"),
    )


@pytest.fixture
def form_submission() -> dict[str, object]:
    """Calculator form payload as the browser posts it."""
    return {
        "filingStatus": "single",
        "age": "35",
        "dependents": "0",
        "disability": False,
        "wages": "400000",
        "selfEmploymentIncome": "",
        "investmentIncome": "",
        "otherIncome": "",
        "taxWithheld": "10000",
        "studentLoanInterest": "",
        "charitableContributions": "",
        "medicalExpenses": "",
        "childTaxCredit": False,
        "educationCredits": False,
    }
