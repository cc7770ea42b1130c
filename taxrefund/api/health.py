"""Health check endpoint for infrastructure verification."""

from fastapi import APIRouter
from pydantic import BaseModel

from taxrefund import __version__
from taxrefund.core.config import settings

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    environment: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report liveness. The service has no backing stores to probe."""
    return HealthResponse(
        status="ok",
        environment=settings.environment,
        version=__version__,
    )
