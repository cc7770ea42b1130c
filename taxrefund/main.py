"""FastAPI application entry point with lifespan management."""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taxrefund import __version__
from taxrefund.api.chat import router as chat_router
from taxrefund.api.estimate import router as estimate_router
from taxrefund.api.health import router as health_router
from taxrefund.api.middleware import RequestContextMiddleware
from taxrefund.core.config import settings
from taxrefund.core.logging import configure_logging, get_logger
from taxrefund.core.sentry import init_sentry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    Startup:
        - Configure structured logging
        - Initialize Sentry error tracking
    """
    configure_logging()
    logger.info("Starting application", environment=settings.environment)

    if init_sentry():
        logger.info("Sentry initialized")

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title="Tax Refund Estimator",
    description="Income-tax refund estimates and canned answers to common tax questions",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestContextMiddleware)

app.include_router(health_router)
app.include_router(estimate_router)
app.include_router(chat_router)
