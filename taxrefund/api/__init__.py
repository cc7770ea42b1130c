"""API module exports."""

from taxrefund.api.chat import router as chat_router
from taxrefund.api.estimate import router as estimate_router
from taxrefund.api.health import router as health_router

__all__ = [
    "chat_router",
    "estimate_router",
    "health_router",
]
