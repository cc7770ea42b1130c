"""Keyword chatbot for canned tax answers."""

from taxrefund.chatbot.responder import (
    DEFAULT_RESPONSE,
    TAX_RESPONSES,
    WELCOME_MESSAGES,
    match_keyword,
    respond,
)

__all__ = [
    "DEFAULT_RESPONSE",
    "TAX_RESPONSES",
    "WELCOME_MESSAGES",
    "match_keyword",
    "respond",
]
