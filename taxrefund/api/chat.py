"""Chatbot endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from taxrefund.chatbot.responder import WELCOME_MESSAGES, match_keyword, respond
from taxrefund.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


class ChatRequest(BaseModel):
    """Single user message."""

    message: str


class ChatResponse(BaseModel):
    """Assistant reply."""

    reply: str


class WelcomeResponse(BaseModel):
    """Greeting lines shown when the chat opens."""

    messages: list[str]


@router.get("/welcome", response_model=WelcomeResponse)
async def chat_welcome() -> WelcomeResponse:
    return WelcomeResponse(messages=list(WELCOME_MESSAGES))


@router.post("", response_model=ChatResponse)
async def chat(payload: ChatRequest) -> ChatResponse:
    """Answer a tax question with a canned response.

    Blank messages are rejected; the chat widget never sends them.
    """
    message = payload.message.strip()
    if not message:
        raise HTTPException(status_code=422, detail="Message must not be empty")

    keyword = match_keyword(message)
    logger.info("chat_answered", keyword=keyword or "default")
    return ChatResponse(reply=respond(message))
