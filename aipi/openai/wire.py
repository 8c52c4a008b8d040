"""OpenAI Chat Completions wire models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class ChatGptWireMessage(BaseModel):
    role: str
    content: str


class ChatGptRequest(BaseModel):
    """Body of ``POST /v1/chat/completions``. There is no system field."""

    model: str
    max_completion_tokens: int
    temperature: float
    messages: List[ChatGptWireMessage]


class ChatGptReplyMessage(BaseModel):
    content: str


class ChatGptChoice(BaseModel):
    index: int
    message: ChatGptReplyMessage


class ChatGptResponse(BaseModel):
    choices: List[ChatGptChoice]


__all__ = [
    "ChatGptWireMessage",
    "ChatGptRequest",
    "ChatGptReplyMessage",
    "ChatGptChoice",
    "ChatGptResponse",
]
