"""Anthropic Messages API wire models.

Request and response bodies as pydantic models. Response models list only the
fields the adapter reads; unknown fields are ignored so additive API changes
do not break parsing.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class ClaudeWireMessage(BaseModel):
    role: str
    content: str


class ClaudeRequest(BaseModel):
    """Body of ``POST /v1/messages``.

    ``system`` is omitted from the serialized body when unset.
    """

    model: str
    max_tokens: int
    temperature: float
    system: Optional[str] = None
    messages: List[ClaudeWireMessage]


class ClaudeContentBlock(BaseModel):
    type: str
    text: str


class ClaudeResponse(BaseModel):
    content: List[ClaudeContentBlock]


__all__ = ["ClaudeWireMessage", "ClaudeRequest", "ClaudeContentBlock", "ClaudeResponse"]
