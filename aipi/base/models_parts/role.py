"""
Conversation roles and their provider-specific wire spelling.

A :class:`Role` has no universal string form; :func:`role_name` answers it
for a given provider from a static table. This is the only place where role
spelling differs between providers.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict

from .provider import Provider, ProviderFamily


class Role(str, Enum):
    """Author of a conversational turn."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


ROLE_NAMES: Dict[ProviderFamily, Dict[Role, str]] = {
    ProviderFamily.CLAUDE: {
        Role.USER: "user",
        Role.ASSISTANT: "assistant",
        Role.SYSTEM: "system",
    },
    ProviderFamily.CHATGPT: {
        Role.USER: "user",
        Role.ASSISTANT: "assistant",
        Role.SYSTEM: "developer",
    },
    ProviderFamily.GEMINI: {
        Role.USER: "user",
        Role.ASSISTANT: "model",
        Role.SYSTEM: "system",
    },
}


def role_name(provider: Provider, role: Role) -> str:
    """Return the wire spelling of ``role`` for ``provider``."""
    return ROLE_NAMES[provider.family][role]


__all__ = ["Role", "ROLE_NAMES", "role_name"]
