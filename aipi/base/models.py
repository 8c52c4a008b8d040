"""
Provider-agnostic domain models public surface.

This module re-exports the one-concern-per-file implementations under
``aipi.base.models_parts`` to keep a single stable import path.
"""

from .models_parts import (
    AuthScheme,
    ChatGptVersion,
    ClaudeVersion,
    GeminiVersion,
    Message,
    MessageBundle,
    MessageMetadata,
    ModelConfig,
    Provider,
    ProviderFamily,
    ProviderVersion,
    ROLE_NAMES,
    Role,
    role_name,
)

__all__ = [
    "AuthScheme",
    "ChatGptVersion",
    "ClaudeVersion",
    "GeminiVersion",
    "Message",
    "MessageBundle",
    "MessageMetadata",
    "ModelConfig",
    "Provider",
    "ProviderFamily",
    "ProviderVersion",
    "ROLE_NAMES",
    "Role",
    "role_name",
]
