"""Models parts package: one concern per module, re-exported by ``aipi.base.models``."""

from .provider import (
    AuthScheme,
    ChatGptVersion,
    ClaudeVersion,
    GeminiVersion,
    Provider,
    ProviderFamily,
    ProviderVersion,
)
from .role import ROLE_NAMES, Role, role_name
from .message import Message
from .model_config import ModelConfig
from .bundle import MessageBundle, MessageMetadata

__all__ = [
    "AuthScheme",
    "ChatGptVersion",
    "ClaudeVersion",
    "GeminiVersion",
    "Provider",
    "ProviderFamily",
    "ProviderVersion",
    "ROLE_NAMES",
    "Role",
    "role_name",
    "Message",
    "ModelConfig",
    "MessageBundle",
    "MessageMetadata",
]
