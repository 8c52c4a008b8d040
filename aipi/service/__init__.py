"""Service layer: conversation sessions and maintainer tooling."""

from .session import ConversationSession

__all__ = ["ConversationSession"]
