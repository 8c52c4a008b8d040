"""Shared helpers for adapters (pure functions only)."""

from .messages import project_message, project_messages

__all__ = ["project_message", "project_messages"]
