"""
Message DTO: the local, provider-agnostic representation of one turn.

Messages are immutable. Create them through the named constructors, which fix
the role.
"""
from __future__ import annotations

from dataclasses import dataclass

from .role import Role


@dataclass(frozen=True)
class Message:
    """A single conversational turn.

    Attributes:
        role: Author of the turn.
        content: Plain text content.
    """

    role: Role
    content: str

    @classmethod
    def from_user(cls, content: str) -> "Message":
        return cls(Role.USER, content)

    @classmethod
    def from_assistant(cls, content: str) -> "Message":
        return cls(Role.ASSISTANT, content)

    @classmethod
    def from_system(cls, content: str) -> "Message":
        return cls(Role.SYSTEM, content)


__all__ = ["Message"]
