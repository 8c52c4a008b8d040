"""
History storage units: a message paired with the metadata of its send.

``MessageMetadata`` snapshots the configuration and a UTC timestamp at send
time; it is never updated afterwards, so each history entry keeps the exact
configuration that produced it even when the session is later reconfigured.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from .message import Message
from .model_config import ModelConfig


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MessageMetadata:
    """When a message was sent and with which configuration."""

    used_config: ModelConfig
    timestamp: datetime = field(default_factory=_utcnow)

    @classmethod
    def capture(cls, config: ModelConfig) -> "MessageMetadata":
        return cls(used_config=config)


@dataclass(frozen=True)
class MessageBundle:
    """A message and its metadata; the unit of session history."""

    message: Message
    metadata: MessageMetadata

    @classmethod
    def capture(cls, message: Message, config: ModelConfig) -> "MessageBundle":
        return cls(message=message, metadata=MessageMetadata.capture(config))

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            "role": self.message.role.value,
            "content": self.message.content,
            "timestamp": self.metadata.timestamp.isoformat(),
            "config": self.metadata.used_config.to_log_dict(),
        }


__all__ = ["MessageMetadata", "MessageBundle"]
