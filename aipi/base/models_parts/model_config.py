"""
Per-session model configuration.

``ModelConfig`` is immutable once built; produce one with
:class:`aipi.config.builder.ModelConfigBuilder`, which validates fields and
resolves the token. The token is a ``pydantic.SecretStr``: its ``repr`` and
``str`` are a fixed placeholder, and only ``get_secret_value()`` (used when
attaching auth headers) yields the raw value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import SecretStr

from .provider import Provider


@dataclass(frozen=True)
class ModelConfig:
    """Validated configuration in effect for a send.

    Attributes:
        provider: Selected provider variant.
        token: Provider secret, redacted in every textual representation.
        system_prompt: Optional system prompt.
        max_tokens: Output token budget.
        temperature: Sampling temperature in ``[0, 1]``.
    """

    provider: Provider
    token: SecretStr
    system_prompt: Optional[str]
    max_tokens: int
    temperature: float

    def to_log_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view without the token."""
        return {
            "provider": self.provider.family.value,
            "model": self.provider.model_string(),
            "has_system_prompt": self.system_prompt is not None,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


__all__ = ["ModelConfig"]
