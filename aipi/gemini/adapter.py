"""Gemini adapter.

Gemini is a selectable provider (its credential, endpoint and model listing
are wired up) but chat translation is not implemented: every operation raises
:class:`UnsupportedProviderError`, which the session surfaces without touching
history.
"""

from __future__ import annotations

from typing import Dict, NoReturn, Sequence

from ..base.errors import ErrorCode, UnsupportedProviderError
from ..base.models import Message, MessageBundle, ModelConfig


def _unsupported(config: ModelConfig, operation: str) -> NoReturn:
    raise UnsupportedProviderError(
        code=ErrorCode.UNSUPPORTED_PROVIDER,
        message=f"Gemini {operation} is not supported",
        provider=config.provider.family.value,
        model=config.provider.model_string(),
    )


class GeminiAdapter:
    """Placeholder adapter for the Gemini family."""

    def headers(self, config: ModelConfig) -> Dict[str, str]:
        _unsupported(config, "headers")

    def build_payload(
        self,
        history: Sequence[MessageBundle],
        next_message: MessageBundle,
        config: ModelConfig,
    ) -> str:
        _unsupported(config, "payload construction")

    def parse_response(self, body: str, config: ModelConfig) -> Message:
        _unsupported(config, "response parsing")


__all__ = ["GeminiAdapter"]
