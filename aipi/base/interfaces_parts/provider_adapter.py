"""ProviderAdapter Protocol (single-class module).

Defines the translation contract between the local message model and one
provider family's wire format.
"""

from __future__ import annotations

from typing import Dict, Protocol, Sequence, runtime_checkable

from ..models import Message, MessageBundle, ModelConfig


@runtime_checkable
class ProviderAdapter(Protocol):
    """Wire translation for a single provider family.

    Implementations are stateless: every input arrives as an argument, so one
    instance may be shared by any number of sessions.
    """

    def headers(self, config: ModelConfig) -> Dict[str, str]:
        """Return the request headers, including authentication."""
        ...

    def build_payload(
        self,
        history: Sequence[MessageBundle],
        next_message: MessageBundle,
        config: ModelConfig,
    ) -> str:
        """Serialize ``history`` followed by ``next_message`` as a JSON request body."""
        ...

    def parse_response(self, body: str, config: ModelConfig) -> Message:
        """Extract the assistant reply from a successful response body.

        Raises ``ParseResponseError`` (or ``EmptyContentError``) on malformed
        or empty responses.
        """
        ...
