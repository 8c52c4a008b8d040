"""Claude (Anthropic Messages API) adapter.

Purpose:
    Translate session history into a Messages API request body and the
    response body back into an assistant :class:`Message`.

Wire contract:
    - Headers: ``x-api-key``, ``anthropic-version``, ``content-type``.
    - Body: ``model``, ``max_tokens``, ``temperature``, optional ``system``
      (present only when the configuration has a system prompt) and
      ``messages``.
    - Reply: the text of the last block in ``content``.

External dependencies:
    - ``pydantic`` for request serialization and response validation.
"""

from __future__ import annotations

from typing import Dict, Sequence

from pydantic import ValidationError

from ..base.constants import HEADER_CONTENT_TYPE, JSON_CONTENT_TYPE
from ..base.errors import EmptyContentError, ErrorCode, ParseResponseError
from ..base.http import auth_headers
from ..base.models import Message, MessageBundle, ModelConfig
from ..base.utils import project_messages
from .wire import ClaudeRequest, ClaudeResponse, ClaudeWireMessage


class ClaudeAdapter:
    """Stateless translator for the Claude family."""

    def headers(self, config: ModelConfig) -> Dict[str, str]:
        headers = auth_headers(config.provider, config.token)
        headers[HEADER_CONTENT_TYPE] = JSON_CONTENT_TYPE
        return headers

    def build_payload(
        self,
        history: Sequence[MessageBundle],
        next_message: MessageBundle,
        config: ModelConfig,
    ) -> str:
        provider = config.provider
        request = ClaudeRequest(
            model=provider.model_string(),
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            system=config.system_prompt,
            messages=[
                ClaudeWireMessage(**m) for m in project_messages(provider, history, next_message)
            ],
        )
        return request.model_dump_json(exclude_none=True)

    def parse_response(self, body: str, config: ModelConfig) -> Message:
        provider = config.provider
        try:
            parsed = ClaudeResponse.model_validate_json(body)
        except ValidationError as e:
            raise ParseResponseError(
                code=ErrorCode.PARSE_RESPONSE,
                message=f"unexpected Claude response body: {e.error_count()} validation error(s)",
                provider=provider.family.value,
                model=provider.model_string(),
                raw=e,
            ) from e
        if not parsed.content:
            raise EmptyContentError(
                code=ErrorCode.EMPTY_CONTENT,
                message="Claude response contained no content blocks",
                provider=provider.family.value,
                model=provider.model_string(),
            )
        return Message.from_assistant(parsed.content[-1].text)


__all__ = ["ClaudeAdapter"]
