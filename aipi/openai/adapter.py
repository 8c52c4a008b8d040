"""ChatGPT (OpenAI Chat Completions) adapter.

Wire contract:
    - Headers: ``authorization: Bearer <token>``, ``content-type``.
    - Body: ``model``, ``max_completion_tokens``, ``temperature``,
      ``messages``. The system prompt travels as the leading ``developer``
      message already present in the session history.
    - Reply: ``message.content`` of the last entry in ``choices``.
"""

from __future__ import annotations

from typing import Dict, Sequence

from pydantic import ValidationError

from ..base.constants import HEADER_CONTENT_TYPE, JSON_CONTENT_TYPE
from ..base.errors import EmptyContentError, ErrorCode, ParseResponseError
from ..base.http import auth_headers
from ..base.models import Message, MessageBundle, ModelConfig
from ..base.utils import project_messages
from .wire import ChatGptRequest, ChatGptResponse, ChatGptWireMessage


class ChatGptAdapter:
    """Stateless translator for the ChatGPT family."""

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
        request = ChatGptRequest(
            model=provider.model_string(),
            max_completion_tokens=config.max_tokens,
            temperature=config.temperature,
            messages=[
                ChatGptWireMessage(**m) for m in project_messages(provider, history, next_message)
            ],
        )
        return request.model_dump_json()

    def parse_response(self, body: str, config: ModelConfig) -> Message:
        provider = config.provider
        try:
            parsed = ChatGptResponse.model_validate_json(body)
        except ValidationError as e:
            raise ParseResponseError(
                code=ErrorCode.PARSE_RESPONSE,
                message=f"unexpected ChatGPT response body: {e.error_count()} validation error(s)",
                provider=provider.family.value,
                model=provider.model_string(),
                raw=e,
            ) from e
        if not parsed.choices:
            raise EmptyContentError(
                code=ErrorCode.EMPTY_CONTENT,
                message="ChatGPT response contained no choices",
                provider=provider.family.value,
                model=provider.model_string(),
            )
        return Message.from_assistant(parsed.choices[-1].message.content)


__all__ = ["ChatGptAdapter"]
