"""Conversation session: configuration, ordered history and the send path.

Purpose:
    Hold one live :class:`ModelConfig`, the ordered list of
    :class:`MessageBundle` entries exchanged so far, and an
    ``httpx.AsyncClient``. Each send builds the request through the adapter
    for ``config.provider`` and issues exactly one POST.

History rule:
    ``send_tracked`` appends the outbound bundle and the reply bundle, in that
    order, only after the reply has been parsed. Any failure before that point
    (adapter lookup, transport, non-2xx status, body read, parse, empty
    content) leaves history exactly as it was and propagates a
    :class:`~aipi.base.errors.SendError` subclass. ``send_untracked`` never
    touches history.

Concurrency:
    Sends on one session are serialized by an ``asyncio.Lock`` so payload
    construction always sees a stable history.

Timeouts and retries:
    None here. The transport's timeout policy comes from
    :func:`aipi.base.http.create_async_client`; there are no retries.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import List, Optional, Tuple

import httpx

from ..base.constants import ERROR_BODY_PREVIEW_CHARS
from ..base.errors import ErrorCode, ExtractContentError, RequestError, SendError
from ..base.factory import get_adapter
from ..base.http import create_async_client
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import Message, MessageBundle, ModelConfig

_LOGGER = get_logger("aipi.session")


class ConversationSession:
    """A single conversation with one provider at a time.

    Parameters:
        config: Live configuration used for subsequent sends.
        client: Optional ``httpx.AsyncClient``. When omitted the session
            creates one and closes it in :meth:`aclose`; an injected client is
            left open for its owner.
    """

    def __init__(self, config: ModelConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        self._history: List[MessageBundle] = []
        self._owns_client = client is None
        self._client = client if client is not None else create_async_client()
        self._lock = asyncio.Lock()
        self.session_id = uuid.uuid4().hex[:12]
        if config.provider.system_prompt_in_history() and config.system_prompt is not None:
            seed = Message.from_system(config.system_prompt)
            self._history.append(MessageBundle.capture(seed, config))

    # -------------------- read-only views --------------------

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def history(self) -> Tuple[MessageBundle, ...]:
        """Snapshot of the history; later sends do not modify it."""
        return tuple(self._history)

    def reconfigure(self, config: ModelConfig) -> None:
        """Replace the live configuration.

        Existing bundles keep the configuration they were sent with. History
        is not reseeded, so a system prompt set here reaches history-carried
        families only if the session was created with one.
        """
        self._config = config
        log_event(_LOGGER, "session.reconfigure", self._ctx(config), config=config.to_log_dict())

    # -------------------- send operations --------------------

    async def send_tracked(self, message: Message) -> None:
        """Send ``message`` and commit it together with the reply.

        Raises:
            SendError: any failure; history is left unchanged.
        """
        async with self._lock:
            outbound, reply = await self._exchange(message)
            self._history.extend((outbound, reply))

    async def send_untracked(self, message: Message) -> MessageBundle:
        """Send ``message`` with the current history as context, without recording.

        Returns:
            The reply bundle.

        Raises:
            SendError: any failure.
        """
        async with self._lock:
            _outbound, reply = await self._exchange(message)
            return reply

    async def _exchange(self, message: Message) -> Tuple[MessageBundle, MessageBundle]:
        config = self._config
        provider = config.provider
        ctx = self._ctx(config)
        outbound = MessageBundle.capture(message, config)
        started = time.perf_counter()
        try:
            adapter = get_adapter(provider)
            headers = adapter.headers(config)
            payload = adapter.build_payload(tuple(self._history), outbound, config)
            normalized_log_event(
                _LOGGER,
                "send.start",
                ctx,
                phase="start",
                attempt=1,
                emitted=False,
                tokens=None,
                history_len=len(self._history),
            )
            body = await self._post(config, provider.target_url(), headers, payload)
            reply = adapter.parse_response(body, config)
        except SendError as e:
            normalized_log_event(
                _LOGGER,
                "send.error",
                ctx,
                phase="finalize",
                attempt=1,
                error_code=e.code.value,
                emitted=False,
                tokens=None,
                level=logging.ERROR,
                error=e.message,
                status_code=e.status_code,
            )
            raise
        normalized_log_event(
            _LOGGER,
            "send.success",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=True,
            tokens=None,
            latency_ms=round((time.perf_counter() - started) * 1000.0, 3),
            reply_chars=len(reply.content),
        )
        return outbound, MessageBundle.capture(reply, config)

    async def _post(self, config: ModelConfig, url: str, headers: dict, payload: str) -> str:
        """POST ``payload`` once and return the response text of a 2xx answer."""
        family = config.provider.family.value
        model = config.provider.model_string()
        request = self._client.build_request("POST", url, headers=headers, content=payload)
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise RequestError(
                code=ErrorCode.REQUEST,
                message=str(e) or type(e).__name__,
                provider=family,
                model=model,
                raw=e,
            ) from e
        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise ExtractContentError(
                code=ErrorCode.EXTRACT_CONTENT,
                message=f"failed to read response body: {e}",
                provider=family,
                model=model,
                status_code=response.status_code,
                raw=e,
            ) from e
        finally:
            await response.aclose()
        if not response.is_success:
            raise RequestError(
                code=ErrorCode.HTTP_STATUS,
                message=f"HTTP {response.status_code}: {response.text[:ERROR_BODY_PREVIEW_CHARS]}",
                provider=family,
                model=model,
                status_code=response.status_code,
            )
        return response.text

    # -------------------- observers --------------------

    def log_history(self) -> None:
        """Emit one ``history.entry`` event per bundle (nothing when empty)."""
        ctx = self._ctx(self._config)
        for index, bundle in enumerate(self._history):
            log_event(_LOGGER, "history.entry", ctx, index=index, **bundle.to_log_dict())

    def print_history(self) -> None:
        """Print a human-readable transcript to stdout."""
        for bundle in self._history:
            msg = bundle.message
            stamp = bundle.metadata.timestamp.isoformat(timespec="seconds")
            print(f"[{stamp}] {msg.role.value}: {msg.content}")

    # -------------------- lifecycle --------------------

    async def aclose(self) -> None:
        """Close the HTTP client when this session created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ConversationSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _ctx(self, config: ModelConfig) -> LogContext:
        return LogContext(
            provider=config.provider.family.value,
            model=config.provider.model_string(),
            session_id=self.session_id,
        )


__all__ = ["ConversationSession"]
