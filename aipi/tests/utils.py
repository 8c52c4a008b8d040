"""Shared testing utilities for session, adapter and maintenance tests.

Exports:
    - ListHandler: logging handler that keeps emitted events for assertions
    - Recorder: ``httpx.MockTransport`` handler that records every request
    - mock_client(respond) -> (httpx.AsyncClient, Recorder)
    - claude_reply(*texts) / chatgpt_reply(*texts): provider response bodies
    - FailingStream: response stream that errors while the body is read
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Tuple

import httpx


class ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []
        self.levels: List[int] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())
        self.levels.append(record.levelno)

    @property
    def events(self) -> List[Dict[str, Any]]:
        return [json.loads(m) for m in self.messages]

    def named(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("event") == event]


class Recorder:
    """Mock transport handler: records requests and answers via ``respond``."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    def payload(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


def mock_client(respond: Callable[[httpx.Request], httpx.Response]) -> Tuple[httpx.AsyncClient, Recorder]:
    recorder = Recorder(respond)
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder)), recorder


def claude_reply(*texts: str) -> Dict[str, Any]:
    return {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": t} for t in texts],
        "stop_reason": "end_turn",
    }


def chatgpt_reply(*texts: str) -> Dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": t}, "finish_reason": "stop"}
            for i, t in enumerate(texts)
        ],
    }


def respond_json(body: Dict[str, Any], status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, json=body)


class FailingStream(httpx.AsyncByteStream):
    """Body stream that fails on the first read."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover

    async def aclose(self) -> None:
        return None
