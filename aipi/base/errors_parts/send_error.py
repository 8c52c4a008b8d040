"""
Structured send-time errors.

Every failure between building an outbound payload and producing a reply
`Message` is surfaced as a `SendError` subclass carrying a normalized
`ErrorCode`. A session never retries; callers decide what to do.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class SendError(Exception):
    """Represents a failed send with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider family where the error originated (e.g. ``"claude"``).
        model: Optional wire model identifier associated with the failure.
        status_code: HTTP status when the server answered.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status_code: Optional[int] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


class RequestError(SendError):
    """Transport failure, or a non-2xx answer from the provider."""


class ParseResponseError(SendError):
    """The response body was not the wire shape the adapter expects."""


class EmptyContentError(ParseResponseError):
    """Well-formed response without any content block or choice."""


class ExtractContentError(SendError):
    """The response body could not be read from the transport."""


class UnsupportedProviderError(SendError):
    """No adapter implements the requested provider family."""


__all__ = [
    "SendError",
    "RequestError",
    "ParseResponseError",
    "EmptyContentError",
    "ExtractContentError",
    "UnsupportedProviderError",
]
