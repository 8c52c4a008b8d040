"""
Normalized aipi error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by configuration, credential and
send-time errors. Values are lowercase snake_case and are considered a stable
public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    MISSING_CREDENTIAL = "missing_credential"
    VALIDATION = "validation"
    MULTI = "multi"
    REQUEST = "request"
    HTTP_STATUS = "http_status"
    PARSE_RESPONSE = "parse_response"
    EMPTY_CONTENT = "empty_content"
    EXTRACT_CONTENT = "extract_content"
    UNSUPPORTED_PROVIDER = "unsupported_provider"


__all__ = ["ErrorCode"]
