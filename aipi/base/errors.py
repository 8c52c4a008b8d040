"""Unified aipi error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``aipi.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    ConfigBuildError,
    ConfigValidationError,
    EmptyContentError,
    ErrorCode,
    ExtractContentError,
    MissingCredentialError,
    MultiConfigError,
    NoTokenSetError,
    ParseResponseError,
    RequestError,
    SendError,
    UnsupportedProviderError,
)

__all__ = [
    "ErrorCode",
    "MissingCredentialError",
    "ConfigBuildError",
    "ConfigValidationError",
    "MultiConfigError",
    "NoTokenSetError",
    "SendError",
    "RequestError",
    "ParseResponseError",
    "EmptyContentError",
    "ExtractContentError",
    "UnsupportedProviderError",
]
