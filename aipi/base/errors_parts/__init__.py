"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `aipi.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .credential_error import MissingCredentialError
from .config_build_error import (
    ConfigBuildError,
    ConfigValidationError,
    MultiConfigError,
    NoTokenSetError,
)
from .send_error import (
    EmptyContentError,
    ExtractContentError,
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
