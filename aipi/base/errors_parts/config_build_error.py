"""
Configuration build errors.

`ModelConfigBuilder` collects every problem it detects before failing. A
single problem is raised as-is; several are wrapped in `MultiConfigError` in
detection order.
"""
from __future__ import annotations

from typing import List

from .error_code import ErrorCode


class ConfigBuildError(Exception):
    """Base class for errors raised by ``ModelConfigBuilder.build``."""

    code: ErrorCode = ErrorCode.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NoTokenSetError(ConfigBuildError):
    """No credential was configured for the selected provider."""

    code = ErrorCode.MISSING_CREDENTIAL


class ConfigValidationError(ConfigBuildError):
    """A supplied configuration value is outside its accepted range."""

    code = ErrorCode.VALIDATION


class MultiConfigError(ConfigBuildError):
    """Two or more configuration problems, kept in detection order."""

    code = ErrorCode.MULTI

    def __init__(self, errors: List[ConfigBuildError]) -> None:
        self.errors = list(errors)
        joined = "; ".join(e.message for e in self.errors)
        super().__init__(f"{len(self.errors)} configuration errors: {joined}")

    def __repr__(self) -> str:
        return f"MultiConfigError({self.errors!r})"


__all__ = [
    "ConfigBuildError",
    "NoTokenSetError",
    "ConfigValidationError",
    "MultiConfigError",
]
