"""
Credential resolution failure.

Raised by the credential store when no secret is configured for a provider
family. The message is the operator-facing remediation text.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode


@dataclass
class MissingCredentialError(Exception):
    """No secret is available for the requested provider family.

    Attributes:
        provider: Provider family key (e.g. ``"claude"``).
        env_var: Canonical environment variable the operator should set.
    """

    provider: str
    env_var: str

    @property
    def code(self) -> ErrorCode:
        return ErrorCode.MISSING_CREDENTIAL

    @property
    def message(self) -> str:
        return f"Must set {self.env_var} in your env"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["MissingCredentialError"]
