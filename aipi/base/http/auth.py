"""Authentication headers per provider auth scheme.

Chat adapters and the model-listing check attach credentials the same way, so
the mapping from :class:`AuthScheme` to header lives here. The raw token is
unwrapped from its ``SecretStr`` only while building the header mapping.
"""

from __future__ import annotations

from typing import Callable, Dict

from pydantic import SecretStr

from ..constants import HEADER_ANTHROPIC_API_KEY, HEADER_ANTHROPIC_VERSION, HEADER_AUTHORIZATION, HEADER_GOOGLE_API_KEY
from ..models import AuthScheme, Provider

_SCHEME_HEADERS: Dict[AuthScheme, Callable[[str], Dict[str, str]]] = {
    AuthScheme.API_KEY_HEADER: lambda token: {HEADER_ANTHROPIC_API_KEY: token},
    AuthScheme.BEARER: lambda token: {HEADER_AUTHORIZATION: f"Bearer {token}"},
    AuthScheme.GOOG_API_KEY_HEADER: lambda token: {HEADER_GOOGLE_API_KEY: token},
}


def auth_headers(provider: Provider, token: SecretStr) -> Dict[str, str]:
    """Return authentication (and API version) headers for ``provider``."""
    headers = _SCHEME_HEADERS[provider.auth_scheme()](token.get_secret_value())
    if version := provider.api_version():
        headers[HEADER_ANTHROPIC_VERSION] = version
    return headers


__all__ = ["auth_headers"]
