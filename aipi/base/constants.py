"""Base shared constants for aipi.

Central location to avoid scattering magic strings across adapters and the
session.

Security
--------
This module contains only generic header names and sentinel strings. There are
no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Wire framing
JSON_CONTENT_TYPE = "application/json"
HEADER_CONTENT_TYPE = "content-type"
HEADER_AUTHORIZATION = "authorization"
HEADER_ANTHROPIC_API_KEY = "x-api-key"  # pragma: allowlist secret - header name, not a secret
HEADER_ANTHROPIC_VERSION = "anthropic-version"
HEADER_GOOGLE_API_KEY = "x-goog-api-key"  # pragma: allowlist secret - header name, not a secret

# Number of response body characters kept in error messages
ERROR_BODY_PREVIEW_CHARS = 500

__all__ = [
    "JSON_CONTENT_TYPE",
    "HEADER_CONTENT_TYPE",
    "HEADER_AUTHORIZATION",
    "HEADER_ANTHROPIC_API_KEY",
    "HEADER_ANTHROPIC_VERSION",
    "HEADER_GOOGLE_API_KEY",
    "ERROR_BODY_PREVIEW_CHARS",
]
