"""HTTP helpers: async client construction and provider auth headers."""

from .auth import auth_headers
from .client import create_async_client

__all__ = ["auth_headers", "create_async_client"]
