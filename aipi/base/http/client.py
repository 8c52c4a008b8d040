"""Async HTTP client construction for sessions and maintenance tooling.

Purpose:
    Build ``httpx.AsyncClient`` instances with the shared transport timeout
    policy from :func:`get_timeout_config`. A session that is not handed a
    client creates one here and owns it; callers that inject their own client
    (tests use ``httpx.MockTransport``) keep ownership of it.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def create_async_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured with the transport timeout.

    Parameters:
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        A fresh client; the caller is responsible for closing it.
    """
    cfg = get_timeout_config()
    timeout = httpx.Timeout(cfg.http_timeout_seconds)
    if transport is not None:
        return httpx.AsyncClient(timeout=timeout, transport=transport)
    return httpx.AsyncClient(timeout=timeout)


__all__ = ["create_async_client"]
