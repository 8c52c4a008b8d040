"""Transport timeout configuration.

The session core defines no timeout of its own: a hung call blocks until the
transport gives up. The transport's policy is read here, once, from the
environment so that every client built by :mod:`aipi.base.http` shares it.

Supported environment variables (all optional):
    AIPI_HTTP_TIMEOUT_SECONDS
        Per-request timeout handed to ``httpx``. Unset, empty, non-numeric or
        non-positive values mean "no timeout".
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

HTTP_TIMEOUT_ENV = "AIPI_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout applied by the HTTP transport to each
            request, or ``None`` to wait indefinitely.
    """

    http_timeout_seconds: Optional[float] = None


_CACHED: TimeoutConfig | None = None


def _parse_env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        val = float(raw)
    except ValueError:
        return None
    return val if val > 0 else None


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED
    if _CACHED is None:
        _CACHED = TimeoutConfig(http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV))
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next read re-parses the environment."""
    global _CACHED
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config", "HTTP_TIMEOUT_ENV"]
