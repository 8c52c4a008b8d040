"""Structured logging for aipi.

Every logger handed out by :func:`get_logger` lives under the shared ``aipi``
logger. That base logger owns the handlers (one stderr handler, plus an
optional rotating file added by :func:`configure_logger`) and does not
propagate to the root logger, so applications embedding aipi keep control of
their own logging tree.

Events are single JSON objects. :func:`log_event` writes ``{"event": ...}``
merged with a :class:`LogContext` and arbitrary fields; the formatter in
:mod:`aipi.base.log_support` hoists those keys to the top level of the
emitted line. :func:`normalized_log_event` is used on the send path and always
carries ``phase``, ``attempt``, ``emitted`` and ``tokens`` (``error_code``
only when something failed).

Environment:
    AIPI_LOG_LEVEL  Level name for the base logger (default ``INFO``).

Tokens and other secrets must never be passed as fields.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "aipi"
LOG_LEVEL_ENV = "AIPI_LOG_LEVEL"

_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time.

    Test runners replace and close ``sys.stderr`` between tests; resolving it
    lazily keeps the handler usable across those swaps.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, _value) -> None:
        pass


class _ManagedFileHandler(RotatingFileHandler):
    """Rotating file handler attached and removed by :func:`configure_logger`."""


def _formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` or ``"WARN"`` to its number.

    Empty and unknown names yield ``default``.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _base_logger(json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return the shared ``aipi`` logger; the first call installs its stderr handler and level."""
    base = logging.getLogger(BASE_LOGGER_NAME)
    if any(isinstance(h, _StderrHandler) for h in base.handlers):
        return base
    wanted = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    base.setLevel(wanted)
    handler = _StderrHandler()
    handler.setLevel(wanted)
    handler.setFormatter(_formatter(json_mode))
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``aipi`` or one of its children.

    ``name`` may be given with or without the ``aipi.`` prefix. Children have
    no handlers of their own; their records reach the base logger's handlers.
    """
    base = _base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    prefix = f"{BASE_LOGGER_NAME}."
    child = logging.getLogger(name if name.startswith(prefix) else prefix + name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level for the logger and all of its handlers; a name or a number.
        ``None`` leaves the level alone.
    file_path: Optional[str]
        Path of a rotating log file. The file handler is created (with its
        parent directories) on first use and reused while the path is
        unchanged. ``None`` removes a previously configured file handler.
    json_mode: bool
        JSON lines (default) or plain text for the file handler.

    Returns
    -------
    logging.Logger
        The base ``aipi`` logger.
    """
    base = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if isinstance(level, str):
        base.setLevel(_parse_level(level, default=base.level))
    elif level is not None:
        base.setLevel(level)
    if level is not None:
        for handler in base.handlers:
            handler.setLevel(base.level)

    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in [h for h in base.handlers if isinstance(h, _ManagedFileHandler)]:
        if handler.baseFilename == target:
            handler.setFormatter(_formatter(json_mode))
            handler.setLevel(base.level)
            return base
        base.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()

    if target is not None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        handler = _ManagedFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        handler.setLevel(base.level)
        handler.setFormatter(_formatter(json_mode))
        base.addHandler(handler)
    return base


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Write ``event`` as one JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Usually obtained from :func:`get_logger`.
    event: str
        Dotted event name, e.g. ``send.start``.
    ctx: LogContext | None
        Correlation fields (provider, model, session id, extras).
    level: int
        Record level.
    keep_none: bool
        Keep fields whose value is ``None`` instead of dropping them.
    **fields: Any
        Additional key/value pairs; values must be JSON-serializable or
        representable through ``str``.
    """
    record: Dict[str, Any] = {"event": event}
    if ctx is not None:
        record.update(ctx.to_dict())
    record.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(record, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "emitted", "tokens")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Write ``event`` with the normalized send-path keys.

    ``phase``, ``attempt``, ``emitted`` and ``tokens`` are always present
    (``None`` when unknown); ``error_code`` appears only when given. Extra
    fields are added unless they are ``None`` or would replace one of the
    normalized values.
    """
    normalized: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": tokens,
    }
    if error_code is not None:
        normalized["error_code"] = error_code
    extras = {
        k: v
        for k, v in extra_fields.items()
        if v is not None and normalized.get(k) is None
    }
    normalized.update(extras)
    log_event(logger, event, ctx, level=level, keep_none=True, **normalized)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
