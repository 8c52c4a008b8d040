"""Configuration layer for aipi.

Goals
-----
* Centralize defaults (endpoints, token budget, temperature).
* Map provider families to credential environment variables (``env``).
* Load a ``.env`` file into the process environment without extra
  dependencies, so operators can fix credentials without a restart.
* Assemble validated per-session configurations (``builder``).

Public API
----------
* load_dotenv(path: str | None = None) -> bool
* ModelConfigBuilder (re-exported lazily from ``aipi.config.builder``)
"""
from __future__ import annotations

import os
from typing import Any, Optional

from .defaults import DOTENV_DEFAULT_PATH
from .env import is_placeholder

DOTENV_PATH_ENV = "DOTENV_FILE"


def load_dotenv(path: Optional[str] = None) -> bool:
    """Parse a ``.env`` file into ``os.environ``.

    Parses KEY=VALUE lines, ignoring comments and blank lines. A variable is
    only written when it is absent from the environment, empty, or holds a
    placeholder value (see :func:`is_placeholder`). Safe to call repeatedly;
    the file is re-read on every call.

    Parameters:
        path: File to read. Defaults to ``$DOTENV_FILE`` or ``.env``.

    Returns:
        True when a file was found and read, False otherwise.
    """
    path = path or os.getenv(DOTENV_PATH_ENV, DOTENV_DEFAULT_PATH)
    if not os.path.isfile(path):
        return False
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (not os.environ.get(k) or is_placeholder(os.environ.get(k))):
                os.environ[k] = v
    return True


def __getattr__(name: str) -> Any:
    # builder imports the credential store, which imports this package
    if name == "ModelConfigBuilder":
        from .builder import ModelConfigBuilder

        return ModelConfigBuilder
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "load_dotenv",
    "ModelConfigBuilder",
    "DOTENV_PATH_ENV",
]
