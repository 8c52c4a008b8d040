"""
Credential Store

Purpose
- Resolve and cache provider secrets from the process environment and the
  ``.env`` file, one entry per provider family.
- Let operators fix a missing credential without restarting the process: a
  miss arms a reload flag, and the next lookup re-reads the configuration.

Design
- The cache is an immutable snapshot (family -> ``SecretStr`` or ``None``).
  Readers take a single reference to the current snapshot; a reload builds a
  fresh snapshot and swaps the reference, so no reader ever sees a partial
  update and the common path takes no lock.
- The reload flag is compare-and-set under a small ``threading.Lock``. Only
  the caller that flips it from set to clear performs the reload, and it does
  so under a separate exclusive lock.
- Secret values are never logged; reload events report which families are
  present.

Usage
- store = CredentialStore()
- token = store.resolve(Provider.claude())
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import SecretStr

from ...config import load_dotenv
from ...config.env import get_env_var_name, resolve_provider_key
from ..errors import MissingCredentialError
from ..logging import LogContext, get_logger, log_event
from ..models import Provider, ProviderFamily

Snapshot = Mapping[ProviderFamily, Optional[SecretStr]]

_logger = get_logger("aipi.credentials")


def _read_snapshot(dotenv_path: Optional[str] = None) -> Snapshot:
    """Read ``.env`` and every provider variable into a fresh snapshot."""
    load_dotenv(dotenv_path)
    entries = {}
    for family in ProviderFamily:
        value, _used = resolve_provider_key(family.value)
        entries[family] = SecretStr(value) if value else None
    return MappingProxyType(entries)


class CredentialStore:
    """Per-family secret cache with lazy reload-on-miss semantics.

    Parameters
    ----------
    dotenv_path: Optional[str]
        ``.env`` file consulted on every (re)load. Defaults to
        ``$DOTENV_FILE`` or ``.env``.
    """

    def __init__(self, dotenv_path: Optional[str] = None) -> None:
        self._dotenv_path = dotenv_path
        self._flag_lock = threading.Lock()
        self._reload_lock = threading.Lock()
        self._reload_needed = False
        self._snapshot: Snapshot = _read_snapshot(dotenv_path)

    @property
    def reload_needed(self) -> bool:
        return self._reload_needed

    def request_reload(self) -> None:
        """Arm the reload flag; the next :meth:`resolve` re-reads configuration."""
        with self._flag_lock:
            self._reload_needed = True

    def _claim_reload(self) -> bool:
        with self._flag_lock:
            if not self._reload_needed:
                return False
            self._reload_needed = False
            return True

    def reload(self) -> None:
        """Re-read configuration and swap in a fresh snapshot."""
        with self._reload_lock:
            snapshot = _read_snapshot(self._dotenv_path)
            self._snapshot = snapshot
        present = sorted(f.value for f, v in snapshot.items() if v is not None)
        log_event(_logger, "credentials.reload", present=present)

    def resolve(self, provider: Provider) -> SecretStr:
        """Return the secret for ``provider``'s family.

        Raises
        ------
        MissingCredentialError
            When no secret is configured. The reload flag is armed first, so
            a later call picks up configuration fixed in the meantime.
        """
        if self._reload_needed and self._claim_reload():
            self.reload()

        family = provider.family
        token = self._snapshot.get(family)
        if token is not None:
            return token

        self.request_reload()
        env_var = get_env_var_name(family.value) or ""
        log_event(
            _logger,
            "credentials.missing",
            LogContext(provider=family.value),
            level=logging.WARNING,
            env_var=env_var,
        )
        raise MissingCredentialError(provider=family.value, env_var=env_var)


_store: Optional[CredentialStore] = None
_store_lock = threading.Lock()


def get_credential_store() -> CredentialStore:
    """Return the process-wide store, creating it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = CredentialStore()
        return _store


def reset_credential_store() -> None:
    """Drop the process-wide store; the next access loads a fresh one."""
    global _store
    with _store_lock:
        _store = None


__all__ = [
    "CredentialStore",
    "get_credential_store",
    "reset_credential_store",
]
