"""Pytest configuration for the aipi test suite.

Every test starts with no provider credentials in the environment, no ``.env``
file in reach, and fresh process-wide caches, so results never depend on the
developer's shell.
"""

from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest

from aipi.base.logging import BASE_LOGGER_NAME, get_logger
from aipi.base.models import ModelConfig, Provider
from aipi.base.repositories import CredentialStore, reset_credential_store
from aipi.base.timeouts import HTTP_TIMEOUT_ENV, reset_timeout_config
from aipi.config import DOTENV_PATH_ENV
from aipi.config.builder import ModelConfigBuilder
from aipi.config.env import ENV_ALIASES

from .utils import ListHandler

CREDENTIAL_VARS = tuple(sorted({name for names in ENV_ALIASES.values() for name in names}))

# Harmless dummy values; allowlist for secret scanners.
CLAUDE_TOKEN = "sk-ant-test-token"  # pragma: allowlist secret
OPENAI_TOKEN = "sk-openai-test-token"  # pragma: allowlist secret
GOOGLE_TOKEN = "google-test-token"  # pragma: allowlist secret


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear credentials, point ``DOTENV_FILE`` at a missing file, reset caches."""
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(HTTP_TIMEOUT_ENV, raising=False)
    monkeypatch.setenv(DOTENV_PATH_ENV, str(tmp_path / "absent.env"))
    reset_credential_store()
    reset_timeout_config()
    yield
    # load_dotenv writes os.environ directly; drop anything it added
    for name in CREDENTIAL_VARS:
        os.environ.pop(name, None)
    reset_credential_store()
    reset_timeout_config()


@pytest.fixture()
def credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set a canonical credential for every provider family."""
    monkeypatch.setenv("API_KEY_ANTHROPIC", CLAUDE_TOKEN)
    monkeypatch.setenv("API_KEY_OPENAI", OPENAI_TOKEN)
    monkeypatch.setenv("API_KEY_GOOGLE", GOOGLE_TOKEN)


@pytest.fixture()
def store(credentials) -> CredentialStore:
    return CredentialStore()


@pytest.fixture()
def config_for(store: CredentialStore) -> Callable[..., ModelConfig]:
    """Return ``build(provider, system_prompt=None, max_tokens=None, temperature=None)``."""

    def _build(provider: Provider, system_prompt=None, max_tokens=None, temperature=None) -> ModelConfig:
        builder = ModelConfigBuilder(provider, store=store)
        if system_prompt is not None:
            builder.with_system_prompt(system_prompt)
        if max_tokens is not None:
            builder.with_max_tokens(max_tokens)
        if temperature is not None:
            builder.with_temperature(temperature)
        return builder.build()

    return _build


@pytest.fixture()
def log_events() -> Iterator[ListHandler]:
    """Attach a collecting handler to the shared ``aipi`` logger."""
    handler = ListHandler()
    base = get_logger(BASE_LOGGER_NAME)
    base.addHandler(handler)
    yield handler
    base.removeHandler(handler)
