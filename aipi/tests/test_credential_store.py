"""Unit tests for CredentialStore resolution, caching and reload-on-miss."""

from __future__ import annotations

import logging
import threading

import pytest
from pydantic import SecretStr

from aipi.base.errors import MissingCredentialError
from aipi.base.models import Provider
from aipi.base.repositories import CredentialStore, get_credential_store, reset_credential_store
from aipi.base.repositories import keys as keys_module


def test_resolve_returns_secret_from_env(monkeypatch):
    monkeypatch.setenv("API_KEY_ANTHROPIC", "secret-value")  # pragma: allowlist secret
    store = CredentialStore()
    token = store.resolve(Provider.claude())
    assert isinstance(token, SecretStr)
    assert token.get_secret_value() == "secret-value"
    assert "secret-value" not in repr(token)


def test_resolve_accepts_alias(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "alias-value")  # pragma: allowlist secret
    store = CredentialStore()
    assert store.resolve(Provider.chatgpt()).get_secret_value() == "alias-value"


def test_miss_raises_with_remediation_and_arms_reload():
    store = CredentialStore()
    assert store.reload_needed is False
    with pytest.raises(MissingCredentialError) as excinfo:
        store.resolve(Provider.claude())
    assert excinfo.value.provider == "claude"
    assert excinfo.value.env_var == "API_KEY_ANTHROPIC"
    assert excinfo.value.message == "Must set API_KEY_ANTHROPIC in your env"
    assert store.reload_needed is True


def test_value_is_cached_until_a_miss(monkeypatch):
    monkeypatch.setenv("API_KEY_OPENAI", "first")  # pragma: allowlist secret
    store = CredentialStore()
    monkeypatch.setenv("API_KEY_OPENAI", "second")  # pragma: allowlist secret
    assert store.resolve(Provider.chatgpt()).get_secret_value() == "first"


def test_fixed_env_is_picked_up_after_miss(monkeypatch):
    store = CredentialStore()
    with pytest.raises(MissingCredentialError):
        store.resolve(Provider.chatgpt())
    monkeypatch.setenv("API_KEY_OPENAI", "now-set")  # pragma: allowlist secret
    assert store.resolve(Provider.chatgpt()).get_secret_value() == "now-set"
    assert store.reload_needed is False


def test_reload_reads_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    store = CredentialStore(dotenv_path=str(env_file))
    with pytest.raises(MissingCredentialError):
        store.resolve(Provider.gemini())
    env_file.write_text("API_KEY_GOOGLE=from-dotenv\n", encoding="utf-8")
    assert store.resolve(Provider.gemini()).get_secret_value() == "from-dotenv"


def test_reload_recovers_from_empty_dotenv_entry(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("API_KEY_ANTHROPIC=\n", encoding="utf-8")
    store = CredentialStore(dotenv_path=str(env_file))
    with pytest.raises(MissingCredentialError):
        store.resolve(Provider.claude())
    env_file.write_text("API_KEY_ANTHROPIC=fixed-value\n", encoding="utf-8")  # pragma: allowlist secret
    assert store.resolve(Provider.claude()).get_secret_value() == "fixed-value"


def test_miss_for_one_family_refreshes_all(monkeypatch):
    monkeypatch.setenv("API_KEY_ANTHROPIC", "old")  # pragma: allowlist secret
    store = CredentialStore()
    with pytest.raises(MissingCredentialError):
        store.resolve(Provider.chatgpt())
    monkeypatch.setenv("API_KEY_ANTHROPIC", "new")  # pragma: allowlist secret
    assert store.resolve(Provider.claude()).get_secret_value() == "new"


def test_concurrent_resolves_trigger_single_reload(monkeypatch):
    monkeypatch.setenv("API_KEY_ANTHROPIC", "present")  # pragma: allowlist secret
    store = CredentialStore()
    calls = []
    original = keys_module._read_snapshot

    def counting(path=None):
        calls.append(path)
        return original(path)

    monkeypatch.setattr(keys_module, "_read_snapshot", counting)
    store.request_reload()

    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(store.resolve(Provider.claude()).get_secret_value())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == ["present"] * 8
    assert len(calls) == 1
    assert store.reload_needed is False


def test_reload_logs_families_without_values(monkeypatch, log_events):
    monkeypatch.setenv("API_KEY_ANTHROPIC", "very-secret")  # pragma: allowlist secret
    store = CredentialStore()
    store.reload()
    event = log_events.named("credentials.reload")[-1]
    assert event["present"] == ["claude"]
    assert all("very-secret" not in m for m in log_events.messages)


def test_miss_is_logged(log_events):
    store = CredentialStore()
    with pytest.raises(MissingCredentialError):
        store.resolve(Provider.gemini())
    event = log_events.named("credentials.missing")[-1]
    assert event["provider"] == "gemini"
    assert event["env_var"] == "API_KEY_GOOGLE"
    assert log_events.events[-1]["event"] == "credentials.missing"
    assert log_events.levels[-1] == logging.WARNING


def test_process_wide_store_is_shared_until_reset():
    first = get_credential_store()
    assert get_credential_store() is first
    reset_credential_store()
    assert get_credential_store() is not first
