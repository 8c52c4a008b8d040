from __future__ import annotations

import pytest

from aipi.anthropic import ClaudeAdapter
from aipi.base import factory as factory_module
from aipi.base.errors import UnsupportedProviderError
from aipi.base.factory import AdapterFactory, get_adapter
from aipi.base.interfaces import ProviderAdapter
from aipi.base.models import Provider, ProviderFamily
from aipi.gemini import GeminiAdapter
from aipi.openai import ChatGptAdapter


def test_factory_creates_adapter_per_family():
    assert isinstance(AdapterFactory.create(Provider.claude()), ClaudeAdapter)
    assert isinstance(AdapterFactory.create(Provider.chatgpt()), ChatGptAdapter)
    assert isinstance(AdapterFactory.create(Provider.gemini()), GeminiAdapter)


def test_adapters_satisfy_protocol():
    for provider in (Provider.claude(), Provider.chatgpt(), Provider.gemini()):
        assert isinstance(AdapterFactory.create(provider), ProviderAdapter)


def test_get_adapter_is_shared_per_family(monkeypatch):
    monkeypatch.setattr(factory_module, "_cache", {})
    first = get_adapter(Provider.claude())
    assert get_adapter(Provider.claude()) is first
    assert get_adapter(Provider.chatgpt()) is not first


def test_factory_unregistered_family(monkeypatch):
    monkeypatch.setattr(AdapterFactory, "_ADAPTERS", {})
    with pytest.raises(UnsupportedProviderError):
        AdapterFactory.create(Provider.claude())


def test_factory_import_failure(monkeypatch):
    monkeypatch.setattr(
        AdapterFactory,
        "_ADAPTERS",
        {ProviderFamily.CLAUDE: {"module": "does.not.exist", "class": "X"}},
    )
    with pytest.raises(UnsupportedProviderError) as excinfo:
        AdapterFactory.create(Provider.claude())
    assert isinstance(excinfo.value.raw, ImportError)
