"""Model listing check against mocked provider endpoints."""
from __future__ import annotations

import asyncio

import httpx
import pytest

from aipi.base.errors import MissingCredentialError, ParseResponseError, RequestError
from aipi.base.models import ProviderFamily
from aipi.base.repositories import CredentialStore
from aipi.service.maintenance import (
    check_provider,
    fetch_and_display_metadata,
    fetch_model_ids,
    find_unsupported_models,
)

from .conftest import CLAUDE_TOKEN, GOOGLE_TOKEN, OPENAI_TOKEN
from .utils import mock_client, respond_json


def _listing(*ids):
    return {"data": [{"id": i, "created_at": "2025-01-01T00:00:00Z"} for i in ids], "has_more": False}


def test_find_unsupported_models_keeps_input_order():
    ids = ["gpt-5", "gpt-4o", "claude-sonnet-4-20250514", "claude-2.1"]
    assert find_unsupported_models(ids) == ["gpt-4o", "claude-2.1"]
    assert find_unsupported_models([]) == []


@pytest.mark.parametrize(
    "family, url, header, value",
    [
        (ProviderFamily.CLAUDE, "https://api.anthropic.com/v1/models", "x-api-key", CLAUDE_TOKEN),
        (ProviderFamily.CHATGPT, "https://api.openai.com/v1/models", "authorization", f"Bearer {OPENAI_TOKEN}"),
        (
            ProviderFamily.GEMINI,
            "https://generativelanguage.googleapis.com/v1beta/models",
            "x-goog-api-key",
            GOOGLE_TOKEN,
        ),
    ],
)
def test_fetch_model_ids_uses_family_endpoint_and_auth(store, family, url, header, value):
    client, recorder = mock_client(respond_json(_listing("a", "b")))
    ids = asyncio.run(fetch_model_ids(family, store=store, client=client))
    assert ids == ["a", "b"]
    request = recorder.requests[0]
    assert request.method == "GET"
    assert str(request.url) == url
    assert request.headers[header] == value


def test_claude_listing_sends_api_version(store):
    client, recorder = mock_client(respond_json(_listing()))
    asyncio.run(fetch_model_ids(ProviderFamily.CLAUDE, store=store, client=client))
    assert recorder.requests[0].headers["anthropic-version"] == "2023-06-01"


def test_fetch_model_ids_requires_credential():
    client, recorder = mock_client(respond_json(_listing()))
    with pytest.raises(MissingCredentialError):
        asyncio.run(fetch_model_ids(ProviderFamily.CHATGPT, store=CredentialStore(), client=client))
    assert recorder.requests == []


def test_fetch_model_ids_status_error(store):
    client, _ = mock_client(respond_json({"error": "nope"}, status=403))
    with pytest.raises(RequestError) as excinfo:
        asyncio.run(fetch_model_ids(ProviderFamily.CLAUDE, store=store, client=client))
    assert excinfo.value.status_code == 403


def test_fetch_model_ids_bad_body(store):
    client, _ = mock_client(lambda request: httpx.Response(200, json={"models": []}))
    with pytest.raises(ParseResponseError):
        asyncio.run(fetch_model_ids(ProviderFamily.CLAUDE, store=store, client=client))


def test_check_provider_logs_each_unsupported_model(store, log_events):
    client, _ = mock_client(respond_json(_listing("claude-opus-4-1-20250805", "claude-3-opus-20240229")))
    unsupported = asyncio.run(check_provider(ProviderFamily.CLAUDE, store=store, client=client))
    assert unsupported == ["claude-3-opus-20240229"]
    events = log_events.named("maintenance.unsupported_model")
    assert [e["model_id"] for e in events] == ["claude-3-opus-20240229"]
    assert events[0]["provider"] == "claude"


def test_fetch_and_display_metadata_reports_default_families(store, capsys):
    def respond(request):
        if request.url.host == "api.anthropic.com":
            return httpx.Response(200, json=_listing("claude-sonnet-4-20250514"))
        return httpx.Response(200, json=_listing("gpt-5", "gpt-4.1"))

    client, recorder = mock_client(respond)
    report = asyncio.run(fetch_and_display_metadata(store=store, client=client))
    assert report == {ProviderFamily.CLAUDE: [], ProviderFamily.CHATGPT: ["gpt-4.1"]}
    assert len(recorder.requests) == 2
    out = capsys.readouterr().out
    assert "claude: 0 unsupported model(s)" in out
    assert "  - gpt-4.1" in out
