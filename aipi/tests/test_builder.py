"""ModelConfigBuilder: defaults, deferred validation and error aggregation."""
from __future__ import annotations

import pytest

from aipi.base.errors import ConfigValidationError, MultiConfigError, NoTokenSetError
from aipi.base.models import ChatGptVersion, ClaudeVersion, ModelConfig, Provider
from aipi.base.repositories import CredentialStore
from aipi.config import ModelConfigBuilder as LazyBuilder
from aipi.config.builder import ModelConfigBuilder
from aipi.config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

from .conftest import CLAUDE_TOKEN


def test_build_applies_defaults(store):
    config = ModelConfigBuilder(Provider.claude(), store=store).build()
    assert isinstance(config, ModelConfig)
    assert config.provider == Provider.claude(ClaudeVersion.SONNET_4)
    assert config.max_tokens == DEFAULT_MAX_TOKENS == 1024
    assert config.temperature == DEFAULT_TEMPERATURE == 0.5
    assert config.system_prompt is None
    assert config.token.get_secret_value() == CLAUDE_TOKEN


def test_setters_chain_and_apply(store):
    builder = ModelConfigBuilder(Provider.chatgpt(ChatGptVersion.GPT_5_MINI), store=store)
    assert builder.with_system_prompt("be brief") is builder
    assert builder.with_max_tokens(256) is builder
    assert builder.with_temperature(0.9) is builder
    config = builder.build()
    assert config.system_prompt == "be brief"
    assert config.max_tokens == 256
    assert config.temperature == 0.9


@pytest.mark.parametrize("temperature", [0, 0.0, 1, 1.0, 0.25])
def test_temperature_bounds_are_inclusive(store, temperature):
    config = ModelConfigBuilder(Provider.claude(), store=store).with_temperature(temperature).build()
    assert config.temperature == temperature


@pytest.mark.parametrize("temperature", [-0.1, 1.5, 2])
def test_temperature_out_of_bounds_is_single_validation_error(store, temperature):
    builder = ModelConfigBuilder(Provider.claude(), store=store).with_temperature(temperature)
    with pytest.raises(ConfigValidationError) as excinfo:
        builder.build()
    assert excinfo.value.message == (
        f"Temperature parameter is out of bounds. Value supplied: {temperature}; Temperature bounds: [0, 1]."
    )


def test_setter_records_error_without_raising(store):
    builder = ModelConfigBuilder(Provider.claude(), store=store).with_temperature(3.0)
    assert len(builder.errors) == 1
    builder.with_temperature(0.2)
    # earlier problems are not forgotten by a later valid value
    assert len(builder.errors) == 1


@pytest.mark.parametrize("max_tokens", [0, -5])
def test_non_positive_max_tokens_is_rejected(store, max_tokens):
    with pytest.raises(ConfigValidationError):
        ModelConfigBuilder(Provider.claude(), store=store).with_max_tokens(max_tokens).build()


def test_missing_token_alone_raises_no_token_set():
    store = CredentialStore()
    with pytest.raises(NoTokenSetError) as excinfo:
        ModelConfigBuilder(Provider.chatgpt(), store=store).build()
    assert excinfo.value.message == "Must set API_KEY_OPENAI in your env"


def test_multiple_problems_are_aggregated_in_detection_order():
    store = CredentialStore()
    builder = (
        ModelConfigBuilder(Provider.claude(), store=store)
        .with_temperature(1.5)
        .with_max_tokens(0)
    )
    with pytest.raises(MultiConfigError) as excinfo:
        builder.build()
    errors = excinfo.value.errors
    assert [type(e) for e in errors] == [ConfigValidationError, ConfigValidationError, NoTokenSetError]
    assert errors[0].message.startswith("Temperature parameter is out of bounds. Value supplied: 1.5")
    assert errors[2].message == "Must set API_KEY_ANTHROPIC in your env"


def test_bad_temperature_and_missing_token_is_multi_error():
    with pytest.raises(MultiConfigError) as excinfo:
        ModelConfigBuilder(Provider.claude(), store=CredentialStore()).with_temperature(2.5).build()
    errors = excinfo.value.errors
    assert [type(e) for e in errors] == [ConfigValidationError, NoTokenSetError]
    assert errors[0].message.startswith("Temperature parameter is out of bounds. Value supplied: 2.5")


def test_builder_uses_process_store_by_default(credentials):
    config = ModelConfigBuilder(Provider.claude()).build()
    assert config.token.get_secret_value() == CLAUDE_TOKEN


def test_config_repr_and_log_view_hide_token(store):
    config = ModelConfigBuilder(Provider.claude(), store=store).build()
    assert CLAUDE_TOKEN not in repr(config)
    assert CLAUDE_TOKEN not in str(config)
    assert CLAUDE_TOKEN not in str(config.to_log_dict())


def test_lazy_export_from_config_package():
    assert LazyBuilder is ModelConfigBuilder
