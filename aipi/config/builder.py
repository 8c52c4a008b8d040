"""aipi.config.builder
===================

Fluent assembly of an immutable :class:`~aipi.base.models.ModelConfig`.

Setters never raise. Out-of-range values are recorded as
:class:`ConfigValidationError` instances and the raw value is still stored, so
every problem surfaces together from :meth:`ModelConfigBuilder.build`:

* no problems: a ``ModelConfig`` is returned;
* exactly one: that error is raised;
* two or more: :class:`MultiConfigError` carrying all of them, in detection
  order, is raised.

The credential is resolved at ``build()`` time through a
:class:`~aipi.base.repositories.CredentialStore` (the process-wide one unless
injected). A missing credential becomes a :class:`NoTokenSetError` with the
store's remediation text.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import SecretStr

from ..base.errors import (
    ConfigBuildError,
    ConfigValidationError,
    MissingCredentialError,
    MultiConfigError,
    NoTokenSetError,
)
from ..base.models import ModelConfig, Provider
from ..base.repositories import CredentialStore, get_credential_store
from .defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, TEMPERATURE_MAX, TEMPERATURE_MIN


class ModelConfigBuilder:
    """Collect configuration values for ``provider`` and validate them on build."""

    def __init__(self, provider: Provider, store: Optional[CredentialStore] = None) -> None:
        self._provider = provider
        self._store = store
        self._system_prompt: Optional[str] = None
        self._max_tokens: int = DEFAULT_MAX_TOKENS
        self._temperature: float = DEFAULT_TEMPERATURE
        self._errors: List[ConfigBuildError] = []

    @property
    def errors(self) -> List[ConfigBuildError]:
        """Problems recorded by the setters so far (copy)."""
        return list(self._errors)

    def with_system_prompt(self, prompt: str) -> "ModelConfigBuilder":
        self._system_prompt = prompt
        return self

    def with_max_tokens(self, max_tokens: int) -> "ModelConfigBuilder":
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
            self._errors.append(
                ConfigValidationError(
                    f"Max tokens must be a positive integer. Value supplied: {max_tokens}."
                )
            )
        self._max_tokens = max_tokens
        return self

    def with_temperature(self, temperature: float) -> "ModelConfigBuilder":
        if not TEMPERATURE_MIN <= temperature <= TEMPERATURE_MAX:
            self._errors.append(
                ConfigValidationError(
                    f"Temperature parameter is out of bounds. Value supplied: {temperature}; "
                    "Temperature bounds: [0, 1]."
                )
            )
        self._temperature = temperature
        return self

    def _resolve_token(self, errors: List[ConfigBuildError]) -> Optional[SecretStr]:
        store = self._store or get_credential_store()
        try:
            return store.resolve(self._provider)
        except MissingCredentialError as exc:
            errors.append(NoTokenSetError(exc.message))
            return None

    def build(self) -> ModelConfig:
        """Validate the collected values and return the configuration.

        Raises:
            ConfigBuildError: the single detected problem.
            MultiConfigError: when two or more problems were detected.
        """
        errors = list(self._errors)
        token = self._resolve_token(errors)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise MultiConfigError(errors)
        return ModelConfig(
            provider=self._provider,
            token=token,
            system_prompt=self._system_prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )


__all__ = ["ModelConfigBuilder"]
