"""
Provider model: families, versions and provider-specific constants.

A :class:`Provider` is a closed variant: one :class:`ProviderFamily` plus a
version drawn from that family's own enumeration. Every provider-specific
constant (wire model identifier, endpoint, API version header, auth scheme)
is a pure function of the variant, answered from per-family tables. Each
table must cover every family; ``aipi.tests.test_provider_model`` enforces it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

from ...config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_MESSAGES_URL,
    ANTHROPIC_MODELS_URL,
    GEMINI_GENERATE_URL_TEMPLATE,
    GEMINI_MODELS_URL,
    OPENAI_CHAT_COMPLETIONS_URL,
    OPENAI_MODELS_URL,
)


class ProviderFamily(str, Enum):
    """Hosted LLM services with a distinct wire contract."""

    CLAUDE = "claude"
    CHATGPT = "chatgpt"
    GEMINI = "gemini"


class ClaudeVersion(str, Enum):
    """Claude models; values are wire model identifiers."""

    SONNET_4 = "claude-sonnet-4-20250514"
    OPUS_4_1 = "claude-opus-4-1-20250805"
    HAIKU_3_5 = "claude-3-5-haiku-20241022"


class ChatGptVersion(str, Enum):
    """ChatGPT models; values are wire model identifiers."""

    GPT_5 = "gpt-5"
    GPT_5_MINI = "gpt-5-mini"


class GeminiVersion(str, Enum):
    """Gemini models; values are wire model identifiers."""

    GEMINI_2_5_PRO = "gemini-2.5-pro"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"


class AuthScheme(str, Enum):
    """How a provider expects the secret token to be attached."""

    API_KEY_HEADER = "x-api-key"
    BEARER = "bearer"
    GOOG_API_KEY_HEADER = "x-goog-api-key"


ProviderVersion = Union[ClaudeVersion, ChatGptVersion, GeminiVersion]

_VERSION_TYPES: Dict[ProviderFamily, Type[Enum]] = {
    ProviderFamily.CLAUDE: ClaudeVersion,
    ProviderFamily.CHATGPT: ChatGptVersion,
    ProviderFamily.GEMINI: GeminiVersion,
}

_TARGET_URLS: Dict[ProviderFamily, Callable[[str], str]] = {
    ProviderFamily.CLAUDE: lambda _model: ANTHROPIC_MESSAGES_URL,
    ProviderFamily.CHATGPT: lambda _model: OPENAI_CHAT_COMPLETIONS_URL,
    ProviderFamily.GEMINI: lambda model: GEMINI_GENERATE_URL_TEMPLATE.format(model=model),
}

_MODELS_URLS: Dict[ProviderFamily, str] = {
    ProviderFamily.CLAUDE: ANTHROPIC_MODELS_URL,
    ProviderFamily.CHATGPT: OPENAI_MODELS_URL,
    ProviderFamily.GEMINI: GEMINI_MODELS_URL,
}

_API_VERSIONS: Dict[ProviderFamily, Optional[str]] = {
    ProviderFamily.CLAUDE: ANTHROPIC_API_VERSION,
    ProviderFamily.CHATGPT: None,
    ProviderFamily.GEMINI: None,
}

_AUTH_SCHEMES: Dict[ProviderFamily, AuthScheme] = {
    ProviderFamily.CLAUDE: AuthScheme.API_KEY_HEADER,
    ProviderFamily.CHATGPT: AuthScheme.BEARER,
    ProviderFamily.GEMINI: AuthScheme.GOOG_API_KEY_HEADER,
}

# Families that take the system prompt as the first history entry instead of
# a dedicated request field.
_SYSTEM_PROMPT_IN_HISTORY: Dict[ProviderFamily, bool] = {
    ProviderFamily.CLAUDE: False,
    ProviderFamily.CHATGPT: True,
    ProviderFamily.GEMINI: False,
}

_FAMILY_TABLES: Tuple[Dict[ProviderFamily, object], ...] = (
    _VERSION_TYPES,
    _TARGET_URLS,
    _MODELS_URLS,
    _API_VERSIONS,
    _AUTH_SCHEMES,
    _SYSTEM_PROMPT_IN_HISTORY,
)


@dataclass(frozen=True)
class Provider:
    """A provider family together with one of its versions.

    Use the named constructors (:meth:`claude`, :meth:`chatgpt`,
    :meth:`gemini`); direct construction validates that ``version`` belongs to
    ``family`` and raises ``ValueError`` otherwise.
    """

    family: ProviderFamily
    version: ProviderVersion

    def __post_init__(self) -> None:
        expected = _VERSION_TYPES[self.family]
        if not isinstance(self.version, expected):
            raise ValueError(
                f"version {self.version!r} does not belong to provider family {self.family.value!r}"
            )

    @classmethod
    def claude(cls, version: ClaudeVersion = ClaudeVersion.SONNET_4) -> "Provider":
        return cls(ProviderFamily.CLAUDE, version)

    @classmethod
    def chatgpt(cls, version: ChatGptVersion = ChatGptVersion.GPT_5) -> "Provider":
        return cls(ProviderFamily.CHATGPT, version)

    @classmethod
    def gemini(cls, version: GeminiVersion = GeminiVersion.GEMINI_2_5_PRO) -> "Provider":
        return cls(ProviderFamily.GEMINI, version)

    @classmethod
    def all(cls) -> List["Provider"]:
        """Every supported (family, version) pair, in declaration order."""
        return [
            cls(family, version)
            for family, versions in _VERSION_TYPES.items()
            for version in versions
        ]

    @classmethod
    def from_model_string(cls, model: str) -> Optional["Provider"]:
        """Return the variant whose wire identifier is ``model``, if any."""
        return _BY_MODEL_STRING.get(model)

    def model_string(self) -> str:
        """Wire model identifier sent in request payloads."""
        return self.version.value

    def target_url(self) -> str:
        """Endpoint that accepts chat requests for this provider."""
        return _TARGET_URLS[self.family](self.model_string())

    def models_url(self) -> str:
        """Endpoint that lists the models served by this provider family."""
        return _MODELS_URLS[self.family]

    def api_version(self) -> Optional[str]:
        """Value of the API version header, for families that require one."""
        return _API_VERSIONS[self.family]

    def auth_scheme(self) -> AuthScheme:
        return _AUTH_SCHEMES[self.family]

    def system_prompt_in_history(self) -> bool:
        """True when the system prompt travels as the leading history message."""
        return _SYSTEM_PROMPT_IN_HISTORY[self.family]

    def __str__(self) -> str:
        return f"{self.family.value}:{self.model_string()}"


_BY_MODEL_STRING: Dict[str, Provider] = {p.model_string(): p for p in Provider.all()}


__all__ = [
    "ProviderFamily",
    "ClaudeVersion",
    "ChatGptVersion",
    "GeminiVersion",
    "AuthScheme",
    "ProviderVersion",
    "Provider",
]
