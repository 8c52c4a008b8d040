"""
aipi Base Package

Exports provider-agnostic models, the adapter contract and factory, the error
taxonomy and the credential store.

Layout:
- Models: provider variants, roles, messages, bundles, configuration
- Interfaces: the ``ProviderAdapter`` contract
- Factory: lazy creation of adapters by provider family
- Repositories: credential resolution and caching
"""

from .errors import (
    ConfigBuildError,
    ConfigValidationError,
    EmptyContentError,
    ErrorCode,
    ExtractContentError,
    MissingCredentialError,
    MultiConfigError,
    NoTokenSetError,
    ParseResponseError,
    RequestError,
    SendError,
    UnsupportedProviderError,
)
from .factory import AdapterFactory, get_adapter
from .interfaces import ProviderAdapter
from .models import (
    AuthScheme,
    ChatGptVersion,
    ClaudeVersion,
    GeminiVersion,
    Message,
    MessageBundle,
    MessageMetadata,
    ModelConfig,
    Provider,
    ProviderFamily,
    Role,
    role_name,
)
from .repositories import CredentialStore, get_credential_store, reset_credential_store
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "ConfigBuildError",
    "ConfigValidationError",
    "EmptyContentError",
    "ErrorCode",
    "ExtractContentError",
    "MissingCredentialError",
    "MultiConfigError",
    "NoTokenSetError",
    "ParseResponseError",
    "RequestError",
    "SendError",
    "UnsupportedProviderError",
    "AdapterFactory",
    "get_adapter",
    "ProviderAdapter",
    "AuthScheme",
    "ChatGptVersion",
    "ClaudeVersion",
    "GeminiVersion",
    "Message",
    "MessageBundle",
    "MessageMetadata",
    "ModelConfig",
    "Provider",
    "ProviderFamily",
    "Role",
    "role_name",
    "CredentialStore",
    "get_credential_store",
    "reset_credential_store",
    "TimeoutConfig",
    "get_timeout_config",
]
