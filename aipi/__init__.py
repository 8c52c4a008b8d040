"""aipi package

Conversational client for hosted LLM providers behind one local data model.

Purpose:
    Build a validated :class:`ModelConfig`, open a :class:`ConversationSession`
    and exchange :class:`Message` turns; the session translates history to the
    selected provider's wire format and keeps it consistent across failures.

Public API (re-exported):
    - Version: ``__version__``
    - Configuration: :class:`ModelConfigBuilder`, :class:`ModelConfig`
    - Provider model: :class:`Provider`, :class:`ProviderFamily` and the
      per-family version enums, :class:`Role`
    - Messages: :class:`Message`, :class:`MessageBundle`
    - Session: :class:`ConversationSession`
    - Errors: :class:`ErrorCode` and the exception taxonomy

Example:
    >>> config = ModelConfigBuilder(Provider.claude()).with_temperature(0.2).build()
    >>> async with ConversationSession(config) as session:
    ...     await session.send_tracked(Message.from_user("Hello"))
"""

from .base.errors import (
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
from .base.models import (
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
)
from .base.repositories import CredentialStore
from .config.builder import ModelConfigBuilder
from .service.session import ConversationSession

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "CredentialStore",
    "ModelConfigBuilder",
    "ConversationSession",
]
