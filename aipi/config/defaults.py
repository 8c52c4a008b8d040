"""aipi.config.defaults
====================

Central place for small, stable default values used across the aipi package.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters and the session free of magic literals.

This module intentionally avoids importing from other aipi packages to prevent
circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Model configuration ----
# Applied by ModelConfigBuilder when the caller never sets them.
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.5
# Inclusive bounds accepted for the sampling temperature.
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 1.0

# ---- Anthropic (Claude family) ----
ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_MODELS_URL = "https://api.anthropic.com/v1/models"
ANTHROPIC_API_VERSION = "2023-06-01"

# ---- OpenAI (ChatGPT family) ----
OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODELS_URL = "https://api.openai.com/v1/models"

# ---- Google (Gemini family) ----
# ``{model}`` is replaced by the wire model identifier.
GEMINI_GENERATE_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)
GEMINI_MODELS_URL = "https://generativelanguage.googleapis.com/v1beta/models"

# ---- Credential sources ----
# .env file consulted on every credential (re)load; overridable via DOTENV_FILE.
DOTENV_DEFAULT_PATH = ".env"


__all__ = [
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "TEMPERATURE_MIN",
    "TEMPERATURE_MAX",
    "ANTHROPIC_MESSAGES_URL",
    "ANTHROPIC_MODELS_URL",
    "ANTHROPIC_API_VERSION",
    "OPENAI_CHAT_COMPLETIONS_URL",
    "OPENAI_MODELS_URL",
    "GEMINI_GENERATE_URL_TEMPLATE",
    "GEMINI_MODELS_URL",
    "DOTENV_DEFAULT_PATH",
]
