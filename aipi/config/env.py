"""aipi.config.env
===============

Environment variable mapping and helpers for provider credentials.

Purpose
-------
- Provide a single source of truth for mapping provider families to their
  environment variable names (canonical and aliases).
- Offer small utilities to look up provider API keys consistently.

Design Notes
------------
- Canonical mapping is defined in ``ENV_MAP``. Families that accept more than
  one variable list them in ``ENV_ALIASES`` with the canonical name first to
  establish precedence.
- Helpers never raise on unknown families or unset variables; the credential
  store decides how to report a miss.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider family -> env var mapping
ENV_MAP: Dict[str, str] = {
    "claude": "API_KEY_ANTHROPIC",
    "chatgpt": "API_KEY_OPENAI",
    "gemini": "API_KEY_GOOGLE",
}

# Family -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "claude": ("API_KEY_ANTHROPIC", "ANTHROPIC_API_KEY"),
    "chatgpt": ("API_KEY_OPENAI", "OPENAI_API_KEY"),
    "gemini": ("API_KEY_GOOGLE", "GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(family: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider family."""
    return ENV_MAP.get(family.lower()) if family else None


def get_env_var_candidates(family: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a family, canonical first."""
    f = (family or "").lower()
    canonical = ENV_MAP.get(f)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(f, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(family: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider family from the process environment.

    Returns:
        ``(value, env_var_used)`` for the first non-empty candidate, or
        ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(family):
        if val := os.environ.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
