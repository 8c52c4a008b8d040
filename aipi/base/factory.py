"""Adapter Factory utilities.

Purpose
-------
Centralize creation of :class:`~aipi.base.interfaces.ProviderAdapter`
instances for a provider family. Adapter modules are imported lazily using
``importlib`` so importing the session layer does not load every family.

External dependencies
---------------------
- Standard library only (``importlib``).

Fallback semantics
------------------
- None. The factory either returns an adapter or raises
  :class:`~aipi.base.errors.UnsupportedProviderError`.
"""

from __future__ import annotations

import threading
from importlib import import_module
from typing import Dict

from .errors import ErrorCode, UnsupportedProviderError
from .interfaces import ProviderAdapter
from .models import Provider, ProviderFamily


class AdapterFactory:
    """Create adapters based on the provider family.

    Design notes
    ------------
    - ``_ADAPTERS`` maps each family to an import path and class name; every
      family must be listed.
    - Adapters are stateless, so :func:`get_adapter` hands out one cached
      instance per family.
    """

    _ADAPTERS: Dict[ProviderFamily, Dict[str, str]] = {
        ProviderFamily.CLAUDE: {"module": "aipi.anthropic.adapter", "class": "ClaudeAdapter"},
        ProviderFamily.CHATGPT: {"module": "aipi.openai.adapter", "class": "ChatGptAdapter"},
        ProviderFamily.GEMINI: {"module": "aipi.gemini.adapter", "class": "GeminiAdapter"},
    }

    @classmethod
    def create(cls, provider: Provider) -> ProviderAdapter:
        """Return a new adapter for ``provider``'s family.

        Raises
        ------
        UnsupportedProviderError
            If the family is not registered, or its module or class cannot be
            loaded.
        """
        family = provider.family
        entry = cls._ADAPTERS.get(family)
        if entry is None:
            raise UnsupportedProviderError(
                code=ErrorCode.UNSUPPORTED_PROVIDER,
                message=f"no adapter registered for provider family '{family.value}'",
                provider=family.value,
                model=provider.model_string(),
            )
        try:
            module = import_module(entry["module"])
            adapter_cls = getattr(module, entry["class"])
        except (ImportError, AttributeError) as e:
            raise UnsupportedProviderError(
                code=ErrorCode.UNSUPPORTED_PROVIDER,
                message=f"failed to load adapter {entry['module']}.{entry['class']}: {e}",
                provider=family.value,
                model=provider.model_string(),
                raw=e,
            ) from e
        return adapter_cls()


_cache: Dict[ProviderFamily, ProviderAdapter] = {}
_cache_lock = threading.Lock()


def get_adapter(provider: Provider) -> ProviderAdapter:
    """Return the shared adapter instance for ``provider``'s family."""
    with _cache_lock:
        adapter = _cache.get(provider.family)
        if adapter is None:
            adapter = AdapterFactory.create(provider)
            _cache[provider.family] = adapter
        return adapter


__all__ = ["AdapterFactory", "get_adapter"]
