"""
Provider-agnostic interfaces (Protocols) for aipi.

Re-exports the single-class modules under ``aipi.base.interfaces_parts`` to
keep one stable import path.
"""

from __future__ import annotations

from .interfaces_parts import ProviderAdapter

__all__ = ["ProviderAdapter"]
