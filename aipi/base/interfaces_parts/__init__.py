"""Interfaces parts package: one Protocol per module."""

from .provider_adapter import ProviderAdapter

__all__ = ["ProviderAdapter"]
