"""
Google (Gemini family) provider package.

Exports:
- GeminiAdapter: ProviderAdapter placeholder; chat is not supported
"""

from .adapter import GeminiAdapter

__all__ = ["GeminiAdapter"]
