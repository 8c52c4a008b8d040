"""
OpenAI (ChatGPT family) provider package.

Exports:
- ChatGptAdapter: ProviderAdapter for Chat Completions
"""

from .adapter import ChatGptAdapter

__all__ = ["ChatGptAdapter"]
