"""
Anthropic (Claude family) provider package.

Exports:
- ClaudeAdapter: ProviderAdapter for the Messages API
"""

from .adapter import ClaudeAdapter

__all__ = ["ClaudeAdapter"]
