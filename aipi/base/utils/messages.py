"""Message projection helpers shared across adapters.

Helpers here are side-effect free and operate on provider-agnostic models
only. Role spelling is delegated to :func:`aipi.base.models.role_name`.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from ..models import MessageBundle, Provider, role_name


def project_message(provider: Provider, bundle: MessageBundle) -> Dict[str, str]:
    """Return ``{"role", "content"}`` for one bundle in ``provider``'s spelling."""
    msg = bundle.message
    return {"role": role_name(provider, msg.role), "content": msg.content}


def project_messages(
    provider: Provider,
    history: Sequence[MessageBundle],
    next_message: MessageBundle,
) -> List[Dict[str, str]]:
    """Project every history bundle, then ``next_message``, preserving order.

    The system prompt is not special-cased: families that carry it in history
    already hold a SYSTEM bundle at position zero, and families that carry it
    in a dedicated field never have one.
    """
    projected = [project_message(provider, b) for b in history]
    projected.append(project_message(provider, next_message))
    return projected


__all__ = ["project_message", "project_messages"]
