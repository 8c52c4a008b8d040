"""Repositories for aipi: credential resolution and caching."""

from .keys import CredentialStore, get_credential_store, reset_credential_store

__all__ = ["CredentialStore", "get_credential_store", "reset_credential_store"]
