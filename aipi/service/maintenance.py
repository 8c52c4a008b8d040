"""Model listing check for maintainers.

Purpose:
    Ask each provider which models it currently serves and report the ones
    that have no :class:`~aipi.base.models.Provider` variant. Run it after a
    provider release to see which versions are missing locally.

Entry points:
    - ``aipi-maintenance`` console script (:func:`main`).
    - :func:`fetch_and_display_metadata` for programmatic use.

External dependencies:
    - ``httpx`` for the listing requests, ``pydantic`` for the response shape.

Failure semantics:
    Errors propagate: a missing credential raises ``MissingCredentialError``,
    transport and status failures raise ``RequestError``, an unexpected body
    raises ``ParseResponseError``. There are no retries or cached fallbacks.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

import httpx
from pydantic import BaseModel, ValidationError

from ..base.constants import ERROR_BODY_PREVIEW_CHARS
from ..base.errors import ErrorCode, ParseResponseError, RequestError
from ..base.http import auth_headers, create_async_client
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Provider, ProviderFamily
from ..base.repositories import CredentialStore, get_credential_store

_LOGGER = get_logger("aipi.maintenance")

DEFAULT_FAMILIES: Sequence[ProviderFamily] = (ProviderFamily.CLAUDE, ProviderFamily.CHATGPT)


class ModelDescriptor(BaseModel):
    id: str


class ModelList(BaseModel):
    data: List[ModelDescriptor]


def _listing_provider(family: ProviderFamily) -> Provider:
    """Any variant of ``family``; only family-level constants are used."""
    return next(p for p in Provider.all() if p.family is family)


def find_unsupported_models(model_ids: Iterable[str]) -> List[str]:
    """Return the ids, in input order, that match no local Provider variant."""
    return [mid for mid in model_ids if Provider.from_model_string(mid) is None]


async def fetch_model_ids(
    family: ProviderFamily,
    store: Optional[CredentialStore] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[str]:
    """GET the family's models endpoint and return the listed model ids."""
    provider = _listing_provider(family)
    token = (store or get_credential_store()).resolve(provider)
    headers = auth_headers(provider, token)
    owns_client = client is None
    http = client if client is not None else create_async_client()
    try:
        try:
            response = await http.get(provider.models_url(), headers=headers)
        except httpx.HTTPError as e:
            raise RequestError(
                code=ErrorCode.REQUEST,
                message=str(e) or type(e).__name__,
                provider=family.value,
                raw=e,
            ) from e
    finally:
        if owns_client:
            await http.aclose()
    if not response.is_success:
        raise RequestError(
            code=ErrorCode.HTTP_STATUS,
            message=f"HTTP {response.status_code}: {response.text[:ERROR_BODY_PREVIEW_CHARS]}",
            provider=family.value,
            status_code=response.status_code,
        )
    try:
        listing = ModelList.model_validate_json(response.text)
    except ValidationError as e:
        raise ParseResponseError(
            code=ErrorCode.PARSE_RESPONSE,
            message=f"unexpected model listing body: {e.error_count()} validation error(s)",
            provider=family.value,
            raw=e,
        ) from e
    return [m.id for m in listing.data]


async def check_provider(
    family: ProviderFamily,
    store: Optional[CredentialStore] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[str]:
    """Fetch ``family``'s model list and log each unsupported model."""
    ids = await fetch_model_ids(family, store=store, client=client)
    unsupported = find_unsupported_models(ids)
    ctx = LogContext(provider=family.value)
    for mid in unsupported:
        log_event(_LOGGER, "maintenance.unsupported_model", ctx, level=logging.WARNING, model_id=mid)
    log_event(_LOGGER, "maintenance.checked", ctx, listed=len(ids), unsupported=len(unsupported))
    return unsupported


async def fetch_and_display_metadata(
    families: Sequence[ProviderFamily] = DEFAULT_FAMILIES,
    store: Optional[CredentialStore] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Check every family in order and print a short report per family."""
    report = {}
    for family in families:
        unsupported = await check_provider(family, store=store, client=client)
        report[family] = unsupported
        print(f"{family.value}: {len(unsupported)} unsupported model(s)")
        for mid in unsupported:
            print(f"  - {mid}")
    return report


def main() -> int:
    """Console entry point for ``aipi-maintenance``."""
    asyncio.run(fetch_and_display_metadata())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())


__all__ = [
    "DEFAULT_FAMILIES",
    "ModelDescriptor",
    "ModelList",
    "find_unsupported_models",
    "fetch_model_ids",
    "check_provider",
    "fetch_and_display_metadata",
    "main",
]
