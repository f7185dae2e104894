"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

import httpx

from collection_metadata.infrastructure.config import Settings, get_settings
from collection_metadata.infrastructure.github_rest_adapter import GitHubMetadataProvider
from collection_metadata.services.auth_tokens import AuthTokenStore

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_auth_tokens: AuthTokenStore | None = None


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Client shared by all fetches.

    Redirects are followed: GitHub answers renamed or transferred repositories
    with a 301 to their new ``/repos/...`` location.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        transport=httpx.AsyncHTTPTransport(retries=settings.http_retries),
        follow_redirects=True,
    )


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _auth_tokens  # noqa: PLW0603

    settings = get_settings()
    _auth_tokens = settings.build_auth_token_store()
    _http_client = build_http_client(settings)
    logger.info("Loaded %d auth token(s)", len(_auth_tokens))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _auth_tokens  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _auth_tokens = None


def get_provider() -> GitHubMetadataProvider:
    """Build the metadata provider around the shared client and token store."""
    assert _http_client is not None, "startup() was not called"
    assert _auth_tokens is not None, "startup() was not called"

    return GitHubMetadataProvider(client=_http_client, auth_tokens=_auth_tokens)
