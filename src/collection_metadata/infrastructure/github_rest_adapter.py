"""GitHub REST API adapter — implements the PackageMetadataProvider port."""

from __future__ import annotations

import asyncio
import logging

import httpx

from collection_metadata.domain.entities import PackageMetadata
from collection_metadata.domain.exceptions import MetadataFetchError
from collection_metadata.services.auth_tokens import AuthTokenStore
from collection_metadata.services.metadata_assembler import assemble
from collection_metadata.services.response_mapper import (
    Failure,
    Outcome,
    classify,
)
from collection_metadata.services.url_resolver import resolve_api_endpoint

logger = logging.getLogger(__name__)

_BASE_HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "package-collection-metadata/1.0",
}


class GitHubMetadataProvider:
    """Concrete ``PackageMetadataProvider`` backed by the GitHub v3 REST API.

    Works against github.com and GitHub Enterprise.  Retries, timeouts and
    connection pooling are left to the injected ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth_tokens: AuthTokenStore | None = None,
    ) -> None:
        self._client = client
        self._auth_tokens = auth_tokens if auth_tokens is not None else AuthTokenStore()

    def api_url(self, repository_url: str) -> str | None:
        """Return the API endpoint for *repository_url*, or ``None`` if it is not a git URL."""
        try:
            return resolve_api_endpoint(repository_url, self._auth_tokens).base_url
        except MetadataFetchError:
            return None

    async def get(self, repository_url: str) -> PackageMetadata:
        """Fetch summary, keywords, readme and license for a repository.

        The repository lookup must succeed; the readme and license lookups
        run concurrently afterwards and only fill in their fields when they
        succeed.
        """
        endpoint = resolve_api_endpoint(repository_url, self._auth_tokens)
        headers = dict(_BASE_HEADERS)
        auth_header = self._auth_tokens.header(endpoint)
        if auth_header:
            name, value = auth_header
            headers[name] = value

        logger.info("Fetching package metadata from %s", endpoint.base_url)
        primary = await self._get(endpoint.base_url, headers)
        if isinstance(primary, Failure):
            raise primary.error

        readme, license_ = await asyncio.gather(
            self._get_optional(endpoint.readme_url, headers),
            self._get_optional(endpoint.license_url, headers),
        )
        return assemble(primary.body, readme, license_)

    async def _get(self, url: str, headers: dict[str, str]) -> Outcome:
        """Perform a GitHub API GET request and classify the response."""
        resp = await self._client.get(url, headers=headers)
        return classify(
            resp.status_code,
            had_auth_header="Authorization" in headers,
            endpoint_url=url,
            body=resp.content,
        )

    async def _get_optional(self, url: str, headers: dict[str, str]) -> Outcome:
        """Like :meth:`_get`, but transport errors become a :class:`Failure` too."""
        try:
            outcome = await self._get(url, headers)
        except httpx.HTTPError as exc:
            logger.debug("Network error fetching %s: %s", url, exc)
            return Failure(MetadataFetchError.unexpected(None, url))

        if isinstance(outcome, Failure):
            logger.debug("Skipping %s: %s", url, outcome.error)
        return outcome
