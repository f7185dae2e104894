"""URL resolver — maps a repository reference to its REST API endpoint.

Public repositories live under ``https://api.github.com/repos/...``; GitHub
Enterprise instances serve the versioned ``https://{host}/api/v3/repos/...``.
Whether a host is an enterprise instance is decided by the auth token store.
A self-hosted host it does not know about gets the public-style
``https://api.{host}`` guess, which is what error messages will report.
"""

from __future__ import annotations

from collection_metadata.domain.value_objects import ApiEndpoint, RepositoryUrl
from collection_metadata.services.auth_tokens import PUBLIC_HOST, AuthTokenStore

_PUBLIC_API_BASE = "https://api.github.com"


def resolve_api_endpoint(raw: str, auth_tokens: AuthTokenStore) -> ApiEndpoint:
    """Resolve *raw* to an :class:`ApiEndpoint`.  Performs no I/O.

    Raises ``MetadataFetchError`` (``INVALID_GIT_URL``) when *raw* is neither
    an SSH nor a scheme URL with an ``owner/repo`` path.
    """
    url = RepositoryUrl.from_string(raw)
    path = f"repos/{url.full_name}"

    if auth_tokens.is_public(url.host):
        return ApiEndpoint(base_url=f"{_PUBLIC_API_BASE}/{path}", host=PUBLIC_HOST)

    if auth_tokens.is_enterprise(url.host):
        return ApiEndpoint(
            base_url=f"https://{url.host}/api/v3/{path}",
            host=url.host,
            is_enterprise=True,
        )

    return ApiEndpoint(base_url=f"https://api.{url.host}/{path}", host=url.host)
