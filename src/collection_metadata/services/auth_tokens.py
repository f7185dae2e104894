"""Auth token store — host → secret lookup and ``Authorization`` header selection."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from collection_metadata.domain.value_objects import ApiEndpoint, AuthToken, AuthTokenType

PUBLIC_HOST = "github.com"


class AuthTokenStore:
    """Read-only collection of auth tokens, keyed by ``(type, host)``.

    Populated once at construction; safe to share across concurrent fetches.

    A host is classified as enterprise when an enterprise token is registered
    for that exact host.  ``enterprise_hosts`` optionally lists hosts to treat
    as enterprise even without a token; it is empty by default, in which case
    an unregistered self-hosted instance cannot be recognised.
    """

    def __init__(
        self,
        tokens: Iterable[AuthToken] = (),
        enterprise_hosts: Iterable[str] = (),
    ) -> None:
        self._tokens = MappingProxyType(
            {(t.type, self._normalise_host(t.host)): t.secret for t in tokens}
        )
        self._enterprise_hosts = frozenset(enterprise_hosts)

    @classmethod
    def from_strings(
        cls, specs: Iterable[str], enterprise_hosts: Iterable[str] = ()
    ) -> AuthTokenStore:
        """Build a store from ``type:host:secret`` entries."""
        return cls(
            (AuthToken.from_string(spec) for spec in specs if spec.strip()),
            enterprise_hosts=enterprise_hosts,
        )

    def __len__(self) -> int:
        return len(self._tokens)

    @staticmethod
    def is_public(host: str) -> bool:
        return host.lower() == PUBLIC_HOST

    def is_enterprise(self, host: str) -> bool:
        if self.is_public(host):
            return False
        return (
            (AuthTokenType.GITHUB_ENTERPRISE, host) in self._tokens
            or host in self._enterprise_hosts
        )

    @classmethod
    def _normalise_host(cls, host: str) -> str:
        # Only the public host is matched case-insensitively.
        return PUBLIC_HOST if cls.is_public(host) else host

    def token_for(self, token_type: AuthTokenType, host: str) -> str | None:
        return self._tokens.get((token_type, self._normalise_host(host)))

    def header(self, endpoint: ApiEndpoint) -> tuple[str, str] | None:
        """Return the ``Authorization`` header for *endpoint*, if a token is registered."""
        token_type = (
            AuthTokenType.GITHUB_ENTERPRISE if endpoint.is_enterprise else AuthTokenType.GITHUB
        )
        secret = self.token_for(token_type, endpoint.host)
        if secret is None:
            return None
        return "Authorization", f"{token_type.scheme} {secret}"
