"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from collection_metadata.domain.exceptions import (
    InvalidAuthTokenSpecError,
    MetadataFetchError,
)

# git@github.com:owner/repo.git
_SSH_URL_RE = re.compile(
    r"^(?P<user>[^@/:\s]+)@(?P<host>[^@/:\s]+):"
    r"(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$"
)
# https://github.com/owner/repo(.git), ssh://git@github.com/owner/repo
_SCHEME_URL_RE = re.compile(
    r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://(?:[^@/\s]+@)?(?P<host>[^@/:\s]+)/"
    r"(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepositoryUrl:
    """A git repository reference split into *host*, *owner* and *repo*.

    Accepts the SSH shorthand ``git@github.com:octocat/Hello-World.git`` and
    scheme URLs such as ``https://github.com/octocat/Hello-World``.  A
    trailing ``.git`` is dropped from *repo*.
    """

    host: str
    owner: str
    repo: str

    @classmethod
    def from_string(cls, url: str) -> RepositoryUrl:
        """Parse a raw repository reference, raising ``INVALID_GIT_URL``."""
        stripped = url.strip()
        match = _SSH_URL_RE.match(stripped) or _SCHEME_URL_RE.match(stripped)
        if not match:
            raise MetadataFetchError.invalid_git_url(url)
        return cls(
            host=match["host"],
            owner=match["owner"],
            repo=match["repo"],
        )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class ApiEndpoint:
    """REST API location of one repository."""

    base_url: str
    host: str
    is_enterprise: bool = False

    @property
    def readme_url(self) -> str:
        return f"{self.base_url}/readme"

    @property
    def license_url(self) -> str:
        return f"{self.base_url}/license"


class AuthTokenType(str, Enum):
    """Host class a token belongs to; fixes the ``Authorization`` scheme."""

    GITHUB = "github"
    GITHUB_ENTERPRISE = "github-enterprise"

    @property
    def scheme(self) -> str:
        return "token" if self is AuthTokenType.GITHUB else "Basic"


_TOKEN_TYPE_ALIASES = {
    "github": AuthTokenType.GITHUB,
    "github-enterprise": AuthTokenType.GITHUB_ENTERPRISE,
    "githubenterprise": AuthTokenType.GITHUB_ENTERPRISE,
}


@dataclass(frozen=True, slots=True)
class AuthToken:
    """A secret registered for one host."""

    type: AuthTokenType
    host: str
    secret: str

    @classmethod
    def from_string(cls, spec: str) -> AuthToken:
        """Parse ``type:host:secret``, e.g. ``github:github.com:ghp_abc``.

        The secret may itself contain colons.
        """
        parts = spec.strip().split(":", 2)
        if len(parts) != 3 or not all(parts):
            raise InvalidAuthTokenSpecError(
                "Invalid auth token entry. Expected format: <type>:<host>:<token>"
            )
        kind, host, secret = parts
        token_type = _TOKEN_TYPE_ALIASES.get(kind.lower())
        if token_type is None:
            raise InvalidAuthTokenSpecError(
                f"Unknown auth token type '{kind}'. "
                "Expected 'github' or 'github-enterprise'."
            )
        return cls(type=token_type, host=host, secret=secret)
