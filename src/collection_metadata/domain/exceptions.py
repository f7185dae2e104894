"""Domain exceptions.

Metadata fetch failures form a closed set of kinds carried by a single
exception type, so callers can match on the exact kind plus the endpoint URL.
The interface layer translates each kind to an HTTP status code.
"""

from __future__ import annotations

from enum import Enum


class CollectionMetadataError(Exception):
    """Base exception for the entire application."""


# ── Configuration ───────────────────────────────────────────────────────────


class InvalidAuthTokenSpecError(CollectionMetadataError):
    """An auth token entry is not of the form ``type:host:secret``."""


# ── Metadata fetch errors ───────────────────────────────────────────────────


class FetchErrorKind(str, Enum):
    """Every way a metadata fetch can fail."""

    INVALID_GIT_URL = "invalid_git_url"
    INVALID_AUTH_TOKEN = "invalid_auth_token"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


_MESSAGES = {
    FetchErrorKind.INVALID_GIT_URL: "Invalid git URL: '{url}'.",
    FetchErrorKind.INVALID_AUTH_TOKEN: "Authentication token rejected by {url}.",
    FetchErrorKind.PERMISSION_DENIED: "Permission denied for {url}.",
    FetchErrorKind.NOT_FOUND: "Repository not found: {url}.",
    FetchErrorKind.UNEXPECTED: "Unexpected HTTP {status_code} from {url}.",
}


class MetadataFetchError(CollectionMetadataError):
    """A metadata fetch failed with one of the :class:`FetchErrorKind` kinds.

    ``url`` is the API endpoint that produced the failure, or the raw
    repository reference for ``INVALID_GIT_URL``.  ``status_code`` is only
    set for ``UNEXPECTED``.
    """

    def __init__(
        self, kind: FetchErrorKind, url: str, status_code: int | None = None
    ) -> None:
        self.kind = kind
        self.url = url
        self.status_code = status_code
        if kind is FetchErrorKind.UNEXPECTED and status_code is None:
            message = f"Request to {url} failed."
        else:
            message = _MESSAGES[kind].format(url=url, status_code=status_code)
        super().__init__(message)

    @classmethod
    def invalid_git_url(cls, url: str) -> MetadataFetchError:
        return cls(FetchErrorKind.INVALID_GIT_URL, url)

    @classmethod
    def invalid_auth_token(cls, url: str) -> MetadataFetchError:
        return cls(FetchErrorKind.INVALID_AUTH_TOKEN, url)

    @classmethod
    def permission_denied(cls, url: str) -> MetadataFetchError:
        return cls(FetchErrorKind.PERMISSION_DENIED, url)

    @classmethod
    def not_found(cls, url: str) -> MetadataFetchError:
        return cls(FetchErrorKind.NOT_FOUND, url)

    @classmethod
    def unexpected(cls, status_code: int | None, url: str) -> MetadataFetchError:
        return cls(FetchErrorKind.UNEXPECTED, url, status_code)

    def _key(self) -> tuple[FetchErrorKind, str, int | None]:
        return (self.kind, self.url, self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataFetchError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self.status_code is None:
            return f"MetadataFetchError({self.kind.value}, {self.url!r})"
        return f"MetadataFetchError({self.kind.value}, {self.url!r}, {self.status_code})"
