"""Response mapper — classifies an API response by status code.

The same mapping is applied to every request; the caller decides whether a
:class:`Failure` is fatal (primary lookup) or just means a missing field
(readme / license).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from collection_metadata.domain.exceptions import MetadataFetchError


@dataclass(frozen=True, slots=True)
class Success:
    """HTTP 200 with a JSON object body."""

    body: dict[str, Any]


@dataclass(frozen=True, slots=True)
class Failure:
    error: MetadataFetchError


Outcome = Success | Failure


def classify(
    status_code: int,
    had_auth_header: bool,
    endpoint_url: str,
    body: bytes | str = b"",
) -> Outcome:
    """Map a response to :class:`Success` or a :class:`Failure` of the right kind."""
    if status_code == 200:
        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict):
            return Success(data)
        return Failure(MetadataFetchError.unexpected(status_code, endpoint_url))

    if status_code == 401:
        if had_auth_header:
            return Failure(MetadataFetchError.invalid_auth_token(endpoint_url))
        return Failure(MetadataFetchError.permission_denied(endpoint_url))

    if status_code == 404:
        return Failure(MetadataFetchError.not_found(endpoint_url))

    return Failure(MetadataFetchError.unexpected(status_code, endpoint_url))
