"""Shared helpers: canned GitHub responses and scripted httpx transports."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from collection_metadata.domain.value_objects import AuthToken, AuthTokenType
from collection_metadata.services.auth_tokens import AuthTokenStore

FIXTURES = Path(__file__).parent / "fixtures"

ENTERPRISE_HOST = "githubEnterprise.foo"

PUBLIC_API_URL = "https://api.github.com/repos/octocat/Hello-World"
ENTERPRISE_API_URL = f"https://{ENTERPRISE_HOST}/api/v3/repos/octocat/Hello-World"


def read_github_data(filename: str, enterprise: bool = False) -> bytes:
    directory = "github_enterprise" if enterprise else "github"
    return (FIXTURES / directory / filename).read_bytes()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable) -> None:
        self.requests: list[httpx.Request] = []

        async def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        super().__init__(_handler)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


def github_handler(
    api_url: str,
    authorization: str | None,
    enterprise: bool = False,
    fallback_status: int | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Serve the Hello-World fixtures for *api_url*, like the real API would.

    Requests without the expected ``Authorization`` header get a 401.  Any
    other URL is answered with *fallback_status*, or fails the test.
    """
    # httpx normalises hosts to lower case, so compare normalised URLs.
    primary = str(httpx.URL(api_url))
    routes = {
        primary: "metadata.json",
        str(httpx.URL(f"{api_url}/readme")): "readme.json",
        str(httpx.URL(f"{api_url}/license")): "license.json",
    }

    def handler(request: httpx.Request) -> httpx.Response:
        if request.headers.get("Authorization") != authorization:
            return httpx.Response(401)
        url = str(request.url)
        if fallback_status is not None and url != primary:
            return httpx.Response(fallback_status)
        if request.method == "GET" and url in routes:
            return httpx.Response(200, content=read_github_data(routes[url], enterprise))
        pytest.fail(f"unexpected request {request.method} {url}")

    return handler


@pytest.fixture
def github_tokens() -> AuthTokenStore:
    return AuthTokenStore([AuthToken(AuthTokenType.GITHUB, "github.com", "foo")])


@pytest.fixture
def enterprise_tokens() -> AuthTokenStore:
    return AuthTokenStore(
        [AuthToken(AuthTokenType.GITHUB_ENTERPRISE, ENTERPRISE_HOST, "bar")]
    )
