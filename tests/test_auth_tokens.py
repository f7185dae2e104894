"""Tests for the auth token store and token entry parsing."""

import pytest

from collection_metadata.domain.exceptions import InvalidAuthTokenSpecError
from collection_metadata.domain.value_objects import ApiEndpoint, AuthToken, AuthTokenType
from collection_metadata.services.auth_tokens import AuthTokenStore

from conftest import ENTERPRISE_API_URL, ENTERPRISE_HOST, PUBLIC_API_URL

PUBLIC_ENDPOINT = ApiEndpoint(base_url=PUBLIC_API_URL, host="github.com")
ENTERPRISE_ENDPOINT = ApiEndpoint(
    base_url=ENTERPRISE_API_URL, host=ENTERPRISE_HOST, is_enterprise=True
)


class TestAuthTokenFromString:
    def test_parses_github_entry(self):
        token = AuthToken.from_string("github:github.com:ghp_abc")
        assert token == AuthToken(AuthTokenType.GITHUB, "github.com", "ghp_abc")

    @pytest.mark.parametrize("kind", ["github-enterprise", "githubEnterprise"])
    def test_parses_enterprise_entry(self, kind):
        token = AuthToken.from_string(f"{kind}:{ENTERPRISE_HOST}:bar")
        assert token.type is AuthTokenType.GITHUB_ENTERPRISE
        assert token.host == ENTERPRISE_HOST

    def test_secret_may_contain_colons(self):
        token = AuthToken.from_string("github-enterprise:ghe.corp:user:pass")
        assert token.secret == "user:pass"

    @pytest.mark.parametrize(
        "spec", ["github.com:abc", "github::abc", "gitlab:gitlab.com:abc", "abc"]
    )
    def test_rejects_malformed_entries(self, spec):
        with pytest.raises(InvalidAuthTokenSpecError):
            AuthToken.from_string(spec)


class TestAuthTokenStore:
    def test_public_host_uses_token_scheme(self, github_tokens):
        assert github_tokens.header(PUBLIC_ENDPOINT) == ("Authorization", "token foo")

    def test_enterprise_host_uses_basic_scheme(self, enterprise_tokens):
        assert enterprise_tokens.header(ENTERPRISE_ENDPOINT) == ("Authorization", "Basic bar")

    def test_no_token_means_no_header(self):
        store = AuthTokenStore()
        assert store.header(PUBLIC_ENDPOINT) is None
        assert store.header(ENTERPRISE_ENDPOINT) is None

    def test_public_host_token_matches_any_case(self):
        store = AuthTokenStore.from_strings(["github:GitHub.com:foo"])
        assert store.token_for(AuthTokenType.GITHUB, "github.com") == "foo"
        assert store.header(PUBLIC_ENDPOINT) == ("Authorization", "token foo")

    def test_enterprise_host_token_keeps_exact_case(self, enterprise_tokens):
        assert enterprise_tokens.token_for(AuthTokenType.GITHUB_ENTERPRISE, ENTERPRISE_HOST) == "bar"
        assert enterprise_tokens.token_for(AuthTokenType.GITHUB_ENTERPRISE, "githubenterprise.foo") is None

    def test_scheme_follows_host_classification(self):
        # A public-type token registered for an enterprise host is not used there.
        store = AuthTokenStore([AuthToken(AuthTokenType.GITHUB, ENTERPRISE_HOST, "foo")])
        assert store.header(ENTERPRISE_ENDPOINT) is None

    def test_classification(self, enterprise_tokens):
        assert enterprise_tokens.is_enterprise(ENTERPRISE_HOST)
        assert not enterprise_tokens.is_enterprise("github.com")
        assert not enterprise_tokens.is_enterprise("githubenterprise.foo")

    def test_public_host_is_never_enterprise(self):
        store = AuthTokenStore(
            [AuthToken(AuthTokenType.GITHUB_ENTERPRISE, "github.com", "x")],
            enterprise_hosts=["github.com"],
        )
        assert not store.is_enterprise("github.com")

    def test_from_strings_skips_blank_entries(self):
        store = AuthTokenStore.from_strings(
            ["github:github.com:foo", " ", f"github-enterprise:{ENTERPRISE_HOST}:bar"]
        )
        assert len(store) == 2
        assert store.token_for(AuthTokenType.GITHUB, "github.com") == "foo"
        assert store.token_for(AuthTokenType.GITHUB_ENTERPRISE, ENTERPRISE_HOST) == "bar"

    def test_store_is_read_only(self, github_tokens):
        with pytest.raises(TypeError):
            github_tokens._tokens[(AuthTokenType.GITHUB, "evil.com")] = "x"
