"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from collection_metadata.services.auth_tokens import PUBLIC_HOST, AuthTokenStore


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    ``auth_tokens`` holds comma-separated ``type:host:token`` entries, e.g.
    ``github:github.com:ghp_xxx,github-enterprise:ghe.example.com:yyy``.
    ``enterprise_hosts`` lists hosts to treat as GitHub Enterprise even when
    no token is registered for them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    auth_tokens: SecretStr | None = None
    enterprise_hosts: str = ""
    request_timeout: float = 30.0
    http_retries: int = 0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def auth_token_specs(self) -> list[str]:
        specs: list[str] = []
        if self.github_token:
            specs.append(f"github:{PUBLIC_HOST}:{self.github_token.get_secret_value()}")
        if self.auth_tokens:
            specs.extend(self.auth_tokens.get_secret_value().split(","))
        return specs

    def enterprise_host_list(self) -> list[str]:
        return [h.strip() for h in self.enterprise_hosts.split(",") if h.strip()]

    def build_auth_token_store(self) -> AuthTokenStore:
        return AuthTokenStore.from_strings(
            self.auth_token_specs(), enterprise_hosts=self.enterprise_host_list()
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
