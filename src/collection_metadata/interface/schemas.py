"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from collection_metadata.domain.entities import PackageMetadata


class MetadataRequest(BaseModel):
    """Request body for ``POST /metadata``."""

    repository_url: str

    @field_validator("repository_url")
    @classmethod
    def _must_not_be_empty(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repository_url must not be empty."
            raise ValueError(msg)
        return stripped


class LicenseResponse(BaseModel):
    name: str
    url: str


class MetadataResponse(BaseModel):
    """Successful response from ``POST /metadata``."""

    summary: str | None = None
    keywords: list[str] | None = None
    readme_url: str | None = None
    license: LicenseResponse | None = None

    @classmethod
    def from_entity(cls, metadata: PackageMetadata) -> MetadataResponse:
        return cls(
            summary=metadata.summary,
            keywords=list(metadata.keywords) if metadata.keywords is not None else None,
            readme_url=metadata.readme_url,
            license=(
                LicenseResponse(name=metadata.license.name, url=metadata.license.url)
                if metadata.license
                else None
            ),
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    kind: str
    message: str
    url: str | None = None
