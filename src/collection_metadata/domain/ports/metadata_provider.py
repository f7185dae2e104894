"""Port: package metadata provider — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from collection_metadata.domain.entities import PackageMetadata


class PackageMetadataProvider(Protocol):
    """Abstract contract for looking up a package's descriptive metadata."""

    async def get(self, repository_url: str) -> PackageMetadata:
        """Return metadata for the repository, or raise ``MetadataFetchError``."""
        ...
