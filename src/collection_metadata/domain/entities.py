"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class License:
    """A repository license: SPDX-style name plus a raw-content URL."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class PackageMetadata:
    """Descriptive metadata for a package, as published in a collection."""

    summary: str | None = None
    keywords: tuple[str, ...] | None = None
    readme_url: str | None = None
    license: License | None = None
