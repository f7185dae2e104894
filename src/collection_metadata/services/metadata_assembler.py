"""Metadata assembler — merges the repository, readme and license lookups.

Only runs once the repository lookup succeeded, so it has no failure path:
anything missing from the optional lookups is simply left out.
"""

from __future__ import annotations

from typing import Any

from collection_metadata.domain.entities import License, PackageMetadata
from collection_metadata.services.response_mapper import Outcome, Success


def assemble(
    primary_body: dict[str, Any],
    readme_outcome: Outcome,
    license_outcome: Outcome,
) -> PackageMetadata:
    """Build :class:`PackageMetadata` from the three lookup results."""
    return PackageMetadata(
        summary=_string(primary_body.get("description")),
        keywords=_keywords(primary_body.get("topics")),
        readme_url=_readme_url(readme_outcome),
        license=_license(license_outcome),
    )


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _keywords(topics: Any) -> tuple[str, ...] | None:
    if not isinstance(topics, list):
        return None
    keywords = tuple(t for t in topics if isinstance(t, str))
    return keywords or None


def _readme_url(outcome: Outcome) -> str | None:
    if not isinstance(outcome, Success):
        return None
    return _string(outcome.body.get("download_url"))


def _license(outcome: Outcome) -> License | None:
    """``license.spdx_id`` (else ``license.name``) plus the raw ``download_url``."""
    if not isinstance(outcome, Success):
        return None
    info = outcome.body.get("license")
    if not isinstance(info, dict):
        return None
    name = _string(info.get("spdx_id")) or _string(info.get("name"))
    url = _string(outcome.body.get("download_url"))
    if not name or not url:
        return None
    return License(name=name, url=url)
