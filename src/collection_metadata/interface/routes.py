"""API routes — thin controllers that delegate to the metadata provider."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from collection_metadata.domain.ports.metadata_provider import PackageMetadataProvider
from collection_metadata.interface.dependencies import get_provider
from collection_metadata.interface.schemas import (
    ErrorResponse,
    MetadataRequest,
    MetadataResponse,
)

router = APIRouter()


@router.post(
    "/metadata",
    response_model=MetadataResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Auth token rejected upstream"},
        403: {"model": ErrorResponse, "description": "Repository requires authentication"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        422: {"model": ErrorResponse, "description": "Invalid git URL"},
        502: {"model": ErrorResponse, "description": "Unexpected upstream response"},
    },
)
async def metadata(
    body: MetadataRequest,
    provider: PackageMetadataProvider = Depends(get_provider),
) -> MetadataResponse:
    """Look up summary, keywords, readme and license for a repository."""
    result = await provider.get(body.repository_url)
    return MetadataResponse.from_entity(result)
