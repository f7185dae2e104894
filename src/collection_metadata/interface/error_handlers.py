"""Global exception handlers — translate domain errors to HTTP responses.

Each fetch error kind maps to a specific HTTP status code and the
``{"status": "error", "kind": ..., "message": ..., "url": ...}`` envelope.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from collection_metadata.domain.exceptions import FetchErrorKind, MetadataFetchError

logger = logging.getLogger(__name__)

_KIND_STATUS: dict[FetchErrorKind, int] = {
    FetchErrorKind.INVALID_GIT_URL: 422,
    FetchErrorKind.INVALID_AUTH_TOKEN: 401,
    FetchErrorKind.PERMISSION_DENIED: 403,
    FetchErrorKind.NOT_FOUND: 404,
    FetchErrorKind.UNEXPECTED: 502,
}


def _error_json(
    status_code: int, kind: str, message: str, url: str | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "kind": kind, "message": message, "url": url},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Metadata fetch errors ───────────────────────────────────────────

    @app.exception_handler(MetadataFetchError)
    async def fetch_error_handler(
        request: Request, exc: MetadataFetchError
    ) -> JSONResponse:
        logger.warning("%s: %s", exc.kind.value, exc)
        return _error_json(_KIND_STATUS[exc.kind], exc.kind.value, str(exc), exc.url)

    # ── Transport failures talking to GitHub ────────────────────────────

    @app.exception_handler(httpx.HTTPError)
    async def transport_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
        logger.warning("Upstream request failed: %s", exc)
        return _error_json(502, "transport_error", f"Upstream request failed: {exc}")

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "validation_error", "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(
            500, "internal_error", "An unexpected error occurred. Please try again later."
        )
