"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from collection_metadata.interface.dependencies import shutdown, startup
from collection_metadata.interface.error_handlers import register_error_handlers
from collection_metadata.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Package Collection Metadata",
        version="1.0.0",
        description=(
            "Takes a git repository URL hosted on GitHub or GitHub Enterprise "
            "and returns the package metadata used in a package collection: "
            "summary, keywords, readme URL and license."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
