from __future__ import annotations

from fastapi import FastAPI

from hypnolint.api.lifespan import lifespan
from hypnolint.api.routes.diagnostics import router as diagnostics_router
from hypnolint.api.routes.formatting import router as formatting_router
from hypnolint.api.routes.health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="hypnolint API",
        description="Analyze, fix and format HypnoScript source.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(diagnostics_router)
    app.include_router(formatting_router)

    return app
