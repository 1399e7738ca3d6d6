"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from election_api.core.config import get_settings
from election_api.core.logging import setup_logging
from election_api.services.dataset_service import DatasetUnavailableError, init_dataset, set_dataset


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Load both datasets once on startup; drop them on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    await init_dataset(settings)

    yield

    set_dataset(None)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Election Results API",
        description="Constituency election results with filtering, aggregates and boundary map joins",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    @app.exception_handler(DatasetUnavailableError)
    async def dataset_unavailable_handler(request: Request, exc: DatasetUnavailableError) -> JSONResponse:
        return JSONResponse(
            status_code=503,
            content={"detail": str(exc)},
        )

    from election_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
