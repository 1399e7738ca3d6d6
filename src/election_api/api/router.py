"""Root API router and middleware registration."""

from fastapi import APIRouter, FastAPI

from election_api.api.middleware import SecurityHeadersMiddleware, setup_cors
from election_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the versioned API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from election_api.api.v1.health import health_router
    from election_api.api.v1.map import map_router
    from election_api.api.v1.records import records_router
    from election_api.api.v1.stats import stats_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(health_router)
    root_router.include_router(records_router)
    root_router.include_router(stats_router)
    root_router.include_router(map_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app."""
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
