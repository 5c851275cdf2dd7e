"""
FastAPI application factory for catalogue-search.

The public symbol is ``app`` — the ASGI application object used by
uvicorn and by the test client.

Architecture:
    - The Catalogue and a single SearchSession are created once in the
      lifespan context manager and stored on ``app.state``.
    - Route modules access them through dependency functions in
      ``dependencies.py`` (which read from ``request.app.state``).
    - No business logic lives here — this is pure wiring.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalogue_search import __version__
from catalogue_search.catalogue import load_catalogue
from catalogue_search.config import get_settings
from catalogue_search.core import get_logger, suppress_third_party_loggers
from catalogue_search.search import SearchSession, sites_from_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Load the dataset and bind the process-wide search session.

    A dataset that cannot be loaded aborts startup: DatasetLoadError and
    DataFormatError propagate to uvicorn unchanged.
    """
    logger.info("Catalogue search API starting up (v%s)", __version__)
    suppress_third_party_loggers()

    settings = get_settings()

    catalogue = load_catalogue(settings.dataset.path)

    app.state.catalogue = catalogue
    app.state.session = SearchSession(catalogue)
    app.state.lookup_sites = sites_from_settings(settings)
    app.state.settings = settings

    logger.info("Session ready. API ready.")
    yield
    stats = app.state.session.current_stats()
    logger.info(
        "Catalogue search API shutting down (%d found, %d not found).",
        stats.found_count,
        stats.not_found_count,
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fully configured ASGI application with CORS middleware,
    lifespan management, and a health-check endpoint.
    """
    settings = get_settings()

    application = FastAPI(
        title="Catalogue Search API",
        description=(
            "Check numeric identifiers against a reference catalogue and "
            "track cumulative found / not-found statistics."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -- CORS ---------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Routers ------------------------------------------------------------
    from catalogue_search.api.routes.search import router as search_router
    from catalogue_search.api.routes.status import router as status_router

    application.include_router(status_router, prefix="/api/status", tags=["status"])
    application.include_router(search_router, prefix="/api/search", tags=["search"])

    # -- Health check -------------------------------------------------------
    @application.get("/api/health", tags=["meta"], summary="Health check")
    async def health() -> dict[str, str]:
        """Return API liveness status."""
        return {"status": "ok", "version": __version__}

    return application


app = create_app()
