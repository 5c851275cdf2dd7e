"""
Status endpoint — dataset summary and session statistics.

Provides ``GET /api/status/``. Mirrors the CLI ``info`` command plus the
counters shown after every search.
"""

from fastapi import APIRouter, Depends

from catalogue_search.api.dependencies import get_session
from catalogue_search.api.schemas import DatasetSchema, StatsSchema, StatusResponse
from catalogue_search.search import SearchSession

router = APIRouter()


@router.get(
    "/",
    response_model=StatusResponse,
    summary="Dataset and statistics overview",
)
def status(session: SearchSession = Depends(get_session)) -> StatusResponse:
    """Return the dataset summary and the cumulative search statistics."""
    info = session.catalogue.info()
    stats = session.current_stats()

    return StatusResponse(
        dataset=DatasetSchema(
            total_count=info.total_count,
            unique_count=info.unique_count,
            generated_at=info.generated_at,
        ),
        stats=StatsSchema(
            total_count=stats.total_count,
            found_count=stats.found_count,
            not_found_count=stats.not_found_count,
        ),
    )
