"""
Search endpoint for identifier lookups.

Provides a single route:
    - ``POST /api/search/`` — check one or many identifiers and return the
      verdicts together with the updated session statistics
"""

import time

from fastapi import APIRouter, Depends, HTTPException

from catalogue_search.api.dependencies import get_lookup_sites, get_session
from catalogue_search.api.schemas import (
    ErrorResponse,
    LookupLinkSchema,
    SearchRequest,
    SearchResponse,
    SearchResultSchema,
    StatsSchema,
)
from catalogue_search.core import get_logger
from catalogue_search.search import LookupSite, SearchSession, build_lookup_links

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Check identifiers against the catalogue",
)
def search(
    body: SearchRequest,
    session: SearchSession = Depends(get_session),
    sites: list[LookupSite] = Depends(get_lookup_sites),
) -> SearchResponse:
    """
    Check identifiers against the reference catalogue.

    In ``single`` mode the whole query is one identifier; in ``bulk`` mode
    each non-blank line is one identifier. Tokens without a leading integer
    are ignored. Results keep input order, duplicates included, and every
    call adds to the session statistics.
    """
    start = time.perf_counter()

    outcome = session.search(body.query, body.mode)

    if not outcome.ok:
        raise HTTPException(
            status_code=400,
            detail={
                "error": outcome.error.kind.value,
                "message": outcome.error.message,
                "details": outcome.error.details,
                "hint": "Provide at least one numeric identifier.",
            },
        )

    elapsed_ms = (time.perf_counter() - start) * 1000

    result_schemas = [
        SearchResultSchema(
            id=r.id,
            found=r.found,
            links=(
                []
                if r.found
                else [
                    LookupLinkSchema(site=link.site, url=link.url)
                    for link in build_lookup_links(r.id, sites)
                ]
            ),
        )
        for r in outcome.results
    ]

    logger.info(
        "Search (%s) checked %d identifier(s) in %.1f ms",
        body.mode,
        len(result_schemas),
        elapsed_ms,
    )

    return SearchResponse(
        mode=body.mode,
        results=result_schemas,
        total_results=len(result_schemas),
        found=len(outcome.found),
        not_found=len(outcome.not_found),
        stats=StatsSchema(
            total_count=outcome.stats.total_count,
            found_count=outcome.stats.found_count,
            not_found_count=outcome.stats.not_found_count,
        ),
        search_time_ms=round(elapsed_ms, 1),
    )
