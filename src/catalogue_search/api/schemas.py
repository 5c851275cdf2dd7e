"""
Pydantic v2 request and response schemas for the catalogue-search API.

Schemas are separate from the core dataclasses in ``catalogue_search.core``
to provide a stable, explicit API contract. Internal representations may
change without affecting the API surface.

Naming convention:
    - Request schemas:  ``<Resource>Request`` (e.g. ``SearchRequest``)
    - Response schemas: ``<Resource>Response`` or ``<Resource>Schema``
    - Nested schemas:   plain names without suffix (e.g. ``LookupLinkSchema``)

All datetime strings are ISO 8601.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from catalogue_search.config import SUPPORTED_MODES


# ---------------------------------------------------------------------------
# Shared / error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """
    Structured error response returned for all 4xx and 5xx responses.

    Matches the CLI error format (error type, human message, optional hint).
    """

    error: str = Field(..., description="Machine-readable error type")
    message: str = Field(..., description="Human-readable error description")
    details: str | None = Field(None, description="Additional technical context")
    hint: str | None = Field(None, description="Suggested remediation action")


class StatsSchema(BaseModel):
    """Cumulative session counters."""

    total_count: int = Field(..., ge=0, description="Declared dataset size")
    found_count: int = Field(..., ge=0, description="IDs found so far")
    not_found_count: int = Field(..., ge=0, description="IDs not found so far")


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class SearchRequest(BaseModel):
    """Request body for ``POST /api/search/``."""

    query: str = Field(
        ...,
        max_length=1_000_000,
        description="One identifier, or one identifier per line in bulk mode",
    )
    mode: str = Field("single", description="Input mode: single or bulk")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Normalise mode to lowercase and reject unknown modes."""
        v = v.strip().lower()
        if v not in SUPPORTED_MODES:
            raise ValueError(f"mode must be one of: {', '.join(SUPPORTED_MODES)}")
        return v


class LookupLinkSchema(BaseModel):
    """An outbound lookup URL for a missing identifier."""

    site: str
    url: str


class SearchResultSchema(BaseModel):
    """Membership verdict for one submitted identifier."""

    id: int
    found: bool
    links: list[LookupLinkSchema] = Field(
        default_factory=list,
        description="Lookup links (only for identifiers that were not found)",
    )


class SearchResponse(BaseModel):
    """Response for ``POST /api/search/``."""

    mode: str
    results: list[SearchResultSchema]
    total_results: int = Field(..., ge=0)
    found: int = Field(..., ge=0, description="Found in this search")
    not_found: int = Field(..., ge=0, description="Not found in this search")
    stats: StatsSchema
    search_time_ms: float = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


class DatasetSchema(BaseModel):
    """Reference dataset summary."""

    total_count: int = Field(..., ge=0, description="Declared dataset size")
    unique_count: int = Field(..., ge=0, description="Distinct IDs loaded")
    generated_at: datetime = Field(..., description="When the dataset was produced")


class StatusResponse(BaseModel):
    """Response for ``GET /api/status/``."""

    dataset: DatasetSchema
    stats: StatsSchema
