"""Core data types for catalogue-search.

This module defines the domain objects passed between the core and its hosts:
    - SearchMode: How raw query input is split into tokens
    - SearchResult: Membership verdict for one submitted identifier
    - SessionStats: Snapshot of a session's cumulative counters
    - SearchOutcome: Everything one search call produces
    - DatasetInfo: Summary of a loaded reference dataset

Design notes:
    - Dataclasses are used for simplicity (no runtime validation)
    - SearchResult and SessionStats are frozen; they are values, not state
    - Errors travel inside SearchOutcome instead of being raised
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from catalogue_search.core.exceptions import ParseError


class SearchMode(Enum):
    """Input modes for a search call.

    Values:
        SINGLE: The whole trimmed input is one identifier token
        BULK: One identifier token per non-blank line
    """

    SINGLE = "single"
    BULK = "bulk"

    @classmethod
    def parse(cls, value: Union[str, "SearchMode"]) -> "SearchMode":
        """Return the mode for ``value``, accepting names case-insensitively.

        Raises:
            ValueError: If ``value`` names no known mode.
        """
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower()
        for mode in cls:
            if mode.value == normalised:
                return mode
        supported = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown search mode {value!r}. Supported: {supported}")


@dataclass(frozen=True)
class SearchResult:
    """Membership verdict for a single submitted identifier.

    Attributes:
        id: The parsed identifier
        found: True iff the identifier is in the catalogue
    """

    id: int
    found: bool


@dataclass(frozen=True)
class SessionStats:
    """Read-only snapshot of a session's counters.

    Attributes:
        total_count: Declared size of the reference dataset
        found_count: Identifiers found so far, across all searches
        not_found_count: Identifiers not found so far, across all searches
    """

    total_count: int
    found_count: int = 0
    not_found_count: int = 0

    @property
    def submitted_count(self) -> int:
        """Total identifiers submitted over the session."""
        return self.found_count + self.not_found_count


@dataclass
class SearchOutcome:
    """Result of one ``SearchSession.search()`` call.

    Exactly one of ``results`` (non-empty) or ``error`` is meaningful:
    an empty batch yields no results and a ParseError.

    Attributes:
        results: Verdicts in input order, duplicates preserved
        stats: Session counters after this batch was applied
        error: Set when the input contained no valid identifiers
    """

    results: list[SearchResult]
    stats: SessionStats
    error: Optional[ParseError] = field(default=None)

    @property
    def ok(self) -> bool:
        """True when the batch was processed."""
        return self.error is None

    @property
    def found(self) -> list[SearchResult]:
        return [r for r in self.results if r.found]

    @property
    def not_found(self) -> list[SearchResult]:
        return [r for r in self.results if not r.found]

    def raise_for_error(self) -> None:
        """Raise the carried ParseError, if any."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class DatasetInfo:
    """Summary of a loaded reference dataset.

    Attributes:
        total_count: Size declared by the dataset
        unique_count: Number of distinct identifiers actually loaded
        generated_at: When the dataset was produced
    """

    total_count: int
    unique_count: int
    generated_at: datetime

    @property
    def is_consistent(self) -> bool:
        """True when the declared size matches the loaded identifiers."""
        return self.total_count == self.unique_count
