"""Core module — types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (SearchMode, SearchResult, SessionStats, SearchOutcome, DatasetInfo)
    - Exception hierarchy (CatalogueSearchError and subclasses)
    - Logging utilities (get_logger, configure_logging)

Usage:
    from catalogue_search.core import (
        SearchMode,
        SearchResult,
        DataFormatError,
        get_logger,
    )
"""

from catalogue_search.core.exceptions import (
    CatalogueSearchError,
    ConfigurationError,
    DataFormatError,
    DatasetLoadError,
    ParseError,
    ParseErrorKind,
)
from catalogue_search.core.logging import (
    configure_logging,
    get_logger,
    suppress_third_party_loggers,
)
from catalogue_search.core.types import (
    DatasetInfo,
    SearchMode,
    SearchOutcome,
    SearchResult,
    SessionStats,
)

__all__ = [
    # Types
    "SearchMode",
    "SearchResult",
    "SessionStats",
    "SearchOutcome",
    "DatasetInfo",
    # Exceptions
    "CatalogueSearchError",
    "ConfigurationError",
    "DataFormatError",
    "DatasetLoadError",
    "ParseError",
    "ParseErrorKind",
    # Logging
    "get_logger",
    "configure_logging",
    "suppress_third_party_loggers",
]
