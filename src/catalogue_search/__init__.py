"""catalogue-search — identifier lookup against a reference catalogue.

This package checks numeric content identifiers against a preloaded
reference dataset and keeps running found / not-found statistics for
the session.

Usage:
    from catalogue_search import __version__
    from catalogue_search.catalogue import load_catalogue
    from catalogue_search.search import SearchSession
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("catalogue-search")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export lightweight core types for convenience.
# Host modules (cli, api) are NOT imported here to avoid pulling in
# typer and fastapi on every import.
from catalogue_search.core import (
    CatalogueSearchError,
    DatasetInfo,
    SearchMode,
    SearchOutcome,
    SearchResult,
    SessionStats,
)

__all__ = [
    "__version__",
    # Core types
    "SearchMode",
    "SearchResult",
    "SessionStats",
    "SearchOutcome",
    "DatasetInfo",
    # Base exception
    "CatalogueSearchError",
]
