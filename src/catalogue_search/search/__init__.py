"""Search module — input parsing, identifier matching, and lookup links.

This module provides the query-side interface:
    - SearchSession: Matches identifier batches and accumulates statistics
    - parse_batch / tokenize / parse_identifier: Raw input to identifiers
    - LookupSite / build_lookup_links: Outbound links for missing identifiers

Usage:
    from catalogue_search.search import SearchSession

    session = SearchSession(catalogue)
    outcome = session.search("1001")
"""

from catalogue_search.search.links import (
    LookupLink,
    LookupSite,
    build_lookup_links,
    sites_from_mapping,
    sites_from_settings,
)
from catalogue_search.search.parsing import parse_batch, parse_identifier, tokenize
from catalogue_search.search.session import SearchSession

__all__ = [
    "SearchSession",
    # Parsing
    "tokenize",
    "parse_identifier",
    "parse_batch",
    # Lookup links
    "LookupSite",
    "LookupLink",
    "build_lookup_links",
    "sites_from_mapping",
    "sites_from_settings",
]
