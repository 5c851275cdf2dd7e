"""
FastAPI dependency providers for catalogue-search.

All dependencies read pre-initialised singletons from ``request.app.state``
(set during the lifespan startup in ``app.py``). Every request therefore
shares one Catalogue and one SearchSession, so statistics accumulate
across the whole process lifetime.
"""

from fastapi import Request

from catalogue_search.search import LookupSite, SearchSession


def get_session(request: Request) -> SearchSession:
    """Provide the SearchSession singleton."""
    session: SearchSession = request.app.state.session
    return session


def get_lookup_sites(request: Request) -> list[LookupSite]:
    """Provide the configured lookup sites."""
    sites: list[LookupSite] = request.app.state.lookup_sites
    return sites
