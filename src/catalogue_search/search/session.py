"""
Search session: identifier matching with cumulative statistics.

A SearchSession binds one Catalogue to a pair of running counters. Every
``search()`` call parses the raw input, checks each identifier against the
catalogue and adds the batch's verdicts to the counters. Counters only
ever grow and are never reset by a single search.

Usage:
    from catalogue_search.catalogue import load_catalogue
    from catalogue_search.core import SearchMode
    from catalogue_search.search import SearchSession

    session = SearchSession(load_catalogue())
    outcome = session.search("1001\\n1500", SearchMode.BULK)
    for result in outcome.results:
        print(result.id, result.found)
    print(outcome.stats.found_count, outcome.stats.not_found_count)
"""

import threading
from typing import Union

from catalogue_search.catalogue import Catalogue
from catalogue_search.core import (
    ParseError,
    ParseErrorKind,
    SearchMode,
    SearchOutcome,
    SearchResult,
    SessionStats,
    get_logger,
)
from catalogue_search.search.parsing import parse_batch

logger = get_logger(__name__)


class SearchSession:
    """
    Owns the statistics of one user's searches against a Catalogue.

    The catalogue is shared and never modified. Counter updates are
    serialised with a lock, and each batch is applied as a whole, so
    ``current_stats()`` never observes a half-counted batch.

    Example:
        >>> session = SearchSession(catalogue)
        >>> outcome = session.search("1001")
        >>> outcome.results
        [SearchResult(id=1001, found=True)]
    """

    def __init__(self, catalogue: Catalogue) -> None:
        """
        Bind a new session to a loaded catalogue.

        Args:
            catalogue: The reference catalogue to search.

        Raises:
            TypeError: If ``catalogue`` is not a Catalogue.
        """
        if not isinstance(catalogue, Catalogue):
            raise TypeError(
                f"SearchSession requires a Catalogue, got {type(catalogue).__name__}"
            )

        self._catalogue = catalogue
        self._found_count = 0
        self._not_found_count = 0
        self._lock = threading.Lock()

    @property
    def catalogue(self) -> Catalogue:
        return self._catalogue

    @property
    def found_count(self) -> int:
        with self._lock:
            return self._found_count

    @property
    def not_found_count(self) -> int:
        with self._lock:
            return self._not_found_count

    def search(
        self,
        raw_input: str,
        mode: Union[SearchMode, str] = SearchMode.SINGLE,
    ) -> SearchOutcome:
        """
        Check every identifier in ``raw_input`` against the catalogue.

        Malformed tokens are dropped. If nothing usable remains, the
        outcome carries a ``ParseError`` of kind ``EMPTY_INPUT`` and the
        statistics are left untouched.

        Args:
            raw_input: Text as typed by the user.
            mode: SINGLE treats the input as one identifier, BULK reads
                  one identifier per line.

        Returns:
            SearchOutcome with results in input order (duplicates
            included) and the statistics after this batch.

        Raises:
            ValueError: If ``mode`` is not a known search mode.
        """
        mode = SearchMode.parse(mode)
        batch = parse_batch(raw_input, mode)

        if not batch:
            logger.debug("Empty %s query rejected", mode.value)
            return SearchOutcome(
                results=[],
                stats=self.current_stats(),
                error=ParseError(
                    ParseErrorKind.EMPTY_INPUT,
                    details="Enter at least one numeric identifier.",
                ),
            )

        results = [
            SearchResult(id=identifier, found=self._catalogue.contains(identifier))
            for identifier in batch
        ]
        found = sum(1 for r in results if r.found)
        not_found = len(results) - found

        with self._lock:
            self._found_count += found
            self._not_found_count += not_found
            stats = self._snapshot()

        logger.info(
            "Searched %d identifier(s) (%s): %d found, %d not found",
            len(results),
            mode.value,
            found,
            not_found,
        )
        return SearchOutcome(results=results, stats=stats)

    def current_stats(self) -> SessionStats:
        """Return a consistent snapshot of the session counters."""
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> SessionStats:
        # Caller must hold self._lock
        return SessionStats(
            total_count=self._catalogue.size(),
            found_count=self._found_count,
            not_found_count=self._not_found_count,
        )
