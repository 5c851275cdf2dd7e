"""Tests for SearchSession.

These cover the behaviour users see across a session: results in input
order, empty batches rejected without touching the counters, counters
that only grow and always add up to the number of identifiers checked,
and batch-atomic updates under concurrent searches.
"""

import threading

import pytest

from catalogue_search.catalogue import Catalogue
from catalogue_search.core.exceptions import ParseError, ParseErrorKind
from catalogue_search.core.types import SearchMode, SearchResult, SessionStats
from catalogue_search.search import SearchSession


def _catalogue(*ids: int) -> Catalogue:
    return Catalogue.initialize(list(ids), len(set(ids)), "2025-01-01T00:00:00")


class TestConstruction:

    def test_starts_at_zero(self, session):
        assert session.current_stats() == SessionStats(
            total_count=3, found_count=0, not_found_count=0
        )

    def test_requires_catalogue(self):
        with pytest.raises(TypeError, match="requires a Catalogue"):
            SearchSession({"ids": [1]})

    def test_exposes_catalogue(self, session, catalogue):
        assert session.catalogue is catalogue


class TestSearch:

    def test_single_found(self, session):
        outcome = session.search("1001", SearchMode.SINGLE)
        assert outcome.ok
        assert outcome.results == [SearchResult(1001, True)]

    def test_default_mode_is_single(self, session):
        assert session.search("2000").results == [SearchResult(2000, True)]

    def test_mode_as_string(self, session):
        outcome = session.search("1001\n7", "bulk")
        assert [r.id for r in outcome.results] == [1001, 7]

    def test_order_preserved_with_duplicates(self):
        session = SearchSession(_catalogue(3))
        outcome = session.search("5\n3\n5", SearchMode.BULK)
        assert outcome.results == [
            SearchResult(5, False),
            SearchResult(3, True),
            SearchResult(5, False),
        ]
        assert outcome.stats.found_count == 1
        assert outcome.stats.not_found_count == 2

    def test_prefix_parsing(self, session):
        outcome = session.search("123abc", SearchMode.SINGLE)
        assert outcome.ok
        assert outcome.results == [SearchResult(123, False)]

    def test_malformed_tokens_skipped(self, session):
        outcome = session.search("1001\nnope\n1002", SearchMode.BULK)
        assert [r.id for r in outcome.results] == [1001, 1002]
        assert session.current_stats().submitted_count == 2

    def test_invalid_mode_raises(self, session):
        with pytest.raises(ValueError):
            session.search("1", "sideways")


class TestEmptyInput:

    @pytest.mark.parametrize(
        "raw, mode",
        [
            ("", SearchMode.SINGLE),
            ("   ", SearchMode.SINGLE),
            ("   \n   ", SearchMode.BULK),
            ("abc\nxyz", SearchMode.BULK),
            ("abc", SearchMode.SINGLE),
        ],
    )
    def test_returns_empty_input_error(self, session, raw, mode):
        outcome = session.search(raw, mode)
        assert not outcome.ok
        assert outcome.results == []
        assert isinstance(outcome.error, ParseError)
        assert outcome.error.kind is ParseErrorKind.EMPTY_INPUT

    def test_does_not_raise(self, session):
        session.search("", SearchMode.SINGLE)

    def test_oversized_identifier_is_empty_input(self, session):
        outcome = session.search("1" * 5000, SearchMode.SINGLE)
        assert outcome.error.kind is ParseErrorKind.EMPTY_INPUT
        assert session.current_stats().submitted_count == 0

    def test_oversized_line_skipped_in_bulk(self, session):
        outcome = session.search("9" * 5000 + "\n1001", SearchMode.BULK)
        assert outcome.results == [SearchResult(1001, True)]

    def test_statistics_unchanged(self, session):
        session.search("1001\n9", SearchMode.BULK)
        before = session.current_stats()
        outcome = session.search("   \n   ", SearchMode.BULK)
        assert session.current_stats() == before
        assert outcome.stats == before


class TestStatistics:

    def test_scenario(self, session):
        """Counters accumulate across searches of different modes."""
        first = session.search("1001\n1500\n2000", SearchMode.BULK)
        assert first.results == [
            SearchResult(1001, True),
            SearchResult(1500, False),
            SearchResult(2000, True),
        ]
        assert session.found_count == 2
        assert session.not_found_count == 1

        second = session.search("1001", SearchMode.SINGLE)
        assert second.results == [SearchResult(1001, True)]
        assert session.found_count == 3
        assert session.not_found_count == 1
        assert second.stats == SessionStats(total_count=3, found_count=3, not_found_count=1)

    def test_monotonic_and_sum_invariant(self, session):
        queries = [
            ("1001", SearchMode.SINGLE),
            ("1\n2\n3", SearchMode.BULK),
            ("", SearchMode.SINGLE),
            ("2000\n2000", SearchMode.BULK),
            ("junk", SearchMode.SINGLE),
            ("1002x", SearchMode.SINGLE),
        ]
        submitted = 0
        previous = session.current_stats()
        for raw, mode in queries:
            outcome = session.search(raw, mode)
            submitted += len(outcome.results)
            stats = session.current_stats()
            assert stats.found_count >= previous.found_count
            assert stats.not_found_count >= previous.not_found_count
            assert stats.submitted_count == submitted
            previous = stats
        assert previous == SessionStats(total_count=3, found_count=4, not_found_count=3)

    def test_catalogue_lookups_do_not_count(self, session, catalogue):
        for _ in range(5):
            catalogue.contains(1001)
            catalogue.contains(42)
        assert session.current_stats().submitted_count == 0

    def test_total_count_is_declared_size(self):
        catalogue = Catalogue.initialize([1, 2], 10, "2025-01-01T00:00:00")
        session = SearchSession(catalogue)
        assert session.search("1").stats.total_count == 10

    def test_sessions_are_independent(self, catalogue):
        a = SearchSession(catalogue)
        b = SearchSession(catalogue)
        a.search("1001")
        assert b.current_stats().submitted_count == 0


class TestConcurrency:

    def test_parallel_searches_keep_invariant(self):
        session = SearchSession(_catalogue(*range(0, 100, 2)))
        batch = "\n".join(str(i) for i in range(100))  # 50 found, 50 not found
        threads_count = 8
        rounds = 25
        barrier = threading.Barrier(threads_count)
        torn: list[SessionStats] = []

        def worker():
            barrier.wait()
            for _ in range(rounds):
                stats = session.search(batch, SearchMode.BULK).stats
                # Every snapshot reflects whole batches only
                if stats.found_count % 50 or stats.found_count != stats.not_found_count:
                    torn.append(stats)

        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert torn == []
        stats = session.current_stats()
        assert stats.found_count == threads_count * rounds * 50
        assert stats.not_found_count == threads_count * rounds * 50
