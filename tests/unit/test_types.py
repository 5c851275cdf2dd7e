"""Tests for core domain data classes.

Every host renders these types, so we pin down mode parsing,
immutability and the derived properties.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from catalogue_search.core.exceptions import ParseError
from catalogue_search.core.types import (
    DatasetInfo,
    SearchMode,
    SearchOutcome,
    SearchResult,
    SessionStats,
)


# -----------------------------------------------------------------------
# SearchMode
# -----------------------------------------------------------------------


class TestSearchMode:

    def test_values(self):
        assert SearchMode.SINGLE.value == "single"
        assert SearchMode.BULK.value == "bulk"

    def test_parse_passes_enum_through(self):
        assert SearchMode.parse(SearchMode.BULK) is SearchMode.BULK

    @pytest.mark.parametrize("value", ["bulk", "BULK", " Bulk "])
    def test_parse_is_case_insensitive(self, value):
        assert SearchMode.parse(value) is SearchMode.BULK

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown search mode"):
            SearchMode.parse("batch")


# -----------------------------------------------------------------------
# SearchResult / SessionStats
# -----------------------------------------------------------------------


class TestSearchResult:

    def test_fields(self):
        r = SearchResult(id=5, found=False)
        assert r.id == 5
        assert r.found is False

    def test_frozen(self):
        r = SearchResult(id=5, found=False)
        with pytest.raises(FrozenInstanceError):
            r.found = True

    def test_equality(self):
        assert SearchResult(3, True) == SearchResult(id=3, found=True)


class TestSessionStats:

    def test_defaults(self):
        s = SessionStats(total_count=10)
        assert s.found_count == 0
        assert s.not_found_count == 0
        assert s.submitted_count == 0

    def test_submitted_count(self):
        s = SessionStats(total_count=10, found_count=2, not_found_count=5)
        assert s.submitted_count == 7

    def test_frozen(self):
        s = SessionStats(total_count=1)
        with pytest.raises(FrozenInstanceError):
            s.found_count = 3


# -----------------------------------------------------------------------
# SearchOutcome
# -----------------------------------------------------------------------


class TestSearchOutcome:

    def test_ok_without_error(self):
        outcome = SearchOutcome(
            results=[SearchResult(1, True), SearchResult(2, False)],
            stats=SessionStats(total_count=1, found_count=1, not_found_count=1),
        )
        assert outcome.ok
        assert outcome.found == [SearchResult(1, True)]
        assert outcome.not_found == [SearchResult(2, False)]
        outcome.raise_for_error()  # no-op

    def test_error_outcome(self):
        outcome = SearchOutcome(
            results=[],
            stats=SessionStats(total_count=0),
            error=ParseError(),
        )
        assert not outcome.ok
        with pytest.raises(ParseError):
            outcome.raise_for_error()


# -----------------------------------------------------------------------
# DatasetInfo
# -----------------------------------------------------------------------


class TestDatasetInfo:

    def test_consistent(self):
        info = DatasetInfo(total_count=3, unique_count=3, generated_at=datetime(2025, 1, 1))
        assert info.is_consistent

    def test_inconsistent(self):
        info = DatasetInfo(total_count=4, unique_count=3, generated_at=datetime(2025, 1, 1))
        assert not info.is_consistent
