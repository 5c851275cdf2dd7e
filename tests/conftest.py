"""
Shared pytest fixtures for catalogue-search tests.

This module provides reusable test data and temporary resources used
across unit, integration and API tests:

    - sample_dataset: The dataset document used by most scenarios
    - catalogue: A Catalogue built from sample_dataset
    - session: A fresh SearchSession bound to that catalogue
    - dataset_file: sample_dataset written to a temporary JSON file
    - write_dataset: Factory writing arbitrary JSON to a temporary file
"""

import json
from datetime import datetime, timezone

import pytest

from catalogue_search.catalogue import Catalogue
from catalogue_search.search import SearchSession


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_dataset() -> dict:
    """
    A small dataset document in the export format.

    Three identifiers, consistent declared total, timezone-aware
    timestamp as written by the export job.
    """
    return {
        "ids": [1001, 1002, 2000],
        "total_count": 3,
        "generated_at": "2025-06-01T12:00:00+00:00",
    }


@pytest.fixture
def sample_generated_at() -> datetime:
    """The parsed form of sample_dataset["generated_at"]."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def catalogue(sample_dataset: dict) -> Catalogue:
    return Catalogue.from_dataset(sample_dataset)


@pytest.fixture
def session(catalogue: Catalogue) -> SearchSession:
    """A fresh session with zeroed counters."""
    return SearchSession(catalogue)


# ---------------------------------------------------------------------------
# Temporary dataset files
# ---------------------------------------------------------------------------


@pytest.fixture
def write_dataset(tmp_path):
    """
    Factory that writes a JSON-serialisable value to a temporary file.

    Pass ``raw=True`` to write the string as-is (for invalid JSON tests).
    Returns the file path.
    """

    def _write(content, name: str = "id_list.json", raw: bool = False):
        path = tmp_path / name
        text = content if raw else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def dataset_file(write_dataset, sample_dataset: dict):
    """sample_dataset stored as a JSON file."""
    return write_dataset(sample_dataset)
