"""Catalogue module — reference identifier index and dataset loading.

This module provides:
    - Catalogue: Immutable membership index over reference identifiers
    - load_dataset: Read a JSON dataset document from disk
    - load_catalogue: Load a dataset and build a Catalogue from it

Usage:
    from catalogue_search.catalogue import Catalogue, load_catalogue

    catalogue = load_catalogue("data/id_list.json")
    catalogue.contains(1001)
"""

from catalogue_search.catalogue.catalogue import Catalogue
from catalogue_search.catalogue.loader import load_catalogue, load_dataset

__all__ = [
    "Catalogue",
    "load_catalogue",
    "load_dataset",
]
