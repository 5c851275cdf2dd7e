"""
Reference dataset loader.

Reads the JSON dataset document produced by the catalogue export job and
turns it into a Catalogue. The document looks like::

    {
        "ids": [1001, 1002, 2000],
        "total_count": 3,
        "generated_at": "2025-06-01T12:00:00+09:00"
    }

A failed load is reported to the caller; nothing here retries.

Usage:
    from catalogue_search.catalogue import load_catalogue

    catalogue = load_catalogue()                   # path from settings
    catalogue = load_catalogue("exports/ids.json")  # explicit path
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from catalogue_search.catalogue.catalogue import Catalogue
from catalogue_search.config import get_settings
from catalogue_search.core import DataFormatError, DatasetLoadError, get_logger

logger = get_logger(__name__)


def load_dataset(path: Union[str, Path]) -> dict[str, Any]:
    """
    Read and decode a dataset document.

    Args:
        path: Location of the JSON document.

    Returns:
        The decoded document.

    Raises:
        DatasetLoadError: If the file cannot be read.
        DataFormatError: If the content is not a JSON object.
    """
    dataset_path = Path(path)

    try:
        raw = dataset_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DatasetLoadError(
            "Dataset file not found",
            details=str(dataset_path),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadError(
            f"Failed to read dataset file {dataset_path}",
            details=str(e),
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataFormatError(
            f"Dataset file {dataset_path} is not valid JSON",
            details=str(e),
        ) from e

    if not isinstance(data, dict):
        raise DataFormatError(
            f"Dataset file {dataset_path} is not a JSON object",
            details=f"top-level value is {type(data).__name__}",
        )

    return data


def load_catalogue(path: Optional[Union[str, Path]] = None) -> Catalogue:
    """
    Load the reference dataset and build a Catalogue from it.

    Args:
        path: Dataset location. Defaults to ``DATASET_PATH`` from settings.

    Returns:
        The loaded Catalogue.

    Raises:
        DatasetLoadError: If the file cannot be read.
        DataFormatError: If the document is malformed.
    """
    dataset_path = Path(path) if path is not None else Path(get_settings().dataset.path)

    logger.debug("Loading dataset from %s", dataset_path)
    catalogue = Catalogue.from_dataset(load_dataset(dataset_path))

    logger.info(
        "Dataset loaded: %d identifiers (declared %d), generated at %s",
        len(catalogue.identifiers),
        catalogue.size(),
        catalogue.generated_at.isoformat(),
    )
    return catalogue
