"""
In-memory membership index over the reference identifiers.

A Catalogue is built once from an already-parsed dataset and never changes
afterwards, so any number of sessions or threads may read it without
locking.

Usage:
    from catalogue_search.catalogue import Catalogue

    catalogue = Catalogue.from_dataset(
        {"ids": [1001, 1002], "total_count": 2, "generated_at": "2025-01-01T00:00:00"}
    )
    catalogue.contains(1001)  # True
"""

from collections.abc import Mapping, Sequence, Set
from datetime import datetime
from typing import Any, Union

from catalogue_search.config import (
    DATASET_GENERATED_AT_FIELD,
    DATASET_IDS_FIELD,
    DATASET_REQUIRED_FIELDS,
    DATASET_TOTAL_COUNT_FIELD,
)
from catalogue_search.core import DataFormatError, DatasetInfo, get_logger

logger = get_logger(__name__)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but JSON true/false are not identifiers
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_ids(ids: Any) -> frozenset[int]:
    if isinstance(ids, (str, bytes, Mapping)) or not isinstance(ids, (Sequence, Set)):
        raise DataFormatError(
            "Invalid dataset identifiers",
            details=f"expected a sequence of integers, got {type(ids).__name__}",
        )

    invalid = [value for value in ids if not _is_integer(value)]
    if invalid:
        raise DataFormatError(
            "Invalid dataset identifiers",
            details=(
                f"{len(invalid)} non-integer value(s), first: {invalid[0]!r}"
            ),
        )

    return frozenset(ids)


def _coerce_generated_at(generated_at: Any) -> datetime:
    if isinstance(generated_at, datetime):
        return generated_at

    if isinstance(generated_at, str):
        try:
            return datetime.fromisoformat(generated_at.strip())
        except ValueError as e:
            raise DataFormatError(
                "Invalid dataset timestamp",
                details=f"{generated_at!r} is not an ISO-8601 timestamp",
            ) from e

    raise DataFormatError(
        "Invalid dataset timestamp",
        details=f"expected an ISO-8601 string, got {type(generated_at).__name__}",
    )


class Catalogue:
    """
    Immutable membership index over reference identifiers.

    ``size()`` reports the count declared by the dataset, which is only
    used for display and may legitimately differ from the number of
    distinct identifiers loaded.

    Attributes:
        identifiers: Distinct reference identifiers
        total_count: Size declared by the dataset
        generated_at: When the dataset was produced
    """

    __slots__ = ("_identifiers", "_total_count", "_generated_at")

    def __init__(
        self,
        ids: Union[Sequence[int], Set[int]],
        total_count: int,
        generated_at: Union[datetime, str],
    ) -> None:
        """
        Validate dataset values and build the index.

        Duplicate identifiers collapse silently.

        Args:
            ids: Reference identifiers.
            total_count: Declared dataset size (non-negative).
            generated_at: Dataset production time, as a datetime or an
                          ISO-8601 string.

        Raises:
            DataFormatError: If any argument is malformed.
        """
        identifiers = _coerce_ids(ids)

        if not _is_integer(total_count):
            raise DataFormatError(
                "Invalid dataset total count",
                details=f"expected an integer, got {type(total_count).__name__}",
            )
        if total_count < 0:
            raise DataFormatError(
                "Invalid dataset total count",
                details=f"must be non-negative, got {total_count}",
            )

        timestamp = _coerce_generated_at(generated_at)

        if len(identifiers) != total_count:
            logger.warning(
                "Dataset declares %d identifiers but %d distinct identifiers were loaded",
                total_count,
                len(identifiers),
            )

        logger.debug(
            "Catalogue initialised: %d identifiers, generated at %s",
            len(identifiers),
            timestamp.isoformat(),
        )
        self._identifiers = identifiers
        self._total_count = total_count
        self._generated_at = timestamp

    @classmethod
    def initialize(
        cls,
        ids: Union[Sequence[int], Set[int]],
        total_count: int,
        generated_at: Union[datetime, str],
    ) -> "Catalogue":
        """Build a catalogue from already-parsed dataset values.

        Same validation as the constructor.

        Raises:
            DataFormatError: If any argument is malformed.
        """
        return cls(ids, total_count, generated_at)

    @classmethod
    def from_dataset(cls, data: Mapping[str, Any]) -> "Catalogue":
        """
        Build a catalogue from a dataset document.

        Args:
            data: Mapping with ``ids``, ``total_count`` and ``generated_at``.

        Raises:
            DataFormatError: If the document is not a mapping, lacks a
                             required field, or holds malformed values.
        """
        if not isinstance(data, Mapping):
            raise DataFormatError(
                "Invalid dataset document",
                details=f"expected an object, got {type(data).__name__}",
            )

        missing = [name for name in DATASET_REQUIRED_FIELDS if name not in data]
        if missing:
            raise DataFormatError(
                "Invalid dataset document",
                details=f"missing field(s): {', '.join(missing)}",
            )

        return cls.initialize(
            ids=data[DATASET_IDS_FIELD],
            total_count=data[DATASET_TOTAL_COUNT_FIELD],
            generated_at=data[DATASET_GENERATED_AT_FIELD],
        )

    @property
    def identifiers(self) -> frozenset[int]:
        return self._identifiers

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def generated_at(self) -> datetime:
        return self._generated_at

    def contains(self, identifier: Any) -> bool:
        """Return True if ``identifier`` is a reference identifier."""
        if not _is_integer(identifier):
            return False
        return identifier in self._identifiers

    def __contains__(self, identifier: Any) -> bool:
        return self.contains(identifier)

    def size(self) -> int:
        """Return the dataset size as declared by the source data."""
        return self._total_count

    def info(self) -> DatasetInfo:
        """Summarise the loaded dataset."""
        return DatasetInfo(
            total_count=self._total_count,
            unique_count=len(self._identifiers),
            generated_at=self._generated_at,
        )

    def __repr__(self) -> str:
        return (
            f"Catalogue(unique={len(self._identifiers)}, "
            f"total_count={self._total_count}, "
            f"generated_at={self._generated_at.isoformat()})"
        )
