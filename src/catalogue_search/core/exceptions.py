"""
Custom exception hierarchy for catalogue-search.

All exceptions inherit from CatalogueSearchError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Exception hierarchy:
    CatalogueSearchError (base)
    ├── ConfigurationError — Invalid or missing configuration
    ├── DataFormatError — Malformed reference dataset
    ├── DatasetLoadError — Reference dataset could not be read
    └── ParseError — Query input yielded no usable identifiers

ParseError is not raised by the search session: it is returned inside a
SearchOutcome so the host decides how to present it.
"""

from enum import Enum
from typing import Optional


class CatalogueSearchError(Exception):
    """
    Base exception for all catalogue-search errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(CatalogueSearchError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Lookup URL template without the ``{id}`` placeholder
        - Unknown default search mode
    """

    pass


class DataFormatError(CatalogueSearchError):
    """
    Raised when the reference dataset is malformed.

    Fatal to session start: the caller must surface it, nothing retries.

    Examples:
        - Missing ``ids``, ``total_count`` or ``generated_at`` field
        - ``ids`` is not a sequence of integers
        - Negative ``total_count``
        - Unparseable ``generated_at`` timestamp
    """

    pass


class DatasetLoadError(CatalogueSearchError):
    """
    Raised when the reference dataset cannot be read.

    Examples:
        - Dataset file does not exist
        - Permission denied or undecodable bytes
    """

    pass


class ParseErrorKind(Enum):
    """Reasons a query could not be turned into an identifier batch."""

    EMPTY_INPUT = "empty_input"


class ParseError(CatalogueSearchError):
    """
    Describes a query that produced zero valid identifiers.

    Recoverable: the caller should re-prompt. Session statistics are left
    unchanged when this error is produced.
    """

    def __init__(
        self,
        kind: ParseErrorKind = ParseErrorKind.EMPTY_INPUT,
        message: str = "No valid identifiers found",
        details: Optional[str] = None,
    ) -> None:
        self.kind = kind
        super().__init__(message, details)
