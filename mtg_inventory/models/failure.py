"""
Failure classification for the inventory engine.

Known failures carry a FailureKind so callers at the transport edge can
explain them. Store I/O errors are not wrapped here: they propagate as
raised by SQLAlchemy.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"

    # Unknown
    UNKNOWN = "unknown"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)


class InvalidPageRequestError(KnownError):
    """Raised when a listing request has an unusable cursor or page size."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            detail=detail,
            suggestion="Use a cursor of 0 or greater and a page size of at least 1.",
        )


class CardNotFoundError(KnownError):
    """Raised when an inventory row referenced by id does not exist."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Inventory card {card_id} not found",
        )
