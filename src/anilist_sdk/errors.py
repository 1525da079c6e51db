"""Exceptions raised by the AniList client and services.

Every failure surfaced by this package derives from AniListError so callers can
catch the whole family at once. Nothing here retries or recovers; the client
raises and the service lets the error propagate.
"""

from typing import Any


class AniListError(Exception):
    """Base exception for all AniList client errors."""


class TransportError(AniListError):
    """Raised when the AniList API cannot be reached or answers garbage.

    Covers connection failures, timeouts, non-2xx responses without a GraphQL
    error payload, and bodies that are not JSON.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize the error with an optional HTTP status code."""
        super().__init__(message)
        self.status_code = status_code


class RemoteError(AniListError):
    """Raised when AniList answers with a GraphQL ``errors`` payload."""

    def __init__(self, errors: Any, status_code: int | None = None) -> None:
        """Initialize the error from the raw ``errors`` member of the response.

        A bare string or object is treated as a single error.
        """
        if not isinstance(errors, list):
            errors = [errors]
        self.errors: list[Any] = errors
        self.status_code = status_code
        self.messages = [
            str(err.get("message", "Unknown error")) if isinstance(err, dict) else str(err)
            for err in errors
        ]
        super().__init__("; ".join(self.messages) or "Unknown GraphQL error")


class ResponseShapeError(AniListError):
    """Raised when a response ``data`` object cannot be mapped to its model."""


class UnknownOperationError(AniListError):
    """Raised when an operation name is not part of the query catalog."""

    def __init__(self, operation_name: str) -> None:
        """Initialize the error with the offending operation name."""
        super().__init__(f"Unknown AniList operation: {operation_name}")
        self.operation_name = operation_name


class PaginationLimitExceeded(AniListError):
    """Raised when a paginated fetch needs more pages than allowed."""

    def __init__(self, operation_name: str, max_pages: int) -> None:
        """Initialize the error with the operation and the configured bound."""
        super().__init__(
            f"{operation_name} still reports more pages after {max_pages} page(s)"
        )
        self.operation_name = operation_name
        self.max_pages = max_pages
