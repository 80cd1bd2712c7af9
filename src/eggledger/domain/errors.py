"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist."""


class ConflictError(DomainError):
    """Constraint violation, such as a second record for the same date."""


class StorageError(DomainError):
    """The storage engine failed to execute a statement."""


def record_not_found(record_date: date) -> str:
    """Return message for a missing record by date."""
    return f"No record for {record_date.isoformat()}"


def duplicate_record_date(record_date: date) -> str:
    """Return message for a duplicate record date."""
    return f"A record for {record_date.isoformat()} already exists"


def sold_exceeds_available(sold_eggs: int, available_eggs: int) -> str:
    """Return message when more eggs are sold than are available."""
    return f"Sold eggs ({sold_eggs}) cannot exceed available eggs ({available_eggs})"


def storage_failure(operation: str, error: Exception) -> str:
    """Return message for an engine failure during an operation."""
    return f"Failed to {operation}: {error}"
