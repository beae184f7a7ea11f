"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a reused DebtChange id."""


def debt_not_found(address: str) -> str:
    """Return message for an account without a Debt record."""
    return f"Debt #{address} not found"


def debt_change_not_found(change_id: str) -> str:
    """Return message for a missing DebtChange."""
    return f"DebtChange {change_id} not found"


def duplicate_debt_change(change_id: str) -> str:
    """Return message for a DebtChange id that is already recorded."""
    return f"DebtChange '{change_id}' already exists"


def unknown_event_type(event_type: str) -> str:
    """Return message for an event the handler does not know."""
    return f"Unknown event type '{event_type}'"


def invalid_address(value: str) -> str:
    """Return message for a value that is not a 20-byte hex address."""
    return f"Invalid address '{value}': expected 0x followed by 40 hex characters"


def invalid_transaction_hash(value: str) -> str:
    """Return message for a value that is not a 32-byte hex hash."""
    return f"Invalid transaction hash '{value}': expected 0x followed by 64 hex characters"
