"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from payerindex.domain.entities import Debt, DebtChange


class Database(ABC):
    """Abstract entity store for payerindex.

    Writes are staged until ``commit()``; ``rollback()`` discards everything
    staged since the last commit. Nothing is ever deleted.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Make all staged writes durable."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard all writes staged since the last commit."""
        pass

    # Debt operations
    @abstractmethod
    def get_debt(self, address: str) -> Optional[Debt]:
        """Get Debt by account address."""
        pass

    @abstractmethod
    def save_debt(self, debt: Debt) -> None:
        """Insert or update a Debt."""
        pass

    @abstractmethod
    def list_debts(self) -> list[Debt]:
        """List all Debts ordered by address."""
        pass

    # DebtChange operations
    @abstractmethod
    def get_debt_change(self, change_id: str) -> Optional[DebtChange]:
        """Get DebtChange by id."""
        pass

    @abstractmethod
    def save_debt_change(self, change: DebtChange) -> None:
        """Insert a DebtChange.

        Raises:
            ConflictError: If a DebtChange with the same id already exists
        """
        pass

    @abstractmethod
    def list_debt_changes(self, address: Optional[str] = None) -> list[DebtChange]:
        """List DebtChanges in the order they were recorded.

        Args:
            address: Optional account address filter
        """
        pass
