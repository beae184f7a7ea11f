"""Debt read-side domain service."""

from typing import Optional

from payerindex.database.base import Database
from payerindex.domain.entities import Debt, DebtChange
from payerindex.domain.errors import NotFoundError, debt_not_found
from payerindex.utils.address import normalize_address


class DebtService:
    """Service for querying indexed debts."""

    def __init__(self, db: Database):
        """Initialize debt service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_debt(self, address: str) -> Optional[Debt]:
        """Get the Debt of an account.

        Args:
            address: Account address in any hex case

        Returns:
            Debt entity or None if the account never registered debt

        Raises:
            ValidationError: If address is not a valid address
        """
        return self.db.get_debt(normalize_address(address))

    def require_debt(self, address: str) -> Debt:
        """Get the Debt of an account or raise NotFoundError."""
        debt = self.get_debt(address)
        if debt is None:
            raise NotFoundError(debt_not_found(normalize_address(address)))
        return debt

    def list_debts(self, outstanding_only: bool = False) -> list[Debt]:
        """List all Debts.

        Args:
            outstanding_only: If True, skip accounts whose balance is zero
        """
        debts = self.db.list_debts()
        if outstanding_only:
            debts = [debt for debt in debts if debt.amount != 0]
        return debts

    def list_changes(self, address: Optional[str] = None) -> list[DebtChange]:
        """List DebtChanges in processing order, optionally for one account."""
        if address is not None:
            address = normalize_address(address)
        return self.db.list_debt_changes(address=address)

    def total_outstanding(self) -> int:
        """Sum of all Debt balances."""
        return sum(debt.amount for debt in self.db.list_debts())
