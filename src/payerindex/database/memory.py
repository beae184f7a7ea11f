"""In-memory implementation of the Database interface.

Used for tests and for one-off replays that do not need a database file.
Staged writes are visible to reads before ``commit()``, like a SQLAlchemy
session with autoflush.
"""

from typing import Optional

from payerindex.database.base import Database
from payerindex.domain.entities import Debt, DebtChange
from payerindex.domain.errors import ConflictError, duplicate_debt_change


class InMemoryDatabase(Database):
    """Dict-backed Database."""

    def __init__(self):
        self._debts: dict[str, Debt] = {}
        self._changes: dict[str, DebtChange] = {}
        self._pending_debts: dict[str, Debt] = {}
        self._pending_changes: dict[str, DebtChange] = {}

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        self.rollback()

    def initialize_schema(self) -> None:
        pass

    def commit(self) -> None:
        self._debts.update(self._pending_debts)
        self._changes.update(self._pending_changes)
        self._pending_debts.clear()
        self._pending_changes.clear()

    def rollback(self) -> None:
        self._pending_debts.clear()
        self._pending_changes.clear()

    # Debt operations
    def get_debt(self, address: str) -> Optional[Debt]:
        if address in self._pending_debts:
            return self._pending_debts[address]
        return self._debts.get(address)

    def save_debt(self, debt: Debt) -> None:
        self._pending_debts[debt.address] = debt

    def list_debts(self) -> list[Debt]:
        debts = {**self._debts, **self._pending_debts}
        return [debts[address] for address in sorted(debts)]

    # DebtChange operations
    def get_debt_change(self, change_id: str) -> Optional[DebtChange]:
        if change_id in self._pending_changes:
            return self._pending_changes[change_id]
        return self._changes.get(change_id)

    def save_debt_change(self, change: DebtChange) -> None:
        if change.id in self._changes or change.id in self._pending_changes:
            raise ConflictError(duplicate_debt_change(change.id))
        self._pending_changes[change.id] = change

    def list_debt_changes(self, address: Optional[str] = None) -> list[DebtChange]:
        # dicts keep insertion order; pending changes are always newer
        changes = list(self._changes.values()) + list(self._pending_changes.values())
        if address is not None:
            changes = [change for change in changes if change.address == address]
        return changes
