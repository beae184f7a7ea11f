"""Payer contract event handlers.

Each handler reads the account's Debt, applies the event's amount, and
appends one DebtChange keyed ``{txHash}-{logIndex}``. Events must be fed in
chain order (block, then log index); handlers do no locking of their own.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from payerindex.database.base import Database
from payerindex.domain.entities import Debt, DebtChange
from payerindex.domain.errors import ValidationError, unknown_event_type
from payerindex.domain.events import PaidBackDebt, PayerEvent, RegisteredDebt

logger = logging.getLogger(__name__)


@dataclass
class HandleResult:
    """Outcome of applying a batch of events."""

    applied: int = 0
    dropped: int = 0
    changes: list[DebtChange] = field(default_factory=list)


class PayerEventHandler:
    """Applies Payer events to the Debt and DebtChange collections."""

    def __init__(self, db: Database):
        """Initialize the handler.

        Args:
            db: Database instance the entities are read from and written to
        """
        self.db = db

    def handle_registered_debt(self, event: RegisteredDebt) -> DebtChange:
        """Add a registered debt to the account's balance.

        Creates the account's Debt on first registration.

        Returns:
            The DebtChange recorded for the event
        """
        debt = self.db.get_debt(event.account)
        if debt is None:
            debt = Debt(address=event.account, amount=0)

        debt = replace(debt, amount=debt.amount + event.amount)
        change = DebtChange(
            id=event.metadata.event_id,
            address=event.account,
            amount=event.amount,
            block_timestamp=event.metadata.block_timestamp,
        )
        self._write(debt, change)
        logger.debug("Registered debt %s for %s, balance %s", event.amount, event.account, debt.amount)
        return change

    def handle_paid_back_debt(self, event: PaidBackDebt) -> Optional[DebtChange]:
        """Subtract a repayment from the account's balance.

        A repayment for an account without a Debt is logged and dropped: no
        Debt is created and no DebtChange is recorded.

        Returns:
            The DebtChange recorded for the event, or None if it was dropped
        """
        debt = self.db.get_debt(event.account)
        if debt is None:
            logger.error(
                "[handle_paid_back_debt] Debt #%s not found. Hash: %s",
                event.account,
                event.metadata.transaction_hash,
            )
            return None

        debt = replace(debt, amount=debt.amount - event.amount)
        change = DebtChange(
            id=event.metadata.event_id,
            address=event.account,
            amount=-event.amount,
            block_timestamp=event.metadata.block_timestamp,
        )
        self._write(debt, change)

        if debt.amount < 0:
            logger.warning(
                "Debt #%s is negative after repayment (%s). Hash: %s",
                event.account,
                debt.amount,
                event.metadata.transaction_hash,
            )
        else:
            logger.debug("Paid back %s for %s, balance %s", event.amount, event.account, debt.amount)
        return change

    def handle(self, event: PayerEvent) -> Optional[DebtChange]:
        """Dispatch an event to its handler.

        Raises:
            ValidationError: If the event is not a Payer event
        """
        if isinstance(event, RegisteredDebt):
            return self.handle_registered_debt(event)
        if isinstance(event, PaidBackDebt):
            return self.handle_paid_back_debt(event)
        raise ValidationError(unknown_event_type(type(event).__name__))

    def handle_many(self, events: Iterable[PayerEvent]) -> HandleResult:
        """Apply events one by one in the given order."""
        result = HandleResult()
        for event in events:
            change = self.handle(event)
            if change is None:
                result.dropped += 1
            else:
                result.applied += 1
                result.changes.append(change)
        return result

    def _write(self, debt: Debt, change: DebtChange) -> None:
        """Save the Debt and its DebtChange as one unit."""
        try:
            self.db.save_debt(debt)
            self.db.save_debt_change(change)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
