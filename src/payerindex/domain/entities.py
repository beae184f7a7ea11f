"""Domain model entities for payerindex.

These are pure data classes representing the derived state, independent of
the database schema. Amounts are plain Python ints, so balances beyond the
uint256 range are kept exactly.
"""

from dataclasses import dataclass


def debt_change_id(transaction_hash: str, log_index: int) -> str:
    """Build the DebtChange id for an event: ``{txHash}-{logIndex}``."""
    return f"{transaction_hash}-{log_index}"


@dataclass(frozen=True)
class Debt:
    """Running debt balance of one account."""

    address: str
    amount: int


@dataclass(frozen=True)
class DebtChange:
    """Immutable audit record of one balance-affecting event.

    ``amount`` is positive for a registration and negative for a repayment.
    """

    id: str
    address: str
    amount: int
    block_timestamp: int
