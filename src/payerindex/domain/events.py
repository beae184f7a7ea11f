"""Typed Payer contract events.

Events are built from already-normalised values: addresses are lowercase
``0x`` hex, transaction hashes lowercase ``0x`` hex. Use
``payerindex.domain.decoding`` to build them from raw logs or JSON records.
"""

from dataclasses import dataclass
from typing import Optional

from payerindex.domain.entities import debt_change_id

# Largest timestamp a signed 64-bit SQL INTEGER column holds
MAX_BLOCK_TIMESTAMP = 2**63 - 1


@dataclass(frozen=True)
class EventMetadata:
    """Ambient transaction/block data attached to every event."""

    transaction_hash: str
    log_index: int
    block_timestamp: int
    block_number: Optional[int] = None

    @property
    def event_id(self) -> str:
        """Unique id of the event within the chain's event stream."""
        return debt_change_id(self.transaction_hash, self.log_index)


@dataclass(frozen=True)
class RegisteredDebt:
    """Debt registered for ``account``."""

    account: str
    amount: int
    metadata: EventMetadata

    event_type = "RegisteredDebt"


@dataclass(frozen=True)
class PaidBackDebt:
    """Debt paid back to ``account``.

    ``remaining_debt`` is reported by the contract but not used to derive
    balances.
    """

    account: str
    amount: int
    remaining_debt: int
    metadata: EventMetadata

    event_type = "PaidBackDebt"


PayerEvent = RegisteredDebt | PaidBackDebt

EVENT_TYPES = {
    RegisteredDebt.event_type: RegisteredDebt,
    PaidBackDebt.event_type: PaidBackDebt,
}
