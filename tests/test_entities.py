"""Tests for domain entities and events."""

import pytest

from payerindex.domain.entities import Debt, DebtChange, debt_change_id
from payerindex.domain.events import EVENT_TYPES, EventMetadata, PaidBackDebt, RegisteredDebt

TX_HASH = "0x" + "ab" * 32
ACCOUNT = "0x0000000000000000000000000000000000000001"


class TestDebt:
    """Tests for Debt entity."""

    def test_create_debt(self):
        """Test creating a Debt entity."""
        debt = Debt(address=ACCOUNT, amount=10**30)
        assert debt.address == ACCOUNT
        assert debt.amount == 10**30

    def test_debt_immutability(self):
        """Test that Debt entities are immutable."""
        debt = Debt(address=ACCOUNT, amount=1)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            debt.amount = 2

    def test_debt_equality(self):
        """Test Debt entity equality."""
        assert Debt(address=ACCOUNT, amount=1) == Debt(address=ACCOUNT, amount=1)
        assert Debt(address=ACCOUNT, amount=1) != Debt(address=ACCOUNT, amount=2)


class TestDebtChange:
    """Tests for DebtChange entity."""

    def test_debt_change_id_format(self):
        """Test ids are the transaction hash and log index joined by a dash."""
        assert debt_change_id(TX_HASH, 0) == f"{TX_HASH}-0"
        assert debt_change_id(TX_HASH, 12) == f"{TX_HASH}-12"

    def test_debt_change_immutability(self):
        """Test that DebtChange entities are immutable."""
        change = DebtChange(id="x-1", address=ACCOUNT, amount=-5, block_timestamp=1)
        with pytest.raises(Exception):
            change.amount = 5


class TestEvents:
    """Tests for event types."""

    def test_metadata_event_id(self):
        """Test EventMetadata.event_id matches debt_change_id."""
        metadata = EventMetadata(transaction_hash=TX_HASH, log_index=3, block_timestamp=100)
        assert metadata.event_id == debt_change_id(TX_HASH, 3)
        assert metadata.block_number is None

    def test_event_type_names(self):
        """Test the event registry is keyed by contract event name."""
        assert EVENT_TYPES == {"RegisteredDebt": RegisteredDebt, "PaidBackDebt": PaidBackDebt}

    def test_paid_back_debt_carries_remaining_debt(self):
        """Test PaidBackDebt keeps the contract's remainingDebt."""
        metadata = EventMetadata(transaction_hash=TX_HASH, log_index=1, block_timestamp=100)
        event = PaidBackDebt(account=ACCOUNT, amount=5, remaining_debt=95, metadata=metadata)
        assert event.remaining_debt == 95
        assert event.event_type == "PaidBackDebt"
