"""Shared pytest fixtures for payerindex tests."""

import tempfile
import os
from itertools import count
from pathlib import Path
import pytest

from payerindex.database.factories import create_memory_database, create_sqlite_database
from payerindex.domain.debt import DebtService
from payerindex.domain.events import EventMetadata, PaidBackDebt, RegisteredDebt
from payerindex.domain.payer import PayerEventHandler

TX_HASH = "0xa16081f360e3847006db660bae1c6d1b2e17ec2a" + "0" * 24
BLOCK_TIMESTAMP = 1700000000


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an empty in-memory database."""
    db = create_memory_database()
    db.connect()
    db.initialize_schema()
    yield db
    db.disconnect()


@pytest.fixture(params=["memory", "sqlite"])
def db(request):
    """Run a test against every Database implementation."""
    return request.getfixturevalue("memory_db" if request.param == "memory" else "temp_db")


@pytest.fixture
def handler(db):
    """Create a PayerEventHandler on the parametrized database."""
    return PayerEventHandler(db)


@pytest.fixture
def debt_service(db):
    """Create a DebtService on the parametrized database."""
    return DebtService(db)


@pytest.fixture
def make_metadata():
    """Build EventMetadata with a fresh log index on every call."""
    log_indices = count(1)

    def _make(tx_hash: str = TX_HASH, log_index: int | None = None, block_timestamp: int = BLOCK_TIMESTAMP):
        if log_index is None:
            log_index = next(log_indices)
        return EventMetadata(
            transaction_hash=tx_hash,
            log_index=log_index,
            block_timestamp=block_timestamp,
        )

    return _make


@pytest.fixture
def registered_debt(make_metadata):
    """Build RegisteredDebt events."""

    def _make(account: str, amount: int, **metadata):
        return RegisteredDebt(account=account, amount=amount, metadata=make_metadata(**metadata))

    return _make


@pytest.fixture
def paid_back_debt(make_metadata):
    """Build PaidBackDebt events."""

    def _make(account: str, amount: int, remaining_debt: int = 0, **metadata):
        return PaidBackDebt(
            account=account,
            amount=amount,
            remaining_debt=remaining_debt,
            metadata=make_metadata(**metadata),
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
