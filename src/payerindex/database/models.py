"""SQLAlchemy models for payerindex database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

# Amounts are stored as base-10 strings: SQL numeric types cannot hold
# arbitrary-precision integers on every backend (SQLite converts to float).


class Debt(Base):
    """Running debt balance per account."""

    __tablename__ = "debts"

    address = Column(String(42), primary_key=True)
    amount = Column(String, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class DebtChange(Base):
    """Append-only audit record of one balance-affecting event."""

    __tablename__ = "debt_changes"

    # Insertion order, used to list changes in processing order
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False)
    address = Column(String(42), nullable=False, index=True)
    amount = Column(String, nullable=False)
    block_timestamp = Column(Integer, nullable=False)
    indexed_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
