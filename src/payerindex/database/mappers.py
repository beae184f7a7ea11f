"""Mapper functions to convert between domain models and SQLAlchemy models.

Amounts cross this boundary as ints on the domain side and base-10 strings on
the database side.
"""

from payerindex.domain import entities as domain
from payerindex.database.models import (
    Debt as ORMDebt,
    DebtChange as ORMDebtChange,
)


def debt_to_domain(orm_debt: ORMDebt) -> domain.Debt:
    """Convert SQLAlchemy Debt model to domain Debt entity."""
    return domain.Debt(
        address=orm_debt.address,
        amount=int(orm_debt.amount),
    )


def debt_change_to_domain(orm_change: ORMDebtChange) -> domain.DebtChange:
    """Convert SQLAlchemy DebtChange model to domain DebtChange entity."""
    return domain.DebtChange(
        id=orm_change.id,
        address=orm_change.address,
        amount=int(orm_change.amount),
        block_timestamp=orm_change.block_timestamp,
    )


def debt_change_to_orm(change: domain.DebtChange) -> ORMDebtChange:
    """Convert domain DebtChange entity to a new SQLAlchemy DebtChange row."""
    return ORMDebtChange(
        id=change.id,
        address=change.address,
        amount=str(change.amount),
        block_timestamp=change.block_timestamp,
    )
