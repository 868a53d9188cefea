"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay stable
when the database schema changes.
"""

from finsight.domain import entities as domain
from finsight.database.models import (
    Budget as ORMBudget,
    Transaction as ORMTransaction,
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=orm_transaction.amount,
        description=orm_transaction.description,
        date=orm_transaction.date,
        type=domain.TransactionType(orm_transaction.type),
        category=orm_transaction.category,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def budget_to_domain(orm_budget: ORMBudget) -> domain.Budget:
    """Convert SQLAlchemy Budget model to domain Budget entity."""
    return domain.Budget(
        id=orm_budget.id,
        category=orm_budget.category,
        amount=orm_budget.amount,
        month=orm_budget.month,
        created_at=orm_budget.created_at,
        updated_at=orm_budget.updated_at,
    )
