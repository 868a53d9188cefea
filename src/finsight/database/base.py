"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from finsight.domain.entities import Budget, Transaction, TransactionType


class Database(ABC):
    """Abstract database interface for finsight."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        description: str,
        date: date,
        transaction_type: TransactionType,
        category: str,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        amount: Decimal,
        description: str,
        date: date,
        transaction_type: TransactionType,
        category: str,
    ) -> None:
        """Replace all mutable fields of a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_type: Optional[TransactionType] = None,
        category: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest date first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            transaction_type: Optional type filter
            category: Optional exact category filter
        """
        pass

    # Budget operations
    @abstractmethod
    def create_budget(self, category: str, amount: Decimal, month: str) -> int:
        """Create a budget. Returns budget ID.

        Raises:
            ConflictError: If a budget already exists for category and month
        """
        pass

    @abstractmethod
    def get_budget(self, budget_id: int) -> Optional[Budget]:
        """Get budget by ID."""
        pass

    @abstractmethod
    def get_budget_for(self, category: str, month: str) -> Optional[Budget]:
        """Get the budget for a category and month, if any."""
        pass

    @abstractmethod
    def update_budget(
        self, budget_id: int, category: str, amount: Decimal, month: str
    ) -> None:
        """Replace all mutable fields of a budget.

        Raises:
            NotFoundError: If the budget does not exist
            ConflictError: If another budget already uses category and month
        """
        pass

    @abstractmethod
    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget.

        Raises:
            NotFoundError: If the budget does not exist
        """
        pass

    @abstractmethod
    def list_budgets(self, month: Optional[str] = None) -> list[Budget]:
        """List budgets ordered by category, optionally for one month."""
        pass
