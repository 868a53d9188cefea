"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from finsight.database.base import Database
from finsight.domain.entities import Transaction as TransactionEntity, TransactionType
from finsight.domain.errors import NotFoundError, transaction_not_found
from finsight.domain.validation import (
    validate_amount,
    validate_category,
    validate_description,
    validate_transaction_type,
)
from finsight.utils.date_parser import MonthLike, get_month_range


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        amount: Decimal,
        description: str,
        date: date,
        category: str,
        transaction_type: TransactionType | str = TransactionType.EXPENSE,
    ) -> int:
        """Create a transaction.

        Args:
            amount: Positive transaction amount
            description: Description (1-200 characters after trimming)
            date: Transaction date
            category: Category name
            transaction_type: income or expense (default: expense)

        Returns:
            Transaction ID

        Raises:
            ValidationError: If any field is invalid
        """
        return self.db.create_transaction(
            amount=validate_amount(amount),
            description=validate_description(description),
            date=date,
            transaction_type=validate_transaction_type(transaction_type),
            category=validate_category(category),
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise if missing.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
        category: Optional[str] = None,
        transaction_type: Optional[TransactionType | str] = None,
    ) -> None:
        """Update a transaction.

        Fields left as None keep their current value; the record is then
        written back as a whole.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If any provided field is invalid
        """
        txn = self.require_transaction(transaction_id)

        self.db.update_transaction(
            transaction_id=transaction_id,
            amount=validate_amount(amount if amount is not None else txn.amount),
            description=validate_description(
                description if description is not None else txn.description
            ),
            date=date if date is not None else txn.date,
            transaction_type=validate_transaction_type(
                transaction_type if transaction_type is not None else txn.type
            ),
            category=validate_category(category if category is not None else txn.category),
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        month: Optional[MonthLike] = None,
        transaction_type: Optional[TransactionType | str] = None,
        category: Optional[str] = None,
    ) -> list[TransactionEntity]:
        """List transactions, newest first.

        Args:
            month: Optional YYYY-MM key or date restricting to one month
            transaction_type: Optional income/expense filter
            category: Optional category filter

        Raises:
            ValidationError: If the type filter is invalid
            ValueError: If the month cannot be parsed
        """
        start_date = end_date = None
        if month is not None:
            start_date, end_date = get_month_range(month)

        type_filter = None
        if transaction_type is not None:
            type_filter = validate_transaction_type(transaction_type)

        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            transaction_type=type_filter,
            category=category,
        )
