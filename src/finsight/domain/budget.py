"""Budget domain service."""

from typing import Optional
from decimal import Decimal
from finsight.database.base import Database
from finsight.domain.entities import Budget
from finsight.domain.errors import (
    ConflictError,
    NotFoundError,
    budget_not_found,
    duplicate_budget,
)
from finsight.domain.validation import validate_amount, validate_category, validate_month
from finsight.utils.date_parser import MonthLike


class BudgetService:
    """Service for managing monthly category budgets."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_budget(self, category: str, amount: Decimal, month: MonthLike) -> int:
        """Create a budget for a category and month.

        Args:
            category: Category name
            amount: Positive budget ceiling
            month: YYYY-MM key or a date inside the month

        Returns:
            Budget ID

        Raises:
            ValidationError: If any field is invalid
            ConflictError: If a budget already exists for this category and month
        """
        category = validate_category(category)
        amount = validate_amount(amount, label="Budget amount")
        month_key = validate_month(month)

        if self.db.get_budget_for(category, month_key) is not None:
            raise ConflictError(duplicate_budget(category, month_key))

        return self.db.create_budget(category=category, amount=amount, month=month_key)

    def get_budget(self, budget_id: int) -> Optional[Budget]:
        """Get budget by ID.

        Returns:
            Budget entity or None if not found
        """
        return self.db.get_budget(budget_id)

    def require_budget(self, budget_id: int) -> Budget:
        """Get budget by ID or raise if missing.

        Raises:
            NotFoundError: If the budget doesn't exist
        """
        budget = self.db.get_budget(budget_id)
        if budget is None:
            raise NotFoundError(budget_not_found(budget_id))
        return budget

    def update_budget(
        self,
        budget_id: int,
        category: Optional[str] = None,
        amount: Optional[Decimal] = None,
        month: Optional[MonthLike] = None,
    ) -> None:
        """Update a budget, keeping fields that are not provided.

        Raises:
            NotFoundError: If the budget doesn't exist
            ValidationError: If any provided field is invalid
            ConflictError: If another budget already uses the category and month
        """
        budget = self.require_budget(budget_id)
        self.db.update_budget(
            budget_id=budget_id,
            category=validate_category(category if category is not None else budget.category),
            amount=validate_amount(
                amount if amount is not None else budget.amount, label="Budget amount"
            ),
            month=validate_month(month if month is not None else budget.month),
        )

    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget.

        Raises:
            NotFoundError: If the budget doesn't exist
        """
        self.db.delete_budget(budget_id)

    def list_budgets(self, month: Optional[MonthLike] = None) -> list[Budget]:
        """List budgets ordered by category.

        Args:
            month: Optional YYYY-MM key or date restricting to one month

        Raises:
            ValidationError: If the month is not a valid YYYY-MM key
        """
        month_key = validate_month(month) if month is not None else None
        return self.db.list_budgets(month=month_key)
