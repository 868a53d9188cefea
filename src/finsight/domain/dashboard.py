"""Dashboard domain service."""

from datetime import date
from typing import Optional

from finsight.database.base import Database
from finsight.domain.aggregation import (
    DEFAULT_WINDOW_MONTHS,
    breakdown_by_category,
    compare_budget_to_actual,
    monthly_series,
    summarize,
    summarize_comparisons,
)
from finsight.domain.categories import CategoryTaxonomy, DEFAULT_TAXONOMY
from finsight.domain.entities import (
    BudgetComparison,
    BudgetComparisonTotals,
    CategoryBreakdown,
    DashboardSummary,
    Insight,
    MonthlyTotals,
    TransactionType,
)
from finsight.domain.insights import derive_insights
from finsight.domain.validation import validate_month, validate_transaction_type
from finsight.utils.date_parser import MonthLike


class DashboardService:
    """Service feeding repository snapshots into the aggregation engine.

    Transactions and budgets are fetched in separate round-trips; skew
    between the two snapshots is not detected.
    """

    def __init__(self, db: Database, taxonomy: CategoryTaxonomy = DEFAULT_TAXONOMY):
        """Initialize dashboard service.

        Args:
            db: Database instance
            taxonomy: Category taxonomy used for display colors
        """
        self.db = db
        self.taxonomy = taxonomy

    def get_summary(self) -> DashboardSummary:
        """Get totals, top expense category and recent transactions."""
        return summarize(self.db.list_transactions())

    def get_category_breakdown(
        self, transaction_type: TransactionType | str = TransactionType.EXPENSE
    ) -> list[CategoryBreakdown]:
        """Get the category breakdown for income or expenses."""
        return breakdown_by_category(
            self.db.list_transactions(),
            validate_transaction_type(transaction_type),
            taxonomy=self.taxonomy,
        )

    def get_monthly_series(
        self,
        window_months: int = DEFAULT_WINDOW_MONTHS,
        anchor: Optional[MonthLike] = None,
    ) -> list[MonthlyTotals]:
        """Get monthly income/expense totals for a trailing window."""
        return monthly_series(
            self.db.list_transactions(), window_months=window_months, anchor=anchor
        )

    def get_budget_comparison(
        self, month: Optional[MonthLike] = None
    ) -> tuple[list[BudgetComparison], BudgetComparisonTotals]:
        """Compare budgets with actual spending for a month.

        Args:
            month: YYYY-MM key or date (defaults to the current month)

        Returns:
            Tuple of (comparison rows, totals across rows)
        """
        month_key = validate_month(month if month is not None else date.today())
        rows = compare_budget_to_actual(
            self.db.list_budgets(month=month_key),
            self.db.list_transactions(transaction_type=TransactionType.EXPENSE),
            month_key,
        )
        return rows, summarize_comparisons(rows)

    def get_insights(self, now: Optional[date] = None) -> list[Insight]:
        """Get ranked spending insights for the month containing `now`."""
        return derive_insights(
            self.db.list_transactions(), self.db.list_budgets(), now=now
        )
