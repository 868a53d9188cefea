"""Category taxonomy shared by transactions, budgets and the dashboard."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from finsight.domain.entities import TransactionType

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Education",
    "Travel",
    "Personal Care",
    "Home & Garden",
    "Insurance",
    "Taxes",
    "Gifts & Donations",
    "Business",
    "Other",
)

INCOME_CATEGORIES: tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Business",
    "Investments",
    "Rental",
    "Gifts",
    "Refunds",
    "Other",
)

CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        # Expense categories
        "Food & Dining": "#FF6B6B",
        "Transportation": "#4ECDC4",
        "Shopping": "#45B7D1",
        "Entertainment": "#96CEB4",
        "Bills & Utilities": "#FFEAA7",
        "Healthcare": "#DDA0DD",
        "Education": "#98D8C8",
        "Travel": "#F7DC6F",
        "Personal Care": "#BB8FCE",
        "Home & Garden": "#85C1E9",
        "Insurance": "#F8C471",
        "Taxes": "#EC7063",
        "Gifts & Donations": "#58D68D",
        "Business": "#5DADE2",
        "Other": "#BDC3C7",
        # Income categories
        "Salary": "#2ECC71",
        "Freelance": "#3498DB",
        "Investments": "#F39C12",
        "Rental": "#9B59B6",
        "Gifts": "#1ABC9C",
        "Refunds": "#34495E",
    }
)

DEFAULT_COLOR = "#BDC3C7"


@dataclass(frozen=True)
class CategoryTaxonomy:
    """Immutable set of category names and their display colors.

    Category names are opaque grouping keys for the aggregation engine; the
    taxonomy only supplies ordering and colors for presentation.
    """

    expense_categories: tuple[str, ...]
    income_categories: tuple[str, ...]
    colors: Mapping[str, str]
    default_color: str = DEFAULT_COLOR

    def categories_for(self, transaction_type: TransactionType) -> tuple[str, ...]:
        """Return the ordered category names for a transaction type."""
        if TransactionType(transaction_type) is TransactionType.INCOME:
            return self.income_categories
        return self.expense_categories

    def color_for(self, category: Optional[str]) -> str:
        """Return the display color for a category, or the fallback color."""
        if category is None:
            return self.default_color
        return self.colors.get(category, self.default_color)

    def is_known(self, category: str) -> bool:
        """Check whether a category name belongs to the taxonomy."""
        return category in self.expense_categories or category in self.income_categories


DEFAULT_TAXONOMY = CategoryTaxonomy(
    expense_categories=EXPENSE_CATEGORIES,
    income_categories=INCOME_CATEGORIES,
    colors=CATEGORY_COLORS,
)
