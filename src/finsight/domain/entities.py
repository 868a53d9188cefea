"""Domain model entities for finsight.

These are pure data classes representing business concepts, independent of
database schema. Stored records (transactions, budgets) and the derived view
models produced by the aggregation engine both live here.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"


class InsightKind(str, Enum):
    """Severity of a spending insight."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    amount: Decimal
    description: str
    date: date
    type: TransactionType
    category: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Budget:
    """Monthly spending ceiling for one category."""

    id: int
    category: str
    amount: Decimal
    month: str  # YYYY-MM
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class CategoryTotal:
    """Summed amount for a single category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """One slice of a category breakdown."""

    category: str
    amount: Decimal
    share: float
    color: str


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense totals for one calendar month."""

    month: str
    label: str
    total_income: Decimal
    total_expense: Decimal


@dataclass(frozen=True)
class BudgetComparison:
    """Budgeted versus actual spending for one category and month."""

    category: str
    budgeted: Decimal
    actual: Decimal
    delta: Decimal
    percent_used: float


@dataclass(frozen=True)
class BudgetComparisonTotals:
    """Totals across all rows of a budget comparison."""

    total_budgeted: Decimal
    total_actual: Decimal
    remaining: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for the dashboard."""

    total_income: Decimal
    total_expense: Decimal
    net: Decimal
    transaction_count: int
    top_expense_category: Optional[CategoryTotal]
    recent_transactions: tuple[Transaction, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Insight:
    """Short human-readable observation derived from threshold rules."""

    kind: InsightKind
    title: str
    description: str
    value: Optional[str] = None
