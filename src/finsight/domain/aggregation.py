"""Aggregation engine for dashboard views.

Every function here is a pure computation over a point-in-time snapshot of
transactions and budgets. Inputs are never mutated, nothing is logged and no
I/O is performed, so calls may be made in any order or concurrently.

Division hazards resolve to zero: a share of an empty total is 0.0 and the
percent used of a budget with no spending is 0.0. Records whose date cannot be
placed in a calendar month are left out of month-bucketed views.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from finsight.domain.categories import CategoryTaxonomy, DEFAULT_TAXONOMY
from finsight.domain.entities import (
    Budget,
    BudgetComparison,
    BudgetComparisonTotals,
    CategoryBreakdown,
    CategoryTotal,
    DashboardSummary,
    MonthlyTotals,
    Transaction,
    TransactionType,
)
from finsight.domain.errors import ValidationError
from finsight.utils.date_parser import (
    MonthLike,
    month_key,
    month_label,
    month_of,
    parse_month,
    parse_timestamp,
    shift_month,
)

ZERO = Decimal("0")
RECENT_TRANSACTION_LIMIT = 5
DEFAULT_WINDOW_MONTHS = 6


def to_decimal(value: object) -> Decimal:
    """Coerce an amount from a snapshot into a Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_type(txn: Transaction, transaction_type: TransactionType) -> bool:
    """Check a transaction's type, accepting enum members or raw strings."""
    return txn.type == transaction_type


def total_amount(transactions: Iterable[Transaction]) -> Decimal:
    """Sum the amounts of the given transactions."""
    return sum((to_decimal(txn.amount) for txn in transactions), ZERO)


def totals_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sum amounts per category, keyed in first-seen order."""
    totals: dict[str, Decimal] = {}
    for txn in transactions:
        totals[txn.category] = totals.get(txn.category, ZERO) + to_decimal(txn.amount)
    return totals


def transactions_in_month(
    transactions: Iterable[Transaction],
    month_start: date,
    transaction_type: Optional[TransactionType] = None,
) -> list[Transaction]:
    """Select transactions dated within a calendar month.

    Args:
        transactions: Transactions to filter
        month_start: First day of the month
        transaction_type: Optional type filter

    Returns:
        Matching transactions in input order
    """
    selected = []
    for txn in transactions:
        if month_of(txn.date) != month_start:
            continue
        if transaction_type is not None and not is_type(txn, transaction_type):
            continue
        selected.append(txn)
    return selected


def ratio(part: Decimal, whole: Decimal) -> float:
    """Return part / whole as a float, or 0.0 when whole is zero."""
    if whole == 0:
        return 0.0
    return float(part / whole)


def percent_of(part: Decimal, whole: Decimal) -> float:
    """Return part as a percentage of whole, or 0.0 when either is zero."""
    if whole == 0 or part == 0:
        return 0.0
    return float(part / whole * 100)


def top_category(totals: dict[str, Decimal]) -> Optional[CategoryTotal]:
    """Pick the largest category total.

    Ties go to the category seen first, which is the first key in `totals`.
    """
    best: Optional[CategoryTotal] = None
    for category, amount in totals.items():
        if best is None or amount > best.amount:
            best = CategoryTotal(category=category, amount=amount)
    return best


def _created_sort_key(txn: Transaction) -> float:
    """Sort key for recency; records without a usable created_at sort last."""
    created_at = parse_timestamp(txn.created_at)
    if created_at is None:
        return float("-inf")
    return created_at.timestamp()


def summarize(transactions: Sequence[Transaction]) -> DashboardSummary:
    """Compute the dashboard headline figures.

    Args:
        transactions: Snapshot of all transactions

    Returns:
        DashboardSummary with totals, net, the top expense category and the
        five most recently created transactions
    """
    income = [txn for txn in transactions if is_type(txn, TransactionType.INCOME)]
    expenses = [txn for txn in transactions if is_type(txn, TransactionType.EXPENSE)]

    total_income = total_amount(income)
    total_expense = total_amount(expenses)

    # sorted() is stable with reverse=True, so equal timestamps keep input order
    recent = sorted(transactions, key=_created_sort_key, reverse=True)

    return DashboardSummary(
        total_income=total_income,
        total_expense=total_expense,
        net=total_income - total_expense,
        transaction_count=len(transactions),
        top_expense_category=top_category(totals_by_category(expenses)),
        recent_transactions=tuple(recent[:RECENT_TRANSACTION_LIMIT]),
    )


def breakdown_by_category(
    transactions: Sequence[Transaction],
    transaction_type: TransactionType,
    taxonomy: CategoryTaxonomy = DEFAULT_TAXONOMY,
) -> list[CategoryBreakdown]:
    """Break down one transaction type by category.

    Shares are computed against the total of the filtered type, not the grand
    total. Rows are sorted by amount descending; ties keep first-seen order.

    Args:
        transactions: Snapshot of transactions
        transaction_type: Type to include
        taxonomy: Taxonomy supplying display colors

    Returns:
        List of CategoryBreakdown rows, empty if nothing matched
    """
    totals = totals_by_category(
        txn for txn in transactions if is_type(txn, transaction_type)
    )
    group_total = sum(totals.values(), ZERO)
    if not totals or group_total == 0:
        return []

    rows = [
        CategoryBreakdown(
            category=category,
            amount=amount,
            share=ratio(amount, group_total),
            color=taxonomy.color_for(category),
        )
        for category, amount in totals.items()
    ]
    return sorted(rows, key=lambda row: row.amount, reverse=True)


def monthly_series(
    transactions: Sequence[Transaction],
    window_months: int = DEFAULT_WINDOW_MONTHS,
    anchor: Optional[MonthLike] = None,
) -> list[MonthlyTotals]:
    """Build a dense trailing series of monthly income and expense totals.

    Args:
        transactions: Snapshot of transactions
        window_months: Number of calendar months in the window
        anchor: Date or YYYY-MM key of the last month (defaults to today)

    Returns:
        Exactly `window_months` entries, oldest first, one per calendar month

    Raises:
        ValidationError: If window_months is less than 1
    """
    if window_months < 1:
        raise ValidationError("Monthly series window must be at least 1 month")

    anchor_month = parse_month(anchor if anchor is not None else date.today())
    months = [
        shift_month(anchor_month, offset)
        for offset in range(-(window_months - 1), 1)
    ]

    income: dict[date, Decimal] = defaultdict(lambda: ZERO)
    expense: dict[date, Decimal] = defaultdict(lambda: ZERO)
    window = set(months)
    for txn in transactions:
        bucket = month_of(txn.date)
        if bucket is None or bucket not in window:
            continue
        if is_type(txn, TransactionType.INCOME):
            income[bucket] += to_decimal(txn.amount)
        elif is_type(txn, TransactionType.EXPENSE):
            expense[bucket] += to_decimal(txn.amount)

    return [
        MonthlyTotals(
            month=month_key(month),
            label=month_label(month),
            total_income=income[month],
            total_expense=expense[month],
        )
        for month in months
    ]


def budgets_for_month(budgets: Iterable[Budget], month_start: date) -> list[Budget]:
    """Select budgets whose month key falls in the given calendar month.

    Budgets with a malformed month key are skipped.
    """
    selected = []
    for budget in budgets:
        try:
            budget_month = parse_month(budget.month)
        except ValueError:
            continue
        if budget_month == month_start:
            selected.append(budget)
    return selected


def compare_budget(budget: Budget, spent_by_category: dict[str, Decimal]) -> BudgetComparison:
    """Compare a single budget with the category spending for its month."""
    budgeted = to_decimal(budget.amount)
    actual = spent_by_category.get(budget.category, ZERO)
    return BudgetComparison(
        category=budget.category,
        budgeted=budgeted,
        actual=actual,
        delta=budgeted - actual,
        percent_used=percent_of(actual, budgeted),
    )


def compare_budget_to_actual(
    budgets: Sequence[Budget],
    transactions: Sequence[Transaction],
    month: MonthLike,
) -> list[BudgetComparison]:
    """Compare each budget of a month with the actual expenses.

    The comparison is budget-centric: expenses in categories without a budget
    produce no row.

    Args:
        budgets: Snapshot of budgets (any months)
        transactions: Snapshot of transactions (any months and types)
        month: YYYY-MM key or a date inside the month

    Returns:
        One BudgetComparison per budget, sorted by budgeted amount descending

    Raises:
        ValueError: If month cannot be parsed
    """
    month_start = parse_month(month)
    spent = totals_by_category(
        transactions_in_month(transactions, month_start, TransactionType.EXPENSE)
    )
    rows = [compare_budget(budget, spent) for budget in budgets_for_month(budgets, month_start)]
    return sorted(rows, key=lambda row: row.budgeted, reverse=True)


def summarize_comparisons(rows: Sequence[BudgetComparison]) -> BudgetComparisonTotals:
    """Total the budgeted, actual and remaining amounts of a comparison."""
    total_budgeted = sum((row.budgeted for row in rows), ZERO)
    total_actual = sum((row.actual for row in rows), ZERO)
    return BudgetComparisonTotals(
        total_budgeted=total_budgeted,
        total_actual=total_actual,
        remaining=total_budgeted - total_actual,
    )
