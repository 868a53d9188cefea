"""Rule-based spending insights.

Insights come from a fixed, ordered list of threshold rules evaluated over the
current and previous calendar month. Every rule runs; the combined output is
then cut to the first INSIGHT_LIMIT entries, so rule order is priority order.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Sequence

from finsight.domain.aggregation import (
    ZERO,
    budgets_for_month,
    compare_budget,
    percent_of,
    top_category,
    totals_by_category,
    transactions_in_month,
)
from finsight.domain.entities import (
    Budget,
    BudgetComparison,
    Insight,
    InsightKind,
    Transaction,
    TransactionType,
)
from finsight.utils.date_parser import MonthLike, parse_month, shift_month

INSIGHT_LIMIT = 6

OVER_BUDGET_PERCENT = 100.0
WARNING_BAND_PERCENT = 80.0
ON_TRACK_PERCENT = 50.0
MONTHLY_CHANGE_PERCENT = 5.0
CATEGORY_SPIKE_PERCENT = 50.0
DOMINANT_CATEGORY_PERCENT = 30.0


@dataclass(frozen=True)
class InsightContext:
    """Aggregates shared by all insight rules."""

    comparisons: tuple[BudgetComparison, ...]
    current_by_category: dict[str, Decimal]
    previous_by_category: dict[str, Decimal]
    current_total: Decimal
    previous_total: Decimal


def format_money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


def format_percent(percent: float) -> str:
    return f"{percent:.1f}%"


def build_context(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    current_month: date,
) -> InsightContext:
    """Aggregate the current and previous month for rule evaluation."""
    previous_month = shift_month(current_month, -1)
    current_by_category = totals_by_category(
        transactions_in_month(transactions, current_month, TransactionType.EXPENSE)
    )
    previous_by_category = totals_by_category(
        transactions_in_month(transactions, previous_month, TransactionType.EXPENSE)
    )
    comparisons = tuple(
        compare_budget(budget, current_by_category)
        for budget in budgets_for_month(budgets, current_month)
    )
    return InsightContext(
        comparisons=comparisons,
        current_by_category=current_by_category,
        previous_by_category=previous_by_category,
        current_total=sum(current_by_category.values(), ZERO),
        previous_total=sum(previous_by_category.values(), ZERO),
    )


def over_budget_rule(context: InsightContext) -> list[Insight]:
    """Warn about every budget whose spending exceeds the ceiling."""
    return [
        Insight(
            kind=InsightKind.WARNING,
            title=f"Over Budget: {row.category}",
            description=f"You've exceeded your budget by {format_money(row.actual - row.budgeted)}",
            value=format_percent(row.percent_used),
        )
        for row in context.comparisons
        if row.actual > row.budgeted
    ]


def budget_warning_rule(context: InsightContext) -> list[Insight]:
    """Warn about budgets that are more than 80% and at most 100% used."""
    return [
        Insight(
            kind=InsightKind.WARNING,
            title=f"Budget Warning: {row.category}",
            description=f"You've used {format_percent(row.percent_used)} of your budget",
            value=f"{format_money(row.delta)} left",
        )
        for row in context.comparisons
        if WARNING_BAND_PERCENT < row.percent_used <= OVER_BUDGET_PERCENT
    ]


def on_track_rule(context: InsightContext) -> list[Insight]:
    """Acknowledge budgets that are less than half used."""
    return [
        Insight(
            kind=InsightKind.SUCCESS,
            title=f"On Track: {row.category}",
            description="Great job staying within budget!",
            value=f"{format_percent(row.percent_used)} used",
        )
        for row in context.comparisons
        if row.percent_used < ON_TRACK_PERCENT
    ]


def monthly_change_rule(context: InsightContext) -> list[Insight]:
    """Report a month-over-month change in total expenses beyond 5%.

    Disabled when the previous month has no expenses.
    """
    if context.previous_total <= 0:
        return []

    change_amount = context.current_total - context.previous_total
    change_percent = float(change_amount / context.previous_total * 100)
    if abs(change_percent) <= MONTHLY_CHANGE_PERCENT:
        return []

    increased = change_percent > 0
    return [
        Insight(
            kind=InsightKind.WARNING if increased else InsightKind.SUCCESS,
            title=f"Monthly Spending {'Increased' if increased else 'Decreased'}",
            description=(
                f"{'Spent more' if increased else 'Saved'} "
                f"{format_money(abs(change_amount))} compared to last month"
            ),
            value=f"{'+' if increased else ''}{format_percent(change_percent)}",
        )
    ]


def category_spike_rule(context: InsightContext) -> list[Insight]:
    """Flag categories that grew more than 50% over the previous month."""
    insights = []
    for category, amount in context.current_by_category.items():
        previous = context.previous_by_category.get(category, ZERO)
        if previous <= 0:
            continue
        change_percent = float((amount - previous) / previous * 100)
        if change_percent > CATEGORY_SPIKE_PERCENT:
            insights.append(
                Insight(
                    kind=InsightKind.INFO,
                    title=f"{category} Spending Spike",
                    description=f"{format_percent(change_percent)} increase from last month",
                    value=f"+{format_money(amount - previous)}",
                )
            )
    return insights


def dominant_category_rule(context: InsightContext) -> list[Insight]:
    """Point out a category taking more than 30% of this month's expenses."""
    top = top_category(context.current_by_category)
    if top is None:
        return []

    share = percent_of(top.amount, context.current_total)
    if share <= DOMINANT_CATEGORY_PERCENT:
        return []

    return [
        Insight(
            kind=InsightKind.INFO,
            title="Top Spending Category",
            description=f"{top.category} accounts for {format_percent(share)} of your monthly expenses",
            value=format_money(top.amount),
        )
    ]


GETTING_STARTED = Insight(
    kind=InsightKind.INFO,
    title="Getting Started",
    description="Set up some budgets to get personalized spending insights",
)

InsightRule = Callable[[InsightContext], list[Insight]]

RULES: tuple[InsightRule, ...] = (
    over_budget_rule,
    budget_warning_rule,
    on_track_rule,
    monthly_change_rule,
    category_spike_rule,
    dominant_category_rule,
)


def derive_insights(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    now: Optional[MonthLike] = None,
) -> list[Insight]:
    """Derive ranked spending insights for the month containing `now`.

    Args:
        transactions: Snapshot of transactions
        budgets: Snapshot of budgets
        now: Reference date or YYYY-MM key (defaults to today)

    Returns:
        At most INSIGHT_LIMIT insights in rule priority order; a single
        "Getting Started" insight when no rule fires
    """
    current_month = parse_month(now if now is not None else date.today())
    context = build_context(transactions, budgets, current_month)

    insights: list[Insight] = []
    for rule in RULES:
        insights.extend(rule(context))

    if not insights:
        return [GETTING_STARTED]
    return insights[:INSIGHT_LIMIT]
