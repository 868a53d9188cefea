"""Tests for the insight evaluator."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from finsight.domain.entities import InsightKind, TransactionType
from finsight.domain.insights import (
    GETTING_STARTED,
    INSIGHT_LIMIT,
    derive_insights,
    format_money,
    format_percent,
)

NOW = date(2024, 6, 20)


def titles(insights):
    return [insight.title for insight in insights]


def find(insights, title):
    return [insight for insight in insights if insight.title == title]


class TestFormatting:
    def test_format_money(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"
        assert format_money(Decimal("0")) == "$0.00"

    def test_format_percent(self):
        assert format_percent(90.0) == "90.0%"
        assert format_percent(33.333) == "33.3%"


class TestFallback:
    def test_empty_input_yields_getting_started(self):
        insights = derive_insights([], [], now=NOW)

        assert insights == [GETTING_STARTED]
        assert insights[0].kind == InsightKind.INFO
        assert insights[0].title == "Getting Started"

    def test_only_old_transactions_yields_getting_started(self, make_txn):
        transactions = [make_txn("100", txn_date=date(2024, 2, 10))]

        assert derive_insights(transactions, [], now=NOW) == [GETTING_STARTED]

    def test_budgets_for_other_months_ignored(self, make_budget):
        budgets = [make_budget("Food & Dining", "100", "2024-05")]

        assert derive_insights([], budgets, now=NOW) == [GETTING_STARTED]


class TestBudgetRules:
    def test_budget_warning_scenario(self, make_txn, make_budget):
        budgets = [make_budget("Food", "200", "2024-06")]
        transactions = [make_txn("180", category="Food", txn_date=date(2024, 6, 5))]

        insights = derive_insights(transactions, budgets, now=NOW)

        warnings = [insight for insight in insights if insight.kind == InsightKind.WARNING]
        assert len(warnings) == 1
        assert warnings[0].title == "Budget Warning: Food"
        assert warnings[0].description == "You've used 90.0% of your budget"
        assert warnings[0].value == "$20.00 left"

    def test_over_budget(self, make_txn, make_budget):
        budgets = [make_budget("Food & Dining", "100")]
        transactions = [make_txn("120", txn_date=date(2024, 6, 2))]

        insights = derive_insights(transactions, budgets, now=NOW)

        over = find(insights, "Over Budget: Food & Dining")
        assert len(over) == 1
        assert over[0].kind == InsightKind.WARNING
        assert over[0].description == "You've exceeded your budget by $20.00"
        assert over[0].value == "120.0%"
        assert not find(insights, "Budget Warning: Food & Dining")

    def test_exactly_full_budget_is_warning_band(self, make_txn, make_budget):
        budgets = [make_budget("Travel", "100")]
        transactions = [make_txn("100", category="Travel", txn_date=date(2024, 6, 2))]

        insights = derive_insights(transactions, budgets, now=NOW)

        assert find(insights, "Budget Warning: Travel")
        assert not find(insights, "Over Budget: Travel")

    def test_eighty_percent_is_not_a_warning(self, make_txn, make_budget):
        budgets = [make_budget("Travel", "100")]
        transactions = [make_txn("80", category="Travel", txn_date=date(2024, 6, 2))]

        insights = derive_insights(transactions, budgets, now=NOW)

        assert not find(insights, "Budget Warning: Travel")
        assert not find(insights, "On Track: Travel")

    def test_on_track(self, make_txn, make_budget):
        budgets = [make_budget("Shopping", "500")]
        transactions = [make_txn("100", category="Shopping", txn_date=date(2024, 6, 2))]

        insights = derive_insights(transactions, budgets, now=NOW)

        on_track = find(insights, "On Track: Shopping")
        assert len(on_track) == 1
        assert on_track[0].kind == InsightKind.SUCCESS
        assert on_track[0].value == "20.0% used"

    def test_unused_budget_is_on_track(self, make_budget):
        insights = derive_insights([], [make_budget("Shopping", "500")], now=NOW)

        assert titles(insights) == ["On Track: Shopping"]

    def test_rules_emit_in_priority_order(self, make_txn, make_budget):
        budgets = [
            make_budget("Shopping", "500"),
            make_budget("Travel", "100"),
            make_budget("Food & Dining", "100"),
        ]
        transactions = [
            make_txn("10", category="Shopping", txn_date=date(2024, 6, 2)),
            make_txn("90", category="Travel", txn_date=date(2024, 6, 2)),
            make_txn("150", category="Food & Dining", txn_date=date(2024, 6, 2)),
        ]

        insights = derive_insights(transactions, budgets, now=NOW)

        assert titles(insights)[:3] == [
            "Over Budget: Food & Dining",
            "Budget Warning: Travel",
            "On Track: Shopping",
        ]

    def test_income_does_not_count_against_budget(self, make_txn, make_budget):
        budgets = [make_budget("Food & Dining", "100")]
        transactions = [
            make_txn("500", transaction_type=TransactionType.INCOME, txn_date=date(2024, 6, 2))
        ]

        insights = derive_insights(transactions, budgets, now=NOW)

        assert titles(insights) == ["On Track: Food & Dining"]

    def test_unparseable_dates_do_not_count(self, make_txn, make_budget):
        budgets = [make_budget("Food & Dining", "100")]
        transactions = [
            replace(make_txn("500"), date="garbage"),
            replace(make_txn("50"), date=None),
            make_txn("20", txn_date=date(2024, 6, 3)),
        ]

        insights = derive_insights(transactions, budgets, now=NOW)

        on_track = find(insights, "On Track: Food & Dining")
        assert len(on_track) == 1
        assert on_track[0].value == "20.0% used"
        assert not find(insights, "Over Budget: Food & Dining")


class TestMonthlyChangeRule:
    def test_suppressed_without_previous_spending(self, make_txn):
        transactions = [make_txn("500", txn_date=date(2024, 6, 3))]

        insights = derive_insights(transactions, [], now=NOW)

        assert not find(insights, "Monthly Spending Increased")
        assert not find(insights, "Monthly Spending Decreased")

    def test_increase(self, make_txn):
        transactions = [
            make_txn("400", txn_date=date(2024, 5, 10)),
            make_txn("500", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        increased = find(insights, "Monthly Spending Increased")
        assert len(increased) == 1
        assert increased[0].kind == InsightKind.WARNING
        assert increased[0].description == "Spent more $100.00 compared to last month"
        assert increased[0].value == "+25.0%"

    def test_decrease(self, make_txn):
        transactions = [
            make_txn("500", txn_date=date(2024, 5, 10)),
            make_txn("400", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        decreased = find(insights, "Monthly Spending Decreased")
        assert len(decreased) == 1
        assert decreased[0].kind == InsightKind.SUCCESS
        assert decreased[0].description == "Saved $100.00 compared to last month"
        assert decreased[0].value == "-20.0%"

    def test_small_change_ignored(self, make_txn):
        transactions = [
            make_txn("100", txn_date=date(2024, 5, 10)),
            make_txn("105", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        assert not find(insights, "Monthly Spending Increased")

    def test_previous_month_crosses_year(self, make_txn):
        transactions = [
            make_txn("100", txn_date=date(2023, 12, 15)),
            make_txn("200", txn_date=date(2024, 1, 5)),
        ]

        insights = derive_insights(transactions, [], now=date(2024, 1, 10))

        assert find(insights, "Monthly Spending Increased")[0].value == "+100.0%"


class TestCategoryRules:
    def test_spending_spike(self, make_txn):
        transactions = [
            make_txn("100", txn_date=date(2024, 5, 10)),
            make_txn("200", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        spike = find(insights, "Food & Dining Spending Spike")
        assert len(spike) == 1
        assert spike[0].kind == InsightKind.INFO
        assert spike[0].description == "100.0% increase from last month"
        assert spike[0].value == "+$100.00"

    def test_fifty_percent_is_not_a_spike(self, make_txn):
        transactions = [
            make_txn("100", txn_date=date(2024, 5, 10)),
            make_txn("150", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        assert not find(insights, "Food & Dining Spending Spike")

    def test_new_category_is_not_a_spike(self, make_txn):
        transactions = [
            make_txn("100", txn_date=date(2024, 5, 10)),
            make_txn("300", category="Travel", txn_date=date(2024, 6, 10)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        assert not find(insights, "Travel Spending Spike")

    def test_dominant_category(self, make_txn):
        transactions = [
            make_txn("60", category="Travel", txn_date=date(2024, 6, 10)),
            make_txn("40", category="Shopping", txn_date=date(2024, 6, 11)),
        ]

        insights = derive_insights(transactions, [], now=NOW)

        top = find(insights, "Top Spending Category")
        assert len(top) == 1
        assert top[0].description == "Travel accounts for 60.0% of your monthly expenses"
        assert top[0].value == "$60.00"

    def test_no_dominant_category_when_spread_evenly(self, make_txn):
        transactions = [
            make_txn("25", category=category, txn_date=date(2024, 6, 10))
            for category in ("Travel", "Shopping", "Healthcare", "Education")
        ]

        insights = derive_insights(transactions, [], now=NOW)

        assert insights == [GETTING_STARTED]


class TestLimit:
    def test_capped_at_limit(self, make_txn, make_budget):
        categories = [f"Category {index}" for index in range(8)]
        budgets = [make_budget(category, "10") for category in categories]
        transactions = [
            make_txn("20", category=category, txn_date=date(2024, 6, 5)) for category in categories
        ]

        insights = derive_insights(transactions, budgets, now=NOW)

        assert len(insights) == INSIGHT_LIMIT
        assert all(title.startswith("Over Budget: ") for title in titles(insights))

    def test_now_accepts_month_key(self, make_txn, make_budget):
        budgets = [make_budget("Food", "200", "2024-06")]
        transactions = [make_txn("180", category="Food", txn_date=date(2024, 6, 5))]

        assert derive_insights(transactions, budgets, now="2024-06") == derive_insights(
            transactions, budgets, now=NOW
        )
