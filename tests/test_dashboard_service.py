"""Tests for DashboardService."""

from datetime import date
from decimal import Decimal

import pytest

from finsight.domain.entities import InsightKind, TransactionType
from finsight.domain.errors import ValidationError
from finsight.domain.insights import GETTING_STARTED


@pytest.fixture
def june_data(transaction_service, budget_service):
    """Populate a month of income, expenses and budgets."""
    transaction_service.create_transaction(
        Decimal("3000"), "Paycheck", date(2024, 6, 1), "Salary", TransactionType.INCOME
    )
    transaction_service.create_transaction(
        Decimal("70"), "Groceries", date(2024, 6, 2), "Food & Dining"
    )
    transaction_service.create_transaction(
        Decimal("50"), "Restaurant", date(2024, 6, 9), "Food & Dining"
    )
    transaction_service.create_transaction(
        Decimal("30"), "Bus pass", date(2024, 6, 10), "Transportation"
    )
    transaction_service.create_transaction(
        Decimal("400"), "Hotel", date(2024, 5, 20), "Travel"
    )
    budget_service.create_budget("Food & Dining", Decimal("100"), "2024-06")
    budget_service.create_budget("Transportation", Decimal("200"), "2024-06")
    budget_service.create_budget("Travel", Decimal("500"), "2024-05")


def test_summary_empty(dashboard_service):
    """Test the summary of an empty database."""
    summary = dashboard_service.get_summary()

    assert summary.total_income == 0
    assert summary.total_expense == 0
    assert summary.net == 0
    assert summary.transaction_count == 0
    assert summary.top_expense_category is None
    assert summary.recent_transactions == ()


def test_summary(dashboard_service, june_data):
    """Test the summary across all stored transactions."""
    summary = dashboard_service.get_summary()

    assert summary.total_income == Decimal("3000")
    assert summary.total_expense == Decimal("550")
    assert summary.net == Decimal("2450")
    assert summary.transaction_count == 5
    assert summary.top_expense_category.category == "Travel"
    assert len(summary.recent_transactions) == 5


def test_category_breakdown(dashboard_service, june_data):
    """Test expense and income breakdowns."""
    expenses = dashboard_service.get_category_breakdown()
    assert [row.category for row in expenses] == ["Travel", "Food & Dining", "Transportation"]
    assert sum(row.share for row in expenses) == pytest.approx(1.0)

    income = dashboard_service.get_category_breakdown("income")
    assert [row.category for row in income] == ["Salary"]


def test_category_breakdown_invalid_type(dashboard_service):
    with pytest.raises(ValidationError):
        dashboard_service.get_category_breakdown("transfer")


def test_monthly_series(dashboard_service, june_data):
    """Test the trailing monthly series."""
    series = dashboard_service.get_monthly_series(anchor="2024-06")

    assert len(series) == 6
    assert series[-1].month == "2024-06"
    assert series[-1].total_income == Decimal("3000")
    assert series[-1].total_expense == Decimal("150")
    assert series[-2].total_expense == Decimal("400")
    assert series[0].total_expense == 0


def test_budget_comparison(dashboard_service, june_data):
    """Test budget versus actual for a month."""
    rows, totals = dashboard_service.get_budget_comparison("2024-06")

    assert [row.category for row in rows] == ["Transportation", "Food & Dining"]
    food = rows[1]
    assert food.actual == Decimal("120")
    assert food.delta == Decimal("-20")
    assert food.percent_used == pytest.approx(120.0)
    assert totals.total_budgeted == Decimal("300")
    assert totals.total_actual == Decimal("150")
    assert totals.remaining == Decimal("150")


def test_budget_comparison_other_month(dashboard_service, june_data):
    rows, totals = dashboard_service.get_budget_comparison(date(2024, 5, 31))

    assert len(rows) == 1
    assert rows[0].category == "Travel"
    assert rows[0].percent_used == pytest.approx(80.0)
    assert totals.remaining == Decimal("100")


def test_budget_comparison_empty_month(dashboard_service, june_data):
    rows, totals = dashboard_service.get_budget_comparison("2023-01")

    assert rows == []
    assert totals.total_budgeted == 0


def test_insights(dashboard_service, june_data):
    """Test insights derived from stored data."""
    insights = dashboard_service.get_insights(now=date(2024, 6, 15))
    titles = [insight.title for insight in insights]

    assert titles[0] == "Over Budget: Food & Dining"
    assert "On Track: Transportation" in titles
    assert "Monthly Spending Decreased" in titles
    assert insights[0].kind == InsightKind.WARNING
    assert len(insights) <= 6


def test_insights_empty(dashboard_service):
    assert dashboard_service.get_insights(now=date(2024, 6, 15)) == [GETTING_STARTED]
