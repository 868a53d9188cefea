"""Shared pytest fixtures for finsight tests."""

import tempfile
import os
from datetime import date, datetime, UTC
from decimal import Decimal
import pytest

from finsight.database.factories import create_sqlite_database
from finsight.domain.budget import BudgetService
from finsight.domain.dashboard import DashboardService
from finsight.domain.entities import Budget, Transaction, TransactionType
from finsight.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_txn():
    """Build in-memory Transaction entities with sequential IDs."""
    counter = {"id": 0}

    def _make(
        amount,
        category="Food & Dining",
        txn_date=date(2024, 6, 15),
        transaction_type=TransactionType.EXPENSE,
        description="Test transaction",
        created_at=None,
    ):
        counter["id"] += 1
        if created_at is None:
            created_at = datetime(2024, 1, 1, tzinfo=UTC).replace(second=counter["id"] % 60)
        return Transaction(
            id=counter["id"],
            amount=Decimal(str(amount)),
            description=description,
            date=txn_date,
            type=transaction_type,
            category=category,
            created_at=created_at,
        )

    return _make


@pytest.fixture
def make_budget():
    """Build in-memory Budget entities with sequential IDs."""
    counter = {"id": 0}

    def _make(category, amount, month="2024-06"):
        counter["id"] += 1
        return Budget(
            id=counter["id"],
            category=category,
            amount=Decimal(str(amount)),
            month=month,
        )

    return _make
