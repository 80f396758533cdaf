"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from expense_tracker.domain.expense_tracker_model import ExpenseTrackerModel  # noqa: E402
from expense_tracker.domain.models.transaction import (  # noqa: E402
    ExpenseCategory,
    Transaction,
)


class RecordingListener:
    """Listener double that records every update it receives."""

    def __init__(self, name: str = "listener", calls: list | None = None):
        self.name = name
        self.calls = calls if calls is not None else []
        self.updates: list[ExpenseTrackerModel] = []

    def update(self, model: ExpenseTrackerModel) -> None:
        self.updates.append(model)
        self.calls.append(self.name)


@pytest.fixture
def model() -> ExpenseTrackerModel:
    """Empty expense tracker model."""
    return ExpenseTrackerModel()


@pytest.fixture
def listener() -> RecordingListener:
    """Single recording listener."""
    return RecordingListener()


@pytest.fixture
def food_transaction() -> Transaction:
    """Sample food expense."""
    return Transaction(
        amount=Decimal("12.50"),
        category=ExpenseCategory.FOOD,
        timestamp=datetime(2024, 3, 1, 12, 0, tzinfo=UTC),
    )


@pytest.fixture
def travel_transaction() -> Transaction:
    """Sample travel expense."""
    return Transaction(
        amount=Decimal("240.00"),
        category=ExpenseCategory.TRAVEL,
        timestamp=datetime(2024, 3, 2, 8, 30, tzinfo=UTC),
    )


@pytest.fixture
def bills_transaction() -> Transaction:
    """Sample bills expense."""
    return Transaction(
        amount=Decimal("75.10"),
        category=ExpenseCategory.BILLS,
        timestamp=datetime(2024, 3, 3, 18, 45, tzinfo=UTC),
    )


@pytest.fixture
def make_listener():
    """Factory for named recording listeners sharing an optional call log."""

    def _make(name: str, calls: list | None = None) -> RecordingListener:
        return RecordingListener(name=name, calls=calls)

    return _make
