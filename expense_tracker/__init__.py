"""Expense Tracker data model.

This package provides the observable model behind an expense tracker:
- An ordered store of transactions
- The positions of transactions matching an externally computed filter
- Synchronous notification of registered listeners on every change
"""

from expense_tracker.core.errors import ExpenseTrackerError, InvalidArgumentError
from expense_tracker.domain.expense_tracker_model import ExpenseTrackerModel
from expense_tracker.domain.models.listener import ExpenseTrackerModelListener
from expense_tracker.domain.models.transaction import ExpenseCategory, Transaction

__version__ = "0.1.0"

__all__ = [
    "ExpenseCategory",
    "ExpenseTrackerError",
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "InvalidArgumentError",
    "Transaction",
]
