"""Value types and collaborator contracts used by the model."""

from expense_tracker.domain.models.listener import ExpenseTrackerModelListener
from expense_tracker.domain.models.transaction import ExpenseCategory, Transaction

__all__ = ["ExpenseCategory", "ExpenseTrackerModelListener", "Transaction"]
