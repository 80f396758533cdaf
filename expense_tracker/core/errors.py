"""
Domain-specific exceptions for the Expense Tracker model.

These exceptions are raised synchronously by the model's mutating
operations and are never caught inside the package.
"""

from typing import Any


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(ExpenseTrackerError, ValueError):
    """
    Raised when an argument to a model operation is rejected.

    Examples:
    - Adding a None transaction
    - Setting a None list of matched filter indices
    - A matched filter index outside [0, transaction count)

    The model state is left untouched when this is raised.
    """

    pass
