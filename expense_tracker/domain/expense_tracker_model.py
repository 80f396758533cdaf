"""Observable model of an expense tracker.

The model owns the ordered transactions and the positions of those matching
the current filter, and notifies registered listeners after every
successful change. It never computes filters itself; callers set the
matching positions after running their own predicate.

Usage:
    model = ExpenseTrackerModel()
    model.register(view)
    model.add_transaction(Transaction(amount=Decimal("12.50"), category="FOOD"))
    model.set_matched_filter_indices([0])
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from expense_tracker.core.errors import InvalidArgumentError
from expense_tracker.core.logging import LoggerMixin
from expense_tracker.domain.filter_indices import FilterIndexSet
from expense_tracker.domain.listener_registry import ListenerRegistry
from expense_tracker.domain.models.listener import ExpenseTrackerModelListener
from expense_tracker.domain.transaction_store import TransactionStore


class ExpenseTrackerModel(LoggerMixin):
    """Transactions, matched filter positions and their listeners.

    Every mutating call validates its argument before touching any state,
    updates one component, then runs one notification pass. Adding or
    removing a transaction always clears the matched filter positions.

    Not thread-safe; callers serialize access.
    """

    def __init__(self) -> None:
        self._transactions = TransactionStore()
        self._matched_filter_indices = FilterIndexSet()
        self._listeners = ListenerRegistry()

    def add_transaction(self, transaction: Any) -> None:
        """Append a transaction.

        Raises:
            InvalidArgumentError: If ``transaction`` is None.
        """
        self._transactions.add(transaction)
        self._matched_filter_indices.clear()
        self.logger.debug("transaction_added", transaction_count=len(self._transactions))
        self._state_changed()

    def remove_transaction(self, transaction: Any) -> None:
        """Remove the first transaction equal to ``transaction``.

        The filter is cleared and listeners are notified even when nothing
        matched.
        """
        if self._transactions.remove(transaction):
            self.logger.debug(
                "transaction_removed", transaction_count=len(self._transactions)
            )
        else:
            self.logger.debug(
                "transaction_not_found", transaction_count=len(self._transactions)
            )
        self._matched_filter_indices.clear()
        self._state_changed()

    def get_transactions(self) -> tuple[Any, ...]:
        """Read-only snapshot of the transactions in insertion order."""
        return self._transactions.snapshot()

    def set_matched_filter_indices(self, indices: Iterable[int] | None) -> None:
        """Replace the positions of transactions matching the current filter.

        Raises:
            InvalidArgumentError: If ``indices`` is None or any position is
                outside ``[0, number of transactions)``. State is unchanged.
        """
        try:
            self._matched_filter_indices.replace(indices, len(self._transactions))
        except InvalidArgumentError as exc:
            self.logger.debug("filter_indices_rejected", error=str(exc))
            raise
        self.logger.debug(
            "filter_indices_set", matched_count=len(self._matched_filter_indices)
        )
        self._state_changed()

    def get_matched_filter_indices(self) -> list[int]:
        """Copy of the matched filter positions."""
        return self._matched_filter_indices.snapshot()

    def register(self, listener: ExpenseTrackerModelListener | None) -> bool:
        """Register ``listener`` for state change events.

        Returns:
            True if the listener is non-null and was not already registered,
            False otherwise.
        """
        return self._listeners.register(listener)

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: object) -> bool:
        return listener in self._listeners

    def _state_changed(self) -> None:
        self._listeners.notify(self)
