"""Ordered storage of transactions."""

from __future__ import annotations

from typing import Any

from expense_tracker.core.errors import InvalidArgumentError


class TransactionStore:
    """Ordered, duplicate-friendly sequence of transactions.

    Transactions are opaque to the store; it only keeps references and
    compares them by equality on removal. Reads go through ``snapshot``,
    which never aliases the internal list.
    """

    def __init__(self) -> None:
        self._transactions: list[Any] = []

    def __len__(self) -> int:
        return len(self._transactions)

    def add(self, transaction: Any) -> None:
        """Append a transaction to the end of the sequence."""
        if transaction is None:
            raise InvalidArgumentError(
                "The new transaction must be non-null.",
                details={"argument": "transaction"},
            )
        self._transactions.append(transaction)

    def remove(self, transaction: Any) -> bool:
        """Remove the first transaction equal to ``transaction``.

        Returns whether an element was removed.
        """
        try:
            self._transactions.remove(transaction)
        except ValueError:
            return False
        return True

    def snapshot(self) -> tuple[Any, ...]:
        """Read-only copy of the current sequence."""
        return tuple(self._transactions)
