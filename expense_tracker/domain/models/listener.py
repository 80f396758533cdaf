"""Listener contract for model state changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from expense_tracker.domain.expense_tracker_model import ExpenseTrackerModel


@runtime_checkable
class ExpenseTrackerModelListener(Protocol):
    """Anything with an ``update(model)`` method.

    ``update`` is called synchronously after every successful mutating
    operation on the model. The model passed in must be treated as read-only.
    """

    def update(self, model: ExpenseTrackerModel) -> None: ...
