"""Registry of model listeners with synchronous notification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from expense_tracker.core.logging import LoggerMixin
from expense_tracker.domain.models.listener import ExpenseTrackerModelListener

if TYPE_CHECKING:
    from expense_tracker.domain.expense_tracker_model import ExpenseTrackerModel


class ListenerRegistry(LoggerMixin):
    """Listeners unique by identity, notified in registration order.

    There is no removal operation. Listener failures are not isolated: an
    exception raised by ``update`` propagates to the caller of ``notify`` and
    the remaining listeners of that pass are skipped.
    """

    def __init__(self) -> None:
        self._listeners: list[ExpenseTrackerModelListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return any(registered is listener for registered in self._listeners)

    def register(self, listener: ExpenseTrackerModelListener | None) -> bool:
        """Add ``listener`` unless it is None or already registered."""
        if listener is None or listener in self:
            return False
        self._listeners.append(listener)
        self.logger.debug("listener_registered", listener_count=len(self._listeners))
        return True

    def notify(self, model: ExpenseTrackerModel) -> None:
        """Call ``update(model)`` on a snapshot of the registered listeners.

        Listeners registered while the pass is running are picked up by the
        next pass, not this one.
        """
        listeners = tuple(self._listeners)
        for listener in listeners:
            listener.update(model)
        self.logger.debug("listeners_notified", listener_count=len(listeners))
