"""Positions of transactions matching an externally computed filter."""

from __future__ import annotations

from collections.abc import Iterable

from expense_tracker.core.errors import InvalidArgumentError


class FilterIndexSet:
    """Validated list of positions into the transaction sequence.

    The positions are only meaningful for the sequence they were computed
    against, so the owner clears them on every structural change.
    """

    def __init__(self) -> None:
        self._indices: list[int] = []

    def __len__(self) -> int:
        return len(self._indices)

    def replace(self, indices: Iterable[int] | None, transaction_count: int) -> None:
        """Replace the stored positions wholesale.

        Every position is checked against ``transaction_count`` before the
        stored list is touched, so a rejected call leaves it unchanged.

        Raises:
            InvalidArgumentError: ``indices`` is None, or an element is not an
                int or lies outside ``[0, transaction_count)``.
        """
        if indices is None:
            raise InvalidArgumentError(
                "The matched filter indices list must be non-null.",
                details={"argument": "indices"},
            )

        try:
            candidate = list(indices)
        except TypeError as exc:
            raise InvalidArgumentError(
                "The matched filter indices must be an iterable of integers.",
                details={"argument": "indices"},
            ) from exc

        for index in candidate:
            # bool is an int subclass but never a position
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidArgumentError(
                    "Each matched filter index must be an integer.",
                    details={"index": index},
                )
            if index < 0 or index >= transaction_count:
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive).",
                    details={"index": index, "transaction_count": transaction_count},
                )

        self._indices = candidate

    def clear(self) -> None:
        self._indices = []

    def snapshot(self) -> list[int]:
        """Independent copy of the stored positions."""
        return list(self._indices)
