"""Transaction value type."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExpenseCategory(str, Enum):
    FOOD = "FOOD"
    TRAVEL = "TRAVEL"
    BILLS = "BILLS"
    ENTERTAINMENT = "ENTERTAINMENT"
    OTHER = "OTHER"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Transaction(BaseModel):
    """A single expense record.

    Immutable and compared by value: two transactions with the same amount,
    category and timestamp are equal and hash equal.
    """

    amount: Decimal = Field(..., gt=0)
    category: ExpenseCategory
    timestamp: datetime = Field(default_factory=_utc_now)

    model_config = ConfigDict(frozen=True)
