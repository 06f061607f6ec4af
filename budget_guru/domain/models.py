"""Domain models - pure Python dataclasses representing budget entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from budget_guru.domain.exceptions import InvalidRecordError


@dataclass(frozen=True)
class IncomeRecord:
    """A single payment received, in the order it was recorded"""

    amount: Decimal
    date: date

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise InvalidRecordError(f"Income amount must be positive, got {self.amount}")


@dataclass(frozen=True)
class GoalRecord:
    """A named savings target"""

    name: str
    amount: Decimal

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidRecordError("Goal name must not be empty")
        if self.amount <= 0:
            raise InvalidRecordError(f"Goal amount must be positive, got {self.amount}")


class SuggestionStatus(str, Enum):
    ACHIEVED = "achieved"
    PENDING = "pending"


@dataclass(frozen=True)
class Suggestion:
    """How much to set aside for one goal from the latest payment"""

    goal_name: str
    status: SuggestionStatus
    recommended_amount: Optional[Decimal] = None  # only set when pending

    @property
    def achieved(self) -> bool:
        return self.status is SuggestionStatus.ACHIEVED


@dataclass(frozen=True)
class Summary:
    """Totals across all incomes and goals"""

    total_received: Decimal
    total_targets: Decimal
