"""Ordered record containers: the income ledger and the goal registry"""

from decimal import Decimal
from typing import Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from budget_guru.domain.exceptions import IndexOutOfRange
from budget_guru.domain.models import GoalRecord, IncomeRecord

R = TypeVar("R")


class RecordSequence(Generic[R]):
    """
    Append / remove-by-index container.

    Records have no identity beyond their position, so the only mutations are
    appending at the end and removing at a valid position. Removal shifts later
    records down by one and leaves earlier ones untouched.
    """

    def __init__(self, records: Iterable[R] = ()):
        self._records = list(records)

    def append(self, record: R) -> None:
        self._records.append(record)

    def remove_at(self, index: int) -> R:
        """
        Remove and return the record at `index`.

        Raises:
            IndexOutOfRange: if index is negative or past the end
        """
        if not 0 <= index < len(self._records):
            raise IndexOutOfRange(index, len(self._records))
        return self._records.pop(index)

    def snapshot(self) -> Tuple[R, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> R:
        return self._records[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._records!r})"


class Ledger(RecordSequence[IncomeRecord]):
    """Incomes in chronological (insertion) order; the last one is the current payment"""


class GoalRegistry(RecordSequence[GoalRecord]):
    """Savings goals in presentation order; order never changes the numbers"""


def split_latest(
    incomes: Sequence[IncomeRecord],
) -> Tuple[Tuple[IncomeRecord, ...], Optional[IncomeRecord]]:
    """Split incomes into (all prior payments, latest payment)"""
    if not incomes:
        return (), None
    return tuple(incomes[:-1]), incomes[-1]


def total_target(goals: Iterable[GoalRecord]) -> Decimal:
    return sum((goal.amount for goal in goals), Decimal(0))
