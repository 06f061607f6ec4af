"""Host object owning the income ledger and goal registry"""

import logging
import threading
from typing import List, Optional, Protocol, Sequence, Tuple

from budget_guru.domain.allocation import compute_suggestions
from budget_guru.domain.models import GoalRecord, IncomeRecord, Suggestion, Summary
from budget_guru.domain.records import GoalRegistry, Ledger
from budget_guru.domain.summary import compute_summary

logger = logging.getLogger(__name__)


class BudgetStore(Protocol):
    """Where records are kept between sessions"""

    def list_incomes(self) -> List[IncomeRecord]: ...

    def list_goals(self) -> List[GoalRecord]: ...

    def append_income(self, income: IncomeRecord) -> None: ...

    def append_goal(self, goal: GoalRecord) -> None: ...

    def delete_income_at(self, index: int) -> None: ...

    def delete_goal_at(self, index: int) -> None: ...


class BudgetBook:
    """
    Holds one Ledger and one GoalRegistry and answers the two queries.

    All mutations and snapshot reads happen under one lock, so the allocation
    engine always sees incomes and goals from the same moment. When a store is
    attached, every change is written through to it after the in-memory
    container accepted it; a rejected removal never reaches the store.
    """

    def __init__(
        self,
        incomes: Sequence[IncomeRecord] = (),
        goals: Sequence[GoalRecord] = (),
        store: Optional[BudgetStore] = None,
    ):
        self._ledger = Ledger(incomes)
        self._goals = GoalRegistry(goals)
        self._store = store
        self._lock = threading.Lock()

    @classmethod
    def from_store(cls, store: BudgetStore) -> "BudgetBook":
        """Load all stored records into a new book that writes back to the same store"""
        return cls(store.list_incomes(), store.list_goals(), store=store)

    def add_income(self, income: IncomeRecord) -> int:
        """Append an income and return its position"""
        with self._lock:
            self._ledger.append(income)
            if self._store is not None:
                self._store.append_income(income)
            position = len(self._ledger) - 1
        logger.debug("Income added", extra={"position": position})
        return position

    def remove_income(self, index: int) -> IncomeRecord:
        with self._lock:
            removed = self._ledger.remove_at(index)
            if self._store is not None:
                self._store.delete_income_at(index)
        logger.debug("Income removed", extra={"position": index})
        return removed

    def add_goal(self, goal: GoalRecord) -> int:
        """Append a goal and return its position"""
        with self._lock:
            self._goals.append(goal)
            if self._store is not None:
                self._store.append_goal(goal)
            position = len(self._goals) - 1
        logger.debug("Goal added", extra={"position": position})
        return position

    def remove_goal(self, index: int) -> GoalRecord:
        with self._lock:
            removed = self._goals.remove_at(index)
            if self._store is not None:
                self._store.delete_goal_at(index)
        logger.debug("Goal removed", extra={"position": index})
        return removed

    def snapshot(self) -> Tuple[Tuple[IncomeRecord, ...], Tuple[GoalRecord, ...]]:
        """Consistent (incomes, goals) pair"""
        with self._lock:
            return self._ledger.snapshot(), self._goals.snapshot()

    @property
    def incomes(self) -> Tuple[IncomeRecord, ...]:
        return self.snapshot()[0]

    @property
    def goals(self) -> Tuple[GoalRecord, ...]:
        return self.snapshot()[1]

    def get_suggestions(self) -> List[Suggestion]:
        incomes, goals = self.snapshot()
        return compute_suggestions(incomes, goals)

    def get_summary(self) -> Optional[Summary]:
        incomes, goals = self.snapshot()
        return compute_summary(incomes, goals)
