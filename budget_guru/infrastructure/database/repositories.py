"""Data access layer for incomes and goals"""

from typing import List, Type, Union
from sqlalchemy import func
from sqlalchemy.orm import Session
from budget_guru.infrastructure.database.models import GoalEntry, IncomeEntry
from budget_guru.domain.exceptions import IndexOutOfRange
from budget_guru.domain.models import GoalRecord, IncomeRecord

Entry = Union[IncomeEntry, GoalEntry]


class BudgetRepository:
    """
    Stores records with a contiguous `position` column.

    Index `i` always addresses the i-th record in insertion order: deleting a
    row shifts every later row's position down by one. Nothing is committed
    here; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_incomes(self) -> List[IncomeRecord]:
        """All incomes in chronological order"""
        return [
            IncomeRecord(amount=row.amount, date=row.received_on)
            for row in self._ordered(IncomeEntry)
        ]

    def list_goals(self) -> List[GoalRecord]:
        """All goals in presentation order"""
        return [GoalRecord(name=row.name, amount=row.amount) for row in self._ordered(GoalEntry)]

    def append_income(self, income: IncomeRecord) -> None:
        self.db.add(
            IncomeEntry(
                position=self._next_position(IncomeEntry),
                amount=income.amount,
                received_on=income.date,
            )
        )
        self.db.flush()

    def append_goal(self, goal: GoalRecord) -> None:
        self.db.add(
            GoalEntry(
                position=self._next_position(GoalEntry),
                name=goal.name,
                amount=goal.amount,
            )
        )
        self.db.flush()

    def delete_income_at(self, index: int) -> None:
        self._delete_at(IncomeEntry, index)

    def delete_goal_at(self, index: int) -> None:
        self._delete_at(GoalEntry, index)

    def _ordered(self, model: Type[Entry]) -> List[Entry]:
        return self.db.query(model).order_by(model.position.asc(), model.id.asc()).all()

    def _next_position(self, model: Type[Entry]) -> int:
        return self.db.query(func.count(model.id)).scalar() or 0

    def _delete_at(self, model: Type[Entry], index: int) -> None:
        rows = self._ordered(model)
        if not 0 <= index < len(rows):
            raise IndexOutOfRange(index, len(rows))

        self.db.delete(rows[index])
        # Renumber so positions stay 0..n-1 after the gap
        for position, row in enumerate(rows[index + 1:], start=index):
            row.position = position
        self.db.flush()
