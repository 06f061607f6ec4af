"""Aggregate totals over incomes and goals"""

from decimal import Decimal
from typing import Optional, Sequence

from budget_guru.domain.models import GoalRecord, IncomeRecord, Summary
from budget_guru.domain.records import total_target


def compute_summary(
    incomes: Sequence[IncomeRecord],
    goals: Sequence[GoalRecord],
) -> Optional[Summary]:
    """Total received and total targeted, or None when nothing has been entered yet"""
    if not incomes and not goals:
        return None

    return Summary(
        total_received=sum((income.amount for income in incomes), Decimal(0)),
        total_targets=total_target(goals),
    )
