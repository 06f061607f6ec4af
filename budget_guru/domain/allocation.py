"""Allocation engine - core business logic for per-goal savings suggestions"""

from decimal import Decimal
from typing import Iterable, List, Sequence

from budget_guru.domain.models import GoalRecord, IncomeRecord, Suggestion, SuggestionStatus
from budget_guru.domain.records import split_latest, total_target

ZERO = Decimal(0)


def goal_share(amount: Decimal, goal: GoalRecord, total_goal_target: Decimal) -> Decimal:
    """
    This goal's proportional slice of a payment (0 when there is no target at all).

    Multiplies before dividing so the share is exact whenever an exact
    result exists (300 * 100 / 300 == 100).
    """
    if total_goal_target <= 0:
        return ZERO
    return amount * goal.amount / total_goal_target


def contributions_from_prior(
    goal: GoalRecord,
    total_goal_target: Decimal,
    prior_incomes: Iterable[IncomeRecord],
) -> Decimal:
    """
    Fold prior payments into the amount already set aside for a goal.

    Payments are visited in chronological order. Each one contributes its
    proportional share, capped by what the goal still needed at that point:

        actual = min(income * goal / total, goal.amount - running_sum)

    Once the running sum reaches the target every later payment contributes 0.
    """
    running_sum = ZERO
    for income in prior_incomes:
        potential = goal_share(income.amount, goal, total_goal_target)
        remaining_for_goal = goal.amount - running_sum
        running_sum += min(potential, remaining_for_goal)
    return running_sum


def suggest_for_goal(
    goal: GoalRecord,
    total_goal_target: Decimal,
    prior_incomes: Sequence[IncomeRecord],
    last_income: IncomeRecord,
) -> Suggestion:
    """Suggestion for one goal given the sum of all targets and the split payment history"""
    remaining = goal.amount - contributions_from_prior(goal, total_goal_target, prior_incomes)

    if remaining <= 0:
        return Suggestion(goal_name=goal.name, status=SuggestionStatus.ACHIEVED)

    recommended = min(goal_share(last_income.amount, goal, total_goal_target), remaining)
    return Suggestion(
        goal_name=goal.name,
        status=SuggestionStatus.PENDING,
        recommended_amount=recommended,
    )


def compute_suggestions(
    incomes: Sequence[IncomeRecord],
    goals: Sequence[GoalRecord],
) -> List[Suggestion]:
    """
    Main entry point: recommend how much of the latest payment to save per goal.

    Goals never compete for the same pool; each gets its own proportional
    slice of every payment, so results come back in the same order as `goals`.
    No incomes or no goals means no suggestions.
    """
    if not incomes or not goals:
        return []

    prior_incomes, last_income = split_latest(incomes)
    total_goal_target = total_target(goals)

    return [
        suggest_for_goal(goal, total_goal_target, prior_incomes, last_income)
        for goal in goals
    ]
