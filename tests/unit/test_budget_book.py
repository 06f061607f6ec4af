"""Unit tests for the budget book host and its write-through store"""

import pytest
from decimal import Decimal
from sqlalchemy.orm import Session
from budget_guru.domain.models import SuggestionStatus, Summary
from budget_guru.domain.exceptions import IndexOutOfRange
from budget_guru.infrastructure.database.repositories import BudgetRepository
from budget_guru.services.budget_book import BudgetBook


def test_queries_on_empty_book():
    book = BudgetBook()

    assert book.get_suggestions() == []
    assert book.get_summary() is None


def test_suggestions_follow_mutations(make_income, make_goal):
    book = BudgetBook()
    book.add_goal(make_goal("A", 150))
    book.add_goal(make_goal("B", 150))
    book.add_income(make_income(100, 1))

    assert book.add_income(make_income(200, 2)) == 1
    assert [s.recommended_amount for s in book.get_suggestions()] == [Decimal(100), Decimal(100)]

    book.remove_goal(1)
    (only,) = book.get_suggestions()
    # A now takes every payment: 100 already covered, 50 left
    assert only.goal_name == "A"
    assert only.recommended_amount == Decimal(50)


def test_summary(monthly_incomes, split_goals):
    book = BudgetBook(monthly_incomes, split_goals)

    assert book.get_summary() == Summary(total_received=Decimal(3000), total_targets=Decimal(100))


def test_cap_regression_through_book(monthly_incomes, split_goals):
    book = BudgetBook(monthly_incomes, split_goals)

    assert [s.status for s in book.get_suggestions()] == [
        SuggestionStatus.ACHIEVED,
        SuggestionStatus.ACHIEVED,
    ]


def test_rejected_removal_leaves_book_unchanged(make_income, make_goal):
    book = BudgetBook([make_income(10)], [make_goal("A", 10)])

    with pytest.raises(IndexOutOfRange):
        book.remove_income(1)
    with pytest.raises(IndexOutOfRange):
        book.remove_goal(5)

    assert book.incomes == (make_income(10),)
    assert book.goals == (make_goal("A", 10),)


def test_snapshot_pairs_incomes_and_goals(make_income, make_goal):
    book = BudgetBook([make_income(10)], [make_goal("A", 10)])
    incomes, goals = book.snapshot()

    book.add_income(make_income(20, 2))

    assert incomes == (make_income(10),)
    assert goals == (make_goal("A", 10),)


def test_write_through_to_store(db: Session, make_income, make_goal):
    book = BudgetBook.from_store(BudgetRepository(db))
    book.add_income(make_income(10, 1))
    book.add_income(make_income(20, 2))
    book.add_income(make_income(30, 3))
    book.add_goal(make_goal("A", 5))
    book.remove_income(1)
    db.commit()

    reloaded = BudgetBook.from_store(BudgetRepository(db))

    assert reloaded.incomes == (make_income(10, 1), make_income(30, 3))
    assert reloaded.goals == (make_goal("A", 5),)


def test_rejected_removal_never_reaches_store(db: Session, make_goal):
    repo = BudgetRepository(db)
    repo.append_goal(make_goal("A", 5))
    book = BudgetBook.from_store(repo)

    with pytest.raises(IndexOutOfRange):
        book.remove_goal(1)

    assert repo.list_goals() == [make_goal("A", 5)]
