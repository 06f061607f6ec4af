"""Unit tests for record types and the ledger / goal registry containers"""

import pytest
from decimal import Decimal
from budget_guru.domain.models import GoalRecord
from budget_guru.domain.records import GoalRegistry, Ledger, split_latest
from budget_guru.domain.exceptions import IndexOutOfRange, InvalidRecordError


def test_income_requires_positive_amount(make_income):
    with pytest.raises(InvalidRecordError):
        make_income(0)
    with pytest.raises(InvalidRecordError):
        make_income(-5)


def test_goal_requires_name_and_positive_amount(make_goal):
    with pytest.raises(InvalidRecordError):
        make_goal("  ", 10)
    with pytest.raises(InvalidRecordError):
        make_goal("Car", 0)


def test_records_are_immutable(make_income):
    record = make_income(10)
    with pytest.raises(AttributeError):
        record.amount = Decimal(20)


def test_append_preserves_order(make_income):
    ledger = Ledger()
    for day in (1, 2, 3):
        ledger.append(make_income(day * 10, day))

    assert [i.amount for i in ledger] == [Decimal(10), Decimal(20), Decimal(30)]
    assert ledger[-1] == make_income(30, 3)


def test_remove_middle_shifts_later_records_down(make_income):
    """Removing index 1 of 3: old index 2 moves to 1, index 0 untouched"""
    first, second, third = make_income(1, 1), make_income(2, 2), make_income(3, 3)
    ledger = Ledger([first, second, third])

    removed = ledger.remove_at(1)

    assert removed == second
    assert len(ledger) == 2
    assert ledger[0] == first
    assert ledger[1] == third


@pytest.mark.parametrize("index", [3, 10, -1])
def test_remove_invalid_index_raises(index):
    registry = GoalRegistry(
        [GoalRecord("A", Decimal(1)), GoalRecord("B", Decimal(2)), GoalRecord("C", Decimal(3))]
    )

    with pytest.raises(IndexOutOfRange) as exc_info:
        registry.remove_at(index)

    assert exc_info.value.index == index
    assert exc_info.value.size == 3
    assert len(registry) == 3


def test_remove_from_empty_raises():
    with pytest.raises(IndexOutOfRange):
        Ledger().remove_at(0)


def test_index_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        GoalRegistry().remove_at(0)


def test_snapshot_is_detached_from_later_changes(make_income):
    ledger = Ledger([make_income(1)])
    snapshot = ledger.snapshot()

    ledger.append(make_income(2, 2))

    assert snapshot == (make_income(1),)
    assert len(ledger) == 2


def test_split_latest(make_income):
    incomes = [make_income(1, 1), make_income(2, 2), make_income(3, 3)]

    prior, last = split_latest(incomes)

    assert prior == (make_income(1, 1), make_income(2, 2))
    assert last == make_income(3, 3)


def test_split_latest_empty():
    assert split_latest([]) == ((), None)
