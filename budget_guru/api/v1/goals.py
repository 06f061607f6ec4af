"""/v1/goals - define and remove savings goals"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from budget_guru.api.v1.schemas import GoalCreate, GoalItem
from budget_guru.api.dependencies import get_budget_book, get_request_id
from budget_guru.infrastructure.database.session import get_db
from budget_guru.services.budget_book import BudgetBook
from budget_guru.domain.models import GoalRecord
from budget_guru.domain.exceptions import IndexOutOfRange, InvalidRecordError
from budget_guru.infrastructure.observability.metrics import record_mutation

router = APIRouter()


@router.get("/goals", response_model=List[GoalItem])
def list_goals(book: BudgetBook = Depends(get_budget_book)):
    """List goals in presentation order with their positions"""
    return [
        GoalItem(index=index, name=goal.name, amount=float(goal.amount))
        for index, goal in enumerate(book.goals)
    ]


@router.post("/goals", response_model=GoalItem, status_code=201)
def add_goal(
    request_body: GoalCreate,
    request: Request,
    db: Session = Depends(get_db),
    book: BudgetBook = Depends(get_budget_book),
):
    """Append a savings goal; names need not be unique"""
    request_id = get_request_id(request)

    try:
        goal = GoalRecord(name=request_body.name, amount=request_body.amount)
        index = book.add_goal(goal)
        db.commit()
    except InvalidRecordError as e:
        db.rollback()
        logging.warning(f"Invalid goal: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_mutation("goal", "added")
    return GoalItem(index=index, name=goal.name, amount=float(goal.amount))


@router.delete("/goals/{index}", status_code=204)
def remove_goal(
    index: int,
    request: Request,
    db: Session = Depends(get_db),
    book: BudgetBook = Depends(get_budget_book),
):
    """Remove the goal at `index`; later goals shift down by one"""
    request_id = get_request_id(request)

    try:
        book.remove_goal(index)
        db.commit()
    except IndexOutOfRange as e:
        db.rollback()
        logging.warning(f"Goal removal rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    record_mutation("goal", "removed")
    return Response(status_code=204)
