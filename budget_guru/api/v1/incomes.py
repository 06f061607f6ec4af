"""/v1/incomes - record and remove income payments"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from budget_guru.api.v1.schemas import IncomeCreate, IncomeItem
from budget_guru.api.dependencies import get_budget_book, get_request_id
from budget_guru.infrastructure.database.session import get_db
from budget_guru.services.budget_book import BudgetBook
from budget_guru.domain.models import IncomeRecord
from budget_guru.domain.exceptions import IndexOutOfRange, InvalidRecordError
from budget_guru.infrastructure.observability.metrics import record_mutation

router = APIRouter()


@router.get("/incomes", response_model=List[IncomeItem])
def list_incomes(book: BudgetBook = Depends(get_budget_book)):
    """List incomes in chronological order with their positions"""
    return [
        IncomeItem(index=index, amount=float(income.amount), date=income.date)
        for index, income in enumerate(book.incomes)
    ]


@router.post("/incomes", response_model=IncomeItem, status_code=201)
def add_income(
    request_body: IncomeCreate,
    request: Request,
    db: Session = Depends(get_db),
    book: BudgetBook = Depends(get_budget_book),
):
    """
    Append a payment to the ledger.

    The new payment becomes the latest one, i.e. the payment that
    suggestions are computed for.
    """
    request_id = get_request_id(request)

    try:
        income = IncomeRecord(amount=request_body.amount, date=request_body.date)
        index = book.add_income(income)
        db.commit()
    except InvalidRecordError as e:
        db.rollback()
        logging.warning(f"Invalid income: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_mutation("income", "added")
    return IncomeItem(index=index, amount=float(income.amount), date=income.date)


@router.delete("/incomes/{index}", status_code=204)
def remove_income(
    index: int,
    request: Request,
    db: Session = Depends(get_db),
    book: BudgetBook = Depends(get_budget_book),
):
    """Remove the income at `index`; later incomes shift down by one"""
    request_id = get_request_id(request)

    try:
        book.remove_income(index)
        db.commit()
    except IndexOutOfRange as e:
        db.rollback()
        logging.warning(f"Income removal rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    record_mutation("income", "removed")
    return Response(status_code=204)
