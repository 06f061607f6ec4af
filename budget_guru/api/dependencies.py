"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from budget_guru.infrastructure.database.repositories import BudgetRepository
from budget_guru.infrastructure.database.session import get_db
from budget_guru.services.budget_book import BudgetBook


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_budget_book(db: Session = Depends(get_db)) -> BudgetBook:
    """Provide a budget book loaded from, and writing back to, the request's session"""
    return BudgetBook.from_store(BudgetRepository(db))
