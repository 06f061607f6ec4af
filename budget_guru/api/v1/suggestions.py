"""GET /v1/suggestions and GET /v1/summary - read-only budget queries"""

import time
from fastapi import APIRouter, Depends, Request

from budget_guru.api.v1.schemas import SuggestionItem, SuggestionsResponse, SummaryResponse
from budget_guru.api.dependencies import get_budget_book, get_request_id
from budget_guru.services.budget_book import BudgetBook
from budget_guru.utils.formatting import suggestion_message, summary_message
from budget_guru.infrastructure.observability.metrics import record_suggestions
from budget_guru.infrastructure.observability.logging import log_suggestions
from budget_guru.config import settings

router = APIRouter()


@router.get("/suggestions", response_model=SuggestionsResponse)
def get_suggestions(request: Request, book: BudgetBook = Depends(get_budget_book)):
    """
    How much of the latest payment to set aside for each goal.

    Returns one item per goal in goal order, or an empty list (and no tip)
    until there is at least one income and one goal.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    suggestions = book.get_suggestions()

    duration_ms = (time.time() - start_time) * 1000
    record_suggestions(suggestions)
    log_suggestions(
        request_id,
        goal_count=len(suggestions),
        achieved_count=sum(1 for s in suggestions if s.achieved),
        duration_ms=duration_ms,
    )

    items = [
        SuggestionItem(
            goal_name=s.goal_name,
            status=s.status,
            recommended_amount=float(s.recommended_amount) if s.recommended_amount is not None else None,
            message=suggestion_message(s, settings.display_places),
        )
        for s in suggestions
    ]
    return SuggestionsResponse(suggestions=items, tip=settings.savings_tip if items else None)


@router.get("/summary", response_model=SummaryResponse)
def get_summary(book: BudgetBook = Depends(get_budget_book)):
    """Total received and total goal targets; `has_data` is false before anything is entered"""
    summary = book.get_summary()
    message = summary_message(summary, settings.display_places)

    if summary is None:
        return SummaryResponse(has_data=False, message=message)

    return SummaryResponse(
        has_data=True,
        total_received=float(summary.total_received),
        total_targets=float(summary.total_targets),
        message=message,
    )
