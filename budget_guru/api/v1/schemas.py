"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
import datetime
from decimal import Decimal
from typing import List, Optional

from budget_guru.domain.models import SuggestionStatus


class IncomeCreate(BaseModel):
    """Request body for POST /v1/incomes"""

    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2, description="Payment amount")
    date: datetime.date


class IncomeItem(BaseModel):
    """Income with its current position in the ledger"""

    index: int
    amount: float
    date: datetime.date


class GoalCreate(BaseModel):
    """Request body for POST /v1/goals"""

    name: str = Field(..., description="Goal name, need not be unique")
    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2, description="Target amount")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class GoalItem(BaseModel):
    """Goal with its current position in the registry"""

    index: int
    name: str
    amount: float


class SuggestionItem(BaseModel):
    """Recommendation for a single goal"""

    goal_name: str
    status: SuggestionStatus
    recommended_amount: Optional[float] = None
    message: str


class SuggestionsResponse(BaseModel):
    """Response for GET /v1/suggestions"""

    suggestions: List[SuggestionItem]
    tip: Optional[str] = None


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary; totals are omitted when there is no data"""

    has_data: bool
    total_received: Optional[float] = None
    total_targets: Optional[float] = None
    message: str
