"""Display formatting for amounts and suggestion messages"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from budget_guru.domain.models import Suggestion, Summary


def format_amount(amount: Decimal, places: int = 2) -> str:
    """Round for display only, e.g. Decimal("33.3333") -> "33.33" """
    quantum = Decimal(1).scaleb(-places)
    return str(amount.quantize(quantum, rounding=ROUND_HALF_UP))


def suggestion_message(suggestion: Suggestion, places: int = 2) -> str:
    if suggestion.achieved:
        return "Goal achieved!"
    return f"save {format_amount(suggestion.recommended_amount, places)} from your last payment"


def summary_message(summary: Optional[Summary], places: int = 2) -> str:
    if summary is None:
        return "No data yet."
    return (
        f"Total received: {format_amount(summary.total_received, places)}"
        f" | Total goal targets: {format_amount(summary.total_targets, places)}"
    )
