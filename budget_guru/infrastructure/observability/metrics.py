"""Prometheus metrics for suggestion outcomes and record activity"""

from typing import Iterable
from prometheus_client import Counter, Histogram

from budget_guru.domain.models import Suggestion

# Suggestion metrics
suggestion_counter = Counter(
    "budget_guru_suggestions_total",
    "Per-goal suggestions produced",
    ["status"],  # achieved | pending
)

recommended_amount_histogram = Histogram(
    "budget_guru_recommended_amount",
    "Recommended amount to set aside per pending goal",
    buckets=[10, 50, 100, 250, 500, 1000, 2500, 5000, 10000],
)

# Record metrics
record_mutation_counter = Counter(
    "budget_guru_record_mutations_total",
    "Income and goal records added or removed",
    ["kind", "action"],  # income | goal, added | removed
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_suggestions(suggestions: Iterable[Suggestion]) -> None:
    """Record how many goals were achieved vs pending and the size of each recommendation"""
    for suggestion in suggestions:
        suggestion_counter.labels(status=suggestion.status.value).inc()
        if suggestion.recommended_amount is not None:
            recommended_amount_histogram.observe(float(suggestion.recommended_amount))


def record_mutation(kind: str, action: str) -> None:
    record_mutation_counter.labels(kind=kind, action=action).inc()
