"""Report service - runs the engines with timing, metrics and structured logs"""

import time
from datetime import date
from typing import Optional, Sequence

from freelance_milestones.config import settings
from freelance_milestones.domain.milestones import calculate_milestones
from freelance_milestones.domain.models import MilestoneResult, StatisticsResult, Transaction
from freelance_milestones.domain.statistics import calculate_statistics
from freelance_milestones.infrastructure.observability.logging import (
    log_milestone_report,
    log_statistics_report,
)
from freelance_milestones.infrastructure.observability.metrics import (
    record_milestone_report,
    record_statistics_report,
)


def build_milestone_report(
    transactions: Sequence[Transaction],
    milestone_amount: float,
    today: Optional[date] = None,
) -> Optional[MilestoneResult]:
    """
    Compute milestones and record the outcome.

    Returns the engine result unchanged (None when there are no earnings).
    """
    start_time = time.perf_counter()
    result = calculate_milestones(transactions, milestone_amount, today=today)
    duration_s = time.perf_counter() - start_time

    milestones_reached = len(result.milestones) if result is not None else None
    if settings.metrics_enabled:
        record_milestone_report(len(transactions), milestones_reached, duration_s)
    log_milestone_report(len(transactions), milestone_amount, milestones_reached, duration_s * 1000)

    return result


def build_statistics_report(transactions: Sequence[Transaction]) -> StatisticsResult:
    """Compute statistics and record the outcome"""
    start_time = time.perf_counter()
    result = calculate_statistics(transactions)
    duration_s = time.perf_counter() - start_time

    if settings.metrics_enabled:
        record_statistics_report(len(transactions), duration_s)
    log_statistics_report(
        len(transactions),
        result.gross_earnings,
        len(result.monthly_earnings),
        duration_s * 1000,
    )

    return result
