"""Milestone engine - cumulative earnings thresholds crossed over time"""

import math
from datetime import date
from numbers import Real
from typing import Iterable, List, Optional, Tuple

from freelance_milestones.domain.exceptions import InvalidMilestoneAmountError
from freelance_milestones.domain.models import Milestone, MilestoneResult, Transaction
from freelance_milestones.utils.date_utils import days_between, to_calendar_day

# Keep in step with Settings.milestone_amount in freelance_milestones/config.py
DEFAULT_MILESTONE_AMOUNT = 1000.0


def validate_milestone_amount(milestone_amount: float) -> float:
    """Reject non-numeric, non-finite and non-positive increments"""
    if isinstance(milestone_amount, bool) or not isinstance(milestone_amount, Real):
        raise InvalidMilestoneAmountError(
            f"Milestone amount must be a number, got {milestone_amount!r}"
        )
    if not math.isfinite(milestone_amount) or milestone_amount <= 0:
        raise InvalidMilestoneAmountError(
            f"Milestone amount must be positive, got {milestone_amount!r}"
        )
    return float(milestone_amount)


def cumulative_earnings(transactions: Iterable[Transaction]) -> List[Tuple[date, float]]:
    """
    Running total of positive amounts in date order.

    Zero, negative and non-finite amounts never count. Ties on the same day keep their
    input order (sorted() is stable).
    """
    positive = sorted(
        (t for t in transactions if t.amount > 0 and math.isfinite(t.amount)),
        key=lambda t: to_calendar_day(t.date),
    )

    points: List[Tuple[date, float]] = []
    running = 0.0
    for txn in positive:
        running += txn.amount
        points.append((to_calendar_day(txn.date), running))
    return points


def find_milestones(
    points: List[Tuple[date, float]], milestone_amount: float
) -> List[Milestone]:
    """
    Walk thresholds milestone_amount, 2x, 3x... over cumulative points.

    The scan index only moves forward: thresholds strictly increase, so the
    first point reaching threshold N+1 can never precede the one reaching N.
    One point may cross several thresholds; the repeats take 0 days.
    """
    milestones: List[Milestone] = []
    if not points:
        return milestones

    threshold = milestone_amount
    previous_date = points[0][0]
    index = 0

    while index < len(points):
        reached_on, running = points[index]
        if running < threshold:
            index += 1
            continue

        milestones.append(
            Milestone(
                amount_reached=threshold,
                days_to_get_this_k=days_between(previous_date, reached_on),
                reached_on=reached_on,
            )
        )
        previous_date = reached_on
        threshold += milestone_amount

    return milestones


def calculate_milestones(
    transactions: Iterable[Transaction],
    milestone_amount: float = DEFAULT_MILESTONE_AMOUNT,
    today: Optional[date] = None,
) -> Optional[MilestoneResult]:
    """
    Compute milestone history and progress toward the next threshold.

    Returns None when there is no positive transaction at all; that is a
    valid "nothing to report" state, not an error.

    Args:
        transactions: Ledger entries in any order (never mutated)
        milestone_amount: Threshold increment, must be positive
        today: Evaluation date for days_since_last_milestone
            (default: date.today()). Pass a fixed date for reproducible output.

    Raises:
        InvalidMilestoneAmountError: milestone_amount is not a positive number
    """
    milestone_amount = validate_milestone_amount(milestone_amount)

    points = cumulative_earnings(transactions)
    if not points:
        return None

    milestones = find_milestones(points, milestone_amount)

    # Every point is positive, so the last running total is the maximum
    current_cumulative_sum = points[-1][1]
    last_milestone_amount = milestones[-1].amount_reached if milestones else 0.0
    progress_towards_next_k = current_cumulative_sum - last_milestone_amount

    days_since_last_milestone = None
    if milestones:
        if today is None:
            today = date.today()
        days_since_last_milestone = days_between(milestones[-1].reached_on, today)

    return MilestoneResult(
        first_positive_transaction_on=points[0][0],
        milestones=tuple(milestones),
        current_cumulative_sum=current_cumulative_sum,
        last_milestone_amount=last_milestone_amount,
        progress_towards_next_k=progress_towards_next_k,
        remaining_to_next_k=milestone_amount - progress_towards_next_k,
        next_milestone_target=last_milestone_amount + milestone_amount,
        days_since_last_milestone=days_since_last_milestone,
        milestone_amount=milestone_amount,
    )
