"""Statistics engine - grouped earnings, monthly trends, rates and extremes"""

from datetime import date
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from freelance_milestones.domain.models import (
    BestWorstMonths,
    EarningsRate,
    GroupEarnings,
    MonthlyEarnings,
    StatisticsResult,
    Transaction,
    TransactionType,
    WITHDRAWAL_TYPES,
)
from freelance_milestones.utils.date_utils import (
    days_between,
    format_month,
    month_key,
    to_calendar_day,
)

DAYS_PER_WEEK = 7
AVERAGE_DAYS_PER_MONTH = 30.44


def _percentage(part: float, whole: float) -> float:
    """Share of whole in percent; 0 when whole is 0 so output stays finite"""
    if whole == 0:
        return 0.0
    return part / whole * 100


def group_earnings(
    positive: List[Transaction],
    gross_earnings: float,
    key_for: Callable[[Transaction], Optional[str]],
) -> Tuple[GroupEarnings, ...]:
    """
    Sum totals and counts per key, sorted by total descending.

    Transactions whose key is None are skipped. Equal totals keep first-seen
    order.
    """
    buckets: Dict[str, List] = {}
    for txn in positive:
        key = key_for(txn)
        if key is None:
            continue
        bucket = buckets.setdefault(key, [0.0, 0])
        bucket[0] += txn.amount
        bucket[1] += 1

    groups = [
        GroupEarnings(
            key=key,
            total=total,
            percentage=_percentage(total, gross_earnings),
            transaction_count=count,
        )
        for key, (total, count) in buckets.items()
    ]
    groups.sort(key=lambda g: g.total, reverse=True)
    return tuple(groups)


def _earning_type_key(txn: Transaction) -> Optional[str]:
    txn_type = txn.transaction_type
    if txn_type is None or not txn_type.is_earning:
        return None
    return txn_type.value


def monthly_earnings(positive: List[Transaction]) -> Tuple[MonthlyEarnings, ...]:
    """Calendar-month buckets in chronological order"""
    buckets: Dict[str, List] = {}
    for txn in positive:
        day = to_calendar_day(txn.date)
        bucket = buckets.setdefault(month_key(day), [0.0, 0, day])
        bucket[0] += txn.amount
        bucket[1] += 1

    # "YYYY-MM" is fixed width, so string order is chronological order
    return tuple(
        MonthlyEarnings(
            month=key,
            month_label=format_month(day),
            total=total,
            transaction_count=count,
        )
        for key, (total, count, day) in sorted(buckets.items())
    )


def earnings_rate(positive: List[Transaction], gross_earnings: float) -> EarningsRate:
    """
    Average earnings per day, week and month across the earning period.

    The span counts both endpoints, so a single day of activity is 1 day.
    Months use the 30.44-day average, not calendar months.
    """
    if not positive:
        return EarningsRate()

    days: List[date] = [to_calendar_day(t.date) for t in positive]
    days_span = days_between(min(days), max(days)) + 1

    return EarningsRate(
        per_day=gross_earnings / days_span,
        per_week=gross_earnings / (days_span / DAYS_PER_WEEK),
        per_month=gross_earnings / (days_span / AVERAGE_DAYS_PER_MONTH),
    )


def best_and_worst_month(months: Iterable[MonthlyEarnings]) -> BestWorstMonths:
    """Strict comparisons: the first month seen wins a tie"""
    best: Optional[MonthlyEarnings] = None
    worst: Optional[MonthlyEarnings] = None
    for month in months:
        if best is None or month.total > best.total:
            best = month
        if worst is None or month.total < worst.total:
            worst = month
    return BestWorstMonths(best=best, worst=worst)


def count_by_type(transactions: Iterable[Transaction]) -> Dict[TransactionType, int]:
    """Every type is present; untagged transactions are not counted"""
    counts = {txn_type: 0 for txn_type in TransactionType}
    for txn in transactions:
        if txn.transaction_type is not None:
            counts[txn.transaction_type] += 1
    return counts


def calculate_statistics(transactions: Iterable[Transaction]) -> StatisticsResult:
    """
    Aggregate earnings statistics.

    Positive amounts drive every earnings figure; fees, withdrawals and counts
    look at all transactions. Deterministic and side-effect free: an empty
    input yields zero sums, empty breakdowns and zero per-type counts.
    """
    all_txns = list(transactions)
    positive = [t for t in all_txns if t.amount > 0]

    gross_earnings = sum((t.amount for t in positive), 0.0)
    total_service_fees = abs(
        sum(t.amount for t in all_txns if t.transaction_type is TransactionType.SERVICE_FEE)
    )
    total_withdrawals = abs(
        sum(t.amount for t in all_txns if t.transaction_type in WITHDRAWAL_TYPES)
    )

    months = monthly_earnings(positive)

    return StatisticsResult(
        gross_earnings=gross_earnings,
        total_service_fees=total_service_fees,
        net_earnings=gross_earnings - total_service_fees,
        total_withdrawals=total_withdrawals,
        earnings_by_client=group_earnings(positive, gross_earnings, lambda t: t.client_label),
        earnings_by_project=group_earnings(positive, gross_earnings, lambda t: t.project_label),
        earnings_by_type=group_earnings(positive, gross_earnings, _earning_type_key),
        monthly_earnings=months,
        earnings_rate=earnings_rate(positive, gross_earnings),
        best_worst_months=best_and_worst_month(months),
        average_transaction_size=gross_earnings / len(positive) if positive else 0.0,
        total_transactions=len(all_txns),
        transaction_counts_by_type=count_by_type(all_txns),
    )
