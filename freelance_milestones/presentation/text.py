"""Plain-text rendering of milestone and statistics reports"""

from typing import Iterable, List

from freelance_milestones.domain.models import GroupEarnings, MilestoneResult, StatisticsResult

NO_DATA_MESSAGE = "No positive transactions found in the data."
NO_MILESTONES_MESSAGE = "No milestones reached yet"

_MILESTONE_COL = 11
_DAYS_COL = 19
_DATE_COL = 27


def format_currency(value: float) -> str:
    """$1,234.56 (negative values as -$1,234.56)"""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_milestone_amount(value: float) -> str:
    """Whole thresholds drop the cents: $1,000 but $1,500.50"""
    if float(value).is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def _border(left: str, mid: str, right: str) -> str:
    return (
        left
        + "─" * (_MILESTONE_COL + 2)
        + mid
        + "─" * (_DAYS_COL + 2)
        + mid
        + "─" * (_DATE_COL + 2)
        + right
    )


def _row(milestone: str, days: str, reached: str) -> str:
    return f"│ {milestone:<{_MILESTONE_COL}} │ {days:<{_DAYS_COL}} │ {reached:<{_DATE_COL}} │"


def render_milestone_table(result: MilestoneResult) -> List[str]:
    if not result.milestones:
        return [NO_MILESTONES_MESSAGE]

    lines = [
        _border("┌", "┬", "┐"),
        _row("Milestone", "Days to Reach", "Date Reached"),
        _border("├", "┼", "┤"),
    ]
    for m in result.milestones:
        lines.append(
            _row(
                format_milestone_amount(m.amount_reached),
                f"{m.days_to_get_this_k} days",
                m.date_reached,
            )
        )
    lines.append(_border("└", "┴", "┘"))
    return lines


def render_milestone_report(result: MilestoneResult | None) -> str:
    """Milestone summary table followed by progress toward the next threshold"""
    if result is None:
        return NO_DATA_MESSAGE

    step = format_milestone_amount(result.milestone_amount)
    lines = [
        f"First positive transaction date: {result.first_positive_transaction_date}",
        "",
        "Milestone Summary Table:",
        *render_milestone_table(result),
        "",
        f"Current progress for the next {step} milestone:",
        "",
        f"Current cumulative gain: {format_currency(result.current_cumulative_sum)}",
        f"Progress towards the next {step} milestone: {format_currency(result.progress_towards_next_k)}",
        f"Remaining to reach {format_milestone_amount(result.next_milestone_target)}: "
        f"{format_currency(result.remaining_to_next_k)}",
    ]

    if result.days_since_last_milestone is not None:
        lines += ["", f"Days since last milestone: {result.days_since_last_milestone} days"]

    return "\n".join(lines)


def _render_groups(title: str, groups: Iterable[GroupEarnings]) -> List[str]:
    lines = [title]
    rendered = [
        f"  {g.key}: {format_currency(g.total)} ({g.percentage:.1f}%, {g.transaction_count} transactions)"
        for g in groups
    ]
    return lines + (rendered or ["  (none)"])


def render_statistics_report(result: StatisticsResult) -> str:
    """Overview figures, rates, extremes and breakdowns"""
    rate = result.earnings_rate
    best = result.best_worst_months.best
    worst = result.best_worst_months.worst

    lines = [
        "Earnings Overview:",
        f"  Gross earnings: {format_currency(result.gross_earnings)}",
        f"  Service fees: {format_currency(result.total_service_fees)}",
        f"  Net earnings: {format_currency(result.net_earnings)}",
        f"  Withdrawals: {format_currency(result.total_withdrawals)}",
        f"  Average transaction: {format_currency(result.average_transaction_size)}",
        f"  Total transactions: {result.total_transactions}",
        "",
        "Earnings Rate:",
        f"  Per day: {format_currency(rate.per_day)}",
        f"  Per week: {format_currency(rate.per_week)}",
        f"  Per month: {format_currency(rate.per_month)}",
        "",
    ]

    if best is not None and worst is not None:
        lines += [
            f"Best month: {best.month_label} ({format_currency(best.total)})",
            f"Worst month: {worst.month_label} ({format_currency(worst.total)})",
            "",
        ]

    lines += _render_groups("Earnings by Client:", result.earnings_by_client)
    lines.append("")
    lines += _render_groups("Earnings by Project:", result.earnings_by_project)
    lines.append("")
    lines += _render_groups("Earnings by Type:", result.earnings_by_type)
    lines.append("")

    lines.append("Monthly Earnings:")
    if result.monthly_earnings:
        for month in result.monthly_earnings:
            lines.append(
                f"  {month.month_label}: {format_currency(month.total)} ({month.transaction_count} transactions)"
            )
    else:
        lines.append("  (none)")
    lines.append("")

    lines.append("Transactions by Type:")
    for txn_type, count in result.transaction_counts_by_type.items():
        lines.append(f"  {txn_type.value}: {count}")

    return "\n".join(lines)
