"""Prometheus metrics for report volume, milestone counts and report latency"""

from pathlib import Path

from prometheus_client import REGISTRY, Counter, Histogram, write_to_textfile

# Report metrics
milestone_report_counter = Counter(
    "milestone_reports_total",
    "Total milestone reports produced",
    ["outcome"],  # reported | no_data
)

statistics_report_counter = Counter(
    "statistics_reports_total",
    "Total statistics reports produced",
)

transactions_processed_counter = Counter(
    "transactions_processed_total",
    "Transactions fed into report calculations",
    ["report"],  # milestones | statistics
)

milestones_reached_histogram = Histogram(
    "milestones_reached",
    "Milestones reached per milestone report",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100],
)

report_duration_histogram = Histogram(
    "report_duration_seconds",
    "Time spent computing a report",
    ["report"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_milestone_report(transaction_count: int, milestones_reached: int | None, duration_s: float) -> None:
    """Record milestone report metrics; milestones_reached is None when there was nothing to report"""
    outcome = "no_data" if milestones_reached is None else "reported"
    milestone_report_counter.labels(outcome=outcome).inc()
    transactions_processed_counter.labels(report="milestones").inc(transaction_count)
    report_duration_histogram.labels(report="milestones").observe(duration_s)

    if milestones_reached is not None:
        milestones_reached_histogram.observe(milestones_reached)


def record_statistics_report(transaction_count: int, duration_s: float) -> None:
    """Record statistics report metrics"""
    statistics_report_counter.inc()
    transactions_processed_counter.labels(report="statistics").inc(transaction_count)
    report_duration_histogram.labels(report="statistics").observe(duration_s)


def write_metrics(path: Path) -> None:
    """Dump the registry in text exposition format (node-exporter textfile collector)"""
    write_to_textfile(str(path), REGISTRY)
