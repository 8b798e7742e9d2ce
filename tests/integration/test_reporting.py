"""Integration tests for the report service: metrics and structured logs"""

import logging

import pytest
from prometheus_client import REGISTRY
from freelance_milestones.services.reporting import build_milestone_report, build_statistics_report


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_build_milestone_report_records_metrics(sample_transactions, today):
    """Test a reported outcome increments the counters"""
    before = _sample("milestone_reports_total", {"outcome": "reported"})
    before_txns = _sample("transactions_processed_total", {"report": "milestones"})

    result = build_milestone_report(sample_transactions, 1000, today=today)

    assert len(result.milestones) == 2
    assert _sample("milestone_reports_total", {"outcome": "reported"}) == before + 1
    assert _sample("transactions_processed_total", {"report": "milestones"}) == before_txns + len(sample_transactions)


def test_build_milestone_report_no_data_outcome():
    """Test the no-data outcome is counted separately"""
    before = _sample("milestone_reports_total", {"outcome": "no_data"})

    assert build_milestone_report([], 1000) is None

    assert _sample("milestone_reports_total", {"outcome": "no_data"}) == before + 1


def test_build_milestone_report_logs_outcome(sample_transactions, today, caplog):
    """Test one structured log line per report"""
    with caplog.at_level(logging.INFO):
        build_milestone_report(sample_transactions, 1000, today=today)

    records = [r for r in caplog.records if r.getMessage() == "Milestone report completed"]
    assert len(records) == 1
    assert records[0].step == "milestone_report"
    assert records[0].milestones_reached == 2
    assert records[0].outcome == "reported"


def test_build_statistics_report(sample_transactions, caplog):
    """Test statistics reports are counted and logged"""
    before = _sample("statistics_reports_total")

    with caplog.at_level(logging.INFO):
        stats = build_statistics_report(sample_transactions)

    assert stats.gross_earnings == pytest.approx(2600)
    assert _sample("statistics_reports_total") == before + 1
    records = [r for r in caplog.records if r.getMessage() == "Statistics report completed"]
    assert records[0].month_count == 3
