"""Unit tests for plain-text report rendering"""

from datetime import date
from freelance_milestones.domain.milestones import calculate_milestones
from freelance_milestones.domain.models import Transaction
from freelance_milestones.domain.statistics import calculate_statistics
from freelance_milestones.presentation.text import (
    NO_DATA_MESSAGE,
    NO_MILESTONES_MESSAGE,
    format_currency,
    format_milestone_amount,
    render_milestone_report,
    render_statistics_report,
)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-20) == "-$20.00"
    assert format_currency(0) == "$0.00"


def test_format_milestone_amount():
    assert format_milestone_amount(1000) == "$1,000"
    assert format_milestone_amount(2500.5) == "$2,500.50"


def test_render_milestone_report_no_data():
    """Test the absent result maps to a distinct message"""
    assert render_milestone_report(None) == NO_DATA_MESSAGE


def test_render_milestone_report_table(sample_transactions, today):
    """Test table rows and progress block"""
    result = calculate_milestones(sample_transactions, 1000, today=today)

    output = render_milestone_report(result)

    assert "First positive transaction date: Jan 1, 2024" in output
    assert "│ $1,000      │ 9 days              │ Jan 10, 2024                │" in output
    assert "│ $2,000      │ 56 days             │ Mar 6, 2024                 │" in output
    assert "Current cumulative gain: $2,600.00" in output
    assert "Progress towards the next $1,000 milestone: $600.00" in output
    assert "Remaining to reach $3,000: $400.00" in output
    assert "Days since last milestone: 87 days" in output


def test_render_milestone_report_no_milestones_yet(today):
    """Test earnings below the first threshold show a message instead of a table"""
    result = calculate_milestones([Transaction(date(2024, 1, 1), 250.0)], 1000, today=today)

    output = render_milestone_report(result)

    assert NO_MILESTONES_MESSAGE in output
    assert "┌" not in output
    assert "Days since last milestone" not in output


def test_render_statistics_report(sample_transactions):
    """Test statistics summary sections"""
    output = render_statistics_report(calculate_statistics(sample_transactions))

    assert "Gross earnings: $2,600.00" in output
    assert "Service fees: $250.00" in output
    assert "Best month: Mar 2024 ($1,400.00)" in output
    assert "Worst month: Feb 2024 ($100.00)" in output
    assert "Initech: $1,400.00 (53.8%, 1 transactions)" in output
    assert "Service Fee: 3" in output


def test_render_statistics_report_empty():
    """Test empty breakdowns render placeholders"""
    output = render_statistics_report(calculate_statistics([]))

    assert "(none)" in output
    assert "Best month" not in output
