"""Unit tests for JSON report schemas"""

from freelance_milestones.api.schemas import MilestoneReportResponse, StatisticsResponse
from freelance_milestones.domain.milestones import calculate_milestones
from freelance_milestones.domain.statistics import calculate_statistics


def test_milestone_report_response_camel_case(sample_transactions, today):
    """Test milestone output uses the camelCase wire names"""
    result = calculate_milestones(sample_transactions, 1000, today=today)

    data = MilestoneReportResponse.from_result(result).model_dump(by_alias=True, mode="json")

    assert data["firstPositiveTransactionDate"] == "Jan 1, 2024"
    assert data["milestones"][0] == {
        "amountReached": 1000.0,
        "daysToGetThisK": 9,
        "dateReached": "Jan 10, 2024",
    }
    assert data["progressTowardsNextK"] == 600.0
    assert data["remainingToNextK"] == 400.0
    assert data["nextMilestoneTarget"] == 3000.0
    assert data["daysSinceLastMilestone"] == 87
    assert data["milestoneAmount"] == 1000.0


def test_statistics_response_camel_case(sample_transactions):
    """Test statistics output shape and type-count keys"""
    stats = calculate_statistics(sample_transactions)

    data = StatisticsResponse.from_result(stats).model_dump(by_alias=True, mode="json")

    assert data["grossEarnings"] == 2600.0
    assert data["earningsByClient"][0] == {
        "client": "Initech",
        "total": 1400.0,
        "percentage": 1400 / 2600 * 100,
        "transactionCount": 1,
    }
    assert data["earningsByType"][0]["type"] == "Hourly"
    assert data["earningsByProject"][0]["project"] == "Website"
    assert data["monthlyEarnings"][0]["monthLabel"] == "Jan 2024"
    assert data["bestWorstMonths"]["best"]["month"] == "2024-03"
    assert set(data["earningsRate"]) == {"perDay", "perWeek", "perMonth"}
    assert data["transactionCountsByType"]["Service Fee"] == 3
    assert len(data["transactionCountsByType"]) == 6


def test_statistics_response_empty():
    """Test the empty result serializes with null extremes"""
    data = StatisticsResponse.from_result(calculate_statistics([])).model_dump(by_alias=True, mode="json")

    assert data["bestWorstMonths"] == {"best": None, "worst": None}
    assert data["earningsByClient"] == []
    assert all(count == 0 for count in data["transactionCountsByType"].values())
