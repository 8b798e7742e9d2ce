"""Pydantic schemas for JSON report output"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from freelance_milestones.domain.models import (
    GroupEarnings,
    MilestoneResult,
    MonthlyEarnings,
    StatisticsResult,
)


class CamelModel(BaseModel):
    """Serializes with camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MilestoneSchema(CamelModel):
    """Single crossed threshold"""

    amount_reached: float
    days_to_get_this_k: int
    date_reached: str


class MilestoneReportResponse(CamelModel):
    """Milestone history and progress toward the next threshold"""

    first_positive_transaction_date: str
    milestones: List[MilestoneSchema]
    current_cumulative_sum: float
    last_milestone_amount: float
    progress_towards_next_k: float
    remaining_to_next_k: float
    next_milestone_target: float
    days_since_last_milestone: Optional[int] = None
    milestone_amount: float

    @classmethod
    def from_result(cls, result: MilestoneResult) -> "MilestoneReportResponse":
        return cls(
            first_positive_transaction_date=result.first_positive_transaction_date,
            milestones=[
                MilestoneSchema(
                    amount_reached=m.amount_reached,
                    days_to_get_this_k=m.days_to_get_this_k,
                    date_reached=m.date_reached,
                )
                for m in result.milestones
            ],
            current_cumulative_sum=result.current_cumulative_sum,
            last_milestone_amount=result.last_milestone_amount,
            progress_towards_next_k=result.progress_towards_next_k,
            remaining_to_next_k=result.remaining_to_next_k,
            next_milestone_target=result.next_milestone_target,
            days_since_last_milestone=result.days_since_last_milestone,
            milestone_amount=result.milestone_amount,
        )


class ClientEarningsSchema(CamelModel):
    client: str
    total: float
    percentage: float
    transaction_count: int


class ProjectEarningsSchema(CamelModel):
    project: str
    total: float
    percentage: float
    transaction_count: int


class TypeEarningsSchema(CamelModel):
    type: str
    total: float
    percentage: float
    transaction_count: int


class MonthlyEarningsSchema(CamelModel):
    month: str
    month_label: str
    total: float
    transaction_count: int

    @classmethod
    def from_month(cls, month: MonthlyEarnings) -> "MonthlyEarningsSchema":
        return cls(
            month=month.month,
            month_label=month.month_label,
            total=month.total,
            transaction_count=month.transaction_count,
        )


class EarningsRateSchema(CamelModel):
    per_day: float
    per_week: float
    per_month: float


class BestWorstMonthsSchema(CamelModel):
    best: Optional[MonthlyEarningsSchema] = None
    worst: Optional[MonthlyEarningsSchema] = None


def _group_fields(group: GroupEarnings) -> Dict[str, float]:
    return {
        "total": group.total,
        "percentage": group.percentage,
        "transaction_count": group.transaction_count,
    }


def _optional_month(month: Optional[MonthlyEarnings]) -> Optional[MonthlyEarningsSchema]:
    return MonthlyEarningsSchema.from_month(month) if month is not None else None


class StatisticsResponse(CamelModel):
    """Aggregate earnings statistics"""

    gross_earnings: float
    total_service_fees: float
    net_earnings: float
    total_withdrawals: float
    earnings_by_client: List[ClientEarningsSchema]
    earnings_by_project: List[ProjectEarningsSchema]
    earnings_by_type: List[TypeEarningsSchema]
    monthly_earnings: List[MonthlyEarningsSchema]
    earnings_rate: EarningsRateSchema
    best_worst_months: BestWorstMonthsSchema
    average_transaction_size: float
    total_transactions: int
    # Keyed by the type's display value, e.g. "Service Fee"
    transaction_counts_by_type: Dict[str, int]

    @classmethod
    def from_result(cls, result: StatisticsResult) -> "StatisticsResponse":
        return cls(
            gross_earnings=result.gross_earnings,
            total_service_fees=result.total_service_fees,
            net_earnings=result.net_earnings,
            total_withdrawals=result.total_withdrawals,
            earnings_by_client=[
                ClientEarningsSchema(client=g.key, **_group_fields(g)) for g in result.earnings_by_client
            ],
            earnings_by_project=[
                ProjectEarningsSchema(project=g.key, **_group_fields(g)) for g in result.earnings_by_project
            ],
            earnings_by_type=[
                TypeEarningsSchema(type=g.key, **_group_fields(g)) for g in result.earnings_by_type
            ],
            monthly_earnings=[MonthlyEarningsSchema.from_month(m) for m in result.monthly_earnings],
            earnings_rate=EarningsRateSchema(
                per_day=result.earnings_rate.per_day,
                per_week=result.earnings_rate.per_week,
                per_month=result.earnings_rate.per_month,
            ),
            best_worst_months=BestWorstMonthsSchema(
                best=_optional_month(result.best_worst_months.best),
                worst=_optional_month(result.best_worst_months.worst),
            ),
            average_transaction_size=result.average_transaction_size,
            total_transactions=result.total_transactions,
            transaction_counts_by_type={
                txn_type.value: count for txn_type, count in result.transaction_counts_by_type.items()
            },
        )
