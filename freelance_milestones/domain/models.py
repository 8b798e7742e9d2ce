"""Domain models - pure Python dataclasses representing earnings ledger entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Mapping, Optional, Tuple

from freelance_milestones.domain.exceptions import UnknownTransactionTypeError
from freelance_milestones.utils.date_utils import format_day

UNKNOWN_LABEL = "Unknown"


class TransactionType(str, Enum):
    """Ledger entry types reported by the freelance platform"""

    HOURLY = "Hourly"
    FIXED_PRICE = "Fixed-price"
    SERVICE_FEE = "Service Fee"
    WITHDRAWAL = "Withdrawal"
    WITHDRAWAL_FEE = "Withdrawal Fee"
    BONUS = "Bonus"

    @classmethod
    def from_label(cls, label: str) -> "TransactionType":
        """
        Map a raw label onto a member.

        Exact value first, then case-insensitive. Anything else raises
        UnknownTransactionTypeError so new platform types surface loudly.
        """
        cleaned = label.strip()
        try:
            return cls(cleaned)
        except ValueError:
            pass
        folded = cleaned.casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        raise UnknownTransactionTypeError(label)

    @property
    def is_earning(self) -> bool:
        """Fees and withdrawals are costs or transfers, not earnings"""
        return self not in _NON_EARNING_TYPES


_NON_EARNING_TYPES = frozenset(
    {
        TransactionType.SERVICE_FEE,
        TransactionType.WITHDRAWAL,
        TransactionType.WITHDRAWAL_FEE,
    }
)

WITHDRAWAL_TYPES = frozenset({TransactionType.WITHDRAWAL, TransactionType.WITHDRAWAL_FEE})


@dataclass(frozen=True)
class Transaction:
    """One ledger entry; positive amount = credit, negative = debit"""

    date: date
    amount: float
    transaction_type: Optional[TransactionType] = None
    client: Optional[str] = None
    project: Optional[str] = None

    @property
    def client_label(self) -> str:
        return self.client or UNKNOWN_LABEL

    @property
    def project_label(self) -> str:
        return self.project or UNKNOWN_LABEL


@dataclass(frozen=True)
class Milestone:
    """A crossed cumulative-earnings threshold"""

    amount_reached: float
    days_to_get_this_k: int
    reached_on: date

    @property
    def date_reached(self) -> str:
        return format_day(self.reached_on)


@dataclass(frozen=True)
class MilestoneResult:
    """Milestone history plus progress toward the next threshold"""

    first_positive_transaction_on: date
    milestones: Tuple[Milestone, ...]
    current_cumulative_sum: float
    last_milestone_amount: float
    progress_towards_next_k: float
    remaining_to_next_k: float
    next_milestone_target: float
    days_since_last_milestone: Optional[int]
    milestone_amount: float

    @property
    def first_positive_transaction_date(self) -> str:
        return format_day(self.first_positive_transaction_on)


@dataclass(frozen=True)
class GroupEarnings:
    """Earnings accumulated under one client, project or type"""

    key: str
    total: float
    percentage: float
    transaction_count: int


@dataclass(frozen=True)
class MonthlyEarnings:
    """Earnings for one calendar month"""

    month: str  # "YYYY-MM"
    month_label: str  # "Jan 2025"
    total: float
    transaction_count: int


@dataclass(frozen=True)
class EarningsRate:
    per_day: float = 0.0
    per_week: float = 0.0
    per_month: float = 0.0


@dataclass(frozen=True)
class BestWorstMonths:
    best: Optional[MonthlyEarnings] = None
    worst: Optional[MonthlyEarnings] = None


@dataclass(frozen=True)
class StatisticsResult:
    """Aggregate earnings statistics over a transaction list"""

    gross_earnings: float
    total_service_fees: float
    net_earnings: float
    total_withdrawals: float
    earnings_by_client: Tuple[GroupEarnings, ...]
    earnings_by_project: Tuple[GroupEarnings, ...]
    earnings_by_type: Tuple[GroupEarnings, ...]
    monthly_earnings: Tuple[MonthlyEarnings, ...]
    earnings_rate: EarningsRate
    best_worst_months: BestWorstMonths
    average_transaction_size: float
    total_transactions: int
    transaction_counts_by_type: Mapping[TransactionType, int]
