"""Unit tests for domain models"""

import pytest
from datetime import date
from freelance_milestones.domain.models import Milestone, Transaction, TransactionType
from freelance_milestones.domain.exceptions import (
    InvalidTransactionDataError,
    UnknownTransactionTypeError,
)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Hourly", TransactionType.HOURLY),
        ("Fixed-price", TransactionType.FIXED_PRICE),
        ("  Service Fee ", TransactionType.SERVICE_FEE),
        ("withdrawal", TransactionType.WITHDRAWAL),
        ("WITHDRAWAL FEE", TransactionType.WITHDRAWAL_FEE),
        ("Bonus", TransactionType.BONUS),
    ],
)
def test_transaction_type_from_label(label, expected):
    """Test labels map onto members regardless of case and padding"""
    assert TransactionType.from_label(label) is expected


def test_transaction_type_from_label_unknown():
    """Test unknown labels are an explicit error"""
    with pytest.raises(UnknownTransactionTypeError) as exc_info:
        TransactionType.from_label("Refund")

    assert exc_info.value.label == "Refund"
    assert isinstance(exc_info.value, InvalidTransactionDataError)


def test_transaction_type_is_earning():
    """Test only fees and withdrawals are non-earning types"""
    earning = {t for t in TransactionType if t.is_earning}
    assert earning == {TransactionType.HOURLY, TransactionType.FIXED_PRICE, TransactionType.BONUS}


def test_transaction_labels_default_to_unknown():
    """Test missing or empty client/project read as 'Unknown'"""
    txn = Transaction(date(2024, 1, 1), 10.0, client="", project=None)

    assert txn.client_label == "Unknown"
    assert txn.project_label == "Unknown"


def test_transaction_is_immutable():
    """Test transactions cannot be modified after construction"""
    txn = Transaction(date(2024, 1, 1), 10.0)
    with pytest.raises(AttributeError):
        txn.amount = 20.0


def test_milestone_date_reached_format():
    """Test crossing dates format like 'Mar 5, 2024'"""
    milestone = Milestone(amount_reached=1000, days_to_get_this_k=3, reached_on=date(2024, 3, 5))
    assert milestone.date_reached == "Mar 5, 2024"
