"""Pytest fixtures for testing"""

import logging

import pytest
from datetime import date, timedelta
from pathlib import Path
from typing import Callable

from freelance_milestones.domain.models import Transaction, TransactionType


@pytest.fixture
def today() -> date:
    """Fixed evaluation date so days-since-last-milestone is reproducible"""
    return date(2024, 6, 1)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Three months of freelance activity with fees and a withdrawal"""
    base_date = date(2024, 1, 1)
    return [
        Transaction(base_date, 500.0, TransactionType.HOURLY, "Acme", "Website"),
        Transaction(base_date, -50.0, TransactionType.SERVICE_FEE, "Acme", "Website"),
        Transaction(base_date + timedelta(days=9), 600.0, TransactionType.FIXED_PRICE, "Globex", "App"),
        Transaction(base_date + timedelta(days=9), -60.0, TransactionType.SERVICE_FEE, "Globex", "App"),
        Transaction(base_date + timedelta(days=31), 100.0, TransactionType.BONUS, "Acme", None),
        Transaction(base_date + timedelta(days=40), -800.0, TransactionType.WITHDRAWAL),
        Transaction(base_date + timedelta(days=40), -2.0, TransactionType.WITHDRAWAL_FEE),
        Transaction(base_date + timedelta(days=65), 1400.0, TransactionType.HOURLY, "Initech", "Website"),
        Transaction(base_date + timedelta(days=65), -140.0, TransactionType.SERVICE_FEE, "Initech", "Website"),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV text to a temporary file and return its path"""

    def _write(content: str, name: str = "transactions.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put them back after each test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
