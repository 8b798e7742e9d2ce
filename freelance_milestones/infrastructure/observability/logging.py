"""Structured JSON logging for report runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from freelance_milestones.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure structured JSON logging.

    Defaults to stderr so report output on stdout stays clean.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_milestone_report(
    transaction_count: int,
    milestone_amount: float,
    milestones_reached: Optional[int],
    duration_ms: float,
) -> None:
    """Log structured milestone report outcome; milestones_reached is None for no data"""
    logging.getLogger(__name__).info(
        "Milestone report completed",
        extra={
            "step": "milestone_report",
            "outcome": "no_data" if milestones_reached is None else "reported",
            "transaction_count": transaction_count,
            "milestone_amount": milestone_amount,
            "milestones_reached": milestones_reached or 0,
            "duration_ms": duration_ms,
        },
    )


def log_statistics_report(
    transaction_count: int,
    gross_earnings: float,
    month_count: int,
    duration_ms: float,
) -> None:
    """Log structured statistics report outcome"""
    logging.getLogger(__name__).info(
        "Statistics report completed",
        extra={
            "step": "statistics_report",
            "transaction_count": transaction_count,
            "gross_earnings": gross_earnings,
            "month_count": month_count,
            "duration_ms": duration_ms,
        },
    )
