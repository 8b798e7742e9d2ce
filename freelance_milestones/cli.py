"""Command-line entry point: milestone table and earnings statistics from a CSV export"""

import argparse
import json
import logging
import math
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from freelance_milestones.api.schemas import MilestoneReportResponse, StatisticsResponse
from freelance_milestones.config import settings
from freelance_milestones.domain.exceptions import DomainException
from freelance_milestones.infrastructure.observability.logging import setup_logging
from freelance_milestones.infrastructure.observability.metrics import write_metrics
from freelance_milestones.infrastructure.sources.csv_file import CsvTransactionSource
from freelance_milestones.presentation.text import (
    NO_DATA_MESSAGE,
    render_milestone_report,
    render_statistics_report,
)
from freelance_milestones.services.reporting import build_milestone_report, build_statistics_report

logger = logging.getLogger(__name__)

COMMANDS = ("milestones", "stats")
MISSING_PATH_MESSAGE = "Please provide the path to your CSV file as an argument."


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Path to the transactions CSV file")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument("--metrics-file", help="Write prometheus metrics to this file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freelance-milestones",
        description="Earnings milestones and statistics from a freelance platform CSV export",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    milestones = sub.add_parser("milestones", help="Milestone table and progress")
    _add_common_args(milestones)
    milestones.add_argument("--amount", help="Milestone increment (default from settings)")
    milestones.add_argument("--today", type=date.fromisoformat, help="Evaluation date, YYYY-MM-DD")

    stats = sub.add_parser("stats", help="Earnings statistics")
    _add_common_args(stats)

    return parser


def parse_milestone_amount(raw: Optional[str]) -> Optional[float]:
    """Apply the caller-side floor; None means the amount is rejected"""
    if raw is None:
        amount = settings.milestone_amount
    else:
        try:
            amount = float(raw)
        except ValueError:
            return None
    if not math.isfinite(amount) or amount <= 0 or amount < settings.min_milestone_amount:
        return None
    return amount


def run_milestones(args: argparse.Namespace) -> int:
    amount = parse_milestone_amount(args.amount)
    if amount is None:
        print(
            f"Invalid milestone amount: {args.amount or settings.milestone_amount}. "
            f"Minimum milestone amount is {settings.min_milestone_amount:,.0f}.",
            file=sys.stderr,
        )
        return 2

    transactions = CsvTransactionSource(args.path).load()
    result = build_milestone_report(transactions, amount, today=args.today)

    if args.format == "json":
        payload = MilestoneReportResponse.from_result(result).model_dump(by_alias=True, mode="json") if result else None
        print(json.dumps({"result": payload}, indent=2))
    else:
        print(render_milestone_report(result))
    return 0


def run_stats(args: argparse.Namespace) -> int:
    transactions = CsvTransactionSource(args.path).load()
    result = build_statistics_report(transactions)

    if args.format == "json":
        payload = StatisticsResponse.from_result(result).model_dump(by_alias=True, mode="json")
        print(json.dumps({"result": payload}, indent=2))
    elif result.total_transactions == 0:
        print(NO_DATA_MESSAGE)
    else:
        print(render_statistics_report(result))
    return 0


def main(argv: List[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print(MISSING_PATH_MESSAGE, file=sys.stderr)
        return 1

    # Bare `freelance-milestones FILE` behaves like the original single-purpose script
    if argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv.insert(0, "milestones")

    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level)

    try:
        if args.command == "milestones":
            exit_code = run_milestones(args)
        else:
            exit_code = run_stats(args)
    except DomainException as e:
        logger.error(f"{args.command} failed: {e}", extra={"path": args.path})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.metrics_file:
        write_metrics(Path(args.metrics_file))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
