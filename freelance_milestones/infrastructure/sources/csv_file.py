"""CSV file transaction source for freelance-platform earnings exports"""

import csv
import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from freelance_milestones.config import settings
from freelance_milestones.domain.exceptions import (
    InvalidTransactionDataError,
    TransactionSourceError,
    UnknownTransactionTypeError,
)
from freelance_milestones.domain.models import Transaction, TransactionType

logger = logging.getLogger(__name__)

DATE_COLUMNS = ("Date", "date")
AMOUNT_COLUMNS = ("Amount $", "amount")
TYPE_COLUMNS = ("Type", "Transaction type", "transactionType")
CLIENT_COLUMNS = ("Client", "Client/Team", "client")
PROJECT_COLUMNS = ("Project", "Description", "project")


def _first_present(fieldnames: Sequence[str], candidates: Sequence[str]) -> Optional[str]:
    for name in candidates:
        if name in fieldnames:
            return name
    return None


def parse_amount(raw: Optional[str]) -> Optional[float]:
    """Parse a signed amount cell such as '-$1,234.50'; None if unusable"""
    if raw is None:
        return None
    cleaned = raw.strip().replace(",", "").replace("$", "")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    # float() also accepts "nan" and "inf"
    if not math.isfinite(value):
        return None
    return value


def parse_date(raw: Optional[str], formats: Sequence[str]) -> Optional[date]:
    """Parse a date cell; ISO timestamps keep only their calendar day"""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None

    for fmt in formats:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(cleaned.replace("Z", "+00:00")).date()
    except ValueError:
        return None


class CsvTransactionSource:
    """Reads transactions from a CSV export with a header row"""

    def __init__(
        self,
        path: Path | str,
        encoding: str | None = None,
        date_formats: Sequence[str] | None = None,
    ):
        self.path = Path(path)
        self.encoding = encoding or settings.csv_encoding
        self.date_formats = list(date_formats or settings.csv_date_formats)

    def load(self) -> List[Transaction]:
        """
        Load all usable transactions.

        Rows without a valid date or amount are dropped. A non-empty type cell
        that is not a known TransactionType aborts the load.

        Raises:
            TransactionSourceError: File missing or unreadable
            InvalidTransactionDataError: Required column missing
            UnknownTransactionTypeError: Unrecognized type label
        """
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as handle:
                reader = csv.DictReader(handle)
                rows = list(reader)
                fieldnames = [name.strip() for name in reader.fieldnames or []]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise TransactionSourceError(f"Error reading {self.path}: {e}") from e

        if not fieldnames:
            return []

        columns = self._resolve_columns(fieldnames)
        transactions: List[Transaction] = []
        dropped = 0

        # Row 1 is the header
        for row_number, raw_row in enumerate(rows, start=2):
            row = {(key or "").strip(): value for key, value in raw_row.items()}
            txn = self._build_transaction(row, columns, row_number)
            if txn is None:
                dropped += 1
                continue
            transactions.append(txn)

        if dropped:
            logger.warning(
                "Dropped rows without a valid date or amount",
                extra={"path": str(self.path), "dropped_rows": dropped},
            )
        logger.info(
            "Loaded transactions",
            extra={"path": str(self.path), "transaction_count": len(transactions)},
        )
        return transactions

    def _resolve_columns(self, fieldnames: Sequence[str]) -> Dict[str, Optional[str]]:
        date_column = _first_present(fieldnames, DATE_COLUMNS)
        if date_column is None:
            raise InvalidTransactionDataError('CSV file must contain a "Date" column.')

        amount_column = _first_present(fieldnames, AMOUNT_COLUMNS)
        if amount_column is None:
            raise InvalidTransactionDataError('CSV file must contain an "Amount $" or "amount" column.')

        return {
            "date": date_column,
            "amount": amount_column,
            "type": _first_present(fieldnames, TYPE_COLUMNS),
            "client": _first_present(fieldnames, CLIENT_COLUMNS),
            "project": _first_present(fieldnames, PROJECT_COLUMNS),
        }

    def _build_transaction(
        self,
        row: Dict[str, Optional[str]],
        columns: Dict[str, Optional[str]],
        row_number: int,
    ) -> Optional[Transaction]:
        txn_date = parse_date(row.get(columns["date"]), self.date_formats)
        amount = parse_amount(row.get(columns["amount"]))
        if txn_date is None or amount is None:
            return None

        txn_type = None
        raw_type = _optional_cell(row, columns["type"])
        if raw_type:
            try:
                txn_type = TransactionType.from_label(raw_type)
            except UnknownTransactionTypeError as e:
                raise UnknownTransactionTypeError(e.label, row=row_number) from e

        return Transaction(
            date=txn_date,
            amount=amount,
            transaction_type=txn_type,
            client=_optional_cell(row, columns["client"]),
            project=_optional_cell(row, columns["project"]),
        )


def _optional_cell(row: Dict[str, Optional[str]], column: Optional[str]) -> Optional[str]:
    if column is None:
        return None
    value = (row.get(column) or "").strip()
    return value or None
