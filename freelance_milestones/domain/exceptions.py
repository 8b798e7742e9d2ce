"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidMilestoneAmountError(DomainException):
    """Milestone increment is not a positive, finite number"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass


class UnknownTransactionTypeError(InvalidTransactionDataError):
    """Transaction type label is outside the known set of types"""

    def __init__(self, label: str, row: int | None = None):
        self.label = label
        self.row = row
        where = f" on row {row}" if row is not None else ""
        super().__init__(f"Unknown transaction type {label!r}{where}")


class TransactionSourceError(DomainException):
    """Transaction source could not be read"""

    pass
