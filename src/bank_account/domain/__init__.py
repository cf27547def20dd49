"""Domain layer - the account ledger and its rules."""

from bank_account.domain.exceptions import (
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
)
from bank_account.domain.models import (
    OVERDRAFT_LIMIT,
    Account,
    Money,
    Operation,
    OperationType,
    Statement,
    StatementLine,
)


__all__ = [
    "OVERDRAFT_LIMIT",
    "Account",
    "DomainError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Money",
    "Operation",
    "OperationType",
    "Statement",
    "StatementLine",
]
