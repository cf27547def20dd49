"""Application layer - services and use cases."""

from bank_account.application.services import (
    AccountService,
    DepositCommand,
    OperationResult,
    OperationStatus,
    WithdrawCommand,
)


__all__ = [
    "AccountService",
    "DepositCommand",
    "OperationResult",
    "OperationStatus",
    "WithdrawCommand",
]
