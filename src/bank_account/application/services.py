import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

import structlog

from bank_account.domain.exceptions import InsufficientFundsError, InvalidAmountError
from bank_account.domain.models import Account, Money, Operation, OperationType, Statement
from bank_account.infrastructure.metrics import ACCOUNT_DECLINED_TOTAL, ACCOUNT_OPERATIONS_TOTAL


logger = structlog.get_logger()


def utc_now() -> datetime:
    return datetime.now(UTC)


class OperationStatus(Enum):
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


@dataclass
class DepositCommand:
    amount: int


@dataclass
class WithdrawCommand:
    amount: int


@dataclass
class OperationResult:
    status: OperationStatus
    balance: int
    operation_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    processed_at: datetime | None = None

    @property
    def accepted(self) -> bool:
        return self.status == OperationStatus.ACCEPTED


class AccountService:
    """Use-case layer over a single Account.

    Every call holds one lock for its whole duration, which makes the
    balance check and the append of a withdrawal atomic for concurrent
    callers.
    """

    def __init__(
        self,
        account: Account | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.account = account if account is not None else Account()
        self.clock = clock
        self._lock = threading.Lock()

    def deposit(self, cmd: DepositCommand) -> OperationResult:
        log = logger.bind(operation_type=OperationType.DEPOSIT.value, amount=cmd.amount)

        with self._lock:
            processed_at = self.clock()
            try:
                operation = self.account.deposit(Money(cmd.amount), processed_at)
            except InvalidAmountError as e:
                return self._declined(OperationType.DEPOSIT, "INVALID_AMOUNT", str(e), processed_at, log)

            return self._accepted(operation, log)

    def withdraw(self, cmd: WithdrawCommand) -> OperationResult:
        log = logger.bind(operation_type=OperationType.WITHDRAW.value, amount=cmd.amount)

        with self._lock:
            processed_at = self.clock()
            try:
                operation = self.account.withdraw(Money(cmd.amount), processed_at)
            except InvalidAmountError as e:
                return self._declined(OperationType.WITHDRAW, "INVALID_AMOUNT", str(e), processed_at, log)
            except InsufficientFundsError as e:
                return self._declined(OperationType.WITHDRAW, "INSUFFICIENT_FUNDS", str(e), processed_at, log)

            return self._accepted(operation, log)

    def balance(self) -> int:
        with self._lock:
            return self.account.balance()

    def statement(self) -> Statement:
        with self._lock:
            return self.account.to_statement()

    def _accepted(self, operation: Operation, log: structlog.stdlib.BoundLogger) -> OperationResult:
        balance = self.account.balance()
        ACCOUNT_OPERATIONS_TOTAL.labels(
            operation_type=operation.operation_type.value,
            status=OperationStatus.ACCEPTED.value,
        ).inc()
        log.info("operation_accepted", operation_id=operation.id, balance=balance)

        return OperationResult(
            status=OperationStatus.ACCEPTED,
            balance=balance,
            operation_id=operation.id,
            processed_at=operation.timestamp,
        )

    def _declined(
        self,
        operation_type: OperationType,
        error_code: str,
        error_message: str,
        processed_at: datetime,
        log: structlog.stdlib.BoundLogger,
    ) -> OperationResult:
        balance = self.account.balance()
        ACCOUNT_OPERATIONS_TOTAL.labels(
            operation_type=operation_type.value,
            status=OperationStatus.DECLINED.value,
        ).inc()
        ACCOUNT_DECLINED_TOTAL.labels(error_code=error_code).inc()
        log.warning("operation_declined", error_code=error_code, reason=error_message, balance=balance)

        return OperationResult(
            status=OperationStatus.DECLINED,
            balance=balance,
            error_code=error_code,
            error_message=error_message,
            processed_at=processed_at,
        )
