from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from ulid import ULID

from bank_account.domain.exceptions import InsufficientFundsError, InvalidAmountError


OVERDRAFT_LIMIT = 50


class OperationType(Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"


@dataclass(frozen=True)
class Money:
    """Non-negative amount in the smallest currency unit."""

    amount: int

    # Largest value of the signed 64-bit balance accumulator.
    MAX_AMOUNT: ClassVar[int] = 2**63 - 1

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmountError(self.amount, "amount must be an integer")
        if self.amount < 0:
            raise InvalidAmountError(self.amount, "amount cannot be negative")
        if self.amount > self.MAX_AMOUNT:
            raise InvalidAmountError(self.amount, f"amount exceeds {self.MAX_AMOUNT}")


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)


@dataclass(frozen=True)
class Operation:
    operation_type: OperationType
    amount: Money
    timestamp: datetime
    sequence: int
    id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _as_utc(self.timestamp))

    @classmethod
    def create(
        cls,
        operation_type: OperationType,
        amount: Money,
        timestamp: datetime,
        sequence: int,
    ) -> "Operation":
        return cls(
            operation_type=operation_type,
            amount=amount,
            timestamp=timestamp,
            sequence=sequence,
            id=str(ULID()),
        )

    def signed_value(self) -> int:
        if self.operation_type is OperationType.DEPOSIT:
            return self.amount.amount
        return -self.amount.amount


@dataclass(frozen=True)
class StatementLine:
    timestamp: datetime
    amount: int
    balance: int


@dataclass(frozen=True)
class Statement:
    lines: tuple[StatementLine, ...] = ()

    def __iter__(self) -> Iterator[StatementLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


class Account:
    """Append-only ledger of deposits and withdrawals with an overdraft floor.

    The balance and the statement are derived from the full operation log on
    every call. A withdrawal is checked against the floor before it is
    appended, so the log never holds a state below ``-overdraft_limit``.
    """

    def __init__(self, overdraft_limit: int = OVERDRAFT_LIMIT) -> None:
        if overdraft_limit < 0:
            raise ValueError("Overdraft limit cannot be negative")
        self.overdraft_limit = overdraft_limit
        self._operations: list[Operation] = []

    @property
    def operations(self) -> tuple[Operation, ...]:
        return tuple(self._operations)

    def balance(self) -> int:
        return sum(operation.signed_value() for operation in self._operations)

    def deposit(self, amount: Money, timestamp: datetime) -> Operation:
        return self._append(OperationType.DEPOSIT, amount, timestamp)

    def withdraw(self, amount: Money, timestamp: datetime) -> Operation:
        available = self.balance()
        if available - amount.amount < -self.overdraft_limit:
            raise InsufficientFundsError(
                required=amount.amount,
                available=available,
                overdraft_limit=self.overdraft_limit,
            )
        return self._append(OperationType.WITHDRAW, amount, timestamp)

    def to_statement(self) -> Statement:
        """Build the statement, most recent operation first.

        Running balances are folded in insertion order and only then are the
        lines sorted by timestamp, so each line keeps the balance the account
        actually had after that operation. Equal timestamps are ordered by
        insertion sequence, later operations first.
        """
        running = 0
        folded: list[tuple[int, StatementLine]] = []
        for operation in self._operations:
            running += operation.signed_value()
            line = StatementLine(
                timestamp=operation.timestamp,
                amount=operation.signed_value(),
                balance=running,
            )
            folded.append((operation.sequence, line))

        folded.sort(key=lambda item: (item[1].timestamp, item[0]), reverse=True)
        return Statement(lines=tuple(line for _, line in folded))

    def _append(self, operation_type: OperationType, amount: Money, timestamp: datetime) -> Operation:
        operation = Operation.create(
            operation_type=operation_type,
            amount=amount,
            timestamp=timestamp,
            sequence=len(self._operations),
        )
        self._operations.append(operation)
        return operation
