class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidAmountError(DomainError):
    """Raised when a monetary amount cannot be represented."""

    def __init__(self, amount: object, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class InsufficientFundsError(DomainError):
    """Raised when a withdrawal would take the balance below the overdraft floor."""

    def __init__(self, required: int, available: int, overdraft_limit: int) -> None:
        self.required = required
        self.available = available
        self.overdraft_limit = overdraft_limit
        super().__init__(
            f"Not enough money: required {required}, available {available}, overdraft limit {overdraft_limit}"
        )
