"""Shared pytest fixtures for bank account tests."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest

from bank_account.application.services import AccountService
from bank_account.domain.models import Account


@pytest.fixture
def account() -> Account:
    """Create an empty account with the default overdraft limit."""
    return Account()


@pytest.fixture
def now() -> datetime:
    """Fixed reference timestamp."""
    return datetime(2022, 1, 14, 8, 9, 10, tzinfo=UTC)


@pytest.fixture
def ticking_clock(now: datetime) -> Callable[[], datetime]:
    """Clock that advances by one second on every call."""
    ticks: Iterator[int] = iter(range(1_000_000))

    def clock() -> datetime:
        return now + timedelta(seconds=next(ticks))

    return clock


@pytest.fixture
def service(account: Account, ticking_clock: Callable[[], datetime]) -> AccountService:
    """Create AccountService over an empty account with a deterministic clock."""
    return AccountService(account=account, clock=ticking_clock)
