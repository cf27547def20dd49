import structlog

from bank_account.application.services import AccountService, DepositCommand, WithdrawCommand
from bank_account.config import settings
from bank_account.domain.models import Account
from bank_account.formatters import render_statement
from bank_account.logging import configure_logging


logger = structlog.get_logger()

DEMO_SCRIPT: list[DepositCommand | WithdrawCommand] = [
    DepositCommand(100),
    WithdrawCommand(20),
    WithdrawCommand(200),
    DepositCommand(50),
    WithdrawCommand(120),
]


def run_demo(service: AccountService) -> None:
    for cmd in DEMO_SCRIPT:
        if isinstance(cmd, DepositCommand):
            service.deposit(cmd)
            continue

        result = service.withdraw(cmd)
        if not result.accepted:
            print("Not enough money")

    print(render_statement(service.statement()))


def main() -> None:
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
    )

    logger.info("starting_demo", overdraft_limit=settings.overdraft_limit)

    service = AccountService(Account(overdraft_limit=settings.overdraft_limit))
    run_demo(service)

    logger.info("demo_finished", balance=service.balance())


if __name__ == "__main__":
    main()
