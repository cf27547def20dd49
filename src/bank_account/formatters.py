"""Fixed-width text rendering of account statements."""

from datetime import UTC, datetime

from bank_account.domain.models import Statement, StatementLine


DATE_WIDTH = 30
AMOUNT_WIDTH = 10
SEPARATOR = " | "

HEADER = SEPARATOR.join(
    [
        f"{'Date':^{DATE_WIDTH}}",
        f"{'Amount':>{AMOUNT_WIDTH}}",
        f"{'Balance':>{AMOUNT_WIDTH}}",
    ]
)


def format_timestamp(timestamp: datetime) -> str:
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(UTC)
    return timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")


def format_line(line: StatementLine) -> str:
    return SEPARATOR.join(
        [
            f"{format_timestamp(line.timestamp):^{DATE_WIDTH}}",
            f"{line.amount:>{AMOUNT_WIDTH}}",
            f"{line.balance:>{AMOUNT_WIDTH}}",
        ]
    )


def render_statement(statement: Statement) -> str:
    return "\n".join([HEADER, *(format_line(line) for line in statement)])
