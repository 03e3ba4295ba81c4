"""Mini README: Entry point CLI for the Spendbook expense tracker.

This script exposes a Typer CLI. Ledgers live only for the duration of a
command, so the commands here are self-contained: ``categories`` lists the
fixed category set and ``demo`` records a short sample of expenses through
the request dispatcher and prints the listing and monthly report.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from spendbook.commands import (
    AddRequest,
    EditRequest,
    QueryKind,
    QueryRequest,
    RemoveRequest,
    Request,
    execute,
)
from spendbook.configuration import get_settings
from spendbook.expenses import ExpenseLedger, category_labels
from spendbook.interface import render_outcome
from spendbook.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Record and summarise personal spending in memory.")

DEMO_REQUESTS: List[Request] = [
    AddRequest(10.00, "food", "lunch"),
    AddRequest(25.50, "transport", "taxi"),
    AddRequest(5.00, "food", "coffee"),
    AddRequest(42.00, "utilities", "electricity"),
    EditRequest(4, {"amount": 40.00}),
    RemoveRequest(4),
    RemoveRequest(4),
    QueryRequest(QueryKind.ALL),
    QueryRequest(QueryKind.BY_CATEGORY, "food"),
    QueryRequest(QueryKind.TOTAL),
    QueryRequest(QueryKind.REPORT),
]


@cli.command()
def categories() -> None:
    """List the categories an expense may be filed under."""

    for label in category_labels():
        typer.echo(label)


@cli.command()
def demo(
    currency: Optional[str] = typer.Option(None, help="Currency symbol for amounts."),
    log_level: Optional[str] = typer.Option(None, help="Logging level, e.g. DEBUG."),
) -> None:
    """Run a sample session against a fresh ledger and print the results."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    symbol = currency if currency is not None else settings.currency_symbol
    LOGGER.debug("Running demo session in %s environment", settings.environment)

    ledger = ExpenseLedger()
    for request in DEMO_REQUESTS:
        outcome = execute(ledger, request, period_format=settings.report_period_format)
        typer.echo(render_outcome(outcome, symbol))


if __name__ == "__main__":
    cli()
