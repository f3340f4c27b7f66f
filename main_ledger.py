"""Mini README: Entry point CLI for Ledgerbook.

This script exposes a Typer CLI with two commands: ``run`` starts the JSON
interface under uvicorn, and ``summary`` prints a month's balance and
expense breakdown to the terminal. Both read defaults from ``LEDGERBOOK_*``
environment variables and configure logging before doing any work.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer
import uvicorn

from ledgerbook.configuration import get_settings
from ledgerbook.ledger import (
    LedgerStore,
    expense_breakdown,
    format_balance,
    monthly_balance,
    seed_demo_transactions,
)
from ledgerbook.logging_utils import configure_root_logger

cli = typer.Typer(help="Run and inspect the Ledgerbook personal ledger.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open 0.0.0.0 or ::, so point them at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Ledgerbook on "
        f"{effective_host}:{effective_port}.\n"
        "API available at "
        f"http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "ledgerbook.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.environment == "production"),
    )


@cli.command()
def summary(
    reference_date: Optional[datetime] = typer.Option(
        None, formats=["%Y-%m-%d"], help="Any day in the month to summarise."
    ),
    demo: bool = typer.Option(
        True, "--demo/--no-demo", help="Seed the ledger with demo transactions."
    ),
) -> None:
    """Print the monthly balance and expense breakdown."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    reference = (reference_date or datetime.now()).date()

    store = LedgerStore()
    if demo:
        seed_demo_transactions(store, reference)
    snapshot = store.list()
    balance = monthly_balance(snapshot, reference)
    breakdown = expense_breakdown(snapshot, reference)

    typer.echo(f"Ledger summary for {reference:%B %Y}")
    typer.echo(f"  Income:   {settings.currency_symbol}{balance.income_total:,.2f}")
    typer.echo(f"  Expenses: {settings.currency_symbol}{balance.expense_total:,.2f}")
    typer.echo(f"  {format_balance(balance.balance, settings.currency_symbol)}")
    if not breakdown:
        typer.echo("No expenses recorded this month.")
        return
    typer.echo("Spending by label:")
    for entry in breakdown:
        typer.echo(f"  {entry.label:<20} {settings.currency_symbol}{entry.total:,.2f}")


if __name__ == "__main__":
    cli()
