"""Mini README: Entry point CLI for the Budsjetto budget tracker.

This script exposes a Typer CLI that starts the FastAPI application and
offers quick terminal reports (current summaries, monthly trends) and CSV
exports. Settings come from ``BUDSJETTO_*`` environment variables; the
``--data-file`` option points any command at a different budget document.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from budsjetto.configuration import get_settings
from budsjetto.errors import ValidationError
from budsjetto.logging_utils import configure_root_logger
from budsjetto.storage import Store
from budsjetto.export import CsvExporter
from budsjetto.tracker import BudgetTracker

cli = typer.Typer(help="Track income, expenses and trip budgets.")


def _open_tracker(data_file: Optional[Path]) -> BudgetTracker:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    if data_file is None:
        tracker = BudgetTracker.from_settings(settings)
    else:
        tracker = BudgetTracker(
            Store(data_file, default_currency=settings.default_currency, strict_load=settings.strict_load),
            exporter=CsvExporter(settings.resolved_export_directory),
        )
        tracker.load_data()
    recovery = tracker.store.last_recovery
    if recovery is not None:
        typer.secho(
            f"Warning: the data file could not be loaded ({recovery.reason}). "
            f"Starting empty; the old file was kept at {recovery.quarantined_path}.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    return tracker


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

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(f"Starting Budsjetto on http://{browser_host}:{effective_port}")
    uvicorn.run(
        "budsjetto.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary(
    data_file: Optional[Path] = typer.Option(None, help="Budget document to read."),
) -> None:
    """Print totals for the current ISO week and calendar month."""

    tracker = _open_tracker(data_file)
    today = date.today()
    iso_year, iso_week, _ = today.isocalendar()
    currency = tracker.get_currency().value
    for label, result in (
        (f"Week {iso_week} {iso_year}", tracker.get_weekly_summary(iso_week, iso_year)),
        (today.strftime("%B %Y"), tracker.get_monthly_summary(today.month, today.year)),
    ):
        typer.echo(
            f"{label}: income {result.total_income:.2f} {currency}, "
            f"expenses {result.total_expenses:.2f} {currency}, "
            f"net {result.net_balance:.2f} {currency}"
        )


@cli.command()
def trends(
    months: int = typer.Option(None, help="Number of months to show."),
    data_file: Optional[Path] = typer.Option(None, help="Budget document to read."),
) -> None:
    """Print income, expenses and net for recent months, oldest first."""

    tracker = _open_tracker(data_file)
    count = months if months is not None else get_settings().trend_months
    try:
        points = tracker.get_monthly_trends(count)
    except ValidationError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from error
    for point in points:
        typer.echo(
            f"{point.month_name} {point.year}: income {point.income:.2f} "
            f"expenses {point.expenses:.2f} net {point.net:.2f}"
        )


@cli.command()
def export(
    destination: Optional[Path] = typer.Option(None, help="CSV file to write."),
    data_file: Optional[Path] = typer.Option(None, help="Budget document to read."),
) -> None:
    """Export all ledger entries to CSV."""

    tracker = _open_tracker(data_file)
    path = tracker.export_to_csv(destination)
    typer.echo(f"Exported {len(tracker.get_all_entries())} entries to {path}")


if __name__ == "__main__":
    cli()
