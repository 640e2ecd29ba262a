"""Mini README: Smoke tests for the Typer command line."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from typer.testing import CliRunner

from budsjetto.storage import Store
from budsjetto.tracker import BudgetTracker
from main_budget_tracker import cli

runner = CliRunner()


def _seed(data_file: Path) -> None:
    tracker = BudgetTracker(Store(data_file))
    tracker.load_data()
    tracker.add_entry("income", 2000, "Salary", date.today(), "")
    tracker.add_entry("expense", 500, "Food", date.today(), "Groceries")


def test_summary_prints_current_totals(data_file: Path) -> None:
    _seed(data_file)

    result = runner.invoke(cli, ["summary", "--data-file", str(data_file)])

    assert result.exit_code == 0, result.output
    assert "income 2000.00 NOK" in result.output
    assert "net 1500.00 NOK" in result.output


def test_trends_prints_requested_months(data_file: Path) -> None:
    _seed(data_file)

    result = runner.invoke(cli, ["trends", "--months", "2", "--data-file", str(data_file)])

    assert result.exit_code == 0, result.output
    rows = [line for line in result.output.splitlines() if ": income " in line]
    assert len(rows) == 2


def test_trends_rejects_zero_months(data_file: Path) -> None:
    """Zero months is an error rather than the configured default."""

    _seed(data_file)

    result = runner.invoke(cli, ["trends", "--months", "0", "--data-file", str(data_file)])

    assert result.exit_code == 2
    assert ": income " not in result.output
    assert "at least 1" in result.output


def test_export_writes_csv(data_file: Path, tmp_path: Path) -> None:
    _seed(data_file)
    destination = tmp_path / "out.csv"

    result = runner.invoke(
        cli, ["export", "--destination", str(destination), "--data-file", str(data_file)]
    )

    assert result.exit_code == 0, result.output
    assert "Exported 2 entries" in result.output
    assert "Groceries" in destination.read_text(encoding="utf-8")
