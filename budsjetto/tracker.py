"""Mini README: Facade exposing the Budsjetto operations to interfaces.

Structure:
    * BudgetTracker - composes the store, ledgers, aggregator and exporter.

The web application and the command line talk only to this class. Each
tracker owns its own ``Store``; nothing is shared at module level, so tests
and multiple apps can run side by side against different files. Read
operations pass the store's current entries to the pure aggregator on every
call.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from .analytics import (
    CategoryAnalytics,
    PeriodSummary,
    TrendPoint,
    category_analytics,
    monthly_summary,
    monthly_trends,
    weekly_summary,
)
from .configuration import BudsjettoSettings, get_settings
from .export import CsvExporter
from .ledger import EntryLedger, TripLedger
from .logging_utils import get_logger
from .storage import AppState, Currency, Entry, EntryType, Store, Trip, TripExpense

LOGGER = get_logger(__name__)


class BudgetTracker:
    """Single entry point for every budget operation."""

    def __init__(self, store: Store, *, exporter: Optional[CsvExporter] = None) -> None:
        self.store = store
        self.entries = EntryLedger(store)
        self.trips = TripLedger(store)
        self.exporter = exporter or CsvExporter(store.path.parent / "exports")

    @classmethod
    def from_settings(cls, settings: Optional[BudsjettoSettings] = None) -> "BudgetTracker":
        """Build a tracker from configuration and load the data file."""

        settings = settings or get_settings()
        tracker = cls(
            Store.from_settings(settings),
            exporter=CsvExporter(settings.resolved_export_directory),
        )
        tracker.load_data()
        return tracker

    # Store
    def load_data(self) -> AppState:
        return self.store.load()

    def get_currency(self) -> Currency:
        return self.store.get_currency()

    def set_currency(self, currency: Union[str, Currency]) -> Currency:
        return self.store.set_currency(currency)

    # Entries
    def add_entry(
        self,
        entry_type: Union[str, EntryType],
        amount: object,
        category: str,
        date: Union[str, date],
        description: Optional[str] = "",
    ) -> Entry:
        return self.entries.add_entry(entry_type, amount, category, date, description)

    def get_all_entries(self) -> List[Entry]:
        return self.entries.get_all_entries()

    def delete_entry(self, entry_id: str) -> None:
        self.entries.delete_entry(entry_id)

    # Aggregates
    def get_weekly_summary(self, week: int, year: int) -> PeriodSummary:
        return weekly_summary(self.store.state.entries, week, year, self.get_currency())

    def get_monthly_summary(self, month: int, year: int) -> PeriodSummary:
        return monthly_summary(self.store.state.entries, month, year, self.get_currency())

    def get_monthly_trends(self, months: int, *, today: Optional[date] = None) -> List[TrendPoint]:
        return monthly_trends(self.store.state.entries, months, today=today)

    def get_category_analytics(self, month: int, year: int) -> CategoryAnalytics:
        return category_analytics(self.store.state.entries, month, year)

    # Trips
    def create_trip(
        self,
        name: str,
        destination: Optional[str],
        budget: object,
        start_date: Union[str, date],
        end_date: Union[str, date],
    ) -> Trip:
        return self.trips.create_trip(name, destination, budget, start_date, end_date)

    def get_trips(self) -> List[Trip]:
        return self.trips.get_trips()

    def add_trip_expense(
        self,
        trip_id: str,
        amount: object,
        category: str,
        description: Optional[str],
        date: Union[str, date],
    ) -> TripExpense:
        return self.trips.add_trip_expense(trip_id, amount, category, description, date)

    def delete_trip(self, trip_id: str) -> None:
        self.trips.delete_trip(trip_id)

    def delete_trip_expense(self, trip_id: str, expense_id: str) -> None:
        self.trips.delete_trip_expense(trip_id, expense_id)

    # Export
    def export_to_csv(self, destination: Optional[Path] = None) -> Path:
        """Write every ledger entry to CSV and return the file path."""

        return self.exporter.export(self.store.state.entries, destination)
