"""Mini README: Persistence layer for Budsjetto.

``models`` defines the dataclasses making up the JSON document and
``store`` owns loading and atomically saving it. Ledgers and the tracker
facade import from here rather than from the submodules.
"""

from .models import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    TRIP_EXPENSE_CATEGORIES,
    AppState,
    Currency,
    Entry,
    EntryType,
    Trip,
    TripExpense,
)
from .store import LoadRecovery, Store

__all__ = [
    "AppState",
    "Currency",
    "EXPENSE_CATEGORIES",
    "Entry",
    "EntryType",
    "INCOME_CATEGORIES",
    "LoadRecovery",
    "Store",
    "TRIP_EXPENSE_CATEGORIES",
    "Trip",
    "TripExpense",
]
