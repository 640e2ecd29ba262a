"""Mini README: Ledgers mutating the Budsjetto store.

``EntryLedger`` covers the main income/expense list and ``TripLedger``
covers travel budgets. Both write through the shared ``Store``.
"""

from .entries import EntryLedger
from .trips import TripLedger

__all__ = ["EntryLedger", "TripLedger"]
