"""Mini README: Core package initializer for the Budsjetto budget tracker.

Budsjetto keeps income/expense entries and trip budgets in one JSON file
and derives weekly, monthly, trend and category views from them. The
``BudgetTracker`` facade is the usual starting point; the subpackages can be
used directly when only one concern is needed.
"""

from .logging_utils import get_logger
from .tracker import BudgetTracker

__all__ = ["BudgetTracker", "get_logger"]
