"""Mini README: Shared fixtures for the Budsjetto test-suite.

Structure:
    * data_file - path of a budget document inside ``tmp_path``.
    * store - a loaded ``Store`` bound to ``data_file``.
    * tracker - a ``BudgetTracker`` exporting into ``tmp_path / "exports"``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from budsjetto.export import CsvExporter
from budsjetto.storage import Store
from budsjetto.tracker import BudgetTracker


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "budget_data.json"


@pytest.fixture
def store(data_file: Path) -> Store:
    store = Store(data_file)
    store.load()
    return store


@pytest.fixture
def tracker(store: Store, tmp_path: Path) -> BudgetTracker:
    return BudgetTracker(store, exporter=CsvExporter(tmp_path / "exports"))
