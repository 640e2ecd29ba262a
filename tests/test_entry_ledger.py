"""Mini README: Tests covering the income/expense ledger.

Structure:
    * adding entries stores exactly one record and persists it.
    * invalid input is rejected without touching state.
    * deletion removes only the targeted record.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from budsjetto.errors import NotFoundError, ValidationError
from budsjetto.ledger import EntryLedger
from budsjetto.storage import EntryType, Store


def test_add_entry_appends_one_matching_record(store: Store, data_file: Path) -> None:
    """The new entry mirrors the input and survives a reload."""

    ledger = EntryLedger(store)

    entry = ledger.add_entry("Income", "5000", "Salary", "2024-03-10", "  March pay ")

    entries = ledger.get_all_entries()
    assert entries == [entry]
    assert entry.entry_type is EntryType.INCOME
    assert entry.amount == pytest.approx(5000.0)
    assert entry.category == "Salary"
    assert entry.date == date(2024, 3, 10)
    assert entry.description == "March pay"
    reloaded = Store(data_file)
    reloaded.load()
    assert EntryLedger(reloaded).get_entry(entry.id) == entry


def test_blank_description_defaults_to_category(store: Store) -> None:
    entry = EntryLedger(store).add_entry("expense", 42, "Transport", date(2024, 1, 5), "   ")

    assert entry.description == "Transport"


def test_entry_ids_are_unique(store: Store) -> None:
    ledger = EntryLedger(store)
    ids = {ledger.add_entry("expense", 1, "Food", "2024-01-01").id for _ in range(5)}

    assert len(ids) == 5


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": 0},
        {"amount": -10},
        {"amount": "abc"},
        {"entry_type": "transfer"},
        {"date": "10/03/2024"},
        {"category": "  "},
    ],
)
def test_invalid_entries_are_rejected_without_mutation(
    store: Store, data_file: Path, overrides: dict
) -> None:
    ledger = EntryLedger(store)
    ledger.add_entry("expense", 10, "Food", "2024-01-01")
    before = data_file.read_text(encoding="utf-8")
    arguments = {
        "entry_type": "expense",
        "amount": 25,
        "category": "Food",
        "date": "2024-01-02",
        "description": "",
    }
    arguments.update(overrides)

    with pytest.raises(ValidationError):
        ledger.add_entry(**arguments)

    assert len(ledger.get_all_entries()) == 1
    assert data_file.read_text(encoding="utf-8") == before


def test_delete_entry_removes_only_that_entry(store: Store) -> None:
    ledger = EntryLedger(store)
    keep = ledger.add_entry("income", 100, "Gift", "2024-01-01")
    drop = ledger.add_entry("expense", 50, "Food", "2024-01-02")

    ledger.delete_entry(drop.id)

    assert ledger.get_all_entries() == [keep]


def test_delete_unknown_entry_raises_and_keeps_collection(store: Store) -> None:
    ledger = EntryLedger(store)
    entry = ledger.add_entry("income", 100, "Gift", "2024-01-01")

    with pytest.raises(NotFoundError):
        ledger.delete_entry("missing")

    assert ledger.get_all_entries() == [entry]
