"""Mini README: Tests for loading and saving the budget document.

Structure:
    * round-trip and default-state behaviour of ``Store.load``/``Store.save``.
    * recovery from corrupt files (quarantine versus strict mode).
    * currency changes and write failures.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from budsjetto.errors import SerializationError, StorageError, ValidationError
from budsjetto.ledger import EntryLedger, TripLedger
from budsjetto.storage import Currency, EntryType, Store


def test_load_without_file_returns_empty_default(data_file: Path) -> None:
    """A first run starts with no entries, no trips and NOK."""

    store = Store(data_file)
    state = store.load()

    assert state.entries == []
    assert state.trips == []
    assert state.selected_currency is Currency.NOK
    assert store.last_recovery is None
    assert not data_file.exists()


def test_save_then_load_reproduces_state(store: Store, data_file: Path) -> None:
    """Reloading from disk yields the same entries, trips and currency."""

    entries = EntryLedger(store)
    trips = TripLedger(store)
    entries.add_entry("income", 5000, "Salary", "2024-03-10", "March pay")
    trip = trips.create_trip("Rome", "Italy", 1000, "2024-05-01", "2024-05-07")
    trips.add_trip_expense(trip.id, 300, "Food", "Dinner", "2024-05-02")
    store.set_currency("EUR")

    reloaded = Store(data_file)
    state = reloaded.load()

    assert state == store.state
    assert state.selected_currency is Currency.EUR
    assert state.entries[0].entry_type is EntryType.INCOME
    assert state.entries[0].date == date(2024, 3, 10)
    assert state.trips[0].total_spent == pytest.approx(300.0)

    reloaded.save()
    assert Store(data_file).load() == state


def test_saved_document_matches_persisted_layout(store: Store, data_file: Path) -> None:
    EntryLedger(store).add_entry("expense", 12.5, "Food", "2024-01-02", "")

    document = json.loads(data_file.read_text(encoding="utf-8"))

    assert set(document) == {"selected_currency", "entries", "trips"}
    assert document["selected_currency"] == "NOK"
    entry = document["entries"][0]
    assert set(entry) == {"id", "entry_type", "amount", "category", "date", "description"}
    assert entry["entry_type"] == "expense"
    assert entry["date"] == "2024-01-02"
    assert entry["description"] == "Food"


def test_save_leaves_no_temporary_files(store: Store, data_file: Path) -> None:
    store.save()
    store.save()

    assert sorted(path.name for path in data_file.parent.iterdir()) == [data_file.name]


def test_corrupt_file_is_quarantined_and_signalled(data_file: Path) -> None:
    """Unparseable JSON falls back to an empty state without losing the file."""

    data_file.write_text("{not json", encoding="utf-8")

    store = Store(data_file)
    state = store.load()

    assert state.entries == []
    assert store.last_recovery is not None
    quarantined = store.last_recovery.quarantined_path
    assert quarantined is not None and quarantined.exists()
    assert quarantined.read_text(encoding="utf-8") == "{not json"
    assert not data_file.exists()


def test_strict_load_raises_on_corrupt_file(data_file: Path) -> None:
    data_file.write_text("[]", encoding="utf-8")

    with pytest.raises(SerializationError):
        Store(data_file, strict_load=True).load()
    assert data_file.exists()


def test_invalid_records_are_treated_as_corrupt(data_file: Path) -> None:
    """A stored entry with a non-positive amount breaks the invariant."""

    data_file.write_text(
        json.dumps(
            {
                "selected_currency": "NOK",
                "entries": [
                    {
                        "id": "a",
                        "entry_type": "expense",
                        "amount": -5,
                        "category": "Food",
                        "date": "2024-01-01",
                        "description": "",
                    }
                ],
                "trips": [],
            }
        ),
        encoding="utf-8",
    )

    with pytest.raises(SerializationError):
        Store(data_file, strict_load=True).load()


def test_unknown_keys_are_ignored_on_load(data_file: Path) -> None:
    data_file.write_text(
        json.dumps(
            {
                "selected_currency": "EUR",
                "entries": [
                    {
                        "id": "a",
                        "entry_type": "income",
                        "amount": 10,
                        "currency": "EUR",
                        "category": "Gift",
                        "date": "2024-02-01",
                        "description": "Birthday",
                    }
                ],
            }
        ),
        encoding="utf-8",
    )

    state = Store(data_file, strict_load=True).load()

    assert state.selected_currency is Currency.EUR
    assert state.entries[0].description == "Birthday"
    assert state.trips == []


def test_set_currency_persists_and_validates(store: Store, data_file: Path) -> None:
    assert store.set_currency("eur") is Currency.EUR
    assert json.loads(data_file.read_text(encoding="utf-8"))["selected_currency"] == "EUR"

    with pytest.raises(ValidationError):
        store.set_currency("USD")
    assert store.get_currency() is Currency.EUR


def test_save_failure_raises_storage_error(tmp_path: Path) -> None:
    """Writing over a directory fails; the in-memory change is kept."""

    target = tmp_path / "occupied"
    target.mkdir()
    store = Store(target)
    store.state.selected_currency = Currency.EUR

    with pytest.raises(StorageError):
        store.save()
    assert store.get_currency() is Currency.EUR
    assert list(tmp_path.iterdir()) == [target]


def test_desktop_files_with_type_key_load(data_file: Path) -> None:
    """Entries keyed by ``type`` (with a stored currency) load as normal."""

    data_file.write_text(
        json.dumps(
            {
                "selected_currency": "NOK",
                "entries": [
                    {
                        "id": "legacy",
                        "type": "expense",
                        "amount": 99.5,
                        "currency": "NOK",
                        "category": "Food",
                        "date": "2024-06-01",
                        "description": "Market",
                    }
                ],
            }
        ),
        encoding="utf-8",
    )

    store = Store(data_file, strict_load=True)
    state = store.load()

    assert state.entries[0].entry_type is EntryType.EXPENSE
    assert store.last_recovery is None
    store.save()
    assert json.loads(data_file.read_text(encoding="utf-8"))["entries"][0]["entry_type"] == "expense"
