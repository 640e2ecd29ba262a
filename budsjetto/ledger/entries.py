"""Mini README: Income and expense ledger backed by the store.

Structure:
    * EntryLedger - add, list, look up and delete ``Entry`` records.

All input is validated before the entry list is touched so a rejected call
leaves both memory and disk unchanged. Successful mutations are written
through ``Store.save`` before returning.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import List, Optional, Union

from ..errors import NotFoundError
from ..logging_utils import get_logger
from ..storage import Entry, EntryType, Store
from ..storage.models import parse_amount, parse_date, require_text

LOGGER = get_logger(__name__)


class EntryLedger:
    """Manage the flat list of income and expense entries."""

    def __init__(self, store: Store) -> None:
        self._store = store

    @property
    def _entries(self) -> List[Entry]:
        return self._store.state.entries

    def add_entry(
        self,
        entry_type: Union[str, EntryType],
        amount: object,
        category: str,
        date: Union[str, date],
        description: Optional[str] = "",
    ) -> Entry:
        """Validate and append a new entry, then persist."""

        kind = EntryType.from_str(entry_type)
        value = parse_amount(amount)
        label = require_text(category, field_name="category")
        occurred_on = parse_date(date)
        text = (description or "").strip() or label

        entry = Entry(
            id=str(uuid.uuid4()),
            entry_type=kind,
            amount=value,
            category=label,
            date=occurred_on,
            description=text,
        )
        self._entries.append(entry)
        self._store.save()
        LOGGER.info(
            "Added %s entry %s of %.2f in %s on %s",
            kind.value,
            entry.id,
            value,
            label,
            occurred_on.isoformat(),
        )
        return entry

    def get_all_entries(self) -> List[Entry]:
        """Return entries in stored order."""

        return list(self._entries)

    def get_entry(self, entry_id: str) -> Entry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"Entry {entry_id} not found")

    def delete_entry(self, entry_id: str) -> None:
        """Remove the entry with ``entry_id``; unknown ids raise ``NotFoundError``."""

        entry = self.get_entry(entry_id)
        self._entries.remove(entry)
        self._store.save()
        LOGGER.info("Deleted entry %s", entry_id)
