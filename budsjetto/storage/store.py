"""Mini README: JSON file store owning the canonical budget state.

Structure:
    * LoadRecovery - record of a failed load that was reset to defaults.
    * Store - loads, holds and atomically saves the ``AppState`` document.

The store is the only component that touches the data file. Ledgers mutate
``store.state`` and then call ``save``, which rewrites the whole document
through a temporary sibling file and ``os.replace`` so an interrupted write
never damages the previous copy. When loading fails the store either raises
(strict mode) or moves the unreadable file aside and starts from an empty
state, recording the event in ``last_recovery`` so callers can warn users.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..configuration import BudsjettoSettings
from ..errors import SerializationError, StorageError
from ..logging_utils import get_logger
from .models import AppState, Currency

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class LoadRecovery:
    """Details of a load that fell back to an empty state."""

    reason: str
    quarantined_path: Optional[Path]
    occurred_at: datetime


class Store:
    """Own the in-memory ``AppState`` and its backing file."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        default_currency: Union[str, Currency] = Currency.NOK,
        strict_load: bool = False,
    ) -> None:
        self.path = Path(path)
        self.default_currency = Currency.from_str(default_currency)
        self.strict_load = strict_load
        self.last_recovery: Optional[LoadRecovery] = None
        self._state = self._default_state()
        LOGGER.debug("Store initialised for %s (strict_load=%s)", self.path, strict_load)

    @classmethod
    def from_settings(cls, settings: BudsjettoSettings) -> "Store":
        return cls(
            settings.data_file,
            default_currency=settings.default_currency,
            strict_load=settings.strict_load,
        )

    @property
    def state(self) -> AppState:
        return self._state

    def _default_state(self) -> AppState:
        return AppState(selected_currency=self.default_currency)

    def load(self) -> AppState:
        """Read the data file, or start empty when it does not exist yet."""

        self.last_recovery = None
        if not self.path.exists():
            LOGGER.info("No data file at %s; starting with an empty budget", self.path)
            self._state = self._default_state()
            return self._state

        try:
            self._state = self._read()
        except (StorageError, SerializationError) as error:
            if self.strict_load:
                raise
            self._recover(error)
            return self._state

        LOGGER.info(
            "Loaded %s entries and %s trips from %s",
            len(self._state.entries),
            len(self._state.trips),
            self.path,
        )
        return self._state

    def _read(self) -> AppState:
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise StorageError(f"Unable to read data file {self.path}: {error}") from error
        try:
            payload = json.loads(content)
        except json.JSONDecodeError as error:
            raise SerializationError(f"Data file {self.path} is not valid JSON: {error}") from error
        try:
            return AppState.from_dict(payload)
        except (KeyError, TypeError, ValueError) as error:
            raise SerializationError(f"Data file {self.path} has an invalid layout: {error!r}") from error

    def _recover(self, error: Exception) -> None:
        """Quarantine the unreadable file and reset to the default state."""

        occurred_at = datetime.now(timezone.utc)
        quarantined: Optional[Path] = self.path.with_name(
            f"{self.path.name}.corrupt-{occurred_at:%Y%m%dT%H%M%SZ}"
        )
        try:
            os.replace(self.path, quarantined)
        except OSError as move_error:
            LOGGER.error("Could not move unreadable data file %s aside: %s", self.path, move_error)
            quarantined = None

        LOGGER.error(
            "Failed to load %s (%s); starting with an empty budget. Previous file kept at %s",
            self.path,
            error,
            quarantined,
        )
        self.last_recovery = LoadRecovery(
            reason=str(error),
            quarantined_path=quarantined,
            occurred_at=occurred_at,
        )
        self._state = self._default_state()

    def save(self) -> None:
        """Write the whole state, replacing the previous file atomically."""

        content = json.dumps(self._state.as_dict(), indent=2, ensure_ascii=False)
        temp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_name, self.path)
            temp_name = None
        except OSError as error:
            LOGGER.error("Failed to save budget data to %s: %s", self.path, error)
            raise StorageError(f"Unable to write data file {self.path}: {error}") from error
        finally:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
        LOGGER.debug(
            "Saved %s entries and %s trips to %s",
            len(self._state.entries),
            len(self._state.trips),
            self.path,
        )

    def get_currency(self) -> Currency:
        return self._state.selected_currency

    def set_currency(self, value: Union[str, Currency]) -> Currency:
        """Change the display currency and persist immediately."""

        currency = Currency.from_str(value)
        self._state.selected_currency = currency
        self.save()
        LOGGER.info("Currency set to %s", currency.value)
        return currency
