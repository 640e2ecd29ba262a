"""Mini README: Dataclasses describing the persisted budget document.

Structure:
    * EntryType - enum representing income versus expense entries.
    * Currency - enum of supported display currencies.
    * Entry - a single ledger income or expense.
    * TripExpense - an expense owned by one trip.
    * Trip - a travel sub-budget with derived spending totals.
    * AppState - root of the document; the unit of persistence.
    * parse_date / parse_amount / require_text - input coercion helpers.

Every record exposes ``as_dict`` for the JSON layout and a ``from_dict``
constructor used when loading. ``from_dict`` lets ``KeyError``,
``TypeError`` and ``ValueError`` escape so the store can report a corrupt
document in one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from ..errors import ValidationError

INCOME_CATEGORIES = ("Salary", "Freelance", "Investment", "Gift", "Other")
EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Housing",
    "Utilities",
    "Entertainment",
    "Shopping",
    "Health",
    "Education",
    "Other",
)
TRIP_EXPENSE_CATEGORIES = (
    "Transport",
    "Accommodation",
    "Food",
    "Activities",
    "Shopping",
    "Other",
)


class EntryType(str, Enum):
    """Enumerate the supported entry kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "EntryType":
        """Coerce arbitrary casing into a valid entry type."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise ValidationError(f"Entry type must be 'income' or 'expense', got {value!r}") from error


class Currency(str, Enum):
    """Display currencies. Amounts are never converted between them."""

    NOK = "NOK"
    EUR = "EUR"

    @classmethod
    def from_str(cls, value: object) -> "Currency":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as error:
            raise ValidationError(f"Currency must be 'NOK' or 'EUR', got {value!r}") from error


def parse_date(value: object, *, field_name: str = "date") -> date:
    """Parse ISO formatted strings or date objects."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD), got {value!r}") from error
    raise ValidationError(f"{field_name} must be an ISO string or date instance")


def parse_amount(value: object, *, allow_zero: bool = False, field_name: str = "amount") -> float:
    """Return ``value`` as a float, rejecting non-positive amounts."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise ValidationError(f"{field_name} must be a number, got {value!r}") from error
    if amount != amount or amount in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} must be a finite number")
    if amount < 0 or (amount == 0 and not allow_zero):
        qualifier = "zero or positive" if allow_zero else "positive"
        raise ValidationError(f"{field_name} must be {qualifier}, got {amount}")
    return amount


def require_text(value: Optional[str], *, field_name: str) -> str:
    """Strip ``value`` and reject empty strings."""

    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field_name} must not be empty")
    return text


@dataclass(slots=True)
class Entry:
    """Represent a ledger income or expense."""

    id: str
    entry_type: EntryType
    amount: float
    category: str
    date: date
    description: str

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with serialisable values."""

        return {
            "id": self.id,
            "entry_type": self.entry_type.value,
            "amount": self.amount,
            "category": self.category,
            "date": self.date.isoformat(),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Entry":
        return cls(
            id=str(payload["id"]),
            # older desktop files store the kind under "type"
            entry_type=EntryType(payload.get("entry_type", payload.get("type"))),
            amount=parse_amount(payload["amount"]),
            category=str(payload["category"]),
            date=date.fromisoformat(payload["date"]),
            description=str(payload.get("description", "")),
        )


@dataclass(slots=True)
class TripExpense:
    """An expense recorded against one trip."""

    id: str
    amount: float
    category: str
    description: str
    date: date

    def as_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TripExpense":
        return cls(
            id=str(payload["id"]),
            amount=parse_amount(payload["amount"]),
            category=str(payload["category"]),
            description=str(payload.get("description", "")),
            date=date.fromisoformat(payload["date"]),
        )


@dataclass(slots=True)
class Trip:
    """A travel budget owning its expense list.

    Spending figures are properties so they always reflect the current
    expense list; nothing derived is written to disk.
    """

    id: str
    name: str
    destination: str
    budget: float
    start_date: date
    end_date: date
    expenses: List[TripExpense] = field(default_factory=list)

    @property
    def total_spent(self) -> float:
        return sum(expense.amount for expense in self.expenses)

    @property
    def remaining(self) -> float:
        return self.budget - self.total_spent

    @property
    def over_budget(self) -> bool:
        return self.total_spent > self.budget

    def find_expense(self, expense_id: str) -> Optional[TripExpense]:
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def as_dict(self, *, include_totals: bool = False) -> Dict[str, object]:
        """Export the trip; ``include_totals`` adds the derived spending fields."""

        payload: Dict[str, object] = {
            "id": self.id,
            "name": self.name,
            "destination": self.destination,
            "budget": self.budget,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "expenses": [expense.as_dict() for expense in self.expenses],
        }
        if include_totals:
            payload["total_spent"] = self.total_spent
            payload["remaining"] = self.remaining
            payload["over_budget"] = self.over_budget
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Trip":
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            destination=str(payload.get("destination", "")),
            budget=parse_amount(payload["budget"], allow_zero=True, field_name="budget"),
            start_date=date.fromisoformat(payload["start_date"]),
            end_date=date.fromisoformat(payload["end_date"]),
            expenses=[TripExpense.from_dict(item) for item in payload.get("expenses", [])],
        )


@dataclass(slots=True)
class AppState:
    """Root of the persisted document."""

    selected_currency: Currency = Currency.NOK
    entries: List[Entry] = field(default_factory=list)
    trips: List[Trip] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {
            "selected_currency": self.selected_currency.value,
            "entries": [entry.as_dict() for entry in self.entries],
            "trips": [trip.as_dict() for trip in self.trips],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AppState":
        if not isinstance(payload, Mapping):
            raise TypeError("Budget document must be a JSON object")
        return cls(
            selected_currency=Currency(payload.get("selected_currency", Currency.NOK.value)),
            entries=[Entry.from_dict(item) for item in payload.get("entries", [])],
            trips=[Trip.from_dict(item) for item in payload.get("trips", [])],
        )
