"""Mini README: Trip budgets and their scoped expenses.

Structure:
    * TripLedger - create and delete trips, record and remove trip expenses.

Trips own their expenses outright: deleting a trip drops its expenses in
the same save. Spending totals are properties on ``Trip`` and are never
stored, so the expense list stays the single source of truth. Start and
end dates are parsed but their order is left to the caller.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import List, Optional, Union

from ..errors import NotFoundError
from ..logging_utils import get_logger
from ..storage import Store, Trip, TripExpense
from ..storage.models import parse_amount, parse_date, require_text

LOGGER = get_logger(__name__)


class TripLedger:
    """Manage trips and the expenses recorded against them."""

    def __init__(self, store: Store) -> None:
        self._store = store

    @property
    def _trips(self) -> List[Trip]:
        return self._store.state.trips

    def create_trip(
        self,
        name: str,
        destination: Optional[str],
        budget: object,
        start_date: Union[str, date],
        end_date: Union[str, date],
    ) -> Trip:
        """Register a trip with an empty expense list, then persist."""

        trip = Trip(
            id=str(uuid.uuid4()),
            name=require_text(name, field_name="name"),
            destination=(destination or "").strip(),
            budget=parse_amount(budget, allow_zero=True, field_name="budget"),
            start_date=parse_date(start_date, field_name="start_date"),
            end_date=parse_date(end_date, field_name="end_date"),
        )
        if trip.start_date > trip.end_date:
            LOGGER.warning("Trip %s ends before it starts (%s > %s)", trip.name, trip.start_date, trip.end_date)
        self._trips.append(trip)
        self._store.save()
        LOGGER.info("Created trip %s '%s' with budget %.2f", trip.id, trip.name, trip.budget)
        return trip

    def get_trips(self) -> List[Trip]:
        """Return all trips; ``total_spent`` is recomputed on each access."""

        return list(self._trips)

    def get_trip(self, trip_id: str) -> Trip:
        for trip in self._trips:
            if trip.id == trip_id:
                return trip
        raise NotFoundError(f"Trip {trip_id} not found")

    def add_trip_expense(
        self,
        trip_id: str,
        amount: object,
        category: str,
        description: Optional[str],
        date: Union[str, date],
    ) -> TripExpense:
        """Append an expense to the trip identified by ``trip_id``."""

        value = parse_amount(amount)
        label = require_text(category, field_name="category")
        occurred_on = parse_date(date)
        trip = self.get_trip(trip_id)

        expense = TripExpense(
            id=str(uuid.uuid4()),
            amount=value,
            category=label,
            description=(description or "").strip(),
            date=occurred_on,
        )
        trip.expenses.append(expense)
        self._store.save()
        LOGGER.info("Added expense %s of %.2f to trip %s", expense.id, value, trip_id)
        if trip.over_budget:
            LOGGER.info(
                "Trip %s is over budget: spent %.2f of %.2f", trip_id, trip.total_spent, trip.budget
            )
        return expense

    def delete_trip(self, trip_id: str) -> None:
        """Remove a trip together with all of its expenses."""

        trip = self.get_trip(trip_id)
        self._trips.remove(trip)
        self._store.save()
        LOGGER.info("Deleted trip %s and %s expenses", trip_id, len(trip.expenses))

    def delete_trip_expense(self, trip_id: str, expense_id: str) -> None:
        trip = self.get_trip(trip_id)
        expense = trip.find_expense(expense_id)
        if expense is None:
            raise NotFoundError(f"Expense {expense_id} not found in trip {trip_id}")
        trip.expenses.remove(expense)
        self._store.save()
        LOGGER.info("Deleted expense %s from trip %s", expense_id, trip_id)
