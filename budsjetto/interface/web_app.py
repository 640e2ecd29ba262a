"""Mini README: FastAPI JSON interface for Budsjetto.

Structure:
    * create_application - application factory wiring routes to a tracker.
    * _recovery_payload - describes a load that was reset after a failure.

Every route delegates to one ``BudgetTracker`` created by the factory (or
passed in by tests). Mutations arrive as form fields, reads as query
parameters. Core errors map to HTTP status codes in one place:
validation 400, unknown ids 404, file problems 500. Routes are plain
functions so FastAPI runs the blocking file writes in its threadpool.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse

from ..analytics import trip_budget_progress, trip_category_breakdown
from ..configuration import get_settings
from ..errors import NotFoundError, StorageError, ValidationError
from ..logging_utils import configure_root_logger, get_logger
from ..storage import EXPENSE_CATEGORIES, INCOME_CATEGORIES, TRIP_EXPENSE_CATEGORIES, Trip
from ..tracker import BudgetTracker

LOGGER = get_logger(__name__)


def _recovery_payload(tracker: BudgetTracker) -> Optional[Dict[str, object]]:
    recovery = tracker.store.last_recovery
    if recovery is None:
        return None
    return {
        "reason": recovery.reason,
        "quarantined_path": str(recovery.quarantined_path) if recovery.quarantined_path else None,
        "occurred_at": recovery.occurred_at.isoformat(),
    }


def _trip_payload(trip: Trip) -> Dict[str, object]:
    payload = trip.as_dict(include_totals=True)
    payload["budget_progress"] = trip_budget_progress(trip)
    payload["category_breakdown"] = [item.as_dict() for item in trip_category_breakdown(trip)]
    return payload


def create_application(tracker: Optional[BudgetTracker] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``tracker``."""

    if tracker is None:
        settings = get_settings()
        configure_root_logger(settings.log_level)
        tracker = BudgetTracker.from_settings(settings)

    app = FastAPI(title="Budsjetto", version="0.1.0")
    app.state.tracker = tracker

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, error: ValidationError) -> JSONResponse:
        LOGGER.debug("Rejected %s %s: %s", request.method, request.url.path, error)
        return JSONResponse({"detail": str(error)}, status_code=400)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, error: NotFoundError) -> JSONResponse:
        return JSONResponse({"detail": str(error)}, status_code=404)

    @app.exception_handler(StorageError)
    async def _storage_error(request: Request, error: StorageError) -> JSONResponse:
        LOGGER.error("Storage failure during %s %s: %s", request.method, request.url.path, error)
        return JSONResponse({"detail": str(error)}, status_code=500)

    @app.get("/")
    def dashboard() -> JSONResponse:
        """Current week and month at a glance plus the recommended categories."""

        today = date.today()
        iso_year, iso_week, _ = today.isocalendar()
        return JSONResponse(
            {
                "currency": tracker.get_currency().value,
                "weekly": tracker.get_weekly_summary(iso_week, iso_year).as_dict(),
                "monthly": tracker.get_monthly_summary(today.month, today.year).as_dict(),
                "categories": {
                    "income": list(INCOME_CATEGORIES),
                    "expense": list(EXPENSE_CATEGORIES),
                    "trip": list(TRIP_EXPENSE_CATEGORIES),
                },
                "recovery": _recovery_payload(tracker),
            }
        )

    @app.post("/load")
    def load_data() -> JSONResponse:
        """Reload the data file and return the full document."""

        state = tracker.load_data()
        payload = state.as_dict()
        payload["recovery"] = _recovery_payload(tracker)
        return JSONResponse(payload)

    @app.get("/currency")
    def get_currency() -> JSONResponse:
        return JSONResponse({"currency": tracker.get_currency().value})

    @app.post("/currency")
    def set_currency(currency: str = Form(...)) -> JSONResponse:
        selected = tracker.set_currency(currency)
        return JSONResponse({"currency": selected.value})

    @app.get("/entries")
    def get_all_entries() -> JSONResponse:
        return JSONResponse({"entries": [entry.as_dict() for entry in tracker.get_all_entries()]})

    @app.post("/entries")
    def add_entry(
        entry_type: str = Form(...),
        amount: str = Form(...),
        category: str = Form(...),
        date: str = Form(...),
        description: str = Form(""),
    ) -> JSONResponse:
        entry = tracker.add_entry(entry_type, amount, category, date, description)
        return JSONResponse(entry.as_dict(), status_code=201)

    @app.delete("/entries/{entry_id}")
    def delete_entry(entry_id: str) -> JSONResponse:
        tracker.delete_entry(entry_id)
        return JSONResponse({"deleted": entry_id})

    @app.get("/summary/weekly")
    def weekly_summary(week: int, year: int) -> JSONResponse:
        return JSONResponse(tracker.get_weekly_summary(week, year).as_dict())

    @app.get("/summary/monthly")
    def monthly_summary(month: int, year: int) -> JSONResponse:
        return JSONResponse(tracker.get_monthly_summary(month, year).as_dict())

    @app.get("/trends")
    def monthly_trends(months: Optional[int] = None) -> JSONResponse:
        count = months if months is not None else get_settings().trend_months
        return JSONResponse({"trends": [point.as_dict() for point in tracker.get_monthly_trends(count)]})

    @app.get("/analytics/categories")
    def category_analytics(month: int, year: int) -> JSONResponse:
        return JSONResponse(tracker.get_category_analytics(month, year).as_dict())

    @app.get("/trips")
    def get_trips() -> JSONResponse:
        return JSONResponse({"trips": [_trip_payload(trip) for trip in tracker.get_trips()]})

    @app.post("/trips")
    def create_trip(
        name: str = Form(...),
        destination: str = Form(""),
        budget: str = Form(...),
        start_date: str = Form(...),
        end_date: str = Form(...),
    ) -> JSONResponse:
        trip = tracker.create_trip(name, destination, budget, start_date, end_date)
        return JSONResponse(_trip_payload(trip), status_code=201)

    @app.delete("/trips/{trip_id}")
    def delete_trip(trip_id: str) -> JSONResponse:
        tracker.delete_trip(trip_id)
        return JSONResponse({"deleted": trip_id})

    @app.post("/trips/{trip_id}/expenses")
    def add_trip_expense(
        trip_id: str,
        amount: str = Form(...),
        category: str = Form(...),
        description: str = Form(""),
        date: str = Form(...),
    ) -> JSONResponse:
        expense = tracker.add_trip_expense(trip_id, amount, category, description, date)
        return JSONResponse(expense.as_dict(), status_code=201)

    @app.delete("/trips/{trip_id}/expenses/{expense_id}")
    def delete_trip_expense(trip_id: str, expense_id: str) -> JSONResponse:
        tracker.delete_trip_expense(trip_id, expense_id)
        return JSONResponse({"deleted": expense_id, "trip_id": trip_id})

    @app.post("/export")
    def export_to_csv() -> JSONResponse:
        path = tracker.export_to_csv()
        return JSONResponse({"path": str(path)})

    return app
