"""Mini README: Pure aggregation over budget entries and trips.

Structure:
    * PeriodSummary - income, expense and net totals for one window.
    * TrendPoint - one month of a trend series.
    * CategoryBreakdown - per-category total, count and share of its type.
    * CategoryAnalytics - income and expense breakdowns for one month.
    * weekly_summary / monthly_summary - totals for an ISO week or a month.
    * monthly_trends - consecutive month totals ending at the current month.
    * category_analytics - per-category breakdowns for a month.
    * trip_category_breakdown / trip_budget_progress - trip spending views.

Nothing here reads or writes state; callers pass the entries in and every
call recomputes from scratch. Breakdown lists keep the order in which
categories first appear; sorting for display is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..errors import ValidationError
from ..storage import Currency, Entry, EntryType, Trip

MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(slots=True)
class PeriodSummary:
    """Totals for a week or month."""

    total_income: float
    total_expenses: float
    net_balance: float
    currency: str
    start: date
    end: date

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "net_balance": self.net_balance,
            "currency": self.currency,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


@dataclass(slots=True)
class TrendPoint:
    month: int
    year: int
    month_name: str
    income: float
    expenses: float
    net: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "month": self.month,
            "year": self.year,
            "month_name": self.month_name,
            "income": self.income,
            "expenses": self.expenses,
            "net": self.net,
        }


@dataclass(slots=True)
class CategoryBreakdown:
    category: str
    total: float
    count: int
    percentage: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "total": self.total,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass(slots=True)
class CategoryAnalytics:
    """Per-category breakdowns of one calendar month."""

    month: int
    year: int
    total_income: float
    total_expenses: float
    income_by_category: List[CategoryBreakdown] = field(default_factory=list)
    expense_by_category: List[CategoryBreakdown] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {
            "month": self.month,
            "year": self.year,
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "income_by_category": [item.as_dict() for item in self.income_by_category],
            "expense_by_category": [item.as_dict() for item in self.expense_by_category],
        }


def _month_start(year: int, month: int) -> date:
    return date(year, month, 1)


def _month_end(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - date.resolution


def _validate_month(month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year out of range: {year}")


def _iso_week_bounds(week: int, year: int) -> Tuple[date, date]:
    try:
        start = date.fromisocalendar(year, week, 1)
    except ValueError as error:
        raise ValidationError(f"Year {year} has no ISO week {week}") from error
    return start, start + timedelta(days=6)


def _totals(entries: Iterable[Entry]) -> Tuple[float, float]:
    income = 0.0
    expenses = 0.0
    for entry in entries:
        if entry.entry_type is EntryType.INCOME:
            income += entry.amount
        else:
            expenses += entry.amount
    return income, expenses


def _in_window(entries: Iterable[Entry], start: date, end: date) -> List[Entry]:
    return [entry for entry in entries if start <= entry.date <= end]


def _summarise(
    entries: Iterable[Entry], start: date, end: date, currency: Union[str, Currency]
) -> PeriodSummary:
    income, expenses = _totals(_in_window(entries, start, end))
    return PeriodSummary(
        total_income=income,
        total_expenses=expenses,
        net_balance=income - expenses,
        currency=Currency.from_str(currency).value,
        start=start,
        end=end,
    )


def weekly_summary(
    entries: Iterable[Entry],
    week: int,
    year: int,
    currency: Union[str, Currency] = Currency.NOK,
) -> PeriodSummary:
    """Totals for the ISO week ``week`` of ISO year ``year``."""

    start, end = _iso_week_bounds(week, year)
    return _summarise(entries, start, end, currency)


def monthly_summary(
    entries: Iterable[Entry],
    month: int,
    year: int,
    currency: Union[str, Currency] = Currency.NOK,
) -> PeriodSummary:
    """Totals for calendar ``month`` of ``year``."""

    _validate_month(month, year)
    return _summarise(entries, _month_start(year, month), _month_end(year, month), currency)


def _previous_months(n_months: int, today: date) -> List[Tuple[int, int]]:
    """Return ``(year, month)`` pairs, oldest first, ending with ``today``'s month."""

    months: List[Tuple[int, int]] = []
    year, month = today.year, today.month
    for _ in range(n_months):
        months.append((year, month))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    months.reverse()
    return months


def monthly_trends(
    entries: Iterable[Entry],
    n_months: int,
    *,
    today: Optional[date] = None,
) -> List[TrendPoint]:
    """Income/expense/net for the last ``n_months`` months, zero months included."""

    if n_months < 1:
        raise ValidationError(f"Number of months must be at least 1, got {n_months}")
    today = today or date.today()

    buckets: Dict[Tuple[int, int], List[float]] = {
        key: [0.0, 0.0] for key in _previous_months(n_months, today)
    }
    for entry in entries:
        bucket = buckets.get((entry.date.year, entry.date.month))
        if bucket is None:
            continue
        if entry.entry_type is EntryType.INCOME:
            bucket[0] += entry.amount
        else:
            bucket[1] += entry.amount

    return [
        TrendPoint(
            month=month,
            year=year,
            month_name=MONTH_NAMES[month - 1],
            income=income,
            expenses=expenses,
            net=income - expenses,
        )
        for (year, month), (income, expenses) in buckets.items()
    ]


def _breakdown(items: Iterable[Tuple[str, float]]) -> Tuple[List[CategoryBreakdown], float]:
    totals: Dict[str, List[float]] = {}
    for category, amount in items:
        bucket = totals.setdefault(category, [0.0, 0])
        bucket[0] += amount
        bucket[1] += 1
    grand_total = sum(total for total, _ in totals.values())
    breakdown = [
        CategoryBreakdown(
            category=category,
            total=total,
            count=int(count),
            percentage=(total / grand_total * 100.0) if grand_total > 0 else 0.0,
        )
        for category, (total, count) in totals.items()
    ]
    return breakdown, grand_total


def category_analytics(entries: Iterable[Entry], month: int, year: int) -> CategoryAnalytics:
    """Group a month's entries by category within each entry type."""

    _validate_month(month, year)
    in_month = _in_window(entries, _month_start(year, month), _month_end(year, month))
    income_by_category, total_income = _breakdown(
        (entry.category, entry.amount) for entry in in_month if entry.entry_type is EntryType.INCOME
    )
    expense_by_category, total_expenses = _breakdown(
        (entry.category, entry.amount) for entry in in_month if entry.entry_type is EntryType.EXPENSE
    )
    return CategoryAnalytics(
        month=month,
        year=year,
        total_income=total_income,
        total_expenses=total_expenses,
        income_by_category=income_by_category,
        expense_by_category=expense_by_category,
    )


def trip_category_breakdown(trip: Trip) -> List[CategoryBreakdown]:
    """Per-category spending of one trip as a share of everything spent on it."""

    breakdown, _ = _breakdown((expense.category, expense.amount) for expense in trip.expenses)
    return breakdown


def trip_budget_progress(trip: Trip) -> float:
    """Percentage of the budget spent, capped at 100 and 0 for a zero budget."""

    if trip.budget <= 0:
        return 0.0
    return min(trip.total_spent / trip.budget * 100.0, 100.0)
