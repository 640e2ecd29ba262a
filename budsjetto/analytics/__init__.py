"""Mini README: Derived views over the Budsjetto ledgers.

The ``aggregator`` module holds pure functions producing weekly and monthly
summaries, multi-month trends and category breakdowns.
"""

from .aggregator import (
    CategoryAnalytics,
    CategoryBreakdown,
    PeriodSummary,
    TrendPoint,
    category_analytics,
    monthly_summary,
    monthly_trends,
    trip_budget_progress,
    trip_category_breakdown,
    weekly_summary,
)

__all__ = [
    "CategoryAnalytics",
    "CategoryBreakdown",
    "PeriodSummary",
    "TrendPoint",
    "category_analytics",
    "monthly_summary",
    "monthly_trends",
    "trip_budget_progress",
    "trip_category_breakdown",
    "weekly_summary",
]
