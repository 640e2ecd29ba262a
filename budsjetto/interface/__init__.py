"""Mini README: Interactive interfaces for Budsjetto.

Exports the FastAPI application factory serving the JSON API used by the
presentation layer. The Typer command line lives in ``main_budget_tracker.py``
at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
