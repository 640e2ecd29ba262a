"""Mini README: Export utilities for Budsjetto.

Exposes the CSV exporter used by the tracker facade, the web application
and the command line.
"""

from .csv_exporter import CSV_HEADER, CsvExporter

__all__ = ["CSV_HEADER", "CsvExporter"]
