"""Mini README: Export ledger entries to CSV files.

Structure:
    * CSV_HEADER - column order of every export.
    * CsvExporter - writes entries to a destination path and returns it.

Only main ledger entries are exported; trip expenses stay inside the JSON
document. Amounts are written with two decimals and text fields are quoted
only when they contain the delimiter, a quote or a newline.
"""

from __future__ import annotations

import csv
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from ..errors import StorageError
from ..logging_utils import get_logger
from ..storage import Entry

LOGGER = get_logger(__name__)

CSV_HEADER = ("id", "type", "amount", "category", "date", "description")


class CsvExporter:
    """Persist entries as a delimited text file."""

    def __init__(self, export_directory: Path, *, delimiter: str = ",") -> None:
        self.export_directory = Path(export_directory)
        self.delimiter = delimiter

    def default_destination(self, today: Optional[date] = None) -> Path:
        today = today or date.today()
        return self.export_directory / f"budsjetto_export_{today.isoformat()}.csv"

    def export(self, entries: Iterable[Entry], destination: Optional[Path] = None) -> Path:
        """Write ``entries`` to ``destination`` (or the dated default) and return the path."""

        destination = Path(destination) if destination is not None else self.default_destination()
        row_count = 0
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with destination.open("w", encoding="utf-8", newline="") as csv_file:
                writer = csv.writer(csv_file, delimiter=self.delimiter, quoting=csv.QUOTE_MINIMAL)
                writer.writerow(CSV_HEADER)
                for entry in entries:
                    writer.writerow(
                        [
                            entry.id,
                            entry.entry_type.value,
                            f"{entry.amount:.2f}",
                            entry.category,
                            entry.date.isoformat(),
                            entry.description,
                        ]
                    )
                    row_count += 1
        except OSError as error:
            LOGGER.error("CSV export to %s failed: %s", destination, error)
            raise StorageError(f"Unable to write export {destination}: {error}") from error
        LOGGER.info("Exported %s entries to %s", row_count, destination)
        return destination
