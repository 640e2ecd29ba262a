"""Mini README: Exception hierarchy shared by the Budsjetto core.

Structure:
    * BudsjettoError - base class for every error raised deliberately.
    * ValidationError - rejected input (amounts, dates, empty fields).
    * NotFoundError - unknown entry, trip, or trip expense identifier.
    * StorageError - the data file or an export could not be read or written.
    * SerializationError - the persisted document is corrupt or malformed.

Each class also derives from the matching builtin (``ValueError``,
``KeyError``, ``OSError``) so callers catching the builtin keep working.
"""

from __future__ import annotations


class BudsjettoError(Exception):
    """Base class for Budsjetto errors."""


class ValidationError(BudsjettoError, ValueError):
    """Raised when caller input is rejected before any state changes."""


class NotFoundError(BudsjettoError, KeyError):
    """Raised when an identifier does not match a stored record."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""


class StorageError(BudsjettoError, OSError):
    """Raised when reading or writing a file fails."""


class SerializationError(BudsjettoError, ValueError):
    """Raised when the persisted document cannot be decoded."""
