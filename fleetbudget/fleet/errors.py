"""Mini README: Exceptions raised by the fleet record store.

Structure:
    * FleetError - common base so callers can catch everything from the core.
    * RecordValidationError - a boat field failed to parse or validate.
    * DelimitedImportError - a delimited import failed, with line context.
    * RecordNotFoundError - a name lookup matched no boat.
    * PersistenceError / SnapshotError - snapshot storage failures.

Declined expenses and a missing snapshot are ordinary outcomes and have no
exception here.
"""

from __future__ import annotations

from typing import Optional


class FleetError(Exception):
    """Base class for fleet tracker errors."""


class RecordValidationError(FleetError, ValueError):
    """Raised when a boat field cannot be converted into a valid value."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class DelimitedImportError(RecordValidationError):
    """Raised when a delimited import file cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, field=field)
        self.line_number = line_number


class RecordNotFoundError(FleetError, LookupError):
    """Raised when no boat in the fleet carries the requested name."""


class PersistenceError(FleetError, OSError):
    """Raised when the snapshot file cannot be written or read."""


class SnapshotError(PersistenceError):
    """Raised when a snapshot exists but cannot be decoded."""
