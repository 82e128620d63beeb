"""Mini README: Fleet records, persistence and budget tracking.

This package holds the core of the tracker: boat records, the store that
owns them, the delimited import parser and the JSON snapshot codec. The
interactive menu and CLI sit on top of ``FleetStore`` and never reach into
the other modules directly.
"""

from .errors import (
    DelimitedImportError,
    FleetError,
    PersistenceError,
    RecordNotFoundError,
    RecordValidationError,
    SnapshotError,
)
from .records import BoatRecord, BoatType
from .store import ExpenseOutcome, FleetStore, FleetTotals, SnapshotLoadStatus

__all__ = [
    "BoatRecord",
    "BoatType",
    "DelimitedImportError",
    "ExpenseOutcome",
    "FleetError",
    "FleetStore",
    "FleetTotals",
    "PersistenceError",
    "RecordNotFoundError",
    "RecordValidationError",
    "SnapshotError",
    "SnapshotLoadStatus",
]
