"""Mini README: In-memory fleet store with budget-checked expenses.

Structure:
    * SnapshotLoadStatus - whether a snapshot load found earlier data.
    * FleetTotals - paid/spent sums, comparable to a plain pair.
    * ExpenseOutcome - result of an expense attempt against a named boat.
    * FleetStore - owns the ordered boat records and every fleet operation.

The store keeps boats in insertion order and allows duplicate names; name
based operations always act on the first case-insensitive match. Records
returned by ``find_by_name`` are the live objects held by the store, so an
expense added through them is visible in later listings. The store raises
on bad input and never talks to the console.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .errors import DelimitedImportError, RecordNotFoundError, RecordValidationError
from .money import ZERO, as_money
from .parsing import build_record, parse_delimited_line
from .records import BoatRecord
from .snapshot import JSONSnapshot

LOGGER = get_logger(__name__)


class SnapshotLoadStatus(str, Enum):
    """Outcome of ``FleetStore.load_from_snapshot``."""

    LOADED = "loaded"
    NO_PREVIOUS_DATA = "no_previous_data"


class FleetTotals(NamedTuple):
    total_paid: Decimal
    total_spent: Decimal


@dataclass(frozen=True, slots=True)
class ExpenseOutcome:
    """Describe whether an expense was applied and what budget remains."""

    boat_name: str
    amount: Decimal
    authorized: bool
    remaining_budget: Decimal


def _matches(record: BoatRecord, canonical: str) -> bool:
    return record.name.casefold() == canonical


class FleetStore:
    """Manage the fleet's boat records for one session."""

    def __init__(self) -> None:
        self._records: List[BoatRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BoatRecord]:
        return iter(self._records)

    # Loading and saving ---------------------------------------------------
    def load_from_delimited(self, path: Path, *, encoding: str = "utf-8-sig") -> int:
        """Append every boat described in a comma-delimited file.

        All lines are parsed before anything is appended, so a bad line
        leaves the store exactly as it was. Blank lines are skipped.
        Returns the number of boats imported.
        """

        path = Path(path)
        parsed: List[BoatRecord] = []
        try:
            with path.open("r", encoding=encoding) as handle:
                for line_number, line in enumerate(handle, start=1):
                    if not line.strip():
                        continue
                    try:
                        parsed.append(parse_delimited_line(line))
                    except RecordValidationError as error:
                        LOGGER.warning("Rejected %s line %s: %s", path, line_number, error)
                        raise DelimitedImportError(
                            str(error), line_number=line_number, field=error.field
                        ) from error
        except (OSError, UnicodeDecodeError, LookupError) as error:
            raise DelimitedImportError(f"Unable to read {path}: {error}") from error

        self._records.extend(parsed)
        LOGGER.info("Imported %s boats from %s", len(parsed), path)
        return len(parsed)

    def load_from_snapshot(self, path: Path) -> SnapshotLoadStatus:
        """Replace the fleet with the boats saved at ``path``.

        A missing file is not an error: the fleet starts empty. Any other
        failure also empties the fleet and raises ``SnapshotError``.
        """

        self._records = []
        records = JSONSnapshot(path).load()
        if records is None:
            LOGGER.info("No snapshot at %s; starting with an empty fleet", path)
            return SnapshotLoadStatus.NO_PREVIOUS_DATA
        self._records = records
        LOGGER.info("Loaded %s boats from snapshot %s", len(records), path)
        return SnapshotLoadStatus.LOADED

    def save_to_snapshot(self, path: Path) -> None:
        """Persist the whole fleet, overwriting any existing snapshot."""

        JSONSnapshot(path).save(self._records)
        LOGGER.info("Saved %s boats to snapshot %s", len(self._records), path)

    # Queries ----------------------------------------------------------------
    def list(self) -> Tuple[BoatRecord, ...]:
        """Return the boats in insertion order."""

        return tuple(self._records)

    def totals(self) -> FleetTotals:
        """Sum purchase prices and expenses across the fleet."""

        total_paid = sum((record.purchase_price for record in self._records), start=ZERO)
        total_spent = sum((record.expenses_spent for record in self._records), start=ZERO)
        return FleetTotals(total_paid, total_spent)

    def find_by_name(self, name: str) -> Optional[BoatRecord]:
        """Return the first boat whose name matches case-insensitively."""

        canonical = name.strip().casefold()
        for record in self._records:
            if _matches(record, canonical):
                return record
        return None

    # Mutations --------------------------------------------------------------
    def add_record(
        self,
        category: object,
        name: object,
        year: object,
        make_model: object,
        length_feet: object,
        purchase_price: object,
    ) -> BoatRecord:
        """Validate the fields, then append a new boat with no expenses."""

        record = build_record(category, name, year, make_model, length_feet, purchase_price)
        self._records.append(record)
        LOGGER.debug("Added boat %s (%s)", record.name, record.category.value)
        return record

    def add_record_from_line(self, line: str) -> BoatRecord:
        """Append a boat described by one comma-delimited line."""

        record = parse_delimited_line(line)
        self._records.append(record)
        LOGGER.debug("Added boat %s (%s)", record.name, record.category.value)
        return record

    def remove_by_name(self, name: str) -> bool:
        """Remove the first boat matching ``name``; report whether one was found."""

        canonical = name.strip().casefold()
        for index, record in enumerate(self._records):
            if _matches(record, canonical):
                del self._records[index]
                LOGGER.debug("Removed boat %s", record.name)
                return True
        return False

    def spend_on(self, name: str, amount: object) -> ExpenseOutcome:
        """Charge ``amount`` to the named boat if its budget allows."""

        record = self.find_by_name(name)
        if record is None:
            raise RecordNotFoundError(f"Cannot find boat {name}")
        try:
            amount = as_money(amount)
        except ValueError as error:
            raise RecordValidationError(str(error), field="amount") from error
        authorized = record.add_expense(amount)
        if authorized:
            LOGGER.debug("Authorised %s on %s", amount, record.name)
        else:
            LOGGER.info(
                "Declined %s on %s; only %s remaining",
                amount,
                record.name,
                record.remaining_budget(),
            )
        return ExpenseOutcome(
            boat_name=record.name,
            amount=amount,
            authorized=authorized,
            remaining_budget=record.remaining_budget(),
        )
