"""Mini README: Interactive text menu driving the fleet store.

Structure:
    * FleetMenu - reads single-letter commands and dispatches them to the
      store: (P)rint, (A)dd, (R)emove, (E)xpense, e(X)it.
    * render_report - formats the fleet report with its totals line.

Input and output go through injectable callables so tests can script a whole
session. Store errors are caught here, reported, and the loop carries on.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

import typer

from ..fleet import FleetStore, FleetTotals, RecordNotFoundError, RecordValidationError
from ..fleet.parsing import parse_price
from ..fleet.records import BoatRecord
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MENU_PROMPT = "\n(P)rint, (A)dd, (R)emove, (E)xpense, e(X)it : "
EXIT_CHOICE = "X"

# Width of BoatRecord.describe() up to the " : Paid" column.
_TOTAL_LABEL_WIDTH = 49

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _prompt(message: str) -> str:
    return typer.prompt(message, default="", show_default=False, prompt_suffix="")


def render_report(records: Iterable[BoatRecord], totals: FleetTotals) -> List[str]:
    """Return the report lines for the given boats and totals."""

    lines = ["", "Fleet report:"]
    lines.extend(f"\t{record.describe()}" for record in records)
    lines.append(
        f"\t{'Total':<{_TOTAL_LABEL_WIDTH}} : Paid ${totals.total_paid:10.2f}"
        f" : Spent ${totals.total_spent:10.2f}"
    )
    return lines


class FleetMenu:
    """Prompt for commands until the operator exits."""

    def __init__(
        self,
        store: FleetStore,
        *,
        reader: Optional[Reader] = None,
        writer: Optional[Writer] = None,
    ) -> None:
        self._store = store
        self._read = reader or _prompt
        self._write = writer or typer.echo
        self._handlers = {
            "P": self.print_fleet,
            "A": self.add_boat,
            "R": self.remove_boat,
            "E": self.add_expense,
        }

    def run(self) -> None:
        """Loop over menu choices; end of input behaves like exit."""

        while True:
            try:
                choice = self._read(MENU_PROMPT).strip().upper()
            except (EOFError, typer.Abort):
                LOGGER.debug("Input closed; leaving menu")
                return
            if choice == EXIT_CHOICE:
                return
            handler = self._handlers.get(choice)
            if handler is None:
                self._write("Invalid menu option, try again.")
                continue
            try:
                handler()
            except (EOFError, typer.Abort):
                LOGGER.debug("Input closed during %s; leaving menu", choice)
                return

    def print_fleet(self) -> None:
        for line in render_report(self._store.list(), self._store.totals()):
            self._write(line)

    def add_boat(self) -> None:
        line = self._read("Please enter the new boat CSV data: ")
        try:
            self._store.add_record_from_line(line)
        except RecordValidationError as error:
            LOGGER.info("Boat not added: %s", error)
            self._write("Invalid input. Boat not added.")

    def remove_boat(self) -> None:
        name = self._read("Which boat do you want to remove? ").strip()
        if self._store.remove_by_name(name):
            self._write("Boat removed.")
        else:
            self._write(f"Cannot find boat {name}")

    def add_expense(self) -> None:
        name = self._read("Which boat do you want to spend on? ").strip()
        if self._store.find_by_name(name) is None:
            self._write(f"Cannot find boat {name}")
            return
        raw_amount = self._read("How much do you want to spend? ")
        try:
            # Negative amounts would act as refunds, so they never reach the store.
            amount = parse_price(raw_amount, "amount")
            outcome = self._store.spend_on(name, amount)
        except RecordValidationError as error:
            LOGGER.info("Expense rejected: %s", error)
            self._write("Invalid amount. Expense not recorded.")
            return
        except RecordNotFoundError:
            self._write(f"Cannot find boat {name}")
            return
        if outcome.authorized:
            self._write(f"Expense authorized, ${outcome.amount:.2f} spent.")
        else:
            self._write(
                f"Expense not permitted, only ${outcome.remaining_budget:.2f} left to spend."
            )
