"""Mini README: Tests scripting the interactive fleet menu.

The menu is driven through injected reader/writer callables so each test
replays a full operator dialogue and inspects what was printed.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from fleetbudget.fleet import FleetStore
from fleetbudget.interface import FleetMenu


class ScriptedConsole:
    """Feed canned answers to prompts and collect output lines."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)


def _run(store: FleetStore, answers: Iterable[str]) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    FleetMenu(store, reader=console.read, writer=console.write).run()
    return console


def _alinghi_store() -> FleetStore:
    store = FleetStore()
    store.add_record("SAIL", "Alinghi", 2004, "Schnieder 80", 80, "2500000.00")
    return store


def test_print_lists_boats_and_totals() -> None:
    console = _run(_alinghi_store(), ["p", "x"])

    assert "Fleet report:" in console.lines
    assert any(line.startswith("\tSAIL    Alinghi") for line in console.lines)
    assert console.lines[-1].startswith("\tTotal ")
    assert console.lines[-1].endswith(": Paid $2500000.00 : Spent $      0.00")


def test_add_boat_accepts_csv_line() -> None:
    store = FleetStore()
    console = _run(store, ["A", "POWER,Big Brother,2019,Mako,20,12000", "X"])

    assert store.find_by_name("big brother") is not None
    assert console.lines == []


def test_add_boat_reports_invalid_input() -> None:
    store = FleetStore()
    console = _run(store, ["A", "POWER,Big Brother,nineteen,Mako,20,12000", "X"])

    assert console.lines == ["Invalid input. Boat not added."]
    assert len(store) == 0


def test_remove_boat_hit_and_miss() -> None:
    store = _alinghi_store()
    console = _run(store, ["R", "Oracle", "R", "alinghi", "X"])

    assert console.lines == ["Cannot find boat Oracle", "Boat removed."]
    assert len(store) == 0


def test_expense_authorised_then_declined() -> None:
    store = _alinghi_store()
    console = _run(store, ["E", "Alinghi", "500000", "E", "ALINGHI", "3000000", "X"])

    assert console.lines == [
        "Expense authorized, $500000.00 spent.",
        "Expense not permitted, only $2000000.00 left to spend.",
    ]
    assert store.totals().total_spent == Decimal("500000.00")


def test_expense_on_unknown_boat_skips_amount_prompt() -> None:
    console = _run(_alinghi_store(), ["E", "Oracle", "X"])

    assert console.lines == ["Cannot find boat Oracle"]
    assert not any("How much" in prompt for prompt in console.prompts)


def test_negative_or_garbage_amounts_are_refused() -> None:
    store = _alinghi_store()
    console = _run(store, ["E", "Alinghi", "-100", "E", "Alinghi", "plenty", "X"])

    assert console.lines == ["Invalid amount. Expense not recorded."] * 2
    assert store.totals().total_spent == Decimal("0")


def test_unknown_option_and_end_of_input() -> None:
    """Unknown letters are reported; running out of input ends the loop."""

    console = _run(_alinghi_store(), ["Q"])

    assert console.lines == ["Invalid menu option, try again."]
