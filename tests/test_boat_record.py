"""Mini README: Tests covering boat records and their budget arithmetic.

Structure:
    * remaining budget and expense authorisation rules.
    * category parsing, report rendering and dict round-trips.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from fleetbudget.fleet import BoatRecord, BoatType


def _boat(price: str = "1000.00", spent: str = "0.00") -> BoatRecord:
    return BoatRecord(
        category=BoatType.POWER,
        name="Big Brother",
        manufacture_year=2019,
        make_model="Mako",
        length_feet=20,
        purchase_price=Decimal(price),
        expenses_spent=Decimal(spent),
    )


def test_new_boat_has_full_budget() -> None:
    """A record with no expenses can spend its whole purchase price."""

    boat = _boat()
    assert boat.expenses_spent == Decimal("0")
    assert boat.remaining_budget() == Decimal("1000.00")


def test_add_expense_within_budget_is_applied() -> None:
    boat = _boat()

    assert boat.add_expense(Decimal("250.50")) is True
    assert boat.expenses_spent == Decimal("250.50")
    assert boat.remaining_budget() == Decimal("749.50")


def test_add_expense_may_use_exact_remaining_budget() -> None:
    boat = _boat(spent="400.00")

    assert boat.add_expense(Decimal("600.00")) is True
    assert boat.remaining_budget() == Decimal("0.00")


def test_add_expense_over_budget_leaves_state_unchanged() -> None:
    """Declined expenses must not move the running total."""

    boat = _boat(spent="400.00")

    assert boat.add_expense(Decimal("600.01")) is False
    assert boat.expenses_spent == Decimal("400.00")
    assert boat.remaining_budget() == Decimal("600.00")


def test_add_expense_does_not_validate_sign() -> None:
    """Negative amounts fit any budget and act as refunds at the record level."""

    boat = _boat(price="10.00", spent="4.00")

    assert boat.add_expense(-5) is True
    assert boat.expenses_spent == Decimal("-1.00")
    assert boat.remaining_budget() == Decimal("11.00")


def test_add_expense_accepts_plain_numbers() -> None:
    boat = _boat()

    assert boat.add_expense(100) is True
    assert boat.add_expense(0.5) is True
    assert boat.add_expense("9.5") is True
    assert boat.expenses_spent == Decimal("110.0")


def test_add_expense_rejects_non_numeric_amount() -> None:
    boat = _boat()

    with pytest.raises(ValueError):
        boat.add_expense("lots")
    assert boat.expenses_spent == Decimal("0.00")


@pytest.mark.parametrize("token", ["sail", "SAIL", " Sail ", "sailing"])
def test_boat_type_parses_case_insensitively(token: str) -> None:
    assert BoatType.from_str(token) is BoatType.SAIL


def test_boat_type_rejects_unknown_token() -> None:
    with pytest.raises(ValueError):
        BoatType.from_str("SUBMARINE")


def test_describe_renders_fixed_width_line() -> None:
    boat = _boat(spent="12.5")

    assert boat.describe() == (
        "POWER   Big Brother          2019 Mako        20' : "
        "Paid $   1000.00 : Spent $     12.50"
    )


def test_dict_round_trip_preserves_expenses() -> None:
    boat = _boat(spent="333.33")

    restored = BoatRecord.from_dict(boat.to_dict())

    assert restored == boat
    assert restored.to_dict()["expenses_spent"] == "333.33"
