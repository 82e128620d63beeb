"""Mini README: Boat records tracked by the fleet store.

Structure:
    * BoatType - closed enumeration of boat categories.
    * BoatRecord - one boat with its purchase budget and running expenses.

A record's identity fields never change after creation. Only
``expenses_spent`` moves, and only upwards through ``add_expense``, which
refuses any amount larger than the remaining budget.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict

from .money import ZERO, as_money


class BoatType(str, Enum):
    """Enumerate the supported boat categories."""

    SAIL = "SAIL"
    POWER = "POWER"
    SAILING = "SAIL"  # alias of SAIL

    @classmethod
    def from_str(cls, value: str) -> "BoatType":
        """Resolve a category token regardless of casing."""

        try:
            return cls.__members__[value.strip().upper()]
        except (KeyError, AttributeError) as error:
            raise ValueError(f"Unsupported boat type: {value}") from error


@dataclass(slots=True)
class BoatRecord:
    """Represent one boat and the money spent on it so far."""

    category: BoatType
    name: str
    manufacture_year: int
    make_model: str
    length_feet: int
    purchase_price: Decimal
    expenses_spent: Decimal = ZERO

    def remaining_budget(self) -> Decimal:
        """Return the purchase price minus expenses already spent."""

        return self.purchase_price - self.expenses_spent

    def add_expense(self, amount: object) -> bool:
        """Spend ``amount`` if it fits in the remaining budget.

        Returns ``False`` and leaves the record untouched when the amount is
        larger than what is left.
        """

        amount = as_money(amount)
        if amount <= self.remaining_budget():
            self.expenses_spent += amount
            return True
        return False

    def describe(self) -> str:
        """Render the record as a fixed-width report line."""

        return (
            f"{self.category.value:<7} {self.name:<20} {self.manufacture_year:4d} "
            f"{self.make_model:<10} {self.length_feet:3d}' : "
            f"Paid ${self.purchase_price:10.2f} : Spent ${self.expenses_spent:10.2f}"
        )

    def to_dict(self) -> Dict[str, object]:
        """Export the record with JSON serialisable values."""

        return {
            "category": self.category.value,
            "name": self.name,
            "manufacture_year": self.manufacture_year,
            "make_model": self.make_model,
            "length_feet": self.length_feet,
            "purchase_price": str(self.purchase_price),
            "expenses_spent": str(self.expenses_spent),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "BoatRecord":
        """Hydrate a record from ``to_dict`` output without re-validating budgets."""

        return cls(
            category=BoatType.from_str(str(data["category"])),
            name=str(data["name"]),
            manufacture_year=int(data["manufacture_year"]),
            make_model=str(data["make_model"]),
            length_feet=int(data["length_feet"]),
            purchase_price=as_money(data["purchase_price"]),
            expenses_spent=as_money(data["expenses_spent"]),
        )
