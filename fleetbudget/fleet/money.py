"""Mini README: Decimal helpers for purchase prices and expenses."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def as_money(value: object) -> Decimal:
    """Coerce numbers or numeric text into a finite Decimal."""

    if isinstance(value, bool):
        raise ValueError("Monetary amounts must be numeric, not boolean")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as error:
            raise ValueError(f"Not a monetary amount: {value!r}") from error
    if not amount.is_finite():
        raise ValueError(f"Monetary amounts must be finite: {value!r}")
    return amount


def quantize_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places using HALF_UP rounding."""

    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
