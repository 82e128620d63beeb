"""Mini README: Field coercion shared by delimited import and interactive add.

Structure:
    * parse_category / parse_integer / parse_price / parse_text - field level
      helpers raising ``RecordValidationError`` with the offending field name.
    * build_record - coerce all six boat fields into a fresh ``BoatRecord``.
    * parse_delimited_line - split one ``CATEGORY,NAME,YEAR,MAKE_MODEL,
      LENGTH_FEET,PURCHASE_PRICE`` line and build the record.

Fields are stripped of surrounding whitespace. Anything after the sixth
comma-separated field is ignored; imported records always start with zero
expenses.
"""

from __future__ import annotations

from decimal import Decimal

from .errors import RecordValidationError
from .money import as_money, quantize_cents
from .records import BoatRecord, BoatType

DELIMITER = ","
FIELD_ORDER = (
    "category",
    "name",
    "manufacture_year",
    "make_model",
    "length_feet",
    "purchase_price",
)


def parse_category(raw: object) -> BoatType:
    if isinstance(raw, BoatType):
        return raw
    try:
        return BoatType.from_str(str(raw))
    except ValueError as error:
        allowed = ", ".join(member.value for member in BoatType)
        raise RecordValidationError(
            f"category must be one of: {allowed} (got {raw!r})", field="category"
        ) from error


def parse_integer(raw: object, field: str) -> int:
    if isinstance(raw, bool):
        raise RecordValidationError(f"{field} must be an integer", field=field)
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as error:
        raise RecordValidationError(
            f"{field} must be an integer (got {raw!r})", field=field
        ) from error


def parse_price(raw: object, field: str = "purchase_price") -> Decimal:
    """Convert raw input to a non-negative Decimal with two fraction digits."""

    try:
        amount = as_money(raw)
    except ValueError as error:
        raise RecordValidationError(
            f"{field} must be a numeric value (got {raw!r})", field=field
        ) from error
    if amount < 0:
        raise RecordValidationError(f"{field} cannot be negative", field=field)
    return quantize_cents(amount)


def parse_text(raw: object, field: str) -> str:
    if raw is None:
        raise RecordValidationError(f"{field} is required", field=field)
    text = str(raw).strip()
    if not text:
        raise RecordValidationError(f"{field} cannot be empty", field=field)
    return text


def build_record(
    category: object,
    name: object,
    year: object,
    make_model: object,
    length_feet: object,
    purchase_price: object,
) -> BoatRecord:
    """Coerce every field before creating the record so failures leave nothing behind."""

    return BoatRecord(
        category=parse_category(category),
        name=parse_text(name, "name"),
        manufacture_year=parse_integer(year, "manufacture_year"),
        make_model=parse_text(make_model, "make_model"),
        length_feet=parse_integer(length_feet, "length_feet"),
        purchase_price=parse_price(purchase_price),
    )


def parse_delimited_line(line: str) -> BoatRecord:
    """Build a record from one comma-delimited line."""

    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) < len(FIELD_ORDER):
        raise RecordValidationError(
            f"expected {len(FIELD_ORDER)} comma-separated fields, found {len(parts)}"
        )
    return build_record(*parts[: len(FIELD_ORDER)])
