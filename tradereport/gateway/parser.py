"""Gateway parser — raw record mapping to Instruction.

parse_instruction is the single entry point for decoded instruction records.
It is total: every input yields Ok or Err, never an exception.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from tradereport.core.errors import InstructionError, malformed_input, missing_field
from tradereport.core.result import Err, Ok
from tradereport.gateway.types import Instruction

_SOURCE = "gateway.parser.parse_instruction"

# calendar dates in extended form only: no basic (20180126) or week (2018-W04-5) dates
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

# Wire names, in the order records are checked.
INSTRUCTION_FIELDS: tuple[str, ...] = (
    "entity",
    "action",
    "agreedFx",
    "currency",
    "instructionDate",
    "settlementDate",
    "units",
    "pricePerUnit",
)


def _extract_str(raw: Mapping[str, object], key: str) -> str | None:
    val = raw.get(key)
    if isinstance(val, str):
        return val
    return None


def _extract_date(raw: Mapping[str, object], key: str) -> date | None:
    val = raw.get(key)
    if isinstance(val, date) and not isinstance(val, datetime):
        return val
    if isinstance(val, str):
        if not _ISO_DATE.fullmatch(val):
            return None
        try:
            return date.fromisoformat(val)
        except ValueError:
            return None
    return None


def _extract_decimal(raw: Mapping[str, object], key: str) -> Decimal | None:
    # floats are refused: they have already lost precision
    val = raw.get(key)
    if isinstance(val, bool):
        return None
    if isinstance(val, Decimal):
        return val if val.is_finite() else None
    if isinstance(val, (int, str)):
        try:
            d = Decimal(str(val).strip())
        except InvalidOperation:
            return None
        return d if d.is_finite() else None
    return None


def _malformed(key: str, expected: str, raw: Mapping[str, object]) -> Err[InstructionError]:
    return Err(malformed_input(
        f"Cannot deserialize '{key}': expected {expected}, got {raw.get(key)!r}",
        key,
        _SOURCE,
    ))


def parse_instruction(raw: Mapping[str, object]) -> Ok[Instruction] | Err[InstructionError]:
    """Parse one decoded record into an Instruction.

    Missing properties (absent or null) are reported first, in
    INSTRUCTION_FIELDS order, then unknown properties, then values of the
    wrong shape. Domain invariants are left to Instruction.create.
    """
    if not isinstance(raw, Mapping):
        return Err(malformed_input(
            f"Cannot deserialize instruction from {type(raw).__name__}",
            "record",
            _SOURCE,
        ))

    for key in INSTRUCTION_FIELDS:
        if raw.get(key) is None:
            return Err(missing_field(key, _SOURCE))

    for key in raw:
        if key not in INSTRUCTION_FIELDS:
            return Err(malformed_input(f"Unrecognized field '{key}'", str(key), _SOURCE))

    entity = _extract_str(raw, "entity")
    if entity is None:
        return _malformed("entity", "string", raw)
    action = _extract_str(raw, "action")
    if action is None:
        return _malformed("action", "string", raw)
    currency = _extract_str(raw, "currency")
    if currency is None:
        return _malformed("currency", "string", raw)

    agreed_fx = _extract_decimal(raw, "agreedFx")
    if agreed_fx is None:
        return _malformed("agreedFx", "decimal number", raw)
    units = _extract_decimal(raw, "units")
    if units is None:
        return _malformed("units", "decimal number", raw)
    price_per_unit = _extract_decimal(raw, "pricePerUnit")
    if price_per_unit is None:
        return _malformed("pricePerUnit", "decimal number", raw)

    instruction_date = _extract_date(raw, "instructionDate")
    if instruction_date is None:
        return _malformed("instructionDate", "ISO-8601 date", raw)
    settlement_date = _extract_date(raw, "settlementDate")
    if settlement_date is None:
        return _malformed("settlementDate", "ISO-8601 date", raw)

    return Instruction.create(
        entity=entity,
        action=action,
        agreed_fx=agreed_fx,
        currency=currency,
        instruction_date=instruction_date,
        settlement_date=settlement_date,
        units=units,
        price_per_unit=price_per_unit,
    )


def instruction_to_dict(instruction: Instruction) -> dict[str, Any]:
    """Serialize an Instruction back to its wire shape (raw settlement date)."""
    return {
        "entity": instruction.entity.value,
        "action": instruction.action.value,
        "agreedFx": str(instruction.agreed_fx.value),
        "currency": instruction.currency.value,
        "instructionDate": instruction.instruction_date.isoformat(),
        "settlementDate": instruction.settlement_date.isoformat(),
        "units": str(instruction.units.value),
        "pricePerUnit": str(instruction.price_per_unit.value),
    }
