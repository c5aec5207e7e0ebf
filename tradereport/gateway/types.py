"""Gateway types — the validated settlement instruction.

Instruction is the single representation of a trade entering the reports.
Invariants are checked once, in Instruction.create; everything downstream
reads it without re-validating.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import final

from tradereport.core.calendar import adjust_settlement_date, convention_for, within_calendar
from tradereport.core.errors import (
    InstructionError,
    invalid_action,
    invalid_date_ordering,
    malformed_input,
    negative_value,
)
from tradereport.core.money import NonEmptyStr, NonNegativeDecimal, exact_product
from tradereport.core.result import Err, Ok

_SOURCE = "gateway.types.Instruction.create"


class Action(Enum):
    BUY = "B"
    SELL = "S"


def _parse_action(raw: str | Action) -> Action | None:
    if isinstance(raw, Action):
        return raw
    try:
        return Action(raw)
    except ValueError:
        return None


@final
@dataclass(frozen=True, slots=True)
class Instruction:
    """Validated settlement instruction.

    settlement_date is the date as instructed; read adjusted_settlement_date
    for the business-calendar corrected one.
    """

    entity: NonEmptyStr
    action: Action
    agreed_fx: NonNegativeDecimal
    currency: NonEmptyStr
    instruction_date: date
    settlement_date: date
    units: NonNegativeDecimal
    price_per_unit: NonNegativeDecimal

    def __post_init__(self) -> None:
        if self.settlement_date < self.instruction_date:
            raise TypeError(
                f"Instruction settlement_date {self.settlement_date} "
                f"precedes instruction_date {self.instruction_date}"
            )

    @staticmethod
    def create(
        *,
        entity: str,
        action: str | Action,
        agreed_fx: Decimal,
        currency: str,
        instruction_date: date,
        settlement_date: date,
        units: Decimal,
        price_per_unit: Decimal,
    ) -> Ok[Instruction] | Err[InstructionError]:
        """Validate all fields and return the first failure, if any.

        Check order: entity, currency, date ordering, settlement date inside
        the calendar, action, agreed FX, units, price per unit.
        """
        match NonEmptyStr.parse(entity):
            case Err(e):
                return Err(malformed_input(f"entity: {e}", "entity", _SOURCE))
            case Ok(ent):
                pass
        match NonEmptyStr.parse(currency):
            case Err(e):
                return Err(malformed_input(f"currency: {e}", "currency", _SOURCE))
            case Ok(cur):
                pass

        if settlement_date < instruction_date:
            return Err(invalid_date_ordering(instruction_date, settlement_date, _SOURCE))
        if not within_calendar(settlement_date, convention_for(cur.value)):
            return Err(malformed_input(
                f"Settlement Date {settlement_date} cannot be rolled to a business day",
                "settlementDate",
                _SOURCE,
            ))

        act = _parse_action(action)
        if act is None:
            return Err(invalid_action(action, _SOURCE))

        checked: dict[str, NonNegativeDecimal] = {}
        for wire_name, raw in (
            ("agreedFx", agreed_fx),
            ("units", units),
            ("pricePerUnit", price_per_unit),
        ):
            match NonNegativeDecimal.parse(raw):
                case Ok(v):
                    checked[wire_name] = v
                case Err(e):
                    if isinstance(raw, Decimal) and raw.is_finite():
                        return Err(negative_value(wire_name, raw, _SOURCE))
                    return Err(malformed_input(f"{wire_name}: {e}", wire_name, _SOURCE))

        return Ok(Instruction(
            entity=ent,
            action=act,
            agreed_fx=checked["agreedFx"],
            currency=cur,
            instruction_date=instruction_date,
            settlement_date=settlement_date,
            units=checked["units"],
            price_per_unit=checked["pricePerUnit"],
        ))

    @property
    def adjusted_settlement_date(self) -> date:
        return adjust_settlement_date(self.settlement_date, self.currency.value)

    @property
    def cost(self) -> Decimal:
        """USD amount of the trade: price per unit * units * agreed FX."""
        return exact_product(
            self.price_per_unit.value, self.units.value, self.agreed_fx.value,
        )
