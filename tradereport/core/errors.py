"""Instruction error values — validation failures are returned, not raised.

Every error is a frozen dataclass carrying a stable literal ``message`` and a
machine-readable ``code``, so callers and tests can match on either.
Base class InstructionError, six @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

CODE_INVALID_DATE_ORDERING = "INVALID_DATE_ORDERING"
CODE_INVALID_ACTION = "INVALID_ACTION"
CODE_NEGATIVE_VALUE = "NEGATIVE_VALUE"
CODE_MISSING_FIELD = "MISSING_FIELD"
CODE_MALFORMED_INPUT = "MALFORMED_INPUT"
CODE_DUPLICATE_FIELD = "DUPLICATE_FIELD"


@dataclass(frozen=True, slots=True)
class InstructionError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "code": self.code, "source": self.source}

    def __str__(self) -> str:
        return self.message


@final
@dataclass(frozen=True, slots=True)
class InvalidDateOrdering(InstructionError):
    """Settlement date precedes instruction date."""

    instruction_date: str
    settlement_date: str

    def to_dict(self) -> dict[str, object]:
        return {
            **InstructionError.to_dict(self),
            "instruction_date": self.instruction_date,
            "settlement_date": self.settlement_date,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidAction(InstructionError):
    """Action code is neither "B" nor "S"."""

    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {**InstructionError.to_dict(self), "actual_value": self.actual_value}


@final
@dataclass(frozen=True, slots=True)
class NegativeValue(InstructionError):
    """agreedFx, units or pricePerUnit is below zero."""

    field: str
    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {
            **InstructionError.to_dict(self),
            "field": self.field,
            "actual_value": self.actual_value,
        }


@final
@dataclass(frozen=True, slots=True)
class MissingField(InstructionError):
    """A required record property is absent."""

    field: str

    def to_dict(self) -> dict[str, object]:
        return {**InstructionError.to_dict(self), "field": self.field}


@final
@dataclass(frozen=True, slots=True)
class MalformedInput(InstructionError):
    """Input could not be decoded or a value has the wrong shape."""

    location: str  # file path, record index or field name

    def to_dict(self) -> dict[str, object]:
        return {**InstructionError.to_dict(self), "location": self.location}


@final
@dataclass(frozen=True, slots=True)
class DuplicateField(InstructionError):
    """The same property appears twice in one record."""

    field: str

    def to_dict(self) -> dict[str, object]:
        return {**InstructionError.to_dict(self), "field": self.field}


# ---------------------------------------------------------------------------
# Constructors with the literal messages
# ---------------------------------------------------------------------------

_NEGATIVE_MESSAGES: dict[str, str] = {
    "agreedFx": "AgreedFx should not be negative",
    "units": "Units should not be negative",
    "pricePerUnit": "Price per Unit should not be negative",
}


def invalid_date_ordering(
    instruction_date: object, settlement_date: object, source: str,
) -> InvalidDateOrdering:
    return InvalidDateOrdering(
        message="Settlement Date date should be after Instruction Date",
        code=CODE_INVALID_DATE_ORDERING,
        source=source,
        instruction_date=str(instruction_date),
        settlement_date=str(settlement_date),
    )


def invalid_action(actual: object, source: str) -> InvalidAction:
    return InvalidAction(
        message="Unexpected Action",
        code=CODE_INVALID_ACTION,
        source=source,
        actual_value=repr(actual),
    )


def negative_value(field: str, actual: object, source: str) -> NegativeValue:
    """Field is the wire name: agreedFx, units or pricePerUnit."""
    return NegativeValue(
        message=_NEGATIVE_MESSAGES[field],
        code=CODE_NEGATIVE_VALUE,
        source=source,
        field=field,
        actual_value=str(actual),
    )


def missing_field(field: str, source: str) -> MissingField:
    return MissingField(
        message=f"Missing required property '{field}'",
        code=CODE_MISSING_FIELD,
        source=source,
        field=field,
    )


def malformed_input(message: str, location: str, source: str) -> MalformedInput:
    return MalformedInput(
        message=message, code=CODE_MALFORMED_INPUT, source=source, location=location,
    )


def duplicate_field(field: str, source: str) -> DuplicateField:
    return DuplicateField(
        message=f"Duplicate field '{field}'",
        code=CODE_DUPLICATE_FIELD,
        source=source,
        field=field,
    )
