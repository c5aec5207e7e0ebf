"""Exact Decimal arithmetic and refined value types.

Cost products and sums never round. Each operation runs under a copy of
REPORT_DECIMAL_CONTEXT whose precision is sized from its operands, so any
valid input fits; Inexact and Rounded stay trapped as a guard. Sequential and
partitioned folds therefore agree to the last digit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN as _ROUND_HALF_EVEN
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    Rounded,
)
from typing import final

from tradereport.core.result import Err, Ok

REPORT_DECIMAL_CONTEXT = Context(
    prec=64,
    rounding=_ROUND_HALF_EVEN,
    Emin=MIN_EMIN,
    Emax=MAX_EMAX,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact, Rounded],
)

ZERO = Decimal("0")


@final
@dataclass(frozen=True, slots=True)
class NonEmptyStr:
    """String constrained to be non-empty."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise TypeError("NonEmptyStr requires non-empty string")

    @staticmethod
    def parse(raw: str) -> Ok[NonEmptyStr] | Err[str]:
        if not isinstance(raw, str) or not raw:
            return Err("NonEmptyStr requires non-empty string")
        return Ok(NonEmptyStr(value=raw))


@final
@dataclass(frozen=True, slots=True)
class NonNegativeDecimal:
    """Finite Decimal constrained to be >= 0."""

    value: Decimal

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, Decimal)
            or not self.value.is_finite()
            or self.value < 0
        ):
            raise TypeError(f"NonNegativeDecimal requires finite Decimal >= 0, got {self.value!r}")

    @staticmethod
    def parse(raw: Decimal) -> Ok[NonNegativeDecimal] | Err[str]:
        if not isinstance(raw, Decimal):
            return Err(f"NonNegativeDecimal requires Decimal, got {type(raw).__name__}")
        if not raw.is_finite():
            return Err(f"NonNegativeDecimal requires finite value, got {raw}")
        if raw < 0:
            return Err(f"NonNegativeDecimal requires >= 0, got {raw}")
        return Ok(NonNegativeDecimal(value=raw))


def _exact_context(digits: int) -> Context:
    if digits <= REPORT_DECIMAL_CONTEXT.prec:
        return REPORT_DECIMAL_CONTEXT
    ctx = REPORT_DECIMAL_CONTEXT.copy()
    ctx.prec = digits
    return ctx


def _coefficient_digits(d: Decimal) -> int:
    return len(d.as_tuple().digits)


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    # a product's coefficient has at most the sum of the operands' digits
    ctx = _exact_context(_coefficient_digits(a) + _coefficient_digits(b))
    return ctx.multiply(a, b)


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """a + b with precision spanning both operands' digit ranges."""
    lowest = min(a.as_tuple().exponent, b.as_tuple().exponent)
    highest = max(a.adjusted(), b.adjusted())
    ctx = _exact_context(highest - lowest + 2)
    return ctx.add(a, b)


def exact_product(*factors: Decimal) -> Decimal:
    """Multiply factors left to right with no rounding."""
    result = Decimal("1")
    for f in factors:
        result = exact_multiply(result, f)
    return result


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Add values with no rounding. Empty input sums to ZERO."""
    total = ZERO
    for v in values:
        total = exact_add(total, v)
    return total
