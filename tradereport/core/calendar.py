"""Settlement calendar — weekend roll-forward per currency convention.

Two weekly conventions, no holiday calendars:
  STANDARD: Monday-Friday business week (every currency not listed as Gulf).
  GULF:     Sunday-Thursday business week (AED, SAR).

A settlement date that falls on a weekend rolls forward to the first day of
the next business week. Business days are returned unchanged, so the
adjustment is idempotent. A Gulf date on the last Friday of the calendar has
no following Sunday; within_calendar() reports such dates so callers can
refuse them up front.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from functools import lru_cache
from typing import assert_never

from dateutil.relativedelta import MO, SU, relativedelta

GULF_CURRENCIES: frozenset[str] = frozenset({"AED", "SAR"})


class WeekConvention(Enum):
    """Business-week convention, named by the days it spans."""

    STANDARD = "MON-FRI"
    GULF = "SUN-THU"


# date.weekday(): Mon=0 .. Sun=6
_BUSINESS_WEEKDAYS: dict[WeekConvention, frozenset[int]] = {
    WeekConvention.STANDARD: frozenset({0, 1, 2, 3, 4}),
    WeekConvention.GULF: frozenset({6, 0, 1, 2, 3}),
}


def convention_for(
    currency: str, gulf_currencies: frozenset[str] = GULF_CURRENCIES,
) -> WeekConvention:
    """Select the weekly convention for a currency code."""
    if currency in gulf_currencies:
        return WeekConvention.GULF
    return WeekConvention.STANDARD


def is_business_day(d: date, convention: WeekConvention) -> bool:
    return d.weekday() in _BUSINESS_WEEKDAYS[convention]


def roll_forward(d: date, convention: WeekConvention) -> date:
    """Move a weekend date to the first business day of the following week.

    STANDARD: Sat +2, Sun +1 (to Monday).
    GULF:     Fri +2, Sat +1 (to Sunday).
    """
    if is_business_day(d, convention):
        return d
    match convention:
        case WeekConvention.STANDARD:
            return d + relativedelta(weekday=MO)
        case WeekConvention.GULF:
            return d + relativedelta(weekday=SU)
        case _never:
            assert_never(_never)


def within_calendar(d: date, convention: WeekConvention) -> bool:
    """False when rolling d forward would pass date.max (9999-12-31 is a Friday)."""
    try:
        roll_forward(d, convention)
    except OverflowError:
        return False
    return True


@lru_cache(maxsize=4096)
def adjust_settlement_date(
    settlement_date: date,
    currency: str,
    gulf_currencies: frozenset[str] = GULF_CURRENCIES,
) -> date:
    """Adjusted settlement date for a raw date and trade currency.

    Pure function of hashable inputs, hence safe to memoize.
    """
    return roll_forward(settlement_date, convention_for(currency, gulf_currencies))
