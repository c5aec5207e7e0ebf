"""Report aggregation — pure folds over validated instructions.

Daily report: cost summed per (adjusted settlement date, action).
Rank report:  cost summed per (action, entity), entities ranked by total.

Both are built in two steps: cost_totals() folds instructions into a flat
insertion-ordered {key: Decimal} table, then the table is shaped into nested
FrozenMaps. Partial tables from contiguous slices of the input can be merged
with merge_totals() before shaping; the result is identical to a single
sequential fold because all addition is exact Decimal.

INV-A01: every instruction contributes to exactly one cell of each report.
INV-A02: daily total == rank total == sum of instruction costs.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TypeAlias, TypeVar, final

from tradereport.core.money import ZERO, exact_add, exact_sum
from tradereport.core.types import FrozenMap
from tradereport.gateway.types import Instruction

DailyKey: TypeAlias = tuple[date, str]
RankKey: TypeAlias = tuple[str, str]

K = TypeVar("K", bound=Hashable)


@final
@dataclass(frozen=True, slots=True)
class RankEntry:
    """One ranked line: 1-based position, entity, summed cost."""

    rank: int
    entity: str
    total: Decimal


@final
@dataclass(frozen=True, slots=True)
class DailyReport:
    """adjusted settlement date -> action code -> summed cost, both ascending."""

    by_date: FrozenMap[date, FrozenMap[str, Decimal]]

    def total(self) -> Decimal:
        return exact_sum(
            cost for per_action in self.by_date.values() for cost in per_action.values()
        )

    def __len__(self) -> int:
        return len(self.by_date)


@final
@dataclass(frozen=True, slots=True)
class RankReport:
    """action code -> entities ranked by summed cost, highest first."""

    by_action: FrozenMap[str, tuple[RankEntry, ...]]

    def total(self) -> Decimal:
        return exact_sum(
            entry.total for entries in self.by_action.values() for entry in entries
        )

    def __len__(self) -> int:
        return len(self.by_action)


@final
@dataclass(frozen=True, slots=True)
class Reports:
    daily: DailyReport
    rank: RankReport


# ---------------------------------------------------------------------------
# Grouping keys
# ---------------------------------------------------------------------------


def daily_key(instruction: Instruction) -> DailyKey:
    return (instruction.adjusted_settlement_date, instruction.action.value)


def rank_key(instruction: Instruction) -> RankKey:
    return (instruction.action.value, instruction.entity.value)


# ---------------------------------------------------------------------------
# Fold and merge
# ---------------------------------------------------------------------------


def cost_totals(
    instructions: Iterable[Instruction], key: Callable[[Instruction], K],
) -> dict[K, Decimal]:
    """Sum cost per key in one pass. Keys keep first-discovery order."""
    totals: dict[K, Decimal] = {}
    for instruction in instructions:
        k = key(instruction)
        totals[k] = exact_add(totals.get(k, ZERO), instruction.cost)
    return totals


def merge_totals(*partials: dict[K, Decimal]) -> dict[K, Decimal]:
    """Merge partial tables left to right.

    Sums are exact, so merging is associative and commutative in value;
    key order is first-discovery across the partials in argument order.
    """
    merged: dict[K, Decimal] = {}
    for partial in partials:
        for k, v in partial.items():
            merged[k] = exact_add(merged.get(k, ZERO), v)
    return merged


# ---------------------------------------------------------------------------
# Shaping
# ---------------------------------------------------------------------------


def daily_report_from_totals(totals: dict[DailyKey, Decimal]) -> DailyReport:
    nested: dict[date, dict[str, Decimal]] = {}
    for (settled, action), cost in totals.items():
        nested.setdefault(settled, {})[action] = cost
    return DailyReport(by_date=FrozenMap.sorted_from(
        (settled, FrozenMap.sorted_from(per_action)) for settled, per_action in nested.items()
    ))


def rank_entities(totals: Sequence[tuple[str, Decimal]]) -> tuple[RankEntry, ...]:
    """Rank (entity, total) pairs by total, descending.

    sorted() is stable with reverse=True, so equal totals keep the order
    in which their entities were first seen.
    """
    ordered = sorted(totals, key=lambda pair: pair[1], reverse=True)
    return tuple(
        RankEntry(rank=position, entity=entity, total=total)
        for position, (entity, total) in enumerate(ordered, start=1)
    )


def rank_report_from_totals(totals: dict[RankKey, Decimal]) -> RankReport:
    grouped: dict[str, list[tuple[str, Decimal]]] = {}
    for (action, entity), cost in totals.items():
        grouped.setdefault(action, []).append((entity, cost))
    return RankReport(by_action=FrozenMap.sorted_from(
        (action, rank_entities(pairs)) for action, pairs in grouped.items()
    ))


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def collect_daily_report(instructions: Iterable[Instruction]) -> DailyReport:
    """Cost settled per adjusted settlement date and action."""
    return daily_report_from_totals(cost_totals(instructions, daily_key))


def collect_rank_report(instructions: Iterable[Instruction]) -> RankReport:
    """Entities ranked by settled cost within each action.

    If entity foo instructs the highest buy amount, foo is rank 1 under "B".
    """
    return rank_report_from_totals(cost_totals(instructions, rank_key))


def build_reports(instructions: Sequence[Instruction]) -> Reports:
    return Reports(
        daily=collect_daily_report(instructions),
        rank=collect_rank_report(instructions),
    )
