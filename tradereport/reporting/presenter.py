"""Text rendering of the daily and rank reports.

Pure projection: rows come out in the order the report values already
carry (dates, then actions, then rank). No value is recomputed here.
"""

from __future__ import annotations

from decimal import Decimal

from tradereport.infra.config import ReportingConfig
from tradereport.reporting.aggregator import DailyReport, RankReport, Reports

DAILY_HEADER = "--- Daily Report ---"
RANK_HEADER = "--- Rank Report ---"

_DEFAULT_CONFIG = ReportingConfig()


def format_amount(amount: Decimal, config: ReportingConfig = _DEFAULT_CONFIG) -> str:
    """e.g. Decimal("13875") -> "$   13875.000" with the default widths."""
    return f"{config.currency_symbol}{amount:{config.amount_width}.{config.amount_places}f}"


def render_daily_report(
    report: DailyReport, config: ReportingConfig = _DEFAULT_CONFIG,
) -> list[str]:
    lines: list[str] = []
    for settled, per_action in report.by_date.items():
        lines.append(f"{settled.isoformat()}:")
        for action, cost in per_action.items():
            lines.append(f"{action}: {format_amount(cost, config)}")
    return lines


def render_rank_report(
    report: RankReport, config: ReportingConfig = _DEFAULT_CONFIG,
) -> list[str]:
    lines: list[str] = []
    for action, entries in report.by_action.items():
        lines.append(f"{action}:")
        for entry in entries:
            lines.append(
                f"{entry.rank:{config.rank_width}d} "
                f"{entry.entity:<{config.entity_width}}   "
                f"{format_amount(entry.total, config)}"
            )
    return lines


def render_reports(reports: Reports, config: ReportingConfig = _DEFAULT_CONFIG) -> str:
    """Both reports as one block of text, daily first."""
    lines = [DAILY_HEADER, *render_daily_report(reports.daily, config), ""]
    lines += [RANK_HEADER, *render_rank_report(reports.rank, config)]
    return "\n".join(lines)
