"""One report run: load, validate, aggregate.

Fail-fast: the first rejected record aborts the run and no report is built.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tradereport.core.errors import InstructionError
from tradereport.core.result import Err, Ok
from tradereport.gateway.loader import load_instructions
from tradereport.infra.config import ReportingConfig
from tradereport.reporting.aggregator import Reports, build_reports

logger = logging.getLogger(__name__)


def run_reports(
    folder: str | Path, config: ReportingConfig | None = None,
) -> Ok[Reports] | Err[InstructionError]:
    config = config or ReportingConfig()
    match load_instructions(folder, config.file_pattern):
        case Err() as failure:
            return failure
        case Ok(instructions):
            pass
    reports = build_reports(instructions)
    logger.info(
        "built reports: %d settlement date(s), %d action group(s)",
        len(reports.daily), len(reports.rank),
    )
    return Ok(reports)
