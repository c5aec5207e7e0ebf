"""Runtime configuration for report runs.

Pure configuration data: defaults reproduce the console layout of the
reports, and every field can be overridden from TRADEREPORT_* variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import final

ENV_PREFIX = "TRADEREPORT_"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@final
@dataclass(frozen=True, slots=True)
class ReportingConfig:
    """Settings for loading and rendering one report run."""

    file_pattern: str = "*"        # glob applied under the data folder
    amount_width: int = 12
    amount_places: int = 3
    entity_width: int = 20
    rank_width: int = 3
    currency_symbol: str = "$"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for name in ("amount_width", "amount_places", "entity_width", "rank_width"):
            if getattr(self, name) < 0:
                raise TypeError(f"ReportingConfig.{name} must be >= 0")
        if self.log_level not in LOG_LEVELS:
            raise TypeError(
                f"ReportingConfig.log_level must be one of {LOG_LEVELS}, got {self.log_level!r}"
            )


def load_config(
    environ: Mapping[str, str] | None = None,
    base: ReportingConfig | None = None,
) -> ReportingConfig:
    """Apply TRADEREPORT_<FIELD> overrides on top of base (or defaults).

    e.g. TRADEREPORT_AMOUNT_PLACES=2, TRADEREPORT_LOG_LEVEL=debug.
    Invalid values raise TypeError or ValueError at startup.
    """
    env = os.environ if environ is None else environ
    config = base or ReportingConfig()
    overrides: dict[str, object] = {}
    for f in fields(ReportingConfig):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None:
            continue
        if f.name == "log_level":
            overrides[f.name] = raw.strip().upper()
        elif isinstance(getattr(config, f.name), int):
            overrides[f.name] = int(raw)
        else:
            overrides[f.name] = raw
    return replace(config, **overrides)
