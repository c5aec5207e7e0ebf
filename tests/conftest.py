"""Hypothesis profiles and shared pytest fixtures for tradereport."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Raw records
# ---------------------------------------------------------------------------


def gulf_record() -> dict[str, object]:
    """AED sell with a Friday settlement date; cost 13875.000."""
    return {
        "entity": "3I GRP.",
        "action": "S",
        "agreedFx": "1.11",
        "currency": "AED",
        "instructionDate": "2018-01-25",
        "settlementDate": "2018-01-26",
        "units": "1000",
        "pricePerUnit": "12.5",
    }


@pytest.fixture
def raw_record() -> dict[str, object]:
    return gulf_record()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write raw text to tmp_path/<relative>, creating folders; return the data root."""

    def _write(relative: str, text: str) -> Path:
        target = tmp_path / "data" / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return tmp_path / "data"

    return _write


@pytest.fixture
def write_records(write_json: Callable[[str, str], Path]) -> Callable[[str, object], Path]:
    """Serialize records (object or list) as JSON into the data root."""

    def _write(relative: str, records: object) -> Path:
        return write_json(relative, json.dumps(records, indent=2))

    return _write
