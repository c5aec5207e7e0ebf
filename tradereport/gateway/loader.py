"""Instruction files — discovery and strict JSON decoding.

Each file holds one instruction object or an array of them. Decoding is
strict: numbers become Decimal, NaN/Infinity literals are refused and a
property repeated inside one object is an error. The first bad record ends
the load; error messages are returned unaltered and the offending file and
record index are logged.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from tradereport.core.errors import InstructionError, duplicate_field, malformed_input
from tradereport.core.result import Err, Ok, sequence
from tradereport.gateway.parser import parse_instruction
from tradereport.gateway.types import Instruction

logger = logging.getLogger(__name__)

_SOURCE = "gateway.loader.load_instructions"


class _DuplicateKey(ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


def _reject_duplicates(pairs: list[tuple[str, object]]) -> dict[str, object]:
    obj: dict[str, object] = {}
    for key, value in pairs:
        if key in obj:
            raise _DuplicateKey(key)
        obj[key] = value
    return obj


def _reject_constant(name: str) -> object:
    raise ValueError(f"Non-numeric literal '{name}' is not allowed")


def _rejected(path: Path, index: int, error: InstructionError) -> InstructionError:
    logger.error("rejected %s[%d]: %s", path, index, error.message)
    return error


def decode_records(text: str, location: str) -> Ok[list[object]] | Err[InstructionError]:
    """Decode JSON text into a list of raw records.

    A single top-level object is treated as a one-element array.
    """
    try:
        decoded = json.loads(
            text,
            object_pairs_hook=_reject_duplicates,
            parse_float=Decimal,
            parse_int=Decimal,
            parse_constant=_reject_constant,
        )
    except _DuplicateKey as e:
        return Err(duplicate_field(e.key, _SOURCE))
    except json.JSONDecodeError as e:
        return Err(malformed_input(
            f"{e.msg}: line {e.lineno} column {e.colno}", location, _SOURCE,
        ))
    except ValueError as e:
        return Err(malformed_input(str(e), location, _SOURCE))

    if isinstance(decoded, list):
        return Ok(decoded)
    return Ok([decoded])


def discover_files(root: Path, pattern: str = "*") -> list[Path]:
    """Regular files under root (recursively), in sorted path order.

    A root that is itself a file is returned on its own.
    """
    if root.is_file():
        return [root]
    return sorted(p for p in root.rglob(pattern) if p.is_file())


def load_file(path: Path) -> Ok[list[Instruction]] | Err[InstructionError]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(malformed_input(f"Cannot read file: {e}", str(path), _SOURCE))

    match decode_records(text, str(path)):
        case Err(error):
            logger.error("rejected %s: %s", path, error.message)
            return Err(error)
        case Ok(records):
            pass

    loaded = sequence(
        parse_instruction(record).map_err(lambda error: _rejected(path, index, error))
        for index, record in enumerate(records)
    )
    if isinstance(loaded, Ok):
        logger.debug("loaded %d instruction(s) from %s", len(loaded.value), path)
    return loaded


def load_instructions(
    folder: str | Path, pattern: str = "*",
) -> Ok[list[Instruction]] | Err[InstructionError]:
    """Load every instruction found under folder, failing fast."""
    root = Path(folder)
    if not root.exists():
        return Err(malformed_input(f"Data folder not found: {root}", str(root), _SOURCE))

    files = discover_files(root, pattern)
    match sequence(load_file(path) for path in files):
        case Err() as failure:
            return failure
        case Ok(per_file):
            instructions = [i for loaded in per_file for i in loaded]
    logger.info("loaded %d instruction(s) from %d file(s)", len(instructions), len(files))
    return Ok(instructions)
