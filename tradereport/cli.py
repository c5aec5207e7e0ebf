"""Command-line entrypoint: print the daily and rank reports for a data folder."""

from __future__ import annotations

import argparse
import logging
import sys

from tradereport.core.result import Err, Ok
from tradereport.infra.config import LOG_LEVELS, load_config
from tradereport.infra.logging import configure_logging
from tradereport.pipeline import run_reports
from tradereport.reporting.presenter import render_reports

logger = logging.getLogger(__name__)

MISSING_FOLDER_MESSAGE = "Path to json data folder not specified"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tradereport",
        description="Report settled amounts per day and rank entities from JSON instruction files",
    )
    parser.add_argument(
        "data_folder", nargs="*",
        help="Path to folder with JSON instruction files, e.g. /home/json_data",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Override TRADEREPORT_LOG_LEVEL",
    )
    args = parser.parse_args(argv)
    if len(args.data_folder) != 1:
        parser.error(MISSING_FOLDER_MESSAGE)
    args.data_folder = args.data_folder[0]
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = load_config()
    configure_logging(args.log_level or config.log_level)

    match run_reports(args.data_folder, config):
        case Err(error):
            logger.error("report run aborted: %s", error.to_dict())
            print(error.message, file=sys.stderr)
            return 1
        case Ok(reports):
            print(render_reports(reports, config))
            return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
