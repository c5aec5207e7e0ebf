"""tradereport — settlement instruction validation and daily/rank reporting."""

from tradereport.gateway.types import Action as Action
from tradereport.gateway.types import Instruction as Instruction
from tradereport.pipeline import run_reports as run_reports
from tradereport.reporting.aggregator import build_reports as build_reports
from tradereport.reporting.presenter import render_reports as render_reports

__version__ = "0.1.0"
