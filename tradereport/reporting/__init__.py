"""tradereport.reporting — daily and rank report aggregation and rendering."""

from tradereport.reporting.aggregator import DailyReport as DailyReport
from tradereport.reporting.aggregator import RankEntry as RankEntry
from tradereport.reporting.aggregator import RankReport as RankReport
from tradereport.reporting.aggregator import Reports as Reports
from tradereport.reporting.aggregator import build_reports as build_reports
from tradereport.reporting.aggregator import collect_daily_report as collect_daily_report
from tradereport.reporting.aggregator import collect_rank_report as collect_rank_report
from tradereport.reporting.aggregator import cost_totals as cost_totals
from tradereport.reporting.aggregator import merge_totals as merge_totals
from tradereport.reporting.presenter import render_daily_report as render_daily_report
from tradereport.reporting.presenter import render_rank_report as render_rank_report
from tradereport.reporting.presenter import render_reports as render_reports
