"""tradereport.infra — configuration and logging."""

from tradereport.infra.config import ReportingConfig as ReportingConfig
from tradereport.infra.config import load_config as load_config
from tradereport.infra.logging import configure_logging as configure_logging
