"""tradereport.core — results, error values, exact decimals, calendar."""

from tradereport.core.calendar import GULF_CURRENCIES as GULF_CURRENCIES
from tradereport.core.calendar import WeekConvention as WeekConvention
from tradereport.core.calendar import adjust_settlement_date as adjust_settlement_date
from tradereport.core.calendar import convention_for as convention_for
from tradereport.core.calendar import is_business_day as is_business_day
from tradereport.core.calendar import within_calendar as within_calendar
from tradereport.core.errors import DuplicateField as DuplicateField
from tradereport.core.errors import InstructionError as InstructionError
from tradereport.core.errors import InvalidAction as InvalidAction
from tradereport.core.errors import InvalidDateOrdering as InvalidDateOrdering
from tradereport.core.errors import MalformedInput as MalformedInput
from tradereport.core.errors import MissingField as MissingField
from tradereport.core.errors import NegativeValue as NegativeValue
from tradereport.core.money import REPORT_DECIMAL_CONTEXT as REPORT_DECIMAL_CONTEXT
from tradereport.core.money import NonEmptyStr as NonEmptyStr
from tradereport.core.money import NonNegativeDecimal as NonNegativeDecimal
from tradereport.core.result import Err as Err
from tradereport.core.result import Ok as Ok
from tradereport.core.result import Result as Result
from tradereport.core.result import sequence as sequence
from tradereport.core.result import unwrap as unwrap
from tradereport.core.types import FrozenMap as FrozenMap
