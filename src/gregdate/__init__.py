"""gregdate public API.

Gregorian date arithmetic for 1601-01-01 .. 3999-12-31 with US federal
holidays and Easter. Keep this surface small: users should mostly interact
with Date and the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    easter,
    holiday,
    holiday_info,
    holidays,
    list_holidays,
    observed,
    register_holiday,
)
from .core.date import (
    MAX_DATE,
    MIN_DATE,
    NULL_DATE,
    Date,
    check_date,
    days_in_month,
    days_in_year,
    is_leap,
    is_valid_date,
    is_valid_day,
    is_valid_day_of_week,
    is_valid_day_of_year,
    is_valid_month,
    is_valid_year,
    month_name,
    ordinal_day,
    weekday_name,
)
from .core.absolute import is_absolute_date
from .core.errors import (
    GregdateError,
    InvalidAbsoluteError,
    InvalidDateError,
    InvalidDayError,
    InvalidDayOfWeekError,
    InvalidDayOfYearError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidPatternError,
    InvalidYearError,
    MaxDateReachedError,
    MinDateReachedError,
    NullArgumentError,
    NullDateError,
    OutOfRangeError,
)
from .core.types import MAX_ABSOLUTE, MAXYEAR, MINYEAR
from .holidays.rules import Position

__all__ = [
    "Date",
    "check_date",
    "MIN_DATE",
    "MAX_DATE",
    "NULL_DATE",
    "MINYEAR",
    "MAXYEAR",
    "MAX_ABSOLUTE",
    "Position",
    "days_in_month",
    "days_in_year",
    "is_leap",
    "is_absolute_date",
    "is_valid_date",
    "is_valid_day",
    "is_valid_day_of_week",
    "is_valid_day_of_year",
    "is_valid_month",
    "is_valid_year",
    "month_name",
    "ordinal_day",
    "weekday_name",
    "easter",
    "holiday",
    "holiday_info",
    "holidays",
    "list_holidays",
    "observed",
    "register_holiday",
    "GregdateError",
    "InvalidAbsoluteError",
    "InvalidDateError",
    "InvalidDayError",
    "InvalidDayOfWeekError",
    "InvalidDayOfYearError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidPatternError",
    "InvalidYearError",
    "MaxDateReachedError",
    "MinDateReachedError",
    "NullArgumentError",
    "NullDateError",
    "OutOfRangeError",
]
