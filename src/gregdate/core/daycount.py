"""
gregdate.core.daycount
----------------------
Pure Gregorian day-counting math. Every function here assumes its arguments
were validated by the caller (see gregdate.core.date) and never re-checks them.
"""

from __future__ import annotations
from typing import Tuple

from .types import MINYEAR

_DAYS_NON_LEAP = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cycle lengths in days
DAYS_400Y = 146097
DAYS_100Y = 36524
DAYS_4Y = 1461
DAYS_1Y = 365


def is_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_NON_LEAP[month - 1]


def day_of_year(month: int, day: int, year: int) -> int:
    """Closed-form ordinal of (month, day) within ``year``, Jan 1 = 1."""
    doy = (367 * month - 362) // 12 + day
    if month > 2:
        doy -= 1 if is_leap_year(year) else 2
    return doy


def days_before_year(year: int) -> int:
    """Days from 1601-01-01 up to and including Dec 31 of ``year``.

    ``days_before_year(1600) == 0``; callers pass ``year - 1`` of the year
    they are interested in.
    """
    y = year - (MINYEAR - 1)
    return 365 * y + y // 4 - y // 100 + y // 400


def year_from_absolute(count: int) -> int:
    """Year containing absolute day ``count`` (1 = 1601-01-01).

    Decomposes the zero-based day offset into 400-, 100-, 4- and 1-year
    cycles. When the 100-year or 1-year quotient reaches 4 the day is
    Dec 31 of a leap year and belongs to the preceding year.
    """
    d0 = count - 1
    n400, d1 = divmod(d0, DAYS_400Y)
    n100, d2 = divmod(d1, DAYS_100Y)
    n4, d3 = divmod(d2, DAYS_4Y)
    n1 = d3 // DAYS_1Y
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1 + MINYEAR
    if n100 == 4 or n1 == 4:
        year -= 1
    return year


def year_from_absolute_iterative(count: int) -> int:
    """Reference inverse: subtract whole calendar years starting at 1601."""
    year = MINYEAR
    remaining = count
    while remaining > days_in_year(year):
        remaining -= days_in_year(year)
        year += 1
    return year


def month_day_from_day_of_year(doy: int, year: int) -> Tuple[int, int]:
    """Walk month lengths forward until the remainder fits inside a month."""
    month = 1
    diff = doy - 1
    while diff >= days_in_month(month, year):
        diff -= days_in_month(month, year)
        month += 1
    return month, diff + 1
