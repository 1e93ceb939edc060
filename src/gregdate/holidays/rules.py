"""
gregdate.holidays.rules
-----------------------
Weekday-relative date rules and the ecclesiastical Easter computation.
Everything here is layered on Date arithmetic; inputs are assumed validated
unless the function is a public holiday entry point.
"""

from __future__ import annotations

from enum import Enum

from ..core.date import Date, is_valid_year
from ..core.errors import InvalidYearError
from ..core import daycount as dc
from ..core.types import APRIL, SATURDAY, SUNDAY


class Position(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    LAST = 5


def check_year(year: int) -> None:
    if not is_valid_year(year):
        raise InvalidYearError(year)


# Offsets are taken mod 7 so that no intermediate date leaves the supported
# range (January 1601 and December 3999 stay computable).

def weekday_on_or_before(d: Date, dow: int) -> Date:
    """Latest date with weekday ``dow`` that is not after ``d``."""
    return d.add(-((d.day_of_week() - dow) % 7))


def weekday_on_or_after(d: Date, dow: int) -> Date:
    return d.add((dow - d.day_of_week()) % 7)


def weekday_after(d: Date, dow: int) -> Date:
    """Earliest date with weekday ``dow`` strictly after ``d``."""
    return d.add((dow - d.day_of_week() - 1) % 7 + 1)


def weekday_before(d: Date, dow: int) -> Date:
    """Latest date with weekday ``dow`` strictly before ``d``."""
    return d.add(-((d.day_of_week() - dow - 1) % 7 + 1))


def nth_weekday(d: Date, dow: int, position: Position) -> Date:
    """Nth ``dow`` counted from ``d``.

    For FIRST..FOURTH ``d`` is the first of the month; for LAST it is the
    last day of the month.
    """
    if position is Position.LAST:
        return weekday_on_or_before(d, dow)
    return weekday_on_or_after(d, dow).add(7 * (position.value - 1))


def weekday_in_month(month: int, year: int, dow: int, position: Position) -> Date:
    if position is Position.LAST:
        start = Date(month, dc.days_in_month(month, year), year)
    else:
        start = Date(month, 1, year)
    return nth_weekday(start, dow, position)


# ============================================================
# Easter
# ============================================================

def century(year: int) -> int:
    return year // 100 + 1


def shifted_epact(year: int) -> int:
    c = century(year)
    return (14 + 11 * (year % 19) - (3 * c) // 4 + (5 + 8 * c) // 25) % 30


def adjusted_epact(year: int) -> int:
    e = shifted_epact(year)
    if e == 0 or (e == 1 and year % 19 > 10):
        return e + 1
    return e


def paschal_moon(year: int) -> Date:
    """Ecclesiastical full moon: April 19 less the adjusted epact."""
    return Date(APRIL, 19, year).add(-adjusted_epact(year))


def easter(year: int) -> Date:
    """Easter Sunday: the first Sunday strictly after the paschal full moon."""
    check_year(year)
    return weekday_after(paschal_moon(year), SUNDAY)


def observed(d: Date) -> Date:
    """Weekday on which a holiday falling on ``d`` is observed.

    Saturday moves to the preceding Friday, Sunday to the following Monday.
    """
    dow = d.day_of_week()
    if dow == SUNDAY:
        return d.increment()
    if dow == SATURDAY:
        return d.decrement()
    return d
