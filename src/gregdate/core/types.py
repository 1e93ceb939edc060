from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

MINYEAR = 1601
MAXYEAR = 3999

# Absolute day of 3999-12-31; day 1 is 1601-01-01.
MAX_ABSOLUTE = 876216
NULL_ABSOLUTE = 0

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

(JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE,
 JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER) = range(1, 13)

DAY_ABBREVS: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_ABBREVS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def is_int(value: object) -> bool:
    """True for a plain integer; bool is excluded."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CalendarFields:
    month: int
    day: int
    year: int


@dataclass(frozen=True)
class AbsoluteDay:
    count: int


@dataclass(frozen=True)
class NullDay:
    """Payload of the null date; carries no calendar meaning."""


Representation = Union[CalendarFields, AbsoluteDay, NullDay]
