"""
gregdate.core.date
------------------
The public Date value. A Date holds exactly one immutable payload, either
calendar fields, an absolute day count, or the null marker, and derives the
other encoding on demand. All input validation happens here, so the
representations and the day-counting helpers can trust their arguments.
"""

from __future__ import annotations

from typing import Optional, Union

from . import daycount as dc
from . import host
from .absolute import AbsoluteDate, is_absolute_date
from .calendar import CalendarDate, is_valid_fields
from .errors import (
    InvalidAbsoluteError,
    InvalidDateError,
    InvalidDayError,
    InvalidDayOfWeekError,
    InvalidDayOfYearError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidYearError,
    MaxDateReachedError,
    MinDateReachedError,
    NullDateError,
)
from .types import (
    DAY_ABBREVS,
    DECEMBER,
    JANUARY,
    MAXYEAR,
    MINYEAR,
    MONTH_ABBREVS,
    NULL_ABSOLUTE,
    SATURDAY,
    SUNDAY,
    AbsoluteDay,
    CalendarFields,
    NullDay,
    Representation,
    is_int,
)
from ..format import pattern as _pattern

_NULL = NullDay()


# ============================================================
# Validators (never raise)
# ============================================================

def is_valid_year(year: int) -> bool:
    return is_int(year) and MINYEAR <= year <= MAXYEAR


def is_valid_month(month: int) -> bool:
    return is_int(month) and 1 <= month <= 12


def is_valid_day(month: int, day: int, year: int) -> bool:
    return is_valid_fields(month, day, year)


def is_valid_date(month: int, day: int, year: int) -> bool:
    return is_valid_fields(month, day, year)


def is_valid_day_of_year(doy: int, year: int) -> bool:
    return is_valid_year(year) and is_int(doy) and 1 <= doy <= dc.days_in_year(year)


def is_valid_day_of_week(dow: int) -> bool:
    return is_int(dow) and SUNDAY <= dow <= SATURDAY


# ============================================================
# Validated calendar queries (raise typed errors)
# ============================================================

def days_in_month(month: int, year: int) -> int:
    if not is_valid_year(year):
        raise InvalidYearError(year)
    if not is_valid_month(month):
        raise InvalidMonthError(month)
    return dc.days_in_month(month, year)


def is_leap(year: int) -> bool:
    if not is_valid_year(year):
        raise InvalidYearError(year)
    return dc.is_leap_year(year)


def days_in_year(year: int) -> int:
    if not is_valid_year(year):
        raise InvalidYearError(year)
    return dc.days_in_year(year)


def month_name(month: int) -> str:
    """3-letter English abbreviation of ``month``."""
    if not is_valid_month(month):
        raise InvalidMonthError(month)
    return MONTH_ABBREVS[month - 1]


def weekday_name(dow: int) -> str:
    if not is_valid_day_of_week(dow):
        raise InvalidDayOfWeekError(dow)
    return DAY_ABBREVS[dow]


def check_date(month: int, day: int, year: int) -> None:
    """Raise the error naming the first bad field of (month, day, year)."""
    if not is_valid_year(year):
        raise InvalidYearError(year)
    if not is_valid_month(month):
        raise InvalidMonthError(month)
    if not (is_int(day) and 1 <= day <= dc.days_in_month(month, year)):
        raise InvalidDayError(day)


def ordinal_day(month: int, day: int, year: int) -> int:
    if not is_valid_fields(month, day, year):
        raise InvalidDateError(f"{month}-{day}-{year}")
    return dc.day_of_year(month, day, year)


# ============================================================
# Date
# ============================================================

class Date:
    """Immutable Gregorian date in 1601-01-01 .. 3999-12-31, or the null date.

    Field access and display work on calendar fields; arithmetic and
    comparison work on the absolute day count. Neither conversion is cached.
    """

    __slots__ = ("_rep",)

    def __init__(self, month: int, day: int, year: int) -> None:
        if not is_valid_fields(month, day, year):
            raise InvalidDateError(f"{month}-{day}-{year}")
        self._rep: Representation = CalendarFields(month, day, year)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def _wrap(cls, rep: Representation) -> "Date":
        obj = object.__new__(cls)
        obj._rep = rep
        return obj

    @classmethod
    def from_day_of_year(cls, doy: int, year: int) -> "Date":
        if not is_valid_year(year):
            raise InvalidYearError(year)
        if not is_valid_day_of_year(doy, year):
            raise InvalidDayOfYearError(doy)
        month, day = dc.month_day_from_day_of_year(doy, year)
        return cls._wrap(CalendarFields(month, day, year))

    @classmethod
    def from_absolute(cls, count: int) -> "Date":
        """0 yields the null date; otherwise ``count`` must be in 1..876216."""
        if is_int(count) and count == NULL_ABSOLUTE:
            return cls._wrap(_NULL)
        if not is_absolute_date(count):
            raise InvalidAbsoluteError(count)
        return cls._wrap(AbsoluteDay(count))

    @classmethod
    def parse(cls, text: str, pattern: str = _pattern.DEFAULT_PATTERN) -> "Date":
        fields = _pattern.parse(text, pattern)
        d = cls(fields.month, fields.day, fields.year)
        if fields.weekday is not None and fields.weekday != d.day_of_week():
            raise InvalidFormatError(f"{text} (weekday does not match date)")
        return d

    @classmethod
    def from_iso(cls, text: str) -> "Date":
        return cls.parse(text, _pattern.ISO_PATTERN)

    @classmethod
    def from_host(cls, value: Optional[host.HostValue]) -> "Date":
        fields = host.fields_from_host(value)
        if fields is None:
            return cls._wrap(_NULL)
        return cls(*fields)

    @classmethod
    def today(cls) -> "Date":
        month, day, year = host.today_fields()
        if not is_valid_fields(month, day, year):
            raise RuntimeError(f"Host clock date {year}-{month}-{day} is outside the supported range")
        return cls._wrap(CalendarFields(month, day, year))

    @classmethod
    def null(cls) -> "Date":
        return cls._wrap(_NULL)

    # ---------------------------------------------------------
    # Representation access
    # ---------------------------------------------------------

    def _calendar(self) -> CalendarDate:
        rep = self._rep
        if isinstance(rep, CalendarFields):
            return CalendarDate._unchecked(rep.month, rep.day, rep.year)
        if isinstance(rep, AbsoluteDay):
            return AbsoluteDate._unchecked(rep.count).to_calendar()
        raise NullDateError()

    def _absolute(self) -> AbsoluteDate:
        rep = self._rep
        if isinstance(rep, AbsoluteDay):
            return AbsoluteDate._unchecked(rep.count)
        if isinstance(rep, CalendarFields):
            return AbsoluteDate.from_fields(rep.month, rep.day, rep.year)
        raise NullDateError()

    def is_null(self) -> bool:
        return isinstance(self._rep, NullDay)

    def is_valid(self) -> bool:
        return not self.is_null()

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def month(self) -> int:
        return self._calendar().month

    @property
    def day(self) -> int:
        return self._calendar().day

    @property
    def year(self) -> int:
        return self._calendar().year

    @property
    def day_of_year(self) -> int:
        return self._calendar().day_of_year

    @property
    def is_leap_year(self) -> bool:
        return self._calendar().is_leap_year

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def to_iso(self) -> str:
        """``YYYY-MM-DD``; empty string for the null date."""
        if self.is_null():
            return ""
        return self._calendar().iso()

    def format(self, pattern: str) -> str:
        c = self._calendar()
        return _pattern.format_fields(pattern, c.month, c.day, c.year, self.day_of_week())

    def __str__(self) -> str:
        if self.is_null():
            return "null date"
        return self._calendar().display()

    def __repr__(self) -> str:
        if self.is_null():
            return "Date.null()"
        c = self._calendar()
        return f"Date({c.month}, {c.day}, {c.year})"

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, days: int) -> "Date":
        if not is_int(days):
            raise TypeError(f"Day count must be an int, got {type(days).__name__}")
        return Date._wrap(AbsoluteDay(self._absolute().add(days).count))

    def increment(self) -> "Date":
        a = self._absolute()
        if a.count == MAX_DATE.to_absolute():
            raise MaxDateReachedError()
        return Date._wrap(AbsoluteDay(a.increment().count))

    def decrement(self) -> "Date":
        a = self._absolute()
        if a.count == MIN_DATE.to_absolute():
            raise MinDateReachedError()
        return Date._wrap(AbsoluteDay(a.decrement().count))

    def difference(self, other: "Date") -> int:
        """Signed number of days from ``other`` to ``self``."""
        return self._absolute().difference(other._absolute())

    def day_of_week(self) -> int:
        """0 = Sunday .. 6 = Saturday."""
        return self._absolute().day_of_week()

    def day_of_week_name(self) -> str:
        return DAY_ABBREVS[self.day_of_week()]

    def __add__(self, days: int) -> "Date":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.add(days)

    __radd__ = __add__

    def __sub__(self, other: Union["Date", int]) -> Union["Date", int]:
        if isinstance(other, Date):
            return self.difference(other)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add(-other)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare_to(self, other: "Date") -> int:
        """Three-way comparison. Null vs null is 0; null vs non-null is -1 either way round."""
        if self.is_null() and other.is_null():
            return 0
        if self.is_null() or other.is_null():
            return -1
        return self._absolute().compare(other._absolute())

    def is_after(self, other: "Date") -> bool:
        if self.is_null() or other.is_null():
            return False
        return self.compare_to(other) == 1

    def is_before(self, other: "Date") -> bool:
        if self.is_null() or other.is_null():
            return False
        return self.compare_to(other) == -1

    def is_on_or_after(self, other: "Date") -> bool:
        if self.is_null() or other.is_null():
            return False
        return self.compare_to(other) >= 0

    def is_on_or_before(self, other: "Date") -> bool:
        if self.is_null() or other.is_null():
            return False
        return self.compare_to(other) <= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_on_or_before(other)

    def __gt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.is_on_or_after(other)

    def __hash__(self) -> int:
        return self.to_absolute()

    # ---------------------------------------------------------
    # Persistence and interop
    # ---------------------------------------------------------

    def to_absolute(self) -> int:
        """Absolute day number; 0 for the null date."""
        if self.is_null():
            return NULL_ABSOLUTE
        return self._absolute().count

    def to_host(self):
        """``datetime.date`` with the same calendar fields."""
        c = self._calendar()
        return host.to_host_date(c.month, c.day, c.year)

    def to_datetime(self):
        """Naive ``datetime.datetime`` at local midnight."""
        c = self._calendar()
        return host.to_host_datetime(c.month, c.day, c.year)

    def copy(self) -> "Date":
        """A copy held as calendar fields, whatever this value holds."""
        if self.is_null():
            return Date._wrap(_NULL)
        c = self._calendar()
        return Date._wrap(CalendarFields(c.month, c.day, c.year))

    def __copy__(self) -> "Date":
        return self.copy()

    def __deepcopy__(self, memo) -> "Date":
        return self.copy()

    def __reduce__(self):
        return (Date.from_absolute, (self.to_absolute(),))


MIN_DATE = Date(JANUARY, 1, MINYEAR)
MAX_DATE = Date(DECEMBER, 31, MAXYEAR)
NULL_DATE = Date.null()
