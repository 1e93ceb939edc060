from __future__ import annotations
from dataclasses import dataclass

from . import daycount as dc
from .errors import InvalidAbsoluteError, OutOfRangeError
from .types import MAX_ABSOLUTE, is_int


def is_absolute_date(count: int) -> bool:
    return is_int(count) and 1 <= count <= MAX_ABSOLUTE


@dataclass(frozen=True, order=False)
class AbsoluteDate:
    """A date as a linear day count, day 1 = 1601-01-01 (a Monday)."""

    count: int

    def __post_init__(self) -> None:
        if not is_absolute_date(self.count):
            raise InvalidAbsoluteError(self.count)

    @classmethod
    def _unchecked(cls, count: int) -> "AbsoluteDate":
        # Caller guarantees 1 <= count <= MAX_ABSOLUTE.
        obj = object.__new__(cls)
        object.__setattr__(obj, "count", count)
        return obj

    @classmethod
    def from_fields(cls, month: int, day: int, year: int) -> "AbsoluteDate":
        """Fields must already be valid."""
        return cls._unchecked(dc.day_of_year(month, day, year) + dc.days_before_year(year - 1))

    def to_calendar(self) -> "CalendarDate":
        from .calendar import CalendarDate

        year = dc.year_from_absolute(self.count)
        doy = self.count - dc.days_before_year(year - 1)
        month, day = dc.month_day_from_day_of_year(doy, year)
        return CalendarDate._unchecked(month, day, year)

    def add(self, delta: int) -> "AbsoluteDate":
        result = self.count + delta
        if not is_absolute_date(result):
            raise OutOfRangeError(result)
        return AbsoluteDate._unchecked(result)

    def increment(self) -> "AbsoluteDate":
        return self.add(1)

    def decrement(self) -> "AbsoluteDate":
        return self.add(-1)

    def difference(self, other: "AbsoluteDate") -> int:
        return self.count - other.count

    def day_of_week(self) -> int:
        # Valid only because day 1 (1601-01-01) falls on weekday 1 (Monday).
        return self.count % 7

    def compare(self, other: "AbsoluteDate") -> int:
        if self.count < other.count:
            return -1
        if self.count > other.count:
            return 1
        return 0
