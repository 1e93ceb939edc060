from __future__ import annotations
from dataclasses import dataclass

from . import daycount as dc
from .errors import InvalidDateError, InvalidDayOfYearError, InvalidYearError
from .types import MAXYEAR, MINYEAR, MONTH_ABBREVS, is_int


def is_valid_fields(month: int, day: int, year: int) -> bool:
    if not (is_int(month) and is_int(day) and is_int(year)):
        return False
    if not (MINYEAR <= year <= MAXYEAR):
        return False
    if not (1 <= month <= 12):
        return False
    return 1 <= day <= dc.days_in_month(month, year)


@dataclass(frozen=True)
class CalendarDate:
    """A date as validated (month, day, year) fields, used for access and display."""

    month: int
    day: int
    year: int

    def __post_init__(self) -> None:
        if not is_valid_fields(self.month, self.day, self.year):
            raise InvalidDateError(f"{self.month}-{self.day}-{self.year}")

    @classmethod
    def _unchecked(cls, month: int, day: int, year: int) -> "CalendarDate":
        # Caller guarantees the fields form a valid date.
        obj = object.__new__(cls)
        object.__setattr__(obj, "month", month)
        object.__setattr__(obj, "day", day)
        object.__setattr__(obj, "year", year)
        return obj

    @classmethod
    def from_day_of_year(cls, doy: int, year: int) -> "CalendarDate":
        if not (is_int(year) and MINYEAR <= year <= MAXYEAR):
            raise InvalidYearError(year)
        if not (is_int(doy) and 1 <= doy <= dc.days_in_year(year)):
            raise InvalidDayOfYearError(doy)
        month, day = dc.month_day_from_day_of_year(doy, year)
        return cls._unchecked(month, day, year)

    @property
    def is_leap_year(self) -> bool:
        return dc.is_leap_year(self.year)

    @property
    def day_of_year(self) -> int:
        return dc.day_of_year(self.month, self.day, self.year)

    def to_absolute(self) -> "AbsoluteDate":
        from .absolute import AbsoluteDate

        return AbsoluteDate.from_fields(self.month, self.day, self.year)

    def display(self) -> str:
        """``DD-Mon-YYYY``, e.g. ``04-Jan-2020``."""
        return f"{self.day:02d}-{MONTH_ABBREVS[self.month - 1]}-{self.year:04d}"

    def iso(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
