from __future__ import annotations
import datetime as _dt
from typing import Optional, Tuple, Union

HostValue = Union[_dt.date, _dt.datetime]


def fields_from_host(value: Optional[HostValue]) -> Optional[Tuple[int, int, int]]:
    """(month, day, year) of a host date/datetime, read in its own local calendar.

    Aware datetimes are not shifted to another zone: the wall-clock date is used.
    Returns None for a None input.
    """
    if value is None:
        return None
    if not isinstance(value, _dt.date):
        raise TypeError(f"Expected datetime.date or datetime.datetime, got {type(value).__name__}")
    return value.month, value.day, value.year


def to_host_date(month: int, day: int, year: int) -> _dt.date:
    return _dt.date(year, month, day)


def to_host_datetime(month: int, day: int, year: int) -> _dt.datetime:
    """Local midnight, naive."""
    return _dt.datetime(year, month, day)


def today_fields() -> Tuple[int, int, int]:
    d = _dt.date.today()
    return d.month, d.day, d.year
