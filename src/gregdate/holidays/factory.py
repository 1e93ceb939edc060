"""
gregdate.holidays.factory
-------------------------
Transforms pure HolidaySpec data into callables ``rule(year) -> Date``.
"""

from __future__ import annotations

from ..core.date import Date
from ..core.registry import HolidayRule
from .rules import check_year, easter, weekday_in_month
from .specs import HolidaySpec


def make_rule(spec: HolidaySpec) -> HolidayRule:
    """The universal entry point."""
    if spec.kind == "fixed":
        if spec.month is None or spec.day is None:
            raise ValueError(f"Fixed holiday '{spec.name}' needs month and day")

        def fixed(year: int) -> Date:
            check_year(year)
            return Date(spec.month, spec.day, year)

        fixed.__name__ = spec.name
        return fixed

    if spec.kind == "nth-weekday":
        if spec.month is None or spec.weekday is None or spec.position is None:
            raise ValueError(f"Weekday holiday '{spec.name}' needs month, weekday and position")

        def nth(year: int) -> Date:
            check_year(year)
            return weekday_in_month(spec.month, year, spec.weekday, spec.position)

        nth.__name__ = spec.name
        return nth

    if spec.kind == "easter":
        return easter

    raise TypeError(f"Unknown holiday kind: {spec.kind!r}")
