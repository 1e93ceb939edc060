"""Holiday rules: US federal holidays and Easter, built on Date arithmetic."""

from .rules import (
    Position,
    easter,
    nth_weekday,
    observed,
    paschal_moon,
    weekday_after,
    weekday_before,
    weekday_in_month,
    weekday_on_or_after,
    weekday_on_or_before,
)
from .specs import ALL_SPECS, FEDERAL_SPECS, HolidaySpec
from .factory import make_rule

__all__ = [
    "Position",
    "easter",
    "nth_weekday",
    "observed",
    "paschal_moon",
    "weekday_after",
    "weekday_before",
    "weekday_in_month",
    "weekday_on_or_after",
    "weekday_on_or_before",
    "ALL_SPECS",
    "FEDERAL_SPECS",
    "HolidaySpec",
    "make_rule",
]
