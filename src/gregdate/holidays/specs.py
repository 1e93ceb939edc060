from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Literal, Optional

from ..core.types import (
    DECEMBER, FEBRUARY, JANUARY, JULY, MAY, MONDAY, NOVEMBER, OCTOBER,
    SEPTEMBER, THURSDAY,
)
from .rules import Position

HolidayKind = Literal["fixed", "nth-weekday", "easter"]


@dataclass(frozen=True)
class HolidaySpec:
    """Pure data description of an annual holiday."""
    name: str
    title: str
    kind: HolidayKind
    month: Optional[int] = None
    day: Optional[int] = None         # fixed
    weekday: Optional[int] = None     # nth-weekday
    position: Optional[Position] = None
    federal: bool = True

    @staticmethod
    def like(name: str) -> "HolidaySpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "HolidaySpec":
        return replace(self, **kwargs)


# ============================================================
# US FEDERAL HOLIDAYS
# ============================================================

NEW_YEARS_DAY = HolidaySpec("new-years-day", "New Year's Day", "fixed", month=JANUARY, day=1)
MLK_BIRTHDAY = HolidaySpec(
    "mlk-birthday", "Martin Luther King Jr.'s Birthday", "nth-weekday",
    month=JANUARY, weekday=MONDAY, position=Position.THIRD,
)
WASHINGTONS_BIRTHDAY = HolidaySpec(
    "washingtons-birthday", "Washington's Birthday", "nth-weekday",
    month=FEBRUARY, weekday=MONDAY, position=Position.THIRD,
)
MEMORIAL_DAY = HolidaySpec(
    "memorial-day", "Memorial Day", "nth-weekday",
    month=MAY, weekday=MONDAY, position=Position.LAST,
)
INDEPENDENCE_DAY = HolidaySpec("independence-day", "Independence Day", "fixed", month=JULY, day=4)
LABOR_DAY = HolidaySpec(
    "labor-day", "Labor Day", "nth-weekday",
    month=SEPTEMBER, weekday=MONDAY, position=Position.FIRST,
)
COLUMBUS_DAY = HolidaySpec(
    "columbus-day", "Columbus Day", "nth-weekday",
    month=OCTOBER, weekday=MONDAY, position=Position.SECOND,
)
VETERANS_DAY = HolidaySpec("veterans-day", "Veterans Day", "fixed", month=NOVEMBER, day=11)
THANKSGIVING = HolidaySpec(
    "thanksgiving", "Thanksgiving Day", "nth-weekday",
    month=NOVEMBER, weekday=THURSDAY, position=Position.FOURTH,
)
CHRISTMAS = HolidaySpec("christmas", "Christmas Day", "fixed", month=DECEMBER, day=25)

FEDERAL_SPECS: Dict[str, HolidaySpec] = {
    s.name: s
    for s in (
        NEW_YEARS_DAY, MLK_BIRTHDAY, WASHINGTONS_BIRTHDAY, MEMORIAL_DAY,
        INDEPENDENCE_DAY, LABOR_DAY, COLUMBUS_DAY, VETERANS_DAY,
        THANKSGIVING, CHRISTMAS,
    )
}

# ============================================================
# MOVABLE FEASTS
# ============================================================

EASTER = HolidaySpec("easter", "Easter Sunday", "easter", federal=False)

ALL_SPECS: Dict[str, HolidaySpec] = {**FEDERAL_SPECS, EASTER.name: EASTER}
