from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.date import Date
from .core.registry import HolidayRegistry, HolidayRule
from .holidays import rules as _rules
from .holidays.specs import FEDERAL_SPECS

_registry: Optional[HolidayRegistry] = None

def set_registry(reg: HolidayRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> HolidayRegistry:
    if _registry is None:
        raise RuntimeError("Holiday registry not initialized")
    return _registry

def list_holidays() -> List[str]:
    return _reg().list()

def holiday_info(name: str) -> Dict[str, Any]:
    return _reg().info(name)

def register_holiday(name: str, rule: HolidayRule, *, overwrite: bool = False) -> None:
    _reg().register(name, rule, overwrite=overwrite)

def holiday(name: str, year: int, *, observed: bool = False) -> Date:
    """Date of holiday ``name`` in ``year``; raises InvalidYearError outside 1601..3999."""
    d = _reg().get(name)(year)
    return _rules.observed(d) if observed else d

def holidays(year: int, *, observed: bool = False, federal_only: bool = False) -> Dict[str, Date]:
    """All registered holidays of ``year`` keyed by name, in date order."""
    names = [n for n in _reg().list() if (not federal_only) or n in FEDERAL_SPECS]
    out = {n: holiday(n, year, observed=observed) for n in names}
    return dict(sorted(out.items(), key=lambda kv: kv[1].to_absolute()))

def observed(d: Date) -> Date:
    return _rules.observed(d)

def easter(year: int) -> Date:
    return _rules.easter(year)
