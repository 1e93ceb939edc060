from __future__ import annotations
from dataclasses import asdict

from gregdate.core.registry import HolidayRegistry
from gregdate.holidays.factory import make_rule
from gregdate.holidays.specs import ALL_SPECS


def build_registry() -> HolidayRegistry:
    reg = HolidayRegistry({})
    for name, spec in ALL_SPECS.items():
        info = asdict(spec)
        if spec.position is not None:
            info["position"] = spec.position.name.lower()
        reg.register(name, make_rule(spec), info=info)
    return reg
