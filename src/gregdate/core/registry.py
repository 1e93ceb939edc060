from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .date import Date

logger = logging.getLogger(__name__)

HolidayRule = Callable[[int], Date]


@dataclass
class HolidayRegistry:
    _rules: Dict[str, HolidayRule]
    _info: Dict[str, Dict[str, object]] = field(default_factory=dict)

    def get(self, name: str) -> HolidayRule:
        if name not in self._rules:
            raise KeyError(f"Unknown holiday '{name}'. Available: {sorted(self._rules)}")
        return self._rules[name]

    def info(self, name: str) -> Dict[str, object]:
        self.get(name)
        return dict(self._info.get(name, {"name": name}))

    def list(self) -> List[str]:
        return sorted(self._rules.keys())

    def register(
        self,
        name: str,
        rule: HolidayRule,
        *,
        overwrite: bool = False,
        info: Optional[Dict[str, object]] = None,
    ) -> None:
        if (not overwrite) and (name in self._rules):
            raise KeyError(f"Holiday '{name}' already exists. Use overwrite=True to replace.")
        self._rules[name] = rule
        self._info[name] = dict(info) if info else {"name": name}
        logger.debug("registered holiday rule %r", name)
