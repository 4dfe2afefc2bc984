from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from .time import CivilDateTime

class CalendarEngine(Protocol):
    """What the registry hands out: one calendar system with fixed parameters."""

    def info(self) -> Dict[str, Any]: ...
    def day_info(self, c: CivilDateTime, *, debug: bool = False) -> Any: ...
    def to_gregorian(self, label: Any, *, policy: str = "all") -> List[CivilDateTime]: ...

@dataclass
class EngineRegistry:
    engines: Dict[str, CalendarEngine] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.engines

    def get(self, name: str) -> CalendarEngine:
        try:
            return self.engines[name]
        except KeyError:
            raise KeyError(f"Unknown engine '{name}'. Available: {self.names()}") from None

    def names(self, family: Optional[str] = None) -> List[str]:
        """Sorted engine names, optionally restricted to one family ('chinese', 'tibetan')."""
        if family is None:
            return sorted(self.engines)
        return sorted(n for n, e in self.engines.items() if e.info().get("family") == family)

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if name in self.engines and not overwrite:
            raise KeyError(f"Engine '{name}' already registered; pass overwrite=True to replace it.")
        self.engines[name] = engine
