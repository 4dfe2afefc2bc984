from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional, Tuple

from .time import CivilDateTime

@dataclass(frozen=True)
class EngineId:
    family: Literal["chinese", "tibetan"]
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    """Chinese lunar date label."""
    year: int
    month: int
    is_leap_month: bool
    day: int

    def __str__(self) -> str:
        leap = "L" if self.is_leap_month else ""
        return f"{self.year}-{leap}{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class RabByungDate:
    """Tibetan date label; occ distinguishes the two civil days of a repeated lunar day."""
    year: int
    month: int
    is_leap_month: bool
    day: int
    occ: int = 1  # 1 or 2

    def __str__(self) -> str:
        leap = "L" if self.is_leap_month else ""
        occ = "" if self.occ == 1 else f" (occ {self.occ})"
        return f"{self.year}-{leap}{self.month:02d}-{self.day:02d}{occ}"

@dataclass(frozen=True)
class ChineseDayInfo:
    civil_date: CivilDateTime
    engine: EngineId
    lunar: LunarDate
    year_cycle: str      # lunar-year stem-branch
    month_cycle: str     # lunar-month stem-branch
    day_cycle: str
    pillars: str         # four pillars of the queried instant
    solar_term: Optional[str] = None  # term falling on this day
    weekday: int = 0
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class RabByungDayInfo:
    civil_date: CivilDateTime
    engine: EngineId
    tibetan: RabByungDate
    status: Literal["normal", "duplicated"]
    skipped_days: Tuple[int, ...] = ()  # lunar days dropped on this civil day
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["chinese", "rab_byung"]
    id: EngineId
    payload: Any  # ChineseSpec | RabByungSpec

    @staticmethod
    def like(name: str) -> "EngineSpec":
        from sxcal.engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs: Any) -> "EngineSpec":
        """Copy with payload fields replaced."""
        return replace(self, payload=replace(self.payload, **kwargs))
