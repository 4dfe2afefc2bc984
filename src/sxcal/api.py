from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.time import CivilDateTime
from .core.types import ChineseDayInfo, EngineSpec, LunarDate, RabByungDate, RabByungDayInfo
from .engines.calendar import ChineseCalendarEngine
from .engines.factory import make_engine as _make_engine
from .engines.lunar import LunarDay, LunarMonth
from .engines.rab_byung import RabByungCalendar, RabByungMonth, RabByungYear
from .engines.sixty_cycle import FourPillars
from .engines.solar_terms import SolarTermInstant

DateLike = Union[date, datetime, CivilDateTime]

_registry: Optional[EngineRegistry] = None


def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry


def _chinese(engine: str) -> ChineseCalendarEngine:
    eng = _reg().get(engine)
    if not isinstance(eng, ChineseCalendarEngine):
        raise TypeError(f"Engine '{engine}' is not a Chinese calendar engine")
    return eng


def _tibetan(engine: str) -> RabByungCalendar:
    eng = _reg().get(engine)
    if not isinstance(eng, RabByungCalendar):
        raise TypeError(f"Engine '{engine}' is not a Rab-Byung calendar engine")
    return eng


# ============================================================
# Registry
# ============================================================

def list_engines(family: Optional[str] = None) -> List[str]:
    return _reg().names(family)


def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()


def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)


def get_calendar(name: str) -> CalendarEngine:
    """A fresh engine (own caches) built from a named spec."""
    return _make_engine(EngineSpec.like(name))


def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)


# ============================================================
# Day lookups
# ============================================================

def day_info(d: DateLike, *, engine: str = "chinese", debug: bool = False) -> Union[ChineseDayInfo, RabByungDayInfo]:
    return _reg().get(engine).day_info(CivilDateTime.from_date(d), debug=debug)


def to_gregorian(
    t: Union[LunarDate, RabByungDate],
    *,
    engine: Optional[str] = None,
    policy: str = "all",
) -> List[CivilDateTime]:
    if engine is None:
        engine = "phugpa" if isinstance(t, RabByungDate) else "chinese"
    return _reg().get(engine).to_gregorian(t, policy=policy)


# ============================================================
# Chinese calendar
# ============================================================

def solar_terms(year: int, *, engine: str = "chinese") -> Tuple[SolarTermInstant, ...]:
    return _chinese(engine).solar_terms(year)


def solar_term_at(d: DateLike, *, engine: str = "chinese") -> SolarTermInstant:
    return _chinese(engine).solar_term_at(CivilDateTime.from_date(d))


def lunar_months(year: int, *, engine: str = "chinese") -> Tuple[LunarMonth, ...]:
    return _chinese(engine).lunar_months(year)


def leap_month(year: int, *, engine: str = "chinese") -> int:
    return _chinese(engine).leap_month(year)


def lunar_day(d: DateLike, *, engine: str = "chinese") -> LunarDay:
    return _chinese(engine).lunar_day(CivilDateTime.from_date(d))


def solar_from_lunar(year: int, month: int, day: int, *, engine: str = "chinese") -> CivilDateTime:
    """month < 0 selects the leap month."""
    return _chinese(engine).solar_from_lunar(year, month, day)


def four_pillars(d: DateLike, *, engine: str = "chinese") -> FourPillars:
    return _chinese(engine).four_pillars(CivilDateTime.from_date(d))


def new_year_day(year: int, *, engine: str = "chinese") -> CivilDateTime:
    eng = _reg().get(engine)
    if not isinstance(eng, (ChineseCalendarEngine, RabByungCalendar)):
        raise TypeError(f"Engine '{engine}' has no new-year lookup")
    return eng.new_year(year)


# ============================================================
# Rab-Byung
# ============================================================

def rab_byung_year(year: int, *, engine: str = "phugpa") -> RabByungYear:
    return _tibetan(engine).year(year)


def rab_byung_months(year: int, *, engine: str = "phugpa") -> Tuple[RabByungMonth, ...]:
    return _tibetan(engine).months(year)
