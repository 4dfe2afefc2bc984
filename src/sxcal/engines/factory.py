"""
sxcal.engines.factory
---------------------
Turns frozen engine specifications into live engine objects.
"""

from __future__ import annotations

from sxcal.core.engine import CalendarEngine
from sxcal.core.types import EngineSpec

from .arithmetic_month import ArithmeticMonthEngine, ArithmeticMonthParams
from .calendar import ChineseCalendarEngine
from .rab_byung import RabByungCalendar
from .specs import ChineseSpec, RabByungSpec
from .trad_day import TraditionalDayEngine, TraditionalDayParams


def build_rab_byung_engine(spec: RabByungSpec) -> RabByungCalendar:
    if not isinstance(spec.month_params, ArithmeticMonthParams):
        raise TypeError(f"Unknown month params type: {type(spec.month_params)}")
    if not isinstance(spec.day_params, TraditionalDayParams):
        raise TypeError(f"Unknown day params type: {type(spec.day_params)}")

    year_min, year_max = spec.years
    return RabByungCalendar(
        id=spec.id,
        month=ArithmeticMonthEngine(spec.month_params),
        day=TraditionalDayEngine(spec.day_params),
        year_min=year_min,
        year_max=year_max,
    )


def make_engine(spec: EngineSpec) -> CalendarEngine:
    if isinstance(spec.payload, ChineseSpec):
        return ChineseCalendarEngine(spec.payload)
    if isinstance(spec.payload, RabByungSpec):
        return build_rab_byung_engine(spec.payload)
    raise TypeError(f"Unknown engine payload for kind '{spec.kind}': {type(spec.payload)}")
