"""
sxcal.engines.calendar
----------------------
The Chinese orchestrator. Binds the day router, the solar-term calculator,
the lunar-month calendar and an eight-char provider into one engine
instance; every cache lives on that instance.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from sxcal.core.errors import InvalidDateError
from sxcal.core.time import CivilDateTime
from sxcal.core.types import ChineseDayInfo, LunarDate

from .corrections import CorrectionTable, DayRouter, builtin_table, load_table
from .lunar import LunarCalendar, LunarDay, LunarMonth
from .sixty_cycle import FourPillars, day_cycle, get_provider
from .solar_terms import SolarTermCalculator, SolarTermInstant
from .specs import ChineseSpec

log = logging.getLogger(__name__)

_POLICIES = ("all", "occ", "first", "second", "raise")


def _table(kind: str, path: Optional[str], search: bool) -> Optional[CorrectionTable]:
    if path is None and not search:
        return None
    return load_table(kind, path)  # type: ignore[arg-type]


class ChineseCalendarEngine:
    def __init__(self, spec: ChineseSpec):
        self.spec = spec
        self.id = spec.id
        self.router = DayRouter(
            qi_table=_table("qi", spec.qi_table, spec.load_env_tables),
            shuo_table=_table("shuo", spec.shuo_table, spec.load_env_tables),
        )
        self.terms = SolarTermCalculator(self.router)
        self.lunar = LunarCalendar(self.router, self.terms)
        self.provider = get_provider(spec.provider)
        log.debug("engine %s ready (provider %s)", self.id.name, self.provider.name)

    # ---------------------------------------------------------
    # Engine protocol
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.name,
            "family": self.id.family,
            "version": self.id.version,
            "provider": self.provider.name,
            "qi_table": "bundled" if self.router.qi_table is builtin_table("qi") else "override",
            "shuo_table": "bundled" if self.router.shuo_table is builtin_table("shuo") else "override",
            **self.spec.meta,
        }

    def day_info(self, c: CivilDateTime, *, debug: bool = False) -> ChineseDayInfo:
        c = CivilDateTime.from_date(c)
        ld = self.lunar.lunar_day(c)
        month = self.lunar.month(ld.year, ld.month_with_leap)
        term = self.terms.term_of_day(c.year, c.month, c.day)

        dbg = None
        if debug:
            dbg = {
                "jd": c.jd,
                "month_first_jd": month.first_jd,
                "month_days": month.day_count,
                "leap_month": self.lunar.leap_month(ld.year),
                "era_qi": self.router.era(c.jd - 2451545.0, True),
                "era_shuo": self.router.era(c.jd - 2451545.0, False),
            }
        return ChineseDayInfo(
            civil_date=c,
            engine=self.id,
            lunar=LunarDate(ld.year, ld.month, ld.leap, ld.day),
            year_cycle=self.lunar.year_sixty_cycle(ld.year).name,
            month_cycle=month.sixty_cycle.name,
            day_cycle=day_cycle(c.jdn).name,
            pillars=str(self.four_pillars(c)),
            solar_term=term.name if term is not None else None,
            weekday=c.weekday,
            debug=dbg,
        )

    def to_gregorian(self, t: LunarDate, *, policy: str = "all") -> List[CivilDateTime]:
        """A Chinese lunar date names exactly one civil day; every policy returns it."""
        if policy not in _POLICIES:
            raise ValueError(f"Unknown policy '{policy}'. Available: {list(_POLICIES)}")
        month = -t.month if t.is_leap_month else t.month
        return [self.lunar.solar_from_lunar(t.year, month, t.day)]

    # ---------------------------------------------------------
    # Chinese calendar operations
    # ---------------------------------------------------------

    def solar_terms(self, year: int) -> Tuple[SolarTermInstant, ...]:
        return self.terms.terms(year)

    def solar_term_at(self, c: CivilDateTime) -> SolarTermInstant:
        return self.terms.term_on_or_before(CivilDateTime.from_date(c).jd)

    def lunar_months(self, year: int) -> Tuple[LunarMonth, ...]:
        return self.lunar.months(year)

    def leap_month(self, year: int) -> int:
        return self.lunar.leap_month(year)

    def four_pillars(self, c: CivilDateTime) -> FourPillars:
        return self.provider.four_pillars(self.terms, CivilDateTime.from_date(c))

    def lunar_day(self, c: CivilDateTime) -> LunarDay:
        return self.lunar.lunar_day(CivilDateTime.from_date(c))

    def solar_from_lunar(self, year: int, month: int, day: int) -> CivilDateTime:
        return self.lunar.solar_from_lunar(year, month, day)

    def new_year(self, year: int) -> CivilDateTime:
        return self.lunar.month(year, 1).first_day

    def lunar_date(self, text: str) -> LunarDate:
        """Parse 'YYYY-MM-DD', with 'L' before the month for a leap month."""
        try:
            y, m, d = text.split("-")
            leap = m.upper().startswith("L")
            return LunarDate(int(y), int(m[1:] if leap else m), leap, int(d))
        except ValueError:
            raise InvalidDateError(f"Bad lunar date '{text}', expected YYYY-MM-DD or YYYY-LMM-DD") from None
