"""
sxcal.engines.solar_terms
-------------------------
The 24 solar terms of a year.

Index 0 is the winter solstice (冬至) of December of the previous civil
year; even indices are the principal terms (zhongqi), odd ones the
sectional terms (jie). Every term is an independent solve at its own
longitude, never a fixed-day offset from its neighbour.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from sxcal.core.time import CivilDateTime, J2000, jdn

from .astro.solver import qi_accurate_near
from .corrections import DayRouter

log = logging.getLogger(__name__)

TERM_NAMES = (
    "冬至", "小寒", "大寒", "立春", "雨水", "惊蛰",
    "春分", "清明", "谷雨", "立夏", "小满", "芒种",
    "夏至", "小暑", "大暑", "立秋", "处暑", "白露",
    "秋分", "寒露", "霜降", "立冬", "小雪", "大雪",
)

TERM_STEP_DAYS = 15.2184
TROPICAL_YEAR = 365.2422


@dataclass(frozen=True)
class SolarTermInstant:
    """
    year: solar-term year (index 0 lies in December of year-1)
    index: 0..23
    cursory_jd: Beijing civil day of the term (days from J2000, noon based)
    jd: exact instant, absolute JD in Beijing time
    """
    year: int
    index: int
    cursory_jd: int
    jd: float

    @property
    def name(self) -> str:
        return TERM_NAMES[self.index]

    @property
    def is_jie(self) -> bool:
        return self.index % 2 == 1

    @property
    def is_qi(self) -> bool:
        return self.index % 2 == 0

    @property
    def day_jd(self) -> float:
        """Absolute JD (noon) of the civil day carrying the term."""
        return self.cursory_jd + J2000

    @property
    def civil_date(self) -> CivilDateTime:
        return CivilDateTime.from_jd(self.day_jd).day_start()

    @property
    def civil_datetime(self) -> CivilDateTime:
        return CivilDateTime.from_jd(self.jd)

    def __str__(self) -> str:
        return f"{self.name} {self.civil_datetime}"


def normalize_index(year: int, index: int) -> Tuple[int, int]:
    return year + index // 24, index % 24


class SolarTermCalculator:
    """Memoised solar terms per year; safe to share across threads."""

    def __init__(self, router: DayRouter):
        self.router = router
        self._cache: Dict[int, Tuple[SolarTermInstant, ...]] = {}
        self._lock = threading.Lock()

    def winter_solstice_anchor(self, year: int) -> float:
        """Approximate day (from J2000) of the winter solstice opening `year`."""
        jd = math.floor((year - 2000) * TROPICAL_YEAR + 180)
        w = math.floor((jd - 355 + 183) / TROPICAL_YEAR) * TROPICAL_YEAR + 355
        if self.router.calc_qi(w) > jd:
            w -= TROPICAL_YEAR
        return w

    def cursory_day(self, year: int, index: int) -> int:
        year, index = normalize_index(year, index)
        return self.router.calc_qi(self.winter_solstice_anchor(year) + TERM_STEP_DAYS * index)

    def terms(self, year: int) -> Tuple[SolarTermInstant, ...]:
        cached = self._cache.get(year)
        if cached is not None:
            return cached

        w = self.winter_solstice_anchor(year)
        out = []
        for i in range(24):
            day = self.router.calc_qi(w + TERM_STEP_DAYS * i)
            out.append(SolarTermInstant(year, i, day, qi_accurate_near(day) + J2000))
        result = tuple(out)
        with self._lock:
            cached = self._cache.setdefault(year, result)
        log.debug("solar terms for %d computed", year)
        return cached

    def term(self, year: int, index: int) -> SolarTermInstant:
        year, index = normalize_index(year, index)
        return self.terms(year)[index]

    def next_term(self, term: SolarTermInstant, n: int = 1) -> SolarTermInstant:
        return self.term(term.year, term.index + n)

    def term_on_or_before(self, jd: float, *, by_day: bool = False) -> SolarTermInstant:
        """
        The term in effect at absolute JD `jd` (Beijing time).

        by_day=False compares exact instants; by_day=True compares civil days,
        so a term is in effect for the whole of the day carrying it.
        """
        year = CivilDateTime.from_jd(jd).year
        candidates = self.terms(year) + (self.term(year + 1, 0),)
        key = (lambda t: t.cursory_jd + J2000 <= math.floor(jd + 0.5)) if by_day else (lambda t: t.jd <= jd)
        found: Optional[SolarTermInstant] = None
        for t in candidates:
            if not key(t):
                break
            found = t
        if found is None:
            found = self.term(year, -1)
        return found

    def term_of_day(self, year: int, month: int, day: int) -> Optional[SolarTermInstant]:
        """The term falling on a civil day, or None."""
        day_jd = jdn(year, month, day)
        t = self.term_on_or_before(day_jd, by_day=True)
        return t if t.cursory_jd + J2000 == day_jd else None
