"""
sxcal.engines.lunar
-------------------
Lunar months of a Chinese lunar year, reconstructed from new moons and
principal solar terms.

Leap placement (无中置闰): within the span between two winter solstices
(a "sui"), if 13 new moons start before the closing solstice, the first
month that holds no principal term is the leap month. Months are indexed
from the one containing the opening solstice (index 0 = month 11 of the
previous year), so a leap at index L >= 3 is leap month L-2 of this year,
and L in {1, 2} is leap month 11 or 12 of the previous year.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Tuple

from sxcal.core.errors import InvalidDateError
from sxcal.core.time import CivilDateTime, J2000

from .astro.solver import shuo_accurate_near
from .corrections import DayRouter
from .sixty_cycle import SixtyCycle, day_cycle
from .solar_terms import TERM_STEP_DAYS, SolarTermCalculator

log = logging.getLogger(__name__)

SYNODIC_MONTH = 29.5306

# k = 0 mean new moon (2000-01-06) and mean synodic month
_K0_JD = 2451550.09766
_K_PERIOD = 29.530588861

# lunar years whose first month is not shifted by a preceding leap 11/12
_OFFSET_EXCEPTIONS = (239, 240)


@dataclass(frozen=True)
class NewMoonInstant:
    """
    index: lunation number (k = 0 is the new moon of 2000-01-06)
    cursory_jd: Beijing civil day (days from J2000, noon based)
    jd: exact instant, absolute JD in Beijing time
    """
    index: int
    cursory_jd: int
    jd: float


@dataclass(frozen=True)
class LunarMonth:
    year: int
    month: int
    leap: bool
    day_count: int
    first_jd: float  # absolute JD (noon) of day 1
    index_in_year: int

    @property
    def month_with_leap(self) -> int:
        return -self.month if self.leap else self.month

    @property
    def last_jd(self) -> float:
        return self.first_jd + self.day_count - 1

    @property
    def first_day(self) -> CivilDateTime:
        return CivilDateTime.from_jd(self.first_jd).day_start()

    @property
    def sixty_cycle(self) -> SixtyCycle:
        year_stem = SixtyCycle.of(self.year - 4).stem
        return SixtyCycle.from_stem_branch((year_stem * 2 + self.month + 1) % 10, (self.month + 1) % 12)

    def contains(self, day_jd: float) -> bool:
        return self.first_jd <= day_jd < self.first_jd + self.day_count

    def new_moon(self) -> NewMoonInstant:
        jd = shuo_accurate_near(self.first_jd - J2000) + J2000
        return NewMoonInstant(round((jd - _K0_JD) / _K_PERIOD), int(self.first_jd - J2000), jd)

    def __str__(self) -> str:
        leap = "L" if self.leap else ""
        return f"{self.year}-{leap}{self.month:02d} ({self.day_count} days from {self.first_day.date_str()})"


@dataclass(frozen=True)
class LunarDay:
    year: int
    month: int
    leap: bool
    day: int
    solar_jd: float  # absolute JD (noon) of the civil day

    @property
    def month_with_leap(self) -> int:
        return -self.month if self.leap else self.month

    @property
    def civil(self) -> CivilDateTime:
        return CivilDateTime.from_jd(self.solar_jd).day_start()

    @property
    def sixty_cycle(self) -> SixtyCycle:
        return day_cycle(int(self.solar_jd))

    def __str__(self) -> str:
        leap = "L" if self.leap else ""
        return f"{self.year}-{leap}{self.month:02d}-{self.day:02d}"


class LunarCalendar:
    """
    Month segmentation of lunar years. Results are memoised on the instance
    (sui leap index, leap month and month list per year).
    """

    def __init__(self, router: DayRouter, terms: SolarTermCalculator):
        self.router = router
        self.terms = terms
        self._sui: Dict[int, int] = {}
        self._leap: Dict[int, int] = {}
        self._months: Dict[int, Tuple[LunarMonth, ...]] = {}
        self._lock = threading.Lock()

    # ---------------------------------------------------------
    # Leap months
    # ---------------------------------------------------------

    def _first_new_moon(self, solstice_day: int) -> float:
        """Approximate day of the new moon on or before the solstice day."""
        w = self.router.calc_shuo(solstice_day)
        if w > solstice_day:
            w -= 29.53
        return w

    def sui_leap_index(self, year: int) -> int:
        """
        Index of the leap month in the sui opening at the winter solstice of
        December year-1 (0 when that sui has only 12 months).
        """
        if year in self._sui:
            return self._sui[year]

        w_qi = self.terms.winter_solstice_anchor(year)
        qi = [self.router.calc_qi(w_qi + TERM_STEP_DAYS * i) for i in range(25)]
        w = self._first_new_moon(qi[0])
        hs = [self.router.calc_shuo(w + SYNODIC_MONTH * i) for i in range(16)]

        leap = 0
        if hs[13] <= qi[24]:
            i = 1
            while i < 13 and hs[i + 1] > qi[2 * i]:
                i += 1
            leap = i

        with self._lock:
            self._sui[year] = leap
        return leap

    def leap_month(self, year: int) -> int:
        """Leap month number of lunar `year` (0 if none)."""
        if year in self._leap:
            return self._leap[year]

        leap = 0
        idx = self.sui_leap_index(year)
        if idx >= 3:
            leap = idx - 2
        else:
            nxt = self.sui_leap_index(year + 1)
            if nxt in (1, 2):
                leap = nxt + 10

        with self._lock:
            self._leap[year] = leap
        return leap

    def month_offset(self, year: int) -> int:
        """New moons between the solstice new moon and month 1."""
        if 8 < year < 24:
            return 1
        if self.leap_month(year - 1) > 10 and year not in _OFFSET_EXCEPTIONS:
            return 3
        return 2

    # ---------------------------------------------------------
    # Months
    # ---------------------------------------------------------

    def months(self, year: int) -> Tuple[LunarMonth, ...]:
        cached = self._months.get(year)
        if cached is not None:
            return cached

        leap = self.leap_month(year)
        w = self._first_new_moon(self.terms.cursory_day(year, 0))
        offset = self.month_offset(year)
        count = 13 if leap else 12
        starts = [self.router.calc_shuo(w + SYNODIC_MONTH * (offset + k)) for k in range(count + 1)]

        out: List[LunarMonth] = []
        for k in range(count):
            if leap and k == leap:
                number, is_leap = leap, True
            elif leap and k > leap:
                number, is_leap = k, False
            else:
                number, is_leap = k + 1, False
            out.append(
                LunarMonth(
                    year=year,
                    month=number,
                    leap=is_leap,
                    day_count=starts[k + 1] - starts[k],
                    first_jd=starts[k] + J2000,
                    index_in_year=k,
                )
            )
        result = tuple(out)
        with self._lock:
            cached = self._months.setdefault(year, result)
        log.debug("lunar year %d: %d months, leap=%d, offset=%d", year, count, leap, offset)
        return cached

    def month(self, year: int, month: int) -> LunarMonth:
        """month < 0 selects the leap month."""
        if month == 0 or not (-12 <= month <= 12):
            raise InvalidDateError(f"lunar month must be in 1..12 (negative for leap): {month}")
        if month < 0 and -month != self.leap_month(year):
            raise InvalidDateError(f"lunar year {year} has no leap month {-month}")
        for m in self.months(year):
            if m.month_with_leap == month:
                return m
        raise InvalidDateError(f"lunar month {month} not found in year {year}")

    def next_month(self, month: LunarMonth, n: int = 1) -> LunarMonth:
        year = month.year
        idx = month.index_in_year + n
        while idx < 0:
            year -= 1
            idx += len(self.months(year))
        while idx >= len(self.months(year)):
            idx -= len(self.months(year))
            year += 1
        return self.months(year)[idx]

    def new_moons(self, year: int) -> Tuple[NewMoonInstant, ...]:
        """New moons opening each month of `year`, plus the one closing it."""
        months = self.months(year)
        closing = self.next_month(months[-1], 1)
        return tuple(m.new_moon() for m in months + (closing,))

    def year_sixty_cycle(self, year: int) -> SixtyCycle:
        return SixtyCycle.of(year - 4)

    # ---------------------------------------------------------
    # Days
    # ---------------------------------------------------------

    def month_containing(self, day_jd: float) -> LunarMonth:
        """Lunar month holding the civil day with noon JD `day_jd`."""
        year = CivilDateTime.from_jd(day_jd).year
        for y in (year, year - 1):
            for m in self.months(y):
                if m.contains(day_jd):
                    return m
        raise InvalidDateError(f"no lunar month contains JD {day_jd}")

    def lunar_day(self, c: CivilDateTime) -> LunarDay:
        day_jd = float(c.jdn)
        m = self.month_containing(day_jd)
        return LunarDay(m.year, m.month, m.leap, int(day_jd - m.first_jd) + 1, day_jd)

    def solar_from_lunar(self, year: int, month: int, day: int) -> CivilDateTime:
        m = self.month(year, month)
        if not (1 <= day <= m.day_count):
            raise InvalidDateError(f"lunar month {year}/{month} has {m.day_count} days: {day}")
        return CivilDateTime.from_jd(m.first_jd + day - 1).day_start()

    def lunar_date(self, year: int, month: int, day: int) -> LunarDay:
        c = self.solar_from_lunar(year, month, day)
        return LunarDay(year, abs(month), month < 0, day, float(c.jdn))
