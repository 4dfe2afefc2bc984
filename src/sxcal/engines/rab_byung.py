"""
sxcal.engines.rab_byung
-----------------------
Tibetan Rab-Byung calendar: sixty-year cycles counted from 1027, with
months from the arithmetic month engine and days from the traditional
day engine.

Only years inside the engine's supported range (1950..2050 for Phugpa)
are accepted; the tables are not trusted outside it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from sxcal.core.errors import InvalidDateError, OutOfRangeError
from sxcal.core.time import CivilDateTime
from sxcal.core.types import EngineId, RabByungDate, RabByungDayInfo

from .arithmetic_month import ArithmeticMonthEngine
from .sixty_cycle import SixtyCycle
from .trad_day import CivilDay, TraditionalDayEngine

log = logging.getLogger(__name__)

RAB_BYUNG_EPOCH = 1027  # first year of the first cycle (fire-female-rabbit)

ELEMENTS = ("wood", "fire", "earth", "iron", "water")
ANIMALS = ("mouse", "ox", "tiger", "rabbit", "dragon", "snake",
           "horse", "sheep", "monkey", "bird", "dog", "pig")

POLICIES = ("all", "occ", "first", "second", "raise")


@dataclass(frozen=True)
class RabByungYear:
    year: int

    @property
    def rab_byung_index(self) -> int:
        """0-based cycle index."""
        return (self.year - RAB_BYUNG_EPOCH) // 60

    @property
    def cycle_number(self) -> int:
        return self.rab_byung_index + 1

    @property
    def ordinal(self) -> int:
        """Position of the year in its cycle, 1..60."""
        return (self.year - RAB_BYUNG_EPOCH) % 60 + 1

    @property
    def sixty_cycle(self) -> SixtyCycle:
        return SixtyCycle.of(self.year - 4)

    @property
    def element(self) -> str:
        return ELEMENTS[self.sixty_cycle.stem // 2]

    @property
    def gender(self) -> str:
        return "male" if self.sixty_cycle.stem % 2 == 0 else "female"

    @property
    def animal(self) -> str:
        return ANIMALS[self.sixty_cycle.branch]

    @property
    def name(self) -> str:
        return f"{self.element}-{self.gender}-{self.animal}"

    def __str__(self) -> str:
        return f"{self.year} (cycle {self.cycle_number}, year {self.ordinal}: {self.name})"


@dataclass(frozen=True)
class RabByungMonth:
    year: int
    month: int
    leap: bool
    lunation: int
    first_jd: int  # JDN of the first civil day
    last_jd: int

    @property
    def day_count(self) -> int:
        return self.last_jd - self.first_jd + 1

    @property
    def first_day(self) -> CivilDateTime:
        return CivilDateTime.from_jd(self.first_jd).day_start()

    def __str__(self) -> str:
        leap = "L" if self.leap else ""
        return f"{self.year}-{leap}{self.month:02d} ({self.day_count} days from {self.first_day.date_str()})"


class RabByungCalendar:
    """
    Binds the arithmetic month engine and the traditional day engine.

    The first of a doubled month label is the leap month. Civil months are
    memoised per lunation.
    """

    def __init__(
        self,
        id: EngineId,
        month: ArithmeticMonthEngine,
        day: TraditionalDayEngine,
        *,
        year_min: int = 1950,
        year_max: int = 2050,
    ):
        self.id = id
        self.month = month
        self.day = day
        self.year_min = year_min
        self.year_max = year_max
        self._civil: Dict[int, Tuple[CivilDay, ...]] = {}
        self._lock = threading.Lock()

    def check_year(self, year: int) -> None:
        if not (self.year_min <= year <= self.year_max):
            raise OutOfRangeError(
                f"Rab-Byung year {year} outside the supported range {self.year_min}..{self.year_max}"
            )

    def year(self, year: int) -> RabByungYear:
        self.check_year(year)
        return RabByungYear(year)

    # ---------------------------------------------------------
    # Months
    # ---------------------------------------------------------

    def lunation(self, year: int, month: int, is_leap: bool = False) -> int:
        self.check_year(year)
        if not (1 <= month <= 12):
            raise InvalidDateError(f"Tibetan month must be in 1..12: {month}")
        ns = self.month.get_lunations(year, month)
        if len(ns) == 1:
            if is_leap:
                raise InvalidDateError(f"Tibetan month {year}/{month} is not doubled; no leap month")
            return ns[0]
        return ns[0] if is_leap else ns[1]

    def civil_month(self, n: int) -> Tuple[CivilDay, ...]:
        cached = self._civil.get(n)
        if cached is not None:
            return cached
        days = tuple(self.day.civil_month(n))
        with self._lock:
            cached = self._civil.setdefault(n, days)
        return cached

    def months(self, year: int) -> Tuple[RabByungMonth, ...]:
        self.check_year(year)
        out: List[RabByungMonth] = []
        for m in range(1, 13):
            ns = self.month.get_lunations(year, m)
            for i, n in enumerate(ns):
                first, last = self.day.month_bounds_jd(n)
                out.append(RabByungMonth(year, m, len(ns) == 2 and i == 0, n, first, last))
        return tuple(out)

    def new_year(self, year: int) -> CivilDateTime:
        """Losar: first civil day of the year's first lunation."""
        self.check_year(year)
        first, _ = self.day.month_bounds_jd(self.month.first_lunation(year))
        return CivilDateTime.from_jd(first).day_start()

    # ---------------------------------------------------------
    # Days
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        p = self.month.p
        return {
            "id": self.id.name,
            "family": self.id.family,
            "version": self.id.version,
            "epoch": (p.Y0, p.M0),
            "P": p.P,
            "Q": p.Q,
            "years": (self.year_min, self.year_max),
        }

    def day_info(self, c: CivilDateTime, *, debug: bool = False) -> RabByungDayInfo:
        c = CivilDateTime.from_date(c)
        jd = c.jdn
        n = self.day.find_lunation(jd)
        year, month, leap_state = self.month.label_from_lunation(n)
        self.check_year(year)

        days = self.civil_month(n)
        i = jd - days[0].jd
        cd = days[i]
        duplicated = cd.repeated or (i + 1 < len(days) and days[i + 1].repeated)

        label = RabByungDate(year, month, leap_state == 1, cd.label, 2 if cd.repeated else 1)
        dbg: Optional[Dict[str, Any]] = None
        if debug:
            dbg = {
                "lunation": n,
                "leap_state": leap_state,
                "jdn": jd,
                "true_date": float(self.day.true_date(cd.label, n)),
            }
        return RabByungDayInfo(
            civil_date=c,
            engine=self.id,
            tibetan=label,
            status="duplicated" if duplicated else "normal",
            skipped_days=cd.skipped,
            debug=dbg,
        )

    def to_gregorian(self, t: RabByungDate, *, policy: str = "all") -> List[CivilDateTime]:
        """
        Civil days carrying the Tibetan date `t`.

        policy:
          all     every civil day with the label (none if skipped, two if repeated)
          occ     the day matching t.occ
          first   the first of them
          second  the second of a repeated day, else the only one
          raise   exactly one day, InvalidDateError otherwise
        """
        if policy not in POLICIES:
            raise ValueError(f"Unknown policy '{policy}'. Available: {list(POLICIES)}")
        if not (1 <= t.day <= 30):
            raise InvalidDateError(f"Tibetan day must be in 1..30: {t.day}")

        n = self.lunation(t.year, t.month, t.is_leap_month)
        hits = [CivilDateTime.from_jd(cd.jd).day_start() for cd in self.civil_month(n) if cd.label == t.day]

        if policy == "all":
            return hits
        if policy == "raise":
            if len(hits) != 1:
                state = "skipped" if not hits else "repeated"
                raise InvalidDateError(f"Tibetan date {t} is {state}")
            return hits
        if not hits:
            return []
        if policy == "occ":
            return hits[t.occ - 1:t.occ]
        if policy == "first":
            return hits[:1]
        return hits[-1:]
