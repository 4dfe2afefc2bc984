"""
sxcal.engines.trad_day
----------------------
Traditional day kinematics of the Tibetan calendar.

The end of tithi d (1..30) of lunation n is the affine mean date corrected
by the Moon's and the Sun's equations, both read from odd periodic tables:

    true_date(d, n) = m0 + m1*n + m2*d
                      + moon_tab(a0 + a1*n + a2*d) / 60
                      - sun_tab(r0 + r1*n + r2*d) / 60

A civil day carries the label of the last tithi ending in it. A day in
which no tithi ends repeats the previous label; a day in which two tithis
end drops the first of them. When tithi 30 of one lunation and tithi 1 of
the next end on the same day, that day opens the next month as day 1 and
the 30th is dropped from the month before.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from .interfaces import DayEngineProtocol
from .sin_tables import OddPeriodicTable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraditionalDayParams:
    # mean date (absolute JD): constant, per lunation, per tithi
    m0: Fraction
    m1: Fraction
    m2: Fraction

    # mean sun (turns)
    s0: Fraction
    s1: Fraction
    s2: Fraction

    # moon anomaly (turns)
    a0: Fraction
    a1: Fraction
    a2: Fraction

    # quarter-wave samples, table units
    moon_tab_quarter: Tuple[int, ...]
    sun_tab_quarter: Tuple[int, ...]

    # sun anomaly (turns); defaults to s - 1/4
    r0: Optional[Fraction] = None
    r1: Optional[Fraction] = None
    r2: Optional[Fraction] = None

    def __post_init__(self) -> None:
        if self.r0 is None:
            object.__setattr__(self, "r0", self.s0 - Fraction(1, 4))
        if self.r1 is None:
            object.__setattr__(self, "r1", self.s1)
        if self.r2 is None:
            object.__setattr__(self, "r2", self.s2)


@dataclass(frozen=True)
class CivilDay:
    jd: int                            # JDN of the civil day
    label: int                         # tithi number 1..30
    repeated: bool                     # second civil day with this label
    skipped: Tuple[int, ...] = ()      # labels dropped on this day


class TraditionalDayEngine(DayEngineProtocol):
    def __init__(self, p: TraditionalDayParams):
        self.p = p
        self.moon_table = OddPeriodicTable(4 * (len(p.moon_tab_quarter) - 1), tuple(p.moon_tab_quarter))
        self.sun_table = OddPeriodicTable(4 * (len(p.sun_tab_quarter) - 1), tuple(p.sun_tab_quarter))

    def mean_date(self, d: int, n: int) -> Fraction:
        p = self.p
        return p.m0 + p.m1 * n + p.m2 * d

    def moon_equation(self, d: int, n: int) -> Fraction:
        p = self.p
        return self.moon_table.eval_turn(p.a0 + p.a1 * n + p.a2 * d) / 60

    def sun_equation(self, d: int, n: int) -> Fraction:
        p = self.p
        return self.sun_table.eval_turn(p.r0 + p.r1 * n + p.r2 * d) / 60

    def true_date(self, d: int, n: int) -> Fraction:
        return self.mean_date(d, n) + self.moon_equation(d, n) - self.sun_equation(d, n)

    def end_jd(self, d: int, n: int) -> int:
        """JDN of the civil day on which tithi d of lunation n ends."""
        return math.floor(self.true_date(d, n))

    def opens_on_last_day(self, n: int) -> bool:
        """Whether tithi 1 of lunation n ends on the same day as tithi 30 of n - 1."""
        return self.end_jd(1, n) == self.end_jd(30, n - 1)

    def month_bounds_jd(self, n: int) -> Tuple[int, int]:
        """First and last civil day (JDN) of lunation n."""
        first = self.end_jd(30, n - 1) + 1
        if self.opens_on_last_day(n):
            first -= 1
        last = self.end_jd(30, n)
        if self.opens_on_last_day(n + 1):
            last -= 1
        return first, last

    def civil_month(self, n: int) -> List[CivilDay]:
        hits: Dict[int, List[int]] = {}
        for d in range(1, 31):
            hits.setdefault(self.end_jd(d, n), []).append(d)

        first, last = self.month_bounds_jd(n)
        out: List[CivilDay] = []
        prev: Optional[int] = None
        for jd in range(first, last + 1):
            ended = hits.get(jd, [])
            # a day with no tithi end repeats the running label (1 at the month start)
            label = ended[-1] if ended else (prev or 1)
            out.append(CivilDay(jd, label, label == prev, tuple(ended[:-1])))
            prev = label

        # tithis ending on a day handed to the next month are dropped on the last day
        late = tuple(d for jd in sorted(hits) if jd > last for d in hits[jd])
        if late:
            cd = out[-1]
            out[-1] = replace(cd, skipped=cd.skipped + late)
        return out

    def find_lunation(self, jd: int) -> int:
        """Lunation n whose civil month contains the day `jd`."""
        n = math.floor((jd - self.p.m0) / self.p.m1)
        while jd < self.month_bounds_jd(n)[0]:
            n -= 1
        while jd > self.month_bounds_jd(n)[1]:
            n += 1
        log.debug("JDN %d lies in lunation %d", jd, n)
        return n
