"""
sxcal.engines.sixty_cycle
-------------------------
Stem-branch (ganzhi) cycle and the four pillars of an instant.

  day    (JDN - 11) mod 60
  hour   branch (h+1)//2 mod 12, stem from the day stem ("five rats")
  year   (Y - 4) mod 60, turning over at the start-of-spring term
  month  branch from the latest jie, stem from the year stem ("five tigers")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sxcal.core.time import CivilDateTime

from .interfaces import EightCharProvider

if TYPE_CHECKING:
    from .solar_terms import SolarTermCalculator

STEMS = "甲乙丙丁戊己庚辛壬癸"
BRANCHES = "子丑寅卯辰巳午未申酉戌亥"

DAY_EPOCH_JDN = 11

START_OF_SPRING = 3  # 立春, index in the solar-term year
TIGER_BRANCH = 2     # 寅


@dataclass(frozen=True)
class SixtyCycle:
    index: int

    def __post_init__(self) -> None:
        if not (0 <= self.index < 60):
            raise ValueError(f"sixty-cycle index must be in 0..59: {self.index}")

    @classmethod
    def of(cls, n: int) -> "SixtyCycle":
        return cls(n % 60)

    @classmethod
    def from_stem_branch(cls, stem: int, branch: int) -> "SixtyCycle":
        if not (0 <= stem < 10 and 0 <= branch < 12):
            raise ValueError(f"stem must be in 0..9 and branch in 0..11: ({stem}, {branch})")
        if (stem - branch) % 2:
            raise ValueError(f"stem {stem} and branch {branch} never pair (parity differs)")
        return cls((6 * stem - 5 * branch) % 60)

    @classmethod
    def from_name(cls, name: str) -> "SixtyCycle":
        if len(name) != 2 or name[0] not in STEMS or name[1] not in BRANCHES:
            raise ValueError(f"not a stem-branch name: {name!r}")
        return cls.from_stem_branch(STEMS.index(name[0]), BRANCHES.index(name[1]))

    @property
    def stem(self) -> int:
        return self.index % 10

    @property
    def branch(self) -> int:
        return self.index % 12

    @property
    def name(self) -> str:
        return STEMS[self.stem] + BRANCHES[self.branch]

    def next(self, n: int = 1) -> "SixtyCycle":
        return SixtyCycle.of(self.index + n)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FourPillars:
    year: SixtyCycle
    month: SixtyCycle
    day: SixtyCycle
    hour: SixtyCycle

    def __str__(self) -> str:
        return f"{self.year} {self.month} {self.day} {self.hour}"


def day_cycle(jdn: int) -> SixtyCycle:
    return SixtyCycle.of(jdn - DAY_EPOCH_JDN)


def hour_branch(hour: int) -> int:
    return (hour + 1) // 2 % 12


def hour_cycle(day: SixtyCycle, hour: int) -> SixtyCycle:
    """
    Hour pillar from the civil day's pillar. The 子 hour starting at 23:00
    already belongs to the next day, so its stem follows the next day stem.
    """
    if hour >= 23:
        day = day.next(1)
    b = hour_branch(hour)
    return SixtyCycle.from_stem_branch((day.stem % 5 * 2 + b) % 10, b)


def year_cycle(terms: "SolarTermCalculator", c: CivilDateTime) -> SixtyCycle:
    y = SixtyCycle.of(c.year - 4)
    if c.jd < terms.term(c.year, START_OF_SPRING).jd:
        y = y.next(-1)
    return y


def month_branch_from_jie(index: int) -> int:
    """Branch of the month opened by jie `index` (odd, 1..23)."""
    return ((index - 3) // 2 + TIGER_BRANCH) % 12


def month_stem(year_stem: int, branch: int) -> int:
    return (year_stem * 2 + 2 + (branch - TIGER_BRANCH) % 12) % 10


def month_cycle(terms: "SolarTermCalculator", c: CivilDateTime) -> SixtyCycle:
    jd = c.jd
    jie = terms.term(c.year - 1, 23)
    for i in range(1, 24, 2):
        t = terms.term(c.year, i)
        if t.jd > jd:
            break
        jie = t
    branch = month_branch_from_jie(jie.index)
    stem = month_stem(year_cycle(terms, c).stem, branch)
    return SixtyCycle.from_stem_branch(stem, branch)


class DefaultEightCharProvider(EightCharProvider):
    """The day pillar advances at 23:00 together with the hour."""

    name = "default"

    def day_pillar(self, c: CivilDateTime) -> SixtyCycle:
        d = day_cycle(c.jdn)
        return d.next(1) if c.hour >= 23 else d

    def four_pillars(self, terms: "SolarTermCalculator", c: CivilDateTime) -> FourPillars:
        return FourPillars(
            year=year_cycle(terms, c),
            month=month_cycle(terms, c),
            day=self.day_pillar(c),
            hour=hour_cycle(day_cycle(c.jdn), c.hour),
        )


class LunarSect2EightCharProvider(DefaultEightCharProvider):
    """The day pillar stays on the civil day until midnight; only the hour stem moves at 23:00."""

    name = "sect2"

    def day_pillar(self, c: CivilDateTime) -> SixtyCycle:
        return day_cycle(c.jdn)


PROVIDERS = {
    DefaultEightCharProvider.name: DefaultEightCharProvider,
    LunarSect2EightCharProvider.name: LunarSect2EightCharProvider,
}


def get_provider(name: str) -> EightCharProvider:
    if name not in PROVIDERS:
        raise KeyError(f"Unknown eight-char provider '{name}'. Available: {sorted(PROVIDERS)}")
    return PROVIDERS[name]()
