"""
sxcal.engines.interfaces
------------------------
Boundaries between the pluggable pieces:

  * EightCharProvider: how an instant maps to its four pillars
    (conventions differ on when the day pillar turns over);
  * MonthEngineProtocol / DayEngineProtocol: the arithmetic month labelling
    and the tithi-to-civil-day kinematics of the Tibetan calendar.

Civil time is Beijing time for the Chinese engines and local civil days for
the Tibetan ones.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, List, Protocol, Tuple

if TYPE_CHECKING:
    from sxcal.core.time import CivilDateTime
    from .sixty_cycle import FourPillars, SixtyCycle
    from .solar_terms import SolarTermCalculator


class EightCharProvider(Protocol):
    """Strategy deriving the four pillars of a civil instant."""

    name: str

    def day_pillar(self, c: "CivilDateTime") -> "SixtyCycle":
        """Day pillar used in the chart (may differ from the civil day's)."""
        ...

    def four_pillars(self, terms: "SolarTermCalculator", c: "CivilDateTime") -> "FourPillars":
        ...


class MonthEngineProtocol(Protocol):
    """
    Discrete arithmetic: maps lunation indices (n) to labels
    (Year, Month, leap state) and back.
    """

    def get_lunations(self, year: int, month: int) -> List[int]:
        """
        [n]        regular month
        [n-1, n]   doubled month (the first instance is the leap one)
        """
        ...

    def first_lunation(self, year: int) -> int:
        ...

    def label_from_lunation(self, n: int) -> Tuple[int, int, int]:
        """(Year, Month, leap_state) with leap_state 0 regular, 1 first of two, 2 second of two."""
        ...


class DayEngineProtocol(Protocol):
    """Tithi kinematics: true_date(d, n) is the JD at which tithi d of lunation n ends."""

    def true_date(self, d: int, n: int) -> Fraction:
        ...

    def end_jd(self, d: int, n: int) -> int:
        ...
