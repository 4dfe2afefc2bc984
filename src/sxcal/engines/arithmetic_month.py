"""
sxcal.engines.arithmetic_month
------------------------------
Arithmetic month labelling of the Tibetan calendar: maps lunation indices
(n, counted from the epoch month) to labels (Year, Month, leap state).

With P < Q (65 < 67 for the Phugpa system) every P labelled months span Q
lunations; the ell = Q - P surplus lunations double a label, and the
first of the two is the leap month.

Leap state: 0 for a plain month, 1 for the first lunation of a doubled
label (the leap month), 2 for the second.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .interfaces import MonthEngineProtocol


def amod12(x: int) -> int:
    """x reduced into 1..12."""
    return (x - 1) % 12 + 1


@dataclass(frozen=True)
class ArithmeticMonthParams:
    Y0: int         # epoch year
    M0: int         # epoch month, lunation n = 0
    P: int          # labelled months per cycle
    Q: int          # lunations per cycle
    beta_star: int  # intercalation index of the epoch month
    tau: int        # smallest index of a doubled label

    def __post_init__(self) -> None:
        if not (0 < self.P < self.Q):
            raise ValueError(f"need 0 < P < Q, got P={self.P}, Q={self.Q}")
        if self.M0 not in range(1, 13):
            raise ValueError(f"epoch month out of 1..12: {self.M0}")
        if self.tau not in range(self.P):
            raise ValueError(f"tau out of 0..{self.P - 1}: {self.tau}")

    @property
    def ell(self) -> int:
        """Doubled labels per cycle."""
        return self.Q - self.P

    @property
    def beta_int(self) -> int:
        """Epoch offset with the doubling block moved to 0..ell-1."""
        return self.beta_star + (-self.tau) % self.P


class ArithmeticMonthEngine(MonthEngineProtocol):
    def __init__(self, params: ArithmeticMonthParams):
        self.p = params

    def mstar(self, Y: int, M: int) -> int:
        """Labelled months since the epoch label."""
        return 12 * (Y - self.p.Y0) + M - self.p.M0

    def intercalation_index(self, Y: int, M: int) -> int:
        """Almanac leap counter of a label, in 0..P-1."""
        p = self.p
        return (p.ell * self.mstar(Y, M) + p.beta_star) % p.P

    def is_trigger_label(self, Y: int, M: int) -> bool:
        """Whether the label (Y, M) spans two lunations."""
        p = self.p
        return (p.ell * self.mstar(Y, M) + p.beta_int) % p.P < p.ell

    def n_plus(self, Y: int, M: int) -> int:
        """Last lunation carrying the label."""
        p = self.p
        return (p.Q * self.mstar(Y, M) + p.beta_int) // p.P

    def get_lunations(self, year: int, month: int) -> List[int]:
        last = self.n_plus(year, month)
        return [last - 1, last] if self.is_trigger_label(year, month) else [last]

    def first_lunation(self, year: int) -> int:
        return self.get_lunations(year, 1)[0]

    def mstar_from_lunation(self, n: int) -> int:
        """Label count of lunation n; inverts n_plus."""
        p = self.p
        return (p.P * n - p.beta_int - 1) // p.Q + 1

    def _cumul(self, n: int) -> int:
        # 12*(Y - Y0) + M of lunation n
        return self.mstar_from_lunation(n) + self.p.M0

    def label_from_lunation(self, n: int) -> Tuple[int, int, int]:
        c = self._cumul(n)
        month = amod12(c)
        year = self.p.Y0 + (c - month) // 12

        leap_state = 0
        if self._cumul(n + 1) == c:
            leap_state = 1
        elif self._cumul(n - 1) == c:
            leap_state = 2
        return year, month, leap_state
