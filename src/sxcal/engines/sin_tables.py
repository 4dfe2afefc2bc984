from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple


@dataclass(frozen=True)
class OddPeriodicTable:
    """
    Odd periodic lookup table with sine-like symmetries, linearly
    interpolated between integer arguments.

    The table is given by its quarter-wave samples quarter[i] = f(i) for
    i = 0..N/4, N being the period in grid units (28 for the Moon's anomaly,
    12 for the Sun's).
    """
    N: int
    quarter: Tuple[int, ...]

    def __post_init__(self) -> None:
        if self.N <= 0 or self.N % 4 != 0:
            raise ValueError("N must be positive and divisible by 4")
        if len(self.quarter) != self.N // 4 + 1:
            raise ValueError("quarter must have length N/4 + 1")

    def eval_u(self, u: Fraction) -> Fraction:
        """Value at grid argument u, in table units."""
        n = Fraction(self.N)
        u = u - n * math.floor(u / n)

        # f(N - x) = -f(x)
        sign = 1
        if u > n / 2:
            sign = -1
            u = n - u
        # f(N/2 - x) = f(x)
        if u > n / 4:
            u = n / 2 - u

        i = math.floor(u)
        if i >= self.N // 4:
            return Fraction(sign * self.quarter[-1])
        v0 = self.quarter[i]
        v1 = self.quarter[i + 1]
        return sign * (v0 + (u - i) * (v1 - v0))

    def eval_turn(self, x: Fraction) -> Fraction:
        """Value at a phase x in turns."""
        return self.eval_u((x % 1) * self.N)
