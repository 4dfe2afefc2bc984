"""
sxcal.engines.astro.series
--------------------------
Truncatable longitude series for the Sun and the Moon.

Time argument t is Julian centuries (TT) from J2000. Longitudes are returned
in radians and are NOT wrapped: they grow continuously with t, so a target
angle W = k*2π + offset can be solved for directly.

The term budget n selects how much of a series is summed (n < 0: all).
Each group gets a share of the budget in proportion to its length, so a
small n keeps the leading terms of every power of t. Coarse budgets are used
for the first solver passes, full ones for the last.
"""

from __future__ import annotations

import math

from .coefficients import XL0, XL1
from .nutation import LUNAR_ABERRATION, SECONDS_PER_RAD, nutation_longitude, solar_aberration

# number of L groups in XL0 (powers τ^0..τ^5)
_EARTH_GROUPS = 6


def earth_longitude(t: float, n: int = -1) -> float:
    """Heliocentric longitude of the Earth (geometric, FK5-adjusted)."""
    tau = t / 10
    base = XL0[2] - XL0[1]
    v = 0.0
    tn = 1.0
    for i in range(_EARTH_GROUPS):
        start = int(XL0[1 + i])
        stop = int(XL0[2 + i])
        size = stop - start
        if size == 0:
            continue
        if n < 0:
            end = stop
        else:
            end = int(3 * n * size / base + 0.5) + start
            if i:
                end += 3
            if end > stop:
                end = stop
        c = 0.0
        for j in range(start, end, 3):
            c += XL0[j] * math.cos(XL0[j + 1] + tau * XL0[j + 2])
        v += c * tn
        tn *= tau
    v /= XL0[0]

    tau2 = tau * tau
    v += (-0.0728 - 2.7702 * tau - 1.1019 * tau2 - 0.0996 * tau2 * tau) / SECONDS_PER_RAD
    return v


def moon_longitude(t: float, n: int = -1) -> float:
    """Geometric geocentric longitude of the Moon, mean equinox of date."""
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t

    # mean longitude (rad) and general precession (arcsec), summed in arcsec
    v = (3.81034409 + 8399.684730072 * t - 3.319e-05 * t2 + 3.11e-08 * t3 - 2.033e-10 * t4) * SECONDS_PER_RAD
    v += 5028.792262 * t + 1.1124406 * t2 + 0.00007699 * t3 - 0.000023479 * t4 - 0.0000000178 * t5
    tx = t - 10
    if tx > 0:
        v += -0.866 + 1.43 * tx + 0.054 * tx * tx

    s2 = t2 / 1e4
    s3 = t3 / 1e8
    s4 = t4 / 1e8
    full = len(XL1[0])
    budget = full if n < 0 else n * 6
    tn = 1.0
    for i, group in enumerate(XL1):
        size = len(group)
        end = int(budget * size / full + 0.5)
        if i:
            end += 6
        if end > size:
            end = size
        c = 0.0
        for j in range(0, end, 6):
            c += group[j] * math.cos(
                group[j + 1] + t * group[j + 2] + s2 * group[j + 3] + s3 * group[j + 4] + s4 * group[j + 5]
            )
        v += c * tn
        tn *= t
    return v / SECONDS_PER_RAD


def sun_apparent_longitude(t: float, n: int = -1) -> float:
    return earth_longitude(t, n) + nutation_longitude(t) + solar_aberration(t) + math.pi


def moon_apparent_longitude(t: float, n: int = -1) -> float:
    return moon_longitude(t, n) + nutation_longitude(t) + LUNAR_ABERRATION


def moon_sun_elongation(t: float, mn: int = -1, sn: int = -1) -> float:
    """Apparent Moon - Sun longitude; nutation cancels."""
    return moon_longitude(t, mn) + LUNAR_ABERRATION - (earth_longitude(t, sn) + solar_aberration(t) + math.pi)


def earth_rate(t: float) -> float:
    """Angular velocity of the Earth, rad per century."""
    f = 628.307585 * t
    return (
        628.332
        + 21 * math.sin(1.527 + f)
        + 0.44 * math.sin(1.48 + f * 2)
        + 0.129 * math.sin(5.82 + f) * t
        + 0.00055 * math.sin(4.21 + f) * t * t
    )


def moon_rate(t: float) -> float:
    """Angular velocity of the Moon, rad per century."""
    v = 8399.71 - 914 * math.sin(0.7848 + 8328.691425 * t + 0.0001523 * t * t)
    v -= (
        179 * math.sin(2.543 + 15542.7543 * t)
        + 160 * math.sin(0.1874 + 7214.0629 * t)
        + 62 * math.sin(3.14 + 16657.3828 * t)
        + 34 * math.sin(4.827 + 16866.9323 * t)
        + 22 * math.sin(4.9 + 23871.4457 * t)
        + 12 * math.sin(2.59 + 14914.4523 * t)
        + 7 * math.sin(0.23 + 6585.7609 * t)
        + 5 * math.sin(0.9 + 25195.624 * t)
        + 5 * math.sin(2.32 - 7700.3895 * t)
        + 5 * math.sin(3.88 + 8956.9934 * t)
        + 5 * math.sin(0.49 + 7771.3771 * t)
    )
    return v
