"""
sxcal.engines.astro.solver
--------------------------
Event solver: the time at which the Sun reaches an apparent longitude W
(solar terms, "qi"), or the Moon-Sun elongation reaches W (new moons, "shuo").

Angles W are unwrapped radians on the same axis as the series in
``series.py``. Two conventions for the returned time:

  * ``*_time`` functions: Julian centuries (TT) from J2000;
  * ``qi_*`` / ``shuo_*`` / ``*_accurate`` functions: days from J2000 in
    Beijing civil time (UT + 8h).

The iteration order, term budgets and thresholds are fixed; downstream day
assignments depend on them.
"""

from __future__ import annotations

import math

from sxcal.core.errors import SolverConvergenceError

from .deltat import delta_t_days
from .nutation import SECONDS_PER_RAD
from .series import (
    earth_longitude,
    earth_rate,
    moon_longitude,
    moon_rate,
    moon_sun_elongation,
    sun_apparent_longitude,
)

DAYS_PER_CENTURY = 36525
BEIJING_OFFSET = 8 / 24

SUN_MEAN_RATE = 628.3319653318      # rad/century
ELONGATION_MEAN_RATE = 7771.37714500204

# half-widths (seconds) of the midnight guard band that triggers a full solve
QI_GUARD_SECONDS = 1200
SHUO_GUARD_SECONDS = 1800


def _finite(t: float, w: float) -> float:
    if not math.isfinite(t):
        raise SolverConvergenceError(f"solver produced a non-finite instant for W={w!r}")
    return t


# ------------------------------------------------------------
# TT solutions (centuries)
# ------------------------------------------------------------

def sun_longitude_time(w: float) -> float:
    """Newton solve of sun_apparent_longitude(t) = w."""
    v = SUN_MEAN_RATE
    t = (w - 1.75347 - math.pi) / v
    v = earth_rate(t)
    t += (w - sun_apparent_longitude(t, 10)) / v
    v = earth_rate(t)
    t += (w - sun_apparent_longitude(t, -1)) / v
    return t


def sun_longitude_time_fast(w: float) -> float:
    """Closed-form approximation of sun_longitude_time (a few seconds of error)."""
    v = SUN_MEAN_RATE
    t = (w - 1.75347 - math.pi) / v
    t -= (
        0.000005297 * t * t
        + 0.0334166 * math.cos(4.669257 + 628.307585 * t)
        + 0.0002061 * math.cos(2.67823 + 628.307585 * t) * t
    ) / v
    t += (
        w
        - earth_longitude(t, 8)
        - math.pi
        + (20.5 + 17.2 * math.sin(2.1824 - 33.75705 * t)) / SECONDS_PER_RAD
    ) / v
    return t


def elongation_time(w: float) -> float:
    """Newton solve of moon_sun_elongation(t) = w."""
    v = ELONGATION_MEAN_RATE
    t = (w + 1.08472) / v
    t += (w - moon_sun_elongation(t, 3, 3)) / v
    v = moon_rate(t) - earth_rate(t)
    t += (w - moon_sun_elongation(t, 20, 10)) / v
    t += (w - moon_sun_elongation(t, -1, 60)) / v
    return t


def elongation_time_fast(w: float) -> float:
    """Closed-form approximation of elongation_time."""
    v = ELONGATION_MEAN_RATE
    t = (w + 1.08472) / v
    t -= (
        -0.00003309 * t * t
        + 0.10976 * math.cos(0.784758 + 8328.6914246 * t + 0.000152292 * t * t)
        + 0.02224 * math.cos(0.18740 + 7214.0628654 * t - 0.00021848 * t * t)
        - 0.03342 * math.cos(4.669257 + 628.307585 * t)
    ) / v
    sun = (
        4.8950632
        + 628.3319653318 * t
        + 0.000005297 * t * t
        + 0.0334166 * math.cos(4.669257 + 628.307585 * t)
        + 0.0002061 * math.cos(2.67823 + 628.307585 * t) * t
        + 0.000349 * math.cos(4.6261 + 1256.61517 * t)
        - 20.5 / SECONDS_PER_RAD
    )
    lon = moon_longitude(t, 20) - sun
    v = (
        7771.38
        - 914 * math.sin(0.7848 + 8328.691425 * t + 0.0001523 * t * t)
        - 179 * math.sin(2.543 + 15542.7543 * t)
        - 160 * math.sin(0.1874 + 7214.0629 * t)
    )
    t += (w - lon) / v
    return t


# ------------------------------------------------------------
# Beijing civil days from J2000
# ------------------------------------------------------------

def qi_high(w: float) -> float:
    t = sun_longitude_time_fast(w) * DAYS_PER_CENTURY
    t = t - delta_t_days(t) + BEIJING_OFFSET
    v = (t + 0.5) % 1 * 86400
    if v < QI_GUARD_SECONDS or v > 86400 - QI_GUARD_SECONDS:
        t = sun_longitude_time(w) * DAYS_PER_CENTURY - delta_t_days(t) + BEIJING_OFFSET
    return _finite(t, w)


def shuo_high(w: float) -> float:
    t = elongation_time_fast(w) * DAYS_PER_CENTURY
    t = t - delta_t_days(t) + BEIJING_OFFSET
    v = (t + 0.5) % 1 * 86400
    if v < SHUO_GUARD_SECONDS or v > 86400 - SHUO_GUARD_SECONDS:
        t = elongation_time(w) * DAYS_PER_CENTURY - delta_t_days(t) + BEIJING_OFFSET
    return _finite(t, w)


def qi_low(w: float) -> float:
    """Closed-form term instant; ΔT is folded into a parabola."""
    v = SUN_MEAN_RATE
    t = (w - 4.895062166) / v
    t -= (
        53 * t * t
        + 334116 * math.cos(4.67 + 628.307585 * t)
        + 2061 * math.cos(2.678 + 628.3076 * t) * t
    ) / v / 10000000
    lon = (
        48950621.66
        + 6283319653.318 * t
        + 53 * t * t
        + 334166 * math.cos(4.669257 + 628.307585 * t)
        + 3489 * math.cos(4.6261 + 1256.61517 * t)
        + 2060.6 * math.cos(2.67823 + 628.307585 * t) * t
        - 994
        - 834 * math.sin(2.1824 - 33.75705 * t)
    )
    t -= (lon / 10000000 - w) / 628.332 + (32 * (t + 1.8) * (t + 1.8) - 20) / 86400 / DAYS_PER_CENTURY
    return _finite(t * DAYS_PER_CENTURY + BEIJING_OFFSET, w)


def shuo_low(w: float) -> float:
    """Closed-form new-moon instant; ΔT is folded into a parabola."""
    v = ELONGATION_MEAN_RATE
    t = (w + 1.08472) / v
    t -= (
        -0.0000331 * t * t
        + 0.10976 * math.cos(0.785 + 8328.6914 * t)
        + 0.02224 * math.cos(0.187 + 7214.0629 * t)
        - 0.03342 * math.cos(4.669 + 628.3076 * t)
    ) / v + (32 * (t + 1.8) * (t + 1.8) - 20) / 86400 / DAYS_PER_CENTURY
    return _finite(t * DAYS_PER_CENTURY + BEIJING_OFFSET, w)


def qi_accurate(w: float) -> float:
    t = sun_longitude_time(w) * DAYS_PER_CENTURY
    return _finite(t - delta_t_days(t) + BEIJING_OFFSET, w)


def qi_accurate_near(jd: float) -> float:
    """Exact instant of the solar term closest to day jd (days from J2000)."""
    d = math.pi / 12
    w = math.floor((jd + 293) / 365.2422 * 24) * d
    a = qi_accurate(w)
    if a - jd > 5:
        return qi_accurate(w - d)
    if a - jd < -5:
        return qi_accurate(w + d)
    return a


def shuo_accurate(w: float) -> float:
    t = elongation_time(w) * DAYS_PER_CENTURY
    return _finite(t - delta_t_days(t) + BEIJING_OFFSET, w)


def shuo_accurate_near(jd: float) -> float:
    """Exact instant of the new moon closest to day jd (days from J2000)."""
    return shuo_accurate(math.floor((jd + 8) / 29.5306) * math.pi * 2)
