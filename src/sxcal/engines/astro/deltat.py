"""
sxcal.engines.astro.deltat
--------------------------
ΔT = TT - UT as a piecewise cubic in the decimal year.

Each anchor row (y_i, a, b, c, d) covers [y_i, y_{i+1}) with
  ΔT = a + b*u + c*u^2 + d*u^3,   u = 10*(y - y_i)/(y_{i+1} - y_i).
After the last anchor a parabola -20 + k*((y-1820)/100)^2 takes over,
blended linearly over the first century so the curve stays continuous.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

DAYS_PER_YEAR = 365.2425

_DT_TABLE: Tuple[Tuple[float, float, float, float, float], ...] = (
    (-4000, 108371.7, -13036.80, 392.000, 0.0000),
    (-500, 17201.0, -627.82, 16.170, -0.3413),
    (-150, 12200.6, -346.41, 5.403, -0.1593),
    (150, 9113.8, -328.13, -1.647, 0.0377),
    (500, 5707.5, -391.41, 0.915, 0.3145),
    (900, 2203.4, -283.45, 13.034, -0.1778),
    (1300, 490.1, -57.35, 2.085, -0.0072),
    (1600, 120.0, -9.81, -1.532, 0.1403),
    (1700, 10.2, -0.91, 0.510, -0.0370),
    (1800, 13.4, -0.72, 0.202, -0.0193),
    (1830, 7.8, -1.81, 0.416, -0.0247),
    (1860, 8.3, -0.13, -0.406, 0.0292),
    (1880, -5.4, 0.32, -0.183, 0.0173),
    (1900, -2.3, 2.06, 0.169, -0.0135),
    (1920, 21.2, 1.69, -0.304, 0.0167),
    (1940, 24.2, 1.22, -0.064, 0.0031),
    (1960, 33.2, 0.51, 0.231, -0.0109),
    (1980, 51.0, 1.29, -0.026, 0.0032),
    (2000, 63.87, 0.1, 0.0, 0.0),
    (2005, 64.7, 0.21, 0.0, 0.0),
    (2012, 66.8, 0.22, 0.0, 0.0),
    (2016, 68.1024, 0.5456, -0.0542, -0.001172),
    (2020, 69.3612, 0.0422, -0.0502, 0.006216),
    (2024, 69.1752, -0.0335, -0.0048, 0.000811),
    (2028, 69.0206, -0.0275, 0.0055, -0.000014),
    (2032, 68.9981, 0.0163, 0.0054, 0.000006),
    (2036, 69.1498, 0.0599, 0.0053, 0.000026),
    (2040, 69.4751, 0.1035, 0.0051, 0.000046),
    (2044, 69.9737, 0.1469, 0.0050, 0.000066),
    (2048, 70.6451, 0.1903, 0.0049, 0.000085),
)

# closing anchor: (year, ΔT seconds)
LAST_ANCHOR: Tuple[float, float] = (2050, 71.0457)

# parabola coefficient (s/century^2) of the long-term extrapolation
EXTRAPOLATION_RATE = 31.0

_YEARS = tuple(row[0] for row in _DT_TABLE) + (LAST_ANCHOR[0],)


def _extrapolate(y: float, k: float = EXTRAPOLATION_RATE) -> float:
    u = (y - 1820) / 100
    return -20 + k * u * u


def delta_t_seconds(y: float) -> float:
    """ΔT in seconds for decimal year y."""
    y0, t0 = LAST_ANCHOR
    if y >= y0:
        if y > y0 + 100:
            return _extrapolate(y)
        return _extrapolate(y) - (_extrapolate(y0) - t0) * (y0 + 100 - y) / 100

    i = min(max(bisect_right(_YEARS, y) - 1, 0), len(_DT_TABLE) - 1)
    ya, a, b, c, d = _DT_TABLE[i]
    u = (y - ya) / (_YEARS[i + 1] - ya) * 10
    u2 = u * u
    return a + b * u + c * u2 + d * u2 * u


def delta_t_days(t_days: float) -> float:
    """ΔT in days for t_days days since J2000."""
    return delta_t_seconds(t_days / DAYS_PER_YEAR + 2000) / 86400
