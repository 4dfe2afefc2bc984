"""
Nutation in longitude and annual aberration.

All arguments are Julian centuries (TT) from J2000; results are radians.
"""

from __future__ import annotations

import math

SECONDS_PER_RAD = 180 * 3600 / math.pi

# (phase, freq, freq2, dpsi, deps): rad, rad/century, rad/century^2, 0.01" and 0.01"
_NUTATION_TERMS = (
    (2.1824, -33.75705, 36e-6, -1720, 920),
    (3.5069, 1256.66393, 11e-6, -132, 57),
    (1.3375, 16799.4182, -51e-6, -23, 10),
    (4.3649, -67.5141, 72e-6, 21, -9),
    (0.04, -628.302, 0, -14, 0),
    (2.36, 8328.691, 0, 7, 0),
    (3.46, 1884.966, 0, -5, 2),
    (5.44, 16833.175, 0, -4, 2),
    (3.69, 25128.110, 0, -3, 0),
    (3.55, 628.362, 0, 2, 0),
)

# secular rate of the leading term, 0.01"/century
_LEADING_RATE = -1.742

LUNAR_ABERRATION = -3.4e-6


def nutation_longitude(t: float) -> float:
    t2 = t * t
    dl = 0.0
    a = _LEADING_RATE * t
    for phase, freq, freq2, amp, _ in _NUTATION_TERMS:
        dl += (amp + a) * math.sin(phase + freq * t + freq2 * t2)
        a = 0.0
    return dl / 100 / SECONDS_PER_RAD


def solar_aberration(t: float) -> float:
    """Annual aberration of the Sun's longitude."""
    v = -0.043126 + 628.301955 * t - 0.000002732 * t * t
    e = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t
    return -20.49552 * (1 + e * math.cos(v)) / SECONDS_PER_RAD
