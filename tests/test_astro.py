# tests/test_astro.py

import math
import random

import pytest

from sxcal.core.errors import SolverConvergenceError
from sxcal.engines.astro import solver
from sxcal.engines.astro.deltat import LAST_ANCHOR, delta_t_days, delta_t_seconds
from sxcal.engines.astro.nutation import SECONDS_PER_RAD, nutation_longitude, solar_aberration
from sxcal.engines.astro.series import (
    earth_longitude,
    moon_longitude,
    moon_sun_elongation,
    sun_apparent_longitude,
)


def _t(jd_tt: float) -> float:
    return (jd_tt - 2451545.0) / 36525


def _deg(rad: float) -> float:
    return math.degrees(rad) % 360


# ------------------------------------------------------------
# ΔT
# ------------------------------------------------------------

def test_delta_t_anchors():
    assert delta_t_seconds(2000) == pytest.approx(63.87)
    assert delta_t_seconds(1900) == pytest.approx(-2.3)
    assert delta_t_seconds(1800) == pytest.approx(13.4)
    assert delta_t_days(0.0) == pytest.approx(63.87 / 86400)


def test_delta_t_continuity():
    """The fitted segments meet within a few seconds; the extrapolation blend is continuous."""
    for y in (-500, -150, 150, 500, 900, 1300, 1600, 1700, 1800, 1900, 2000, 2016, 2020, 2032, 2048):
        assert delta_t_seconds(y - 1e-6) == pytest.approx(delta_t_seconds(y + 1e-6), abs=5.0)
    y0, t0 = LAST_ANCHOR
    assert y0 == 2050
    assert delta_t_seconds(y0) == pytest.approx(t0)
    assert delta_t_seconds(y0 - 1e-6) == pytest.approx(t0, abs=5.0)
    assert delta_t_seconds(y0 + 100 - 1e-6) == pytest.approx(delta_t_seconds(y0 + 100 + 1e-6), abs=1e-3)


def test_delta_t_far_range():
    # ΔT grows without bound away from the modern era
    assert delta_t_seconds(-5000) > delta_t_seconds(-4000) > delta_t_seconds(0) > 10000
    assert delta_t_seconds(3000) > delta_t_seconds(2500) > 1000


# ------------------------------------------------------------
# Nutation, aberration
# ------------------------------------------------------------

def test_nutation_meeus_22a():
    """Meeus Example 22.a, 1987 April 10, 0h TD: Δψ = -3.788"."""
    dpsi = nutation_longitude(_t(2446895.5)) * SECONDS_PER_RAD
    assert dpsi == pytest.approx(-3.788, abs=0.5)


def test_aberration_magnitude():
    random.seed(42)
    for _ in range(100):
        a = solar_aberration(random.uniform(-20, 20)) * SECONDS_PER_RAD
        assert -21.0 < a < -20.0


# ------------------------------------------------------------
# Series
# ------------------------------------------------------------

def test_meeus_example_47a_lunar_longitude():
    """
    Meeus, Astronomical Algorithms (2nd Ed), Example 47.a.
    1992 April 12, 0h TD: geometric λ = 133.162655°.
    """
    t = _t(2448724.5)
    assert _deg(moon_longitude(t)) == pytest.approx(133.162655, abs=5e-3)


def test_meeus_example_25b_solar_longitude():
    """
    Meeus Example 25.b, 1992 October 13, 0h TD.
    Heliocentric L of the Earth = 19.907372°, apparent Sun ≈ 199.906°.
    """
    t = _t(2448908.5)
    assert _deg(earth_longitude(t)) == pytest.approx(19.907372, abs=5e-4)
    assert _deg(sun_apparent_longitude(t)) == pytest.approx(199.906, abs=2e-3)


def test_truncation_converges():
    """Coarser term budgets stay close to the full series."""
    random.seed(42)
    for _ in range(50):
        t = random.uniform(-2, 2)
        full = earth_longitude(t)
        assert earth_longitude(t, 10) == pytest.approx(full, abs=2e-4)
        assert moon_longitude(t, 20) == pytest.approx(moon_longitude(t), abs=5e-3)


def test_longitudes_unwrapped():
    """Longitudes grow with time instead of wrapping at 2π."""
    assert earth_longitude(0.1) - earth_longitude(0.0) == pytest.approx(2 * math.pi * 10, abs=0.1)
    assert moon_longitude(0.01) > moon_longitude(0.0) + 2 * math.pi * 13


# ------------------------------------------------------------
# Solver
# ------------------------------------------------------------

def test_sun_longitude_solver_residual():
    random.seed(42)
    for _ in range(50):
        w = random.randint(-2400, 2400) * math.pi / 12
        t = solver.sun_longitude_time(w)
        assert sun_apparent_longitude(t) == pytest.approx(w, abs=1e-6)
        # the closed form lands within a few minutes of the Newton solve
        assert solver.sun_longitude_time_fast(w) * 36525 == pytest.approx(t * 36525, abs=0.01)


def test_elongation_solver_residual():
    random.seed(42)
    for _ in range(50):
        w = random.randint(-1000, 1000) * 2 * math.pi
        t = solver.elongation_time(w)
        assert moon_sun_elongation(t, -1, 60) == pytest.approx(w, abs=2e-5)
        assert solver.elongation_time_fast(w) * 36525 == pytest.approx(t * 36525, abs=0.01)


def test_accurate_near_known_events():
    # 2024 start of spring (立春), 2024-02-04 16:27 Beijing
    jd = solver.qi_accurate_near(8800.0) + 2451545.0
    assert jd == pytest.approx(2460344.5 + (16 + 27 / 60) / 24, abs=2 / 1440)
    # new moon of 2024-02-10, 06:59 Beijing
    jd = solver.shuo_accurate_near(8806.0) + 2451545.0
    assert jd == pytest.approx(2460350.5 + (6 + 59 / 60) / 24, abs=3 / 1440)


def test_high_and_low_agree_in_modern_era():
    """The closed-form tier stays close to the full solve near J2000."""
    for k in range(-24, 24):
        w = (24 * 25 + k) * math.pi / 12
        assert solver.qi_low(w) == pytest.approx(solver.qi_high(w), abs=30 / 1440)
    for k in range(-12, 12):
        w = (300 + k) * 2 * math.pi
        assert solver.shuo_low(w) == pytest.approx(solver.shuo_high(w), abs=2 / 24)


def test_non_finite_input_raises():
    with pytest.raises(SolverConvergenceError):
        solver.qi_accurate(float("nan"))
