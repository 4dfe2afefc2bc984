# tests/test_rab_byung.py

import random
from fractions import Fraction

import pytest

from sxcal.core.errors import InvalidDateError, OutOfRangeError
from sxcal.core.time import CivilDateTime, jdn
from sxcal.core.types import RabByungDate
from sxcal.engines.arithmetic_month import ArithmeticMonthEngine, ArithmeticMonthParams, amod12
from sxcal.engines.factory import make_engine
from sxcal.engines.rab_byung import RabByungYear
from sxcal.engines.sin_tables import OddPeriodicTable
from sxcal.engines.specs import MOON_TAB_QUARTER, PHUGPA, PHUGPA_SPEC, SUN_TAB_QUARTER
from sxcal.engines.trad_day import TraditionalDayEngine


@pytest.fixture(scope="module")
def phugpa():
    return make_engine(PHUGPA)


# ------------------------------------------------------------
# Tables
# ------------------------------------------------------------

def test_odd_periodic_table_symmetries():
    moon = OddPeriodicTable(28, MOON_TAB_QUARTER)
    assert moon.eval_u(Fraction(0)) == 0
    assert moon.eval_u(Fraction(7)) == 25
    assert moon.eval_u(Fraction(3)) == 15
    assert moon.eval_u(Fraction(7, 2)) == Fraction(17)     # between 15 and 19
    random.seed(42)
    for _ in range(200):
        u = Fraction(random.randint(-2800, 2800), 100)
        assert moon.eval_u(-u) == -moon.eval_u(u)
        assert moon.eval_u(u + 28) == moon.eval_u(u)
        assert moon.eval_u(14 - u) == moon.eval_u(u)


def test_odd_periodic_table_turns():
    sun = OddPeriodicTable(12, SUN_TAB_QUARTER)
    assert sun.eval_turn(Fraction(1, 4)) == 11
    assert sun.eval_turn(Fraction(3, 4)) == -11
    assert sun.eval_turn(Fraction(5, 4)) == 11


def test_odd_periodic_table_validation():
    with pytest.raises(ValueError):
        OddPeriodicTable(10, (0, 1, 2))
    with pytest.raises(ValueError):
        OddPeriodicTable(12, (0, 6, 10))


# ------------------------------------------------------------
# Month arithmetic
# ------------------------------------------------------------

def test_month_params():
    p = PHUGPA_SPEC.month_params
    assert (p.P, p.Q, p.ell) == (65, 67, 2)
    assert p.beta_int == 17
    with pytest.raises(ValueError):
        ArithmeticMonthParams(Y0=1987, M0=3, P=67, Q=65, beta_star=0, tau=48)
    with pytest.raises(ValueError):
        ArithmeticMonthParams(Y0=1987, M0=13, P=65, Q=67, beta_star=0, tau=48)


def test_amod12():
    assert [amod12(x) for x in (0, 1, 12, 13, -1)] == [12, 1, 12, 1, 11]


def test_month_epoch():
    m = ArithmeticMonthEngine(PHUGPA_SPEC.month_params)
    assert m.n_plus(1987, 3) == 0
    assert m.get_lunations(1987, 3) == [0]
    assert m.label_from_lunation(0) == (1987, 3, 0)
    assert m.first_lunation(1987) == -2


def test_month_label_roundtrip():
    """Every lunation carries exactly one label, and labels map back to it."""
    m = ArithmeticMonthEngine(PHUGPA_SPEC.month_params)
    leaps = 0
    for n in range(-600, 900):
        Y, M, leap_state = m.label_from_lunation(n)
        ns = m.get_lunations(Y, M)
        assert n in ns
        if leap_state == 0:
            assert ns == [n]
        else:
            assert len(ns) == 2 and ns[leap_state - 1] == n
            assert m.is_trigger_label(Y, M)
            leaps += leap_state == 1
    # two doubled labels in every 67 lunations
    assert leaps == pytest.approx(1500 * 2 / 67, abs=2)


def test_doubled_month_2000():
    m = ArithmeticMonthEngine(PHUGPA_SPEC.month_params)
    assert m.get_lunations(2000, 1) == [158, 159]
    assert m.label_from_lunation(158) == (2000, 1, 1)
    assert m.label_from_lunation(159) == (2000, 1, 2)


# ------------------------------------------------------------
# Day kinematics
# ------------------------------------------------------------

def test_sun_anomaly_defaults_to_quarter_turn_shift():
    p = PHUGPA_SPEC.day_params
    assert p.r0 == p.s0 - Fraction(1, 4)
    assert p.r1 == p.s1
    assert p.r2 == p.s2


def test_true_date_near_mean():
    day = TraditionalDayEngine(PHUGPA_SPEC.day_params)
    for n in range(-50, 50):
        for d in (1, 10, 20, 30):
            assert abs(day.true_date(d, n) - day.mean_date(d, n)) < 1
            assert day.end_jd(d, n) < day.end_jd(d, n + 1)


def test_civil_month_structure():
    day = TraditionalDayEngine(PHUGPA_SPEC.day_params)
    for n in range(400, 460):
        days = day.civil_month(n)
        first, last = day.month_bounds_jd(n)
        assert [cd.jd for cd in days] == list(range(first, last + 1))
        # a month handing its last day to the next one can run a day short
        assert 28 <= len(days) <= 31

        labels = [cd.label for cd in days]
        skipped = {s for cd in days for s in cd.skipped}
        assert labels == sorted(labels)
        assert set(labels) | skipped == set(range(1, 31))
        assert not (set(labels) & skipped)
        for prev, cd in zip(days, days[1:]):
            assert cd.repeated == (cd.label == prev.label)


@pytest.mark.parametrize("n,ymd", [(402, (2019, 10, 28)), (417, (2021, 1, 13))])
def test_month_opens_on_shared_day(phugpa, n, ymd):
    """Tithi 30 of one lunation and tithi 1 of the next end on the same civil day."""
    shared = jdn(*ymd)
    day = phugpa.day
    assert day.end_jd(30, n - 1) == day.end_jd(1, n) == shared
    assert day.opens_on_last_day(n)
    assert day.month_bounds_jd(n)[0] == shared
    assert day.month_bounds_jd(n - 1)[1] == shared - 1
    assert day.find_lunation(shared) == n

    first = phugpa.civil_month(n)[0]
    assert (first.jd, first.label, first.repeated) == (shared, 1, False)
    last = phugpa.civil_month(n - 1)[-1]
    assert last.jd == shared - 1
    assert 30 in last.skipped


def test_shared_day_dates(phugpa):
    # 2019-10-28 opens the ninth month; the 30th of the eighth is dropped
    assert phugpa.month.label_from_lunation(402) == (2019, 9, 0)
    assert phugpa.to_gregorian(RabByungDate(2019, 9, False, 1)) == [CivilDateTime(2019, 10, 28)]
    assert phugpa.to_gregorian(RabByungDate(2019, 8, False, 30)) == []
    assert phugpa.day_info(CivilDateTime(2019, 10, 28)).tibetan == RabByungDate(2019, 9, False, 1)
    assert 30 in phugpa.day_info(CivilDateTime(2019, 10, 27)).skipped_days

    assert phugpa.month.label_from_lunation(417) == (2020, 12, 0)
    assert phugpa.to_gregorian(RabByungDate(2020, 12, False, 1)) == [CivilDateTime(2021, 1, 13)]


def test_find_lunation():
    day = TraditionalDayEngine(PHUGPA_SPEC.day_params)
    assert day.find_lunation(jdn(1987, 5, 10)) == 0
    random.seed(42)
    for _ in range(200):
        jd = random.randint(jdn(1950, 1, 1), jdn(2050, 12, 31))
        n = day.find_lunation(jd)
        first, last = day.month_bounds_jd(n)
        assert first <= jd <= last


# ------------------------------------------------------------
# Calendar
# ------------------------------------------------------------

@pytest.mark.parametrize(
    "year,ymd",
    [
        (1987, (1987, 2, 28)),
        (2000, (2000, 2, 6)),
        (2023, (2023, 2, 21)),
        (2024, (2024, 2, 10)),
        (2025, (2025, 2, 28)),
    ],
)
def test_losar(phugpa, year, ymd):
    assert phugpa.new_year(year) == CivilDateTime(*ymd)


def test_rab_byung_year():
    y = RabByungYear(1987)
    assert y.rab_byung_index == 16
    assert y.cycle_number == 17
    assert y.ordinal == 1
    assert y.name == "fire-female-rabbit"

    y = RabByungYear(2024)
    assert (y.cycle_number, y.ordinal) == (17, 38)
    assert (y.element, y.gender, y.animal) == ("wood", "male", "dragon")
    assert y.sixty_cycle.name == "甲辰"

    assert RabByungYear(1027).rab_byung_index == 0
    assert RabByungYear(2046).cycle_number == 17
    assert RabByungYear(2047).cycle_number == 18


def test_months(phugpa):
    months = phugpa.months(2000)
    assert len(months) == 13
    assert (months[0].month, months[0].leap) == (1, True)
    assert (months[1].month, months[1].leap) == (1, False)
    assert months[0].first_day == CivilDateTime(2000, 2, 6)
    for a, b in zip(months, months[1:]):
        assert a.last_jd + 1 == b.first_jd
        assert 28 <= a.day_count <= 31
    assert len(phugpa.months(2023)) == 12
    months = phugpa.months(2024)
    assert [(m.month, m.leap) for m in months if m.leap] == [(6, True)]
    assert months[6].month == 6 and not months[6].leap


def test_supported_range(phugpa):
    for year in (1949, 2051):
        with pytest.raises(OutOfRangeError, match="1950..2050"):
            phugpa.months(year)
        with pytest.raises(OutOfRangeError):
            phugpa.new_year(year)
    with pytest.raises(OutOfRangeError):
        phugpa.day_info(CivilDateTime(1940, 1, 1))
    with pytest.raises(OutOfRangeError):
        phugpa.to_gregorian(RabByungDate(2100, 1, False, 1))


def test_day_info_losar(phugpa):
    info = phugpa.day_info(CivilDateTime(2024, 2, 10))
    t = info.tibetan
    assert (t.year, t.month, t.is_leap_month) == (2024, 1, False)
    assert t.day in (1, 2)
    assert info.engine.name == "phugpa"
    assert info.debug is None
    dbg = phugpa.day_info(CivilDateTime(2024, 2, 10), debug=True).debug
    assert dbg["jdn"] == jdn(2024, 2, 10)


def test_day_roundtrip(phugpa):
    random.seed(42)
    for _ in range(300):
        jd = random.randint(jdn(1951, 1, 1), jdn(2049, 12, 31))
        c = CivilDateTime.from_jd(jd).day_start()
        info = phugpa.day_info(c)
        assert phugpa.to_gregorian(info.tibetan, policy="occ") == [c]
        assert c in phugpa.to_gregorian(info.tibetan)


def test_repeated_and_skipped_days(phugpa):
    n = phugpa.month.get_lunations(2024, 1)[0]
    found_repeat = found_skip = False
    for k in range(n, n + 12):
        for cd in phugpa.civil_month(k):
            Y, M, leap_state = phugpa.month.label_from_lunation(k)
            t = RabByungDate(Y, M, leap_state == 1, cd.label)
            if cd.repeated:
                found_repeat = True
                days = phugpa.to_gregorian(t)
                assert len(days) == 2
                assert days[1].jdn == cd.jd
                assert phugpa.to_gregorian(t, policy="first") == days[:1]
                assert phugpa.to_gregorian(t, policy="second") == days[1:]
                assert phugpa.day_info(days[0]).status == "duplicated"
                with pytest.raises(InvalidDateError):
                    phugpa.to_gregorian(t, policy="raise")
            for s in cd.skipped:
                found_skip = True
                gone = RabByungDate(Y, M, leap_state == 1, s)
                assert phugpa.to_gregorian(gone) == []
                assert phugpa.to_gregorian(gone, policy="first") == []
                with pytest.raises(InvalidDateError):
                    phugpa.to_gregorian(gone, policy="raise")
                info = phugpa.day_info(CivilDateTime.from_jd(cd.jd))
                assert s in info.skipped_days
    assert found_repeat and found_skip


def test_to_gregorian_validation(phugpa):
    with pytest.raises(ValueError):
        phugpa.to_gregorian(RabByungDate(2024, 1, False, 1), policy="nope")
    with pytest.raises(InvalidDateError):
        phugpa.to_gregorian(RabByungDate(2024, 1, False, 31))
    with pytest.raises(InvalidDateError):
        phugpa.to_gregorian(RabByungDate(2024, 1, True, 1))   # month 1 of 2024 is not doubled
