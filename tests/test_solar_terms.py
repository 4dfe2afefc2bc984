# tests/test_solar_terms.py

import pytest

from sxcal.core.time import CivilDateTime, julian_day
from sxcal.engines.corrections import DayRouter
from sxcal.engines.solar_terms import TERM_NAMES, SolarTermCalculator, normalize_index


@pytest.fixture(scope="module")
def terms():
    return SolarTermCalculator(DayRouter())


def test_term_names():
    assert len(TERM_NAMES) == 24
    assert TERM_NAMES[0] == "冬至"
    assert TERM_NAMES[3] == "立春"
    assert TERM_NAMES[6] == "春分"


def test_normalize_index():
    assert normalize_index(2024, 24) == (2025, 0)
    assert normalize_index(2024, -1) == (2023, 23)
    assert normalize_index(2024, 3) == (2024, 3)


def test_start_of_spring_2024(terms):
    t = terms.term(2024, 3)
    assert t.name == "立春"
    assert t.is_jie and not t.is_qi
    assert t.civil_date == CivilDateTime(2024, 2, 4)
    # 16:26:53 Beijing
    assert t.civil_datetime.hour == 16
    assert 25 <= t.civil_datetime.minute <= 28


def test_winter_solstice_2000(terms):
    t = terms.term(2001, 0)
    assert t.name == "冬至"
    assert t.civil_date == CivilDateTime(2000, 12, 21)


@pytest.mark.parametrize(
    "year,index,ymd",
    [
        (2024, 0, (2023, 12, 22)),
        (2024, 6, (2024, 3, 20)),
        (2024, 7, (2024, 4, 4)),
        (2024, 12, (2024, 6, 21)),
        (2024, 18, (2024, 9, 22)),
        (2025, 0, (2024, 12, 21)),
        (2023, 3, (2023, 2, 4)),
        (1987, 6, (1987, 3, 21)),
    ],
)
def test_known_term_days(terms, year, index, ymd):
    assert terms.term(year, index).civil_date == CivilDateTime(*ymd)


def test_term_spacing(terms):
    """Successive terms are 14.7..15.8 days apart (faster near perihelion)."""
    for year in range(1950, 2051, 5):
        ts = terms.terms(year) + (terms.term(year + 1, 0),)
        for a, b in zip(ts, ts[1:]):
            assert 14.5 < b.jd - a.jd < 16.0
            assert a.cursory_jd + 2451545 == pytest.approx(a.jd, abs=1)


def test_cursory_day_matches_exact_instant(terms):
    """In the modern era the routed day is the civil day of the exact instant."""
    for year in range(1970, 2031):
        for t in terms.terms(year):
            assert t.civil_date == CivilDateTime.from_jd(t.jd).day_start()


def test_terms_cached(terms):
    assert terms.terms(2024) is terms.terms(2024)


def test_next_term(terms):
    t = terms.term(2024, 23)
    nxt = terms.next_term(t)
    assert (nxt.year, nxt.index) == (2025, 0)
    back = terms.next_term(nxt, -2)
    assert (back.year, back.index) == (2024, 22)


def test_term_on_or_before(terms):
    noon = julian_day(2024, 2, 4, 12)
    evening = julian_day(2024, 2, 4, 17)
    assert terms.term_on_or_before(noon).name == "大寒"
    assert terms.term_on_or_before(evening).name == "立春"
    assert terms.term_on_or_before(noon, by_day=True).name == "立春"
    # early January still falls under the previous winter solstice
    t = terms.term_on_or_before(julian_day(2024, 1, 2))
    assert (t.year, t.index) == (2024, 0)


def test_term_of_day(terms):
    assert terms.term_of_day(2024, 2, 4).name == "立春"
    assert terms.term_of_day(2024, 2, 5) is None
    assert terms.term_of_day(2024, 12, 21).name == "冬至"
