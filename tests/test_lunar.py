# tests/test_lunar.py

import random

import pytest

from sxcal.core.errors import InvalidDateError
from sxcal.core.time import CivilDateTime, jdn
from sxcal.engines.corrections import DayRouter
from sxcal.engines.lunar import LunarCalendar
from sxcal.engines.solar_terms import SolarTermCalculator


@pytest.fixture(scope="module")
def lunar():
    router = DayRouter()
    return LunarCalendar(router, SolarTermCalculator(router))


@pytest.mark.parametrize(
    "year,ymd",
    [
        (2023, (2023, 1, 22)),
        (2024, (2024, 2, 10)),
        (2025, (2025, 1, 29)),
        (2000, (2000, 2, 5)),
        (1950, (1950, 2, 17)),
    ],
)
def test_lunar_new_year(lunar, year, ymd):
    assert lunar.month(year, 1).first_day == CivilDateTime(*ymd)


@pytest.mark.parametrize(
    "year,leap",
    [(2017, 6), (2020, 4), (2023, 2), (2024, 0), (2025, 6), (2028, 5), (2033, 11), (2034, 0)],
)
def test_leap_months(lunar, year, leap):
    assert lunar.leap_month(year) == leap


def test_leap_month_uniqueness(lunar):
    """At most one leap month per lunar year, and months are numbered in order."""
    for year in range(1900, 2101, 3):
        months = lunar.months(year)
        leaps = [m for m in months if m.leap]
        assert len(leaps) <= 1
        assert len(months) == (13 if leaps else 12)
        assert [m.month for m in months if not m.leap] == list(range(1, 13))
        if leaps:
            assert leaps[0].month == lunar.leap_month(year)
            # the leap month follows its regular namesake
            i = months.index(leaps[0])
            assert months[i - 1].month == leaps[0].month and not months[i - 1].leap
        for m in months:
            assert m.day_count in (29, 30)


def test_months_are_contiguous(lunar):
    for year in range(1990, 2031):
        months = lunar.months(year)
        nxt = lunar.months(year + 1)[0]
        for a, b in zip(months, months[1:] + (nxt,)):
            assert a.first_jd + a.day_count == b.first_jd


def test_year_2024_layout(lunar):
    months = lunar.months(2024)
    assert len(months) == 12
    assert sum(m.day_count for m in months) == 354
    assert lunar.solar_from_lunar(2024, 8, 15) == CivilDateTime(2024, 9, 17)


def test_leap_month_2023(lunar):
    m = lunar.month(2023, -2)
    assert m.leap and m.month == 2
    assert m.first_day == CivilDateTime(2023, 3, 22)
    assert m.day_count == 29
    assert str(m).startswith("2023-L02")


def test_leap_month_1661(lunar):
    """Corrected low-precision era: the Qing almanac of 1661 has a leap seventh month."""
    assert lunar.leap_month(1661) == 7
    m = lunar.month(1661, -7)
    assert m.leap and m.month == 7
    assert m.first_day == CivilDateTime(1661, 8, 25)


def test_months_2057(lunar):
    # the eighth month is long and the ninth begins on 2057-09-29
    assert lunar.month(2057, 8).day_count == 30
    assert lunar.month(2057, 9).first_day == CivilDateTime(2057, 9, 29)


def test_missing_leap_month_raises(lunar):
    with pytest.raises(InvalidDateError):
        lunar.month(2024, -3)
    with pytest.raises(InvalidDateError):
        lunar.month(2024, 13)
    with pytest.raises(InvalidDateError):
        lunar.solar_from_lunar(2024, 1, 31)


def test_next_month(lunar):
    dec = lunar.month(2024, 12)
    jan = lunar.next_month(dec, 1)
    assert (jan.year, jan.month, jan.leap) == (2025, 1, False)
    assert lunar.next_month(jan, -1) == dec

    feb = lunar.month(2023, 2)
    leap = lunar.next_month(feb)
    assert (leap.month, leap.leap) == (2, True)
    assert lunar.next_month(feb, 14).year == 2024


def test_new_moons(lunar):
    nms = lunar.new_moons(2024)
    assert len(nms) == 13
    for a, b in zip(nms, nms[1:]):
        assert 29.0 < b.jd - a.jd < 29.9
        assert b.index == a.index + 1
    # 2024-02-10 06:59 Beijing
    assert nms[0].jd == pytest.approx(2460350.5 + (6 + 59 / 60) / 24, abs=3 / 1440)


def test_lunar_day(lunar):
    d = lunar.lunar_day(CivilDateTime(2024, 2, 10))
    assert (d.year, d.month, d.leap, d.day) == (2024, 1, False, 1)
    d = lunar.lunar_day(CivilDateTime(2023, 12, 31))
    assert (d.year, d.month, d.leap, d.day) == (2023, 11, False, 19)
    d = lunar.lunar_day(CivilDateTime(2023, 4, 1))
    assert (d.year, d.month, d.leap, d.day) == (2023, 2, True, 11)
    assert str(d) == "2023-L02-11"


def test_lunar_solar_roundtrip(lunar):
    random.seed(42)
    for _ in range(300):
        z = random.randint(jdn(1950, 3, 1), jdn(2050, 12, 31))
        c = CivilDateTime.from_jd(z).day_start()
        d = lunar.lunar_day(c)
        assert lunar.solar_from_lunar(d.year, d.month_with_leap, d.day) == c
        assert lunar.lunar_date(d.year, d.month_with_leap, d.day) == d


def test_month_sixty_cycle(lunar):
    assert lunar.month(2024, 1).sixty_cycle.name == "丙寅"
    assert lunar.month(2023, 11).sixty_cycle.name == "甲子"
    assert lunar.year_sixty_cycle(2024).name == "甲辰"
    assert lunar.year_sixty_cycle(1984).index == 0


def test_month_offset_exceptions(lunar):
    assert lunar.month_offset(10) == 1
    for year in (239, 240):
        assert lunar.month_offset(year) == 2
