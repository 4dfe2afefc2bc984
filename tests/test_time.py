# tests/test_time.py

import pytest
import random
from datetime import date, datetime

from sxcal.core.errors import InvalidDateError
from sxcal.core.time import (
    CivilDateTime,
    civil_fields_from_jd,
    civil_from_jd,
    days_in_month,
    is_leap_year,
    jdn,
    julian_day,
    weekday,
    _ymd_from_jdn,
)


def test_jdn_date_roundtrip():
    random.seed(42)
    # years 1..9999
    for _ in range(10000):
        z = random.randint(1721426, 5373484)
        assert jdn(*_ymd_from_jdn(z)) == z


def test_jd_civil_roundtrip():
    """Civil instants are rounded to the second, so JDs survive within ~6e-6 day."""
    random.seed(42)
    for _ in range(2000):
        jd_in = random.uniform(1800000.0, 2600000.0)
        jd_out = civil_from_jd(jd_in).jd
        assert jd_in == pytest.approx(jd_out, abs=1e-5)


def test_civil_jd_roundtrip_exact():
    random.seed(42)
    for _ in range(2000):
        y = random.randint(1, 9998)
        m = random.randint(1, 12)
        d = random.randint(1, 28)
        if y == 1582 and m == 10 and 4 < d < 15:
            continue
        c = CivilDateTime(y, m, d, random.randint(0, 23), random.randint(0, 59), random.randint(0, 59))
        assert CivilDateTime.from_jd(c.jd) == c


def test_civil_fields_unchecked():
    assert civil_fields_from_jd(0.0) == (-4712, 1, 1, 12, 0, 0)
    assert civil_fields_from_jd(-0.5) == (-4712, 1, 1, 0, 0, 0)
    assert civil_fields_from_jd(-1.0) == (-4713, 12, 31, 12, 0, 0)
    assert civil_fields_from_jd(2451545.0) == (2000, 1, 1, 12, 0, 0)
    assert civil_fields_from_jd(2451544.5 - 1e-9) == (2000, 1, 1, 0, 0, 0)
    # the validated form keeps the 1..9999 year range
    with pytest.raises(InvalidDateError, match="year"):
        CivilDateTime.from_jd(0.0)


def test_known_epochs():
    assert julian_day(2000, 1, 1, 12) == 2451545.0
    assert jdn(2000, 1, 1) == 2451545
    assert jdn(1949, 10, 1) == 2433191
    # Meeus 7.a
    assert julian_day(1957, 10, 4, 19, 26, 24) == pytest.approx(2436116.31, abs=1e-6)
    # Meeus 7.b (Julian calendar)
    assert julian_day(333, 1, 27, 12) == 1842713.0


def test_gregorian_switch():
    """1582-10-04 (Julian) is followed directly by 1582-10-15 (Gregorian)."""
    assert jdn(1582, 10, 15) - jdn(1582, 10, 4) == 1
    assert CivilDateTime.from_jd(2299160.5) == CivilDateTime(1582, 10, 15)
    assert CivilDateTime.from_jd(2299159.5) == CivilDateTime(1582, 10, 4)


@pytest.mark.parametrize("day", range(5, 15))
def test_gap_dates_rejected(day):
    with pytest.raises(InvalidDateError):
        CivilDateTime(1582, 10, day)


def test_leap_rules():
    assert is_leap_year(1500)       # Julian
    assert not is_leap_year(1700)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert days_in_month(1582, 10) == 21
    assert days_in_month(2024, 2) == 29

    CivilDateTime(1500, 2, 29)
    with pytest.raises(InvalidDateError):
        CivilDateTime(1900, 2, 29)


def test_field_validation():
    for args in [(2024, 13, 1), (2024, 0, 1), (2024, 4, 31), (2024, 1, 1, 24), (2024, 1, 1, 0, 60), (0, 1, 1)]:
        with pytest.raises(InvalidDateError):
            CivilDateTime(*args)
    # InvalidDateError is also a ValueError
    with pytest.raises(ValueError):
        CivilDateTime(2023, 2, 29)


def test_weekday():
    assert weekday(2451545.0) == 6           # 2000-01-01, Saturday
    assert CivilDateTime(2024, 2, 10).weekday == 6
    assert CivilDateTime(1949, 10, 1).weekday == 6
    assert CivilDateTime(2024, 2, 12).weekday == 1


def test_helpers():
    c = CivilDateTime(2024, 2, 10, 13, 5, 7)
    assert c.day_start() == CivilDateTime(2024, 2, 10)
    assert c.next_days(20).date_str() == "2024-03-01"
    assert c.is_after(c.day_start())
    assert c.day_start().is_before(c)
    assert str(c) == "2024-02-10 13:05:07"
    assert CivilDateTime.from_date(date(2024, 2, 10)) == CivilDateTime(2024, 2, 10)
    assert CivilDateTime.from_date(datetime(2024, 2, 10, 13, 5, 7)) == c
