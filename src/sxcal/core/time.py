"""
sxcal.core.time
---------------
Continuous Julian Day <-> civil date-time on the hybrid calendar:
Julian before 1582-10-15, Gregorian from then on. The ten dates
1582-10-05 .. 1582-10-14 do not exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Tuple, Union

from .errors import InvalidDateError

J2000 = 2451545.0

YEAR_MIN = 1
YEAR_MAX = 9999

# year*372 + month*31 + day of 1582-10-15
_GREGORIAN_KEY = 588829


def is_leap_year(year: int) -> bool:
    if year < 1600:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if year == 1582 and month == 10:
        return 21
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def _check(year: int, month: int, day: int, hour: int, minute: int, second: int) -> None:
    if not (YEAR_MIN <= year <= YEAR_MAX):
        raise InvalidDateError(f"year must be in {YEAR_MIN}..{YEAR_MAX}: {year}")
    if not (1 <= month <= 12):
        raise InvalidDateError(f"month must be in 1..12: {month}")
    if year == 1582 and month == 10 and 4 < day < 15:
        raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d} falls in the Julian/Gregorian gap")
    last = 31 if (year == 1582 and month == 10) else days_in_month(year, month)
    if not (1 <= day <= last):
        raise InvalidDateError(f"day must be in 1..{last} for {year:04d}-{month:02d}: {day}")
    if not (0 <= hour <= 23):
        raise InvalidDateError(f"hour must be in 0..23: {hour}")
    if not (0 <= minute <= 59):
        raise InvalidDateError(f"minute must be in 0..59: {minute}")
    if not (0 <= second <= 59):
        raise InvalidDateError(f"second must be in 0..59: {second}")


def julian_day(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: float = 0) -> float:
    """Continuous JD of a civil instant (no validation)."""
    d = day + ((second / 60 + minute) / 60 + hour) / 24
    gregorian = year * 372 + month * 31 + int(d) >= _GREGORIAN_KEY
    if month <= 2:
        month += 12
        year -= 1
    n = 0
    if gregorian:
        n = int(year / 100)
        n = 2 - n + int(n / 4)
    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + d + n - 1524.5


def jdn(year: int, month: int, day: int) -> int:
    """Integer day number of a civil day (the JD of its noon)."""
    return int(julian_day(year, month, day, 12))


def _ymd_from_jdn(z: int) -> tuple[int, int, int]:
    a = z
    if z >= 2299161:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def civil_fields_from_jd(jd: float) -> Tuple[int, int, int, int, int, int]:
    """
    (year, month, day, hour, minute, second) of a JD, rounded to the nearest
    second. Unchecked: any finite JD converts, including years outside the
    range CivilDateTime accepts (JD 0.0 is -4712-01-01 12:00).
    """
    z = math.floor(jd + 0.5)
    secs = int(round((jd + 0.5 - z) * 86400))
    if secs >= 86400:
        z += 1
        secs -= 86400
    year, month, day = _ymd_from_jdn(z)
    return year, month, day, secs // 3600, secs // 60 % 60, secs % 60


def civil_from_jd(jd: float) -> "CivilDateTime":
    """Civil instant of a JD; InvalidDateError outside years 1..9999."""
    return CivilDateTime(*civil_fields_from_jd(jd))


def weekday(jd: float) -> int:
    """Day of week, 0 = Sunday."""
    return int(jd + 0.5 + 7000001) % 7


@dataclass(frozen=True, order=True)
class CivilDateTime:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        _check(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def from_jd(cls, jd: float) -> "CivilDateTime":
        return civil_from_jd(jd)

    @classmethod
    def from_date(cls, d: Union[date, datetime, "CivilDateTime"]) -> "CivilDateTime":
        """Take the calendar fields of a date/datetime as civil labels."""
        if isinstance(d, CivilDateTime):
            return d
        if isinstance(d, datetime):
            return cls(d.year, d.month, d.day, d.hour, d.minute, d.second)
        return cls(d.year, d.month, d.day)

    @property
    def jd(self) -> float:
        return julian_day(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @property
    def jdn(self) -> int:
        return jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        return weekday(self.jd)

    def day_start(self) -> "CivilDateTime":
        return CivilDateTime(self.year, self.month, self.day)

    def next_days(self, n: int) -> "CivilDateTime":
        return civil_from_jd(self.jd + n)

    def is_before(self, other: "CivilDateTime") -> bool:
        return self < other

    def is_after(self, other: "CivilDateTime") -> bool:
        return self > other

    def date_str(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return f"{self.date_str()} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"
