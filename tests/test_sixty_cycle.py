# tests/test_sixty_cycle.py

import random

import pytest

from sxcal.core.time import CivilDateTime, jdn
from sxcal.engines.corrections import DayRouter
from sxcal.engines.sixty_cycle import (
    PROVIDERS,
    DefaultEightCharProvider,
    LunarSect2EightCharProvider,
    SixtyCycle,
    day_cycle,
    get_provider,
    hour_cycle,
    month_branch_from_jie,
    month_cycle,
    year_cycle,
)
from sxcal.engines.solar_terms import SolarTermCalculator


@pytest.fixture(scope="module")
def terms():
    return SolarTermCalculator(DayRouter())


def test_cycle_bounds():
    random.seed(42)
    for _ in range(2000):
        c = SixtyCycle.of(random.randint(-10**7, 10**7))
        assert 0 <= c.index < 60
        assert c.stem == c.index % 10
        assert c.branch == c.index % 12
        assert SixtyCycle.from_stem_branch(c.stem, c.branch) == c
        assert SixtyCycle.from_name(c.name) == c


def test_cycle_validation():
    with pytest.raises(ValueError):
        SixtyCycle(60)
    with pytest.raises(ValueError):
        SixtyCycle.from_stem_branch(0, 1)   # 甲丑 does not exist
    with pytest.raises(ValueError):
        SixtyCycle.from_name("甲")


def test_names():
    assert SixtyCycle(0).name == "甲子"
    assert SixtyCycle(13).name == "丁丑"
    assert SixtyCycle(59).name == "癸亥"
    assert SixtyCycle(59).next().name == "甲子"
    assert SixtyCycle(0).next(-1).name == "癸亥"


def test_day_cycle_fixtures():
    assert day_cycle(jdn(1949, 10, 1)).name == "甲子"
    assert day_cycle(jdn(2000, 1, 1)).name == "戊午"
    assert day_cycle(jdn(2024, 2, 10)).name == "甲辰"
    # consecutive days advance by one
    assert day_cycle(jdn(1949, 10, 2)).index == 1


def test_hour_cycle():
    d = SixtyCycle(0)  # 甲子 day
    assert hour_cycle(d, 0).name == "甲子"
    assert hour_cycle(d, 1).name == "乙丑"
    assert hour_cycle(d, 12).name == "庚午"
    # 23:00 starts the next day's 子 hour: 乙 day -> 丙子
    assert hour_cycle(d, 23).name == "丙子"


def test_month_branch_from_jie():
    assert month_branch_from_jie(3) == 2    # 立春 -> 寅
    assert month_branch_from_jie(1) == 1    # 小寒 -> 丑
    assert month_branch_from_jie(23) == 0   # 大雪 -> 子


def test_year_and_month_pillars(terms):
    before = CivilDateTime(2024, 2, 4, 12)
    after = CivilDateTime(2024, 2, 4, 17)
    assert year_cycle(terms, before).name == "癸卯"
    assert year_cycle(terms, after).name == "甲辰"
    assert month_cycle(terms, before).name == "乙丑"
    assert month_cycle(terms, after).name == "丙寅"
    assert month_cycle(terms, CivilDateTime(2024, 1, 20)).name == "乙丑"
    assert month_cycle(terms, CivilDateTime(2023, 12, 20)).name == "甲子"
    assert month_cycle(terms, CivilDateTime(2024, 1, 3)).name == "甲子"


def test_pillar_bounds(terms):
    random.seed(42)
    provider = DefaultEightCharProvider()
    for _ in range(200):
        z = random.randint(jdn(1950, 1, 1), jdn(2050, 12, 31))
        c = CivilDateTime.from_jd(z + random.random() - 0.5)
        p = provider.four_pillars(terms, c)
        for pillar in (p.year, p.month, p.day, p.hour):
            assert 0 <= pillar.index < 60
            assert (pillar.stem - pillar.branch) % 2 == 0
        assert p.hour.branch == (c.hour + 1) // 2 % 12


def test_providers_differ_only_late_evening(terms):
    default = get_provider("default")
    sect2 = get_provider("sect2")
    assert isinstance(default, DefaultEightCharProvider)
    assert isinstance(sect2, LunarSect2EightCharProvider)
    assert set(PROVIDERS) == {"default", "sect2"}

    late = CivilDateTime(1949, 10, 1, 23, 30)
    assert default.day_pillar(late).name == "乙丑"
    assert sect2.day_pillar(late).name == "甲子"
    # the hour pillar is the same under both
    assert default.four_pillars(terms, late).hour == sect2.four_pillars(terms, late).hour

    noon = CivilDateTime(1949, 10, 1, 12)
    assert default.four_pillars(terms, noon) == sect2.four_pillars(terms, noon)


def test_four_pillars_fixture(terms):
    p = get_provider("default").four_pillars(terms, CivilDateTime(2024, 2, 10, 10))
    assert str(p) == "甲辰 丙寅 甲辰 己巳"


def test_unknown_provider():
    with pytest.raises(KeyError):
        get_provider("nope")
