# tests/test_api.py

import logging
from datetime import date

import pytest

import sxcal
from sxcal import api
from sxcal.bootstrap import build_registry
from sxcal.cli import main
from sxcal.core.log import configure, get_logger
from sxcal.core.types import EngineSpec
from sxcal.engines.calendar import ChineseCalendarEngine
from sxcal.engines.rab_byung import RabByungCalendar
from sxcal.engines.specs import CHINESE, PHUGPA


@pytest.fixture
def fresh_registry():
    """Swap in a private registry for tests that register engines."""
    saved = api._reg()
    reg = build_registry()
    api.set_registry(reg)
    yield reg
    api.set_registry(saved)


# ------------------------------------------------------------
# Registry
# ------------------------------------------------------------

def test_list_engines():
    assert sxcal.list_engines() == ["chinese", "chinese-sect2", "phugpa"]
    assert sxcal.list_engines("chinese") == ["chinese", "chinese-sect2"]
    assert sxcal.list_engines("tibetan") == ["phugpa"]


def test_engine_info():
    info = sxcal.engine_info("chinese")
    assert info["family"] == "chinese"
    assert info["provider"] == "default"
    assert (info["qi_table"], info["shuo_table"]) == ("bundled", "bundled")
    assert sxcal.engine_info("chinese-sect2")["provider"] == "sect2"

    info = sxcal.engine_info("phugpa")
    assert (info["P"], info["Q"]) == (65, 67)
    assert info["years"] == (1950, 2050)


def test_unknown_engine_lists_available():
    with pytest.raises(KeyError, match="phugpa"):
        sxcal.day_info(date(2024, 2, 10), engine="nope")


def test_register_engine(fresh_registry):
    eng = sxcal.make_engine(CHINESE)
    with pytest.raises(KeyError, match="already registered"):
        sxcal.register_engine("chinese", eng)
    sxcal.register_engine("chinese", eng, overwrite=True)
    assert fresh_registry.get("chinese") is eng

    sxcal.register_engine("mine", eng)
    assert "mine" in sxcal.list_engines("chinese")


def test_get_calendar_builds_fresh_engines():
    eng = sxcal.get_calendar("phugpa")
    assert isinstance(eng, RabByungCalendar)
    assert eng is not api._reg().get("phugpa")
    with pytest.raises(KeyError):
        sxcal.get_calendar("nope")


def test_spec_tweak():
    sect2 = CHINESE.tweak(provider="sect2")
    assert sect2.payload.provider == "sect2"
    assert CHINESE.payload.provider == "default"
    assert isinstance(sxcal.make_engine(sect2), ChineseCalendarEngine)

    narrow = sxcal.make_engine(PHUGPA.tweak(years=(1990, 2010)))
    assert (narrow.year_min, narrow.year_max) == (1990, 2010)
    with pytest.raises(sxcal.OutOfRangeError):
        narrow.new_year(1980)

    assert EngineSpec.like("phugpa") is PHUGPA


def test_make_engine_rejects_unknown_payload():
    with pytest.raises(TypeError):
        sxcal.make_engine(EngineSpec(kind="chinese", id=CHINESE.id, payload=object()))


def test_wrong_family():
    with pytest.raises(TypeError):
        sxcal.leap_month(2023, engine="phugpa")
    with pytest.raises(TypeError):
        sxcal.rab_byung_year(2024, engine="chinese")


# ------------------------------------------------------------
# Day lookups
# ------------------------------------------------------------

def test_chinese_day_info():
    info = sxcal.day_info(date(2024, 2, 10))
    assert info.lunar == sxcal.LunarDate(2024, 1, False, 1)
    assert info.year_cycle == "甲辰"
    assert info.day_cycle == "甲辰"
    assert info.solar_term is None
    assert sxcal.day_info(date(2024, 2, 4)).solar_term == "立春"


def test_tibetan_day_info():
    info = sxcal.day_info(date(2024, 2, 10), engine="phugpa")
    assert (info.tibetan.year, info.tibetan.month) == (2024, 1)
    assert info.status in ("normal", "duplicated")


def test_to_gregorian_defaults():
    assert sxcal.to_gregorian(sxcal.LunarDate(2024, 8, False, 15)) == [sxcal.CivilDateTime(2024, 9, 17)]
    assert sxcal.to_gregorian(sxcal.LunarDate(2023, 2, True, 1)) == [sxcal.CivilDateTime(2023, 3, 22)]
    with pytest.raises(ValueError):
        sxcal.to_gregorian(sxcal.LunarDate(2024, 1, False, 1), policy="nope")

    # a Tibetan label is routed to phugpa
    t = sxcal.day_info(date(2024, 3, 1), engine="phugpa").tibetan
    assert sxcal.CivilDateTime(2024, 3, 1) in sxcal.to_gregorian(t)


def test_chinese_operations():
    assert sxcal.leap_month(2023) == 2
    assert len(sxcal.lunar_months(2023)) == 13
    assert len(sxcal.solar_terms(2024)) == 24
    assert sxcal.solar_term_at(date(2024, 2, 5)).name == "立春"
    assert sxcal.new_year_day(2024) == sxcal.CivilDateTime(2024, 2, 10)
    assert sxcal.solar_from_lunar(2023, -2, 1) == sxcal.CivilDateTime(2023, 3, 22)
    assert str(sxcal.four_pillars(sxcal.CivilDateTime(2024, 2, 10, 10))) == "甲辰 丙寅 甲辰 己巳"
    d = sxcal.lunar_day(date(2024, 2, 10))
    assert (d.year, d.month, d.day) == (2024, 1, 1)


def test_tibetan_operations():
    assert sxcal.new_year_day(2024, engine="phugpa") == sxcal.CivilDateTime(2024, 2, 10)
    assert sxcal.rab_byung_year(2024).name == "wood-male-dragon"
    assert len(sxcal.rab_byung_months(2000)) == 13
    with pytest.raises(sxcal.OutOfRangeError):
        sxcal.rab_byung_year(2051)


# ------------------------------------------------------------
# Logging
# ------------------------------------------------------------

def test_configure_logging(monkeypatch):
    logger = configure("debug")
    assert logger.name == "sxcal"
    assert logger.level == logging.DEBUG
    n = len(logger.handlers)
    configure("INFO")
    assert len(logger.handlers) == n

    monkeypatch.setenv("SXCAL_LOG_LEVEL", "error")
    assert configure().level == logging.ERROR
    monkeypatch.delenv("SXCAL_LOG_LEVEL")
    assert configure().level == logging.WARNING

    with pytest.raises(ValueError):
        configure("loud")


def test_get_logger_namespacing():
    assert get_logger("sxcal.engines.lunar").name == "sxcal.engines.lunar"
    assert get_logger("scripts").name == "sxcal.scripts"


# ------------------------------------------------------------
# CLI
# ------------------------------------------------------------

def test_cli_jd(capsys):
    assert main(["jd", "2000-01-01T12:00"]) == 0
    out = capsys.readouterr().out
    assert "JD      = 2451545.000000" in out
    assert "weekday = 6" in out


def test_cli_months(capsys):
    assert main(["months", "2023"]) == 0
    out = capsys.readouterr().out
    assert "leap month 2" in out
    assert "2023-03-22" in out


def test_cli_terms_and_pillars(capsys):
    assert main(["terms", "2024"]) == 0
    assert "立春" in capsys.readouterr().out
    assert main(["pillars", "2024-02-10T10:00"]) == 0
    assert capsys.readouterr().out.strip() == "甲辰 丙寅 甲辰 己巳"


def test_cli_day_shorthand(capsys):
    assert main(["2024-02-10"]) == 0
    assert "甲辰" in capsys.readouterr().out


def test_cli_tibetan(capsys):
    assert main(["tibetan", "--year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "Losar: 2024-02-10" in out
    assert "wood-male-dragon" in out

    assert main(["tibetan", "--year", "2000"]) == 0
    assert "2000-L01" in capsys.readouterr().out

    assert main(["tibetan", "--to-gregorian", "2019-9-1"]) == 0
    assert capsys.readouterr().out.split() == ["2019-10-28"]
    assert main(["tibetan", "--to-gregorian", "2019-8-30"]) == 0
    assert "skipped" in capsys.readouterr().out


def test_cli_engines(capsys):
    assert main(["engines", "--family", "tibetan"]) == 0
    assert capsys.readouterr().out.split() == ["phugpa"]


def test_cli_errors(capsys):
    assert main(["tibetan", "--year", "1940"]) == 2
    assert "sxcal tibetan: error:" in capsys.readouterr().err

    assert main(["day", "2024-02-10", "--engine", "nope"]) == 2
    assert "Unknown engine" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["--log-level", "loud", "jd", "2000-01-01"])

    with pytest.raises(SystemExit) as exc:
        main(["tibetan", "--to-gregorian", "2019-9"])
    assert exc.value.code == 2
    assert "bad Tibetan date '2019-9'" in capsys.readouterr().err
