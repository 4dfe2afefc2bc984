from __future__ import annotations

import argparse
import math
import re
import sys

from sxcal.core.errors import SxcalError
from sxcal.core.time import CivilDateTime


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")
_DATETIME_RE = re.compile(r"^(-?\d{1,4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})(?::(\d{2}))?$")
_TIBETAN_RE = re.compile(r"^(\d{1,4})-(\d{1,2})-(\d{1,2})$")


def _parse_civil(s: str) -> CivilDateTime:
    """YYYY-MM-DD or YYYY-MM-DDTHH:MM[:SS], Beijing civil time."""
    m = _DATETIME_RE.match(s)
    if m:
        y, mo, d, h, mi, sec = m.groups()
        return CivilDateTime(int(y), int(mo), int(d), int(h), int(mi), int(sec or 0))
    if _DATE_RE.match(s):
        y, mo, d = s.rsplit("-", 2)
        return CivilDateTime(int(y), int(mo), int(d))
    raise argparse.ArgumentTypeError(f"bad date '{s}', expected YYYY-MM-DD[THH:MM[:SS]]")


def _parse_tibetan(s: str) -> tuple[int, int, int]:
    """Y-M-D of a Tibetan date label; range checks are left to the engine."""
    m = _TIBETAN_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"bad Tibetan date '{s}', expected Y-M-D")
    y, mo, d = (int(x) for x in m.groups())
    return y, mo, d


def cmd_jd(argv: list[str]) -> int:
    from sxcal.core.time import weekday

    p = argparse.ArgumentParser(prog="sxcal jd", description="Civil date/time -> Julian day")
    p.add_argument("date", type=_parse_civil, help="YYYY-MM-DD[THH:MM[:SS]]")
    args = p.parse_args(argv)

    c = args.date
    print(f"civil   = {c}")
    print(f"JD      = {c.jd:.6f}")
    print(f"JDN     = {c.jdn}")
    print(f"weekday = {weekday(c.jd)} (0 = Sunday)")
    return 0


def cmd_terms(argv: list[str]) -> int:
    import sxcal

    p = argparse.ArgumentParser(prog="sxcal terms", description="The 24 solar terms of a year (index 0 = previous winter solstice)")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="chinese")
    args = p.parse_args(argv)

    for t in sxcal.solar_terms(args.year, engine=args.engine):
        kind = "qi " if t.is_qi else "jie"
        print(f"{t.index:2d}  {t.name}  {kind}  {t.civil_datetime}")
    return 0


def cmd_months(argv: list[str]) -> int:
    import sxcal

    p = argparse.ArgumentParser(prog="sxcal months", description="Lunar months of a Chinese lunar year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="chinese")
    args = p.parse_args(argv)

    leap = sxcal.leap_month(args.year, engine=args.engine)
    print(f"lunar year {args.year}: leap month {leap if leap else 'none'}")
    for m in sxcal.lunar_months(args.year, engine=args.engine):
        print(f"  {'L' if m.leap else ' '}{m.month:2d}  {m.sixty_cycle.name}  {m.day_count}d  {m.first_day.date_str()}")
    return 0


def cmd_day(argv: list[str]) -> int:
    import sxcal

    p = argparse.ArgumentParser(prog="sxcal day", description="Civil date -> lunar date, cycles and solar term")
    p.add_argument("date", type=_parse_civil, help="YYYY-MM-DD[THH:MM[:SS]]")
    p.add_argument("--engine", default="chinese")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    print(sxcal.day_info(args.date, engine=args.engine, debug=args.debug))
    return 0


def cmd_pillars(argv: list[str]) -> int:
    import sxcal

    p = argparse.ArgumentParser(prog="sxcal pillars", description="Four pillars (year, month, day, hour) of a civil instant")
    p.add_argument("date", type=_parse_civil, help="YYYY-MM-DD[THH:MM[:SS]]")
    p.add_argument("--engine", default="chinese")
    args = p.parse_args(argv)

    print(sxcal.four_pillars(args.date, engine=args.engine))
    return 0


def cmd_tibetan(argv: list[str]) -> int:
    import sxcal
    from sxcal.core.types import RabByungDate

    p = argparse.ArgumentParser(prog="sxcal tibetan", description="Tibetan Rab-Byung calendar")
    p.add_argument("date", nargs="?", type=_parse_civil, help="civil date to label")
    p.add_argument("--engine", default="phugpa")
    p.add_argument("--year", type=int, help="print Losar and the months of a Tibetan year")
    p.add_argument("--to-gregorian", metavar="Y-M-D", type=_parse_tibetan, help="Tibetan date -> civil date(s)")
    p.add_argument("--leap", action="store_true", help="with --to-gregorian: the leap month")
    p.add_argument("--occ", type=int, default=1, choices=(1, 2))
    p.add_argument("--policy", default="all", choices=("all", "occ", "first", "second", "raise"))
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    if args.year is not None:
        print(sxcal.rab_byung_year(args.year, engine=args.engine))
        print(f"Losar: {sxcal.new_year_day(args.year, engine=args.engine).date_str()}")
        for m in sxcal.rab_byung_months(args.year, engine=args.engine):
            print(f"  {m}")
        return 0

    if args.to_gregorian is not None:
        y, mo, d = args.to_gregorian
        t = RabByungDate(y, mo, args.leap, d, args.occ)
        days = sxcal.to_gregorian(t, engine=args.engine, policy=args.policy)
        if not days:
            print(f"{t}: skipped")
        for c in days:
            print(c.date_str())
        return 0

    if args.date is None:
        p.error("give a date, --year or --to-gregorian")
    print(sxcal.day_info(args.date, engine=args.engine, debug=args.debug))
    return 0


def cmd_engines(argv: list[str]) -> int:
    import sxcal

    p = argparse.ArgumentParser(prog="sxcal engines", description="List registered engines")
    p.add_argument("--family", choices=("chinese", "tibetan"))
    p.add_argument("--info", action="store_true")
    args = p.parse_args(argv)

    for name in sxcal.list_engines(args.family):
        if args.info:
            print(f"{name}: {sxcal.engine_info(name)}")
        else:
            print(name)
    return 0


def cmd_astro(argv: list[str]) -> int:
    from sxcal.engines.astro.deltat import delta_t_seconds
    from sxcal.engines.astro.series import moon_apparent_longitude, sun_apparent_longitude

    p = argparse.ArgumentParser(prog="sxcal astro", description="Apparent Sun and Moon longitudes at a Julian date (TT)")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0)")
    args = p.parse_args(argv)

    jd = float(args.jd_tt)
    t = (jd - 2451545.0) / 36525
    sun = math.degrees(sun_apparent_longitude(t)) % 360
    moon = math.degrees(moon_apparent_longitude(t)) % 360
    year = 2000 + t * 100

    print(f"JD_TT = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {t:.12f}")
    print(f"  Sun  apparent longitude = {sun:.6f} deg")
    print(f"  Moon apparent longitude = {moon:.6f} deg")
    print(f"  elongation              = {(moon - sun) % 360:.6f} deg")
    print(f"  Delta T                 = {delta_t_seconds(year):.2f} s")
    return 0


_COMMANDS = {
    "jd": (cmd_jd, "Civil date/time -> Julian day"),
    "terms": (cmd_terms, "The 24 solar terms of a year"),
    "months": (cmd_months, "Lunar months of a Chinese lunar year"),
    "day": (cmd_day, "Civil date -> lunar date and cycles"),
    "pillars": (cmd_pillars, "Four pillars of a civil instant"),
    "tibetan": (cmd_tibetan, "Tibetan Rab-Byung calendar"),
    "engines": (cmd_engines, "List registered engines"),
    "astro": (cmd_astro, "Apparent Sun and Moon longitudes"),
}


def main(argv: list[str] | None = None) -> int:
    from sxcal.core.log import configure

    if argv is None:
        argv = sys.argv[1:]

    # shorthand: `sxcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="sxcal", description="Chinese (and Tibetan) calendar toolkit CLI.")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ... (default: $SXCAL_LOG_LEVEL)")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text, add_help=False)

    args, rest = p.parse_known_args(argv)
    try:
        configure(args.log_level)
    except ValueError as e:
        p.error(str(e))

    fn, _ = _COMMANDS[args.cmd]
    try:
        return fn(rest)
    except (SxcalError, KeyError) as e:
        print(f"sxcal {args.cmd}: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
