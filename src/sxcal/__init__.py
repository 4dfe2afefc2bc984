"""sxcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    list_engines,
    engine_info,
    make_engine,
    get_calendar,
    register_engine,
    solar_terms,
    solar_term_at,
    lunar_months,
    leap_month,
    lunar_day,
    solar_from_lunar,
    four_pillars,
    new_year_day,
    rab_byung_year,
    rab_byung_months,
)
from .core.errors import InvalidDateError, OutOfRangeError, SolverConvergenceError, SxcalError
from .core.time import CivilDateTime, julian_day, weekday
from .core.types import LunarDate, RabByungDate

__all__ = [
    "day_info",
    "to_gregorian",
    "list_engines",
    "engine_info",
    "make_engine",
    "get_calendar",
    "register_engine",
    "solar_terms",
    "solar_term_at",
    "lunar_months",
    "leap_month",
    "lunar_day",
    "solar_from_lunar",
    "four_pillars",
    "new_year_day",
    "rab_byung_year",
    "rab_byung_months",
    "CivilDateTime",
    "julian_day",
    "weekday",
    "LunarDate",
    "RabByungDate",
    "SxcalError",
    "InvalidDateError",
    "OutOfRangeError",
    "SolverConvergenceError",
]
