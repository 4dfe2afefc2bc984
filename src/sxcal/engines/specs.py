from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Optional, Tuple

from ..core.types import EngineId, EngineSpec
from .arithmetic_month import ArithmeticMonthParams
from .trad_day import TraditionalDayParams


# ============================================================
# CHINESE
# ============================================================

@dataclass(frozen=True)
class ChineseSpec:
    id: EngineId
    provider: str = "default"           # eight-char provider name
    qi_table: Optional[str] = None      # encoded solar-term corrections overriding the bundled ones
    shuo_table: Optional[str] = None    # encoded new-moon corrections overriding the bundled ones
    load_env_tables: bool = True        # also search SXCAL_*_TABLE and the user cache
    meta: Dict[str, Any] = field(default_factory=dict)


CHINESE_ID = EngineId("chinese", "chinese", "0.1")
CHINESE = EngineSpec(
    kind="chinese",
    id=CHINESE_ID,
    payload=ChineseSpec(id=CHINESE_ID, meta={"day_boundary": "23:00"}),
)

CHINESE_SECT2_ID = EngineId("chinese", "chinese-sect2", "0.1")
CHINESE_SECT2 = EngineSpec(
    kind="chinese",
    id=CHINESE_SECT2_ID,
    payload=ChineseSpec(id=CHINESE_SECT2_ID, provider="sect2", meta={"day_boundary": "00:00"}),
)


# ============================================================
# TIBETAN
# ============================================================

# Tibetan month ratio in the P < Q convention: 65 labels per 67 lunations
P_TIB = 65
Q_TIB = 67

# mean motions per lunation
M1_TIB = Fraction(167025, 5656)
S1_TIB = Fraction(65, 804)
A1_TIB = Fraction(253, 3528)
A2_STD = Fraction(1, 28)

MOON_TAB_QUARTER = (0, 5, 10, 15, 19, 22, 24, 25)   # N = 28
SUN_TAB_QUARTER = (0, 6, 10, 11)                    # N = 12


@dataclass(frozen=True)
class RabByungSpec:
    id: EngineId
    month_params: ArithmeticMonthParams
    day_params: TraditionalDayParams
    years: Tuple[int, int] = (1950, 2050)
    meta: Dict[str, Any] = field(default_factory=dict)


def trad_month(*, Y0: int, M0: int = 3, beta_star: int, tau: int) -> ArithmeticMonthParams:
    return ArithmeticMonthParams(Y0=Y0, M0=M0, P=P_TIB, Q=Q_TIB, beta_star=beta_star, tau=tau)


def trad_day(
    *,
    m0: Fraction,
    s0: Fraction,
    a0: Fraction,
    m1: Fraction = M1_TIB,
    s1: Fraction = S1_TIB,
    a1: Fraction = A1_TIB,
    a2: Fraction = A2_STD,
) -> TraditionalDayParams:
    return TraditionalDayParams(
        m0=m0,
        m1=m1,
        m2=m1 / 30,
        s0=s0,
        s1=s1,
        s2=s1 / 30,
        a0=a0,
        a1=a1,
        a2=a2,
        moon_tab_quarter=MOON_TAB_QUARTER,
        sun_tab_quarter=SUN_TAB_QUARTER,
    )


# PHUGPA, epoch month 1987/3
PHUGPA_ID = EngineId("tibetan", "phugpa", "0.1")
PHUGPA_SPEC = RabByungSpec(
    id=PHUGPA_ID,
    month_params=trad_month(Y0=1987, M0=3, beta_star=0, tau=48),
    day_params=trad_day(
        m0=Fraction(1729968333, 707),
        s0=Fraction(0),
        a0=Fraction(38, 49),
    ),
    meta={"epoch": "E1987", "tradition": "phugpa"},
)
PHUGPA = EngineSpec(kind="rab_byung", id=PHUGPA_ID, payload=PHUGPA_SPEC)


ALL_SPECS: Dict[str, EngineSpec] = {
    "chinese": CHINESE,
    "chinese-sect2": CHINESE_SECT2,
    "phugpa": PHUGPA,
}
