from __future__ import annotations

from sxcal.core.engine import EngineRegistry
from sxcal.engines.factory import make_engine
from sxcal.engines.specs import ALL_SPECS


def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    return EngineRegistry(engines)
