"""Per-link derived metrics.

Travel time, monetary cost and CO2 emissions are pure functions of a
link's distance and transport mode. They are shared by the resolver
(as search weights) and by any reporting code.

Modes missing from the tables fall back to the CAR coefficients.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Union

FALLBACK_MODE = "CAR"

# km/h
SPEED_KMH: Dict[str, float] = {
    "CAR": 90.0,
    "BUS": 60.0,
    "METRO": 80.0,
    "WALK": 5.0,
}

# currency units per km (fuel for CAR, ticket price otherwise)
COST_PER_KM: Dict[str, float] = {
    "CAR": 0.5,
    "BUS": 0.15,
    "METRO": 0.2,
    "WALK": 0.0,
}

# kg CO2 per km
EMISSIONS_PER_KM: Dict[str, float] = {
    "CAR": 0.171,
    "BUS": 0.089,
    "METRO": 0.041,
    "WALK": 0.0,
}


def _coefficient(table: Mapping[str, float], mode: Union[str, Enum]) -> float:
    key = mode.value if isinstance(mode, Enum) else mode
    return table.get(str(key).upper(), table[FALLBACK_MODE])


def time_of(distance_km: float, mode: Union[str, Enum]) -> float:
    """Travel time in minutes for ``distance_km`` at the mode's speed."""
    return distance_km / _coefficient(SPEED_KMH, mode) * 60


def cost_of(distance_km: float, mode: Union[str, Enum]) -> float:
    """Monetary cost of travelling ``distance_km`` with ``mode``."""
    return distance_km * _coefficient(COST_PER_KM, mode)


def emissions_of(distance_km: float, mode: Union[str, Enum]) -> float:
    """CO2 emitted (kg) travelling ``distance_km`` with ``mode``."""
    return distance_km * _coefficient(EMISSIONS_PER_KM, mode)
