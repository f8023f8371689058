"""Dijkstra route solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Logging of each search and its outcome
- Search timing at DEBUG level
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import Location, PathResult, WeightSelector
from ...graph.builder import Graph
from ...graph.dijkstra import resolve
from ...monitoring import timed


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. It holds no search state:
    every call allocates its own distance, predecessor and visited
    tables, so one instance can serve concurrent searches.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        origin: Location,
        destination: Location,
        weight: WeightSelector = WeightSelector.DISTANCE,
    ) -> Optional[PathResult]:
        """Find the path minimizing ``weight`` between two locations.

        Args:
            graph: The transport network graph.
            origin: Departure location.
            destination: Arrival location.
            weight: Criterion to optimize.

        Returns:
            The optimal PathResult, or None if no path exists.

        Raises:
            InvalidLocationError: If origin or destination is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "origin": origin.name,
                "destination": destination.name,
                "criterion": weight.value,
            },
        )

        with timed(self._logger, f"{weight.value} search"):
            result = resolve(graph, origin, destination, weight)

        if result is None:
            self._logger.info(
                "No route found",
                extra={
                    "origin": origin.name,
                    "destination": destination.name,
                    "criterion": weight.value,
                },
            )
            return None

        self._logger.info(
            "Route found",
            extra={
                "origin": origin.name,
                "destination": destination.name,
                "criterion": weight.value,
                "stops": result.num_stops,
                "distance_km": result.total_distance_km,
            },
        )
        return result
