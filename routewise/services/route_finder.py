"""Route finder service - Main orchestrator.

Resolves caller-facing location names, builds a fresh graph from the
repository snapshot for each request and runs the solver once per
requested criterion.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import RoutingConfig, get_config
from ..domain.errors import (
    InvalidLocationError,
    LinkValidationError,
    NoRouteFoundError,
    SameEndpointError,
)
from ..domain.models import Link, LinkView, Location, NewLink, PathResult, WeightSelector
from ..graph.builder import Graph, build_graph
from ..ports.network import NetworkRepositoryPort, RouteSolverPort

# Fixed order; position carries the meaning of each comparison entry.
COMPARISON_CRITERIA: Tuple[WeightSelector, ...] = (
    WeightSelector.TIME,
    WeightSelector.COST,
    WeightSelector.EMISSIONS,
)

COMPARISON_LABELS: Dict[WeightSelector, str] = {
    WeightSelector.DISTANCE: "shortest",
    WeightSelector.TIME: "fastest",
    WeightSelector.COST: "cheapest",
    WeightSelector.EMISSIONS: "eco-friendliest",
}


@dataclass
class RouteFinderService:
    """Main service for finding and comparing routes.

    Attributes:
        repository: Supplies locations and links, persists new links
        route_solver: Computes one optimal path per criterion
        config: Comparison execution settings
    """

    repository: NetworkRepositoryPort
    route_solver: RouteSolverPort
    config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_best_by_distance(self, origin: str, destination: str) -> PathResult:
        """Find the distance-optimal route between two named locations.

        Args:
            origin: Name of the departure location.
            destination: Name of the arrival location.

        Returns:
            The shortest PathResult, with time, cost and emissions of that path.

        Raises:
            SameEndpointError: If both names are equal.
            InvalidLocationError: If either name is unknown.
            NoRouteFoundError: If the locations are not connected.
        """
        graph, start, end = self._prepare(origin, destination)

        result = self.route_solver.solve(graph, start, end, WeightSelector.DISTANCE)
        if result is None:
            raise NoRouteFoundError(
                f"No route from {origin} to {destination}",
                origin=origin,
                destination=destination,
                criterion=WeightSelector.DISTANCE.value,
            )
        return result

    def compare_by_alternative_criteria(
        self, origin: str, destination: str
    ) -> List[PathResult]:
        """Find the fastest, cheapest and lowest-emission routes.

        Results keep the order TIME, COST, EMISSIONS. A criterion with no
        path is left out rather than failing the comparison.

        Args:
            origin: Name of the departure location.
            destination: Name of the arrival location.

        Returns:
            Zero to three PathResults.

        Raises:
            SameEndpointError: If both names are equal.
            InvalidLocationError: If either name is unknown.
        """
        graph, start, end = self._prepare(origin, destination)

        if self.config.parallel_comparison:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                futures = [
                    executor.submit(self.route_solver.solve, graph, start, end, criterion)
                    for criterion in COMPARISON_CRITERIA
                ]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [
                self.route_solver.solve(graph, start, end, criterion)
                for criterion in COMPARISON_CRITERIA
            ]

        results = [result for result in outcomes if result is not None]
        self._logger.info(
            "Routes compared",
            extra={
                "origin": origin,
                "destination": destination,
                "found": [result.criterion.value for result in results],
            },
        )
        return results

    def find_best_by_distance_safe(
        self, origin: str, destination: str
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Find the shortest route, returning an error message instead of raising.

        Args:
            origin: Name of the departure location.
            destination: Name of the arrival location.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.find_best_by_distance(origin, destination), None
        except SameEndpointError:
            return None, "Error: Origin and destination must be different"
        except InvalidLocationError as e:
            return None, f"Error: Invalid location name: {e.location_name}"
        except NoRouteFoundError as e:
            return None, f"No route found between {e.origin} and {e.destination}"

    def add_link(self, request: NewLink) -> Link:
        """Persist a new link between two named locations.

        Raises:
            LinkValidationError: If both endpoints are the same location.
            InvalidLocationError: If either name is unknown.
        """
        if request.from_name == request.to_name:
            raise LinkValidationError(
                "A link must connect two different locations",
                field_name="to_name",
            )
        return self.repository.add_link(request)

    def list_locations(self) -> Sequence[Location]:
        return sorted(self.repository.list_locations(), key=lambda loc: loc.name)

    def list_links(self) -> Sequence[LinkView]:
        return self.repository.list_link_views()

    def format_result(self, route: PathResult) -> str:
        """Format a route as a human-readable string."""
        path_str = " -> ".join(route.names)
        legs = "\n".join(
            f"  {route.locations[i].name} -> {route.locations[i + 1].name}: "
            f"{link.distance_km:g} km by {link.mode}"
            for i, link in enumerate(route.links)
        )
        label = COMPARISON_LABELS.get(route.criterion, "best")
        result = (
            f"{label.capitalize()} route: {path_str}\n"
            f"Total distance: {route.total_distance_km:.1f} km\n"
            f"Total time: {route.total_time_minutes:.0f} min\n"
            f"Estimated cost: {route.total_cost:.2f}\n"
            f"CO2 emissions: {route.total_emissions_kg:.2f} kg"
        )
        if legs:
            result += f"\n{legs}"
        return result

    def _prepare(self, origin: str, destination: str) -> Tuple[Graph, Location, Location]:
        if origin == destination:
            raise SameEndpointError(
                "Origin and destination must be different",
                location_name=origin,
            )

        locations = self.repository.list_locations()
        by_name = {location.name: location for location in locations}
        for name in (origin, destination):
            if name not in by_name:
                raise InvalidLocationError(
                    f"Invalid location name: {name}",
                    location_name=name,
                )

        graph = build_graph(locations, self.repository.list_links())
        self._logger.debug(
            "Graph built",
            extra={"nodes": len(graph), "links": graph.num_links},
        )
        return graph, by_name[origin], by_name[destination]
