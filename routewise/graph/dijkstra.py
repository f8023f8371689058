"""Shortest-path computation using Dijkstra's algorithm.

One label-setting search serves every criterion: the caller picks a
WeightSelector and the search only changes how a link's weight is read.
All derived weights are non-negative, which the method requires.

Ties are broken by input order. The heap orders equal tentative
distances by the location's position in the graph (the order locations
were given to ``build_graph``), and relaxation uses a strict ``<`` so the
first link in adjacency order wins among equal-weight alternatives.
"""

from __future__ import annotations

import heapq
from operator import methodcaller
from typing import Callable, Dict, List, Optional, Set, Tuple, Union

from ..domain.errors import InvalidLocationError
from ..domain.models import Link, Location, PathResult, WeightSelector
from .builder import Graph

WeightFn = Callable[[Link], float]

Predecessors = Dict[int, Tuple[int, Link]]


def shortest_path_tree(
    graph: Graph, start: int, end: int, weight_fn: WeightFn
) -> Tuple[Dict[int, float], Predecessors]:
    """Run the search from ``start`` until ``end`` is settled.

    Parameters
    ----------
    graph:
        Transport network as produced by ``build_graph``.
    start:
        Location id the search grows from.
    end:
        Location id that stops the search once settled.
    weight_fn:
        Maps a link to its non-negative weight.

    Returns
    -------
    dict[int, float], dict[int, tuple[int, Link]]
        Tentative distances for every location (``inf`` when unreached)
        and, for each reached location except ``start``, the predecessor
        and the link used to reach it.
    """
    order = {location_id: index for index, location_id in enumerate(graph)}

    distances: Dict[int, float] = {location_id: float("inf") for location_id in graph}
    previous: Predecessors = {}
    distances[start] = 0.0

    heap: List[Tuple[float, int, int]] = [(0.0, order[start], start)]
    visited: Set[int] = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, link in graph.neighbors(u):
            if v in visited:
                continue
            new_distance = current_distance + weight_fn(link)
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = (u, link)
                heapq.heappush(heap, (new_distance, order[v], v))

    return distances, previous


def resolve(
    graph: Graph,
    origin: Location,
    destination: Location,
    weight: Union[WeightSelector, WeightFn] = WeightSelector.DISTANCE,
) -> Optional[PathResult]:
    """Compute the path from ``origin`` to ``destination`` minimizing ``weight``.

    Parameters
    ----------
    graph:
        Transport network as produced by ``build_graph``.
    origin:
        Departure location.
    destination:
        Arrival location. Equal to ``origin`` gives a zero-hop path.
    weight:
        Which per-link scalar defines "shortest". A callable taking a
        Link and returning a non-negative float may be given instead; the
        result then has no ``criterion``.

    Returns
    -------
    PathResult or None
        The optimal path with its four aggregates, or ``None`` when the
        two locations are not connected.

    Raises
    ------
    InvalidLocationError
        If either location is not part of ``graph``.
    """
    for location in (origin, destination):
        if location.id not in graph:
            raise InvalidLocationError(
                f"Location not in graph: {location.name}",
                location_name=location.name,
            )

    if isinstance(weight, WeightSelector):
        weight_fn: WeightFn = methodcaller("weight", weight)
        criterion: Optional[WeightSelector] = weight
    else:
        weight_fn, criterion = weight, None

    distances, previous = shortest_path_tree(graph, origin.id, destination.id, weight_fn)

    if distances[destination.id] == float("inf"):
        return None

    locations: List[Location] = [graph.location(destination.id)]
    links: List[Link] = []
    current = destination.id
    while current != origin.id:
        predecessor, link = previous[current]
        links.append(link)
        locations.append(graph.location(predecessor))
        current = predecessor

    locations.reverse()
    links.reverse()
    return PathResult.from_path(locations, links, criterion)
