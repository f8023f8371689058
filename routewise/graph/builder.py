"""Graph construction from flat location and link records.

The graph is rebuilt for every request from the data store snapshot.
Links are undirected: each one is indexed under both endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from ..domain.errors import GraphError, MalformedLinkError
from ..domain.models import Link, Location

Adjacency = Dict[int, List[Tuple[int, Link]]]


@dataclass(frozen=True)
class Graph:
    """Adjacency structure over the transport network.

    Iteration order of ``locations`` and ``adjacency`` follows the input
    order given to ``build_graph``; the resolver relies on it to break
    ties reproducibly.

    Attributes:
        locations: Location id -> Location, in input order
        adjacency: Location id -> (neighbor id, link) pairs, in link input order
    """

    locations: Dict[int, Location] = field(default_factory=dict)
    adjacency: Adjacency = field(default_factory=dict)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self.locations

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[int]:
        return iter(self.locations)

    def neighbors(self, location_id: int) -> List[Tuple[int, Link]]:
        return self.adjacency.get(location_id, [])

    def location(self, location_id: int) -> Location:
        return self.locations[location_id]

    @property
    def num_links(self) -> int:
        """Number of distinct links (each is indexed twice)."""
        return sum(len(pairs) for pairs in self.adjacency.values()) // 2


def build_graph(locations: Sequence[Location], links: Sequence[Link]) -> Graph:
    """Build the adjacency structure for ``locations`` and ``links``.

    Parameters
    ----------
    locations:
        All known locations. Each one gets an entry, even without links.
    links:
        Links between those locations.

    Returns
    -------
    Graph
        Every link appears once in the neighbor list of each endpoint.
        A link whose two endpoints are the same location is indexed once.

    Raises
    ------
    GraphError
        If two locations share the same id.
    MalformedLinkError
        If a link references a location id absent from ``locations``.
    """
    by_id: Dict[int, Location] = {}
    adjacency: Adjacency = {}
    for location in locations:
        if location.id in by_id:
            raise GraphError(
                f"Location id {location.id} is used by both "
                f"{by_id[location.id].name!r} and {location.name!r}"
            )
        by_id[location.id] = location
        adjacency[location.id] = []

    for link in links:
        for endpoint in (link.from_id, link.to_id):
            if endpoint not in by_id:
                raise MalformedLinkError(
                    f"Link {link.id} references unknown location {endpoint}",
                    link_id=link.id,
                    missing_location_id=endpoint,
                )

        adjacency[link.from_id].append((link.to_id, link))
        if link.to_id != link.from_id:
            adjacency[link.to_id].append((link.from_id, link))

    return Graph(locations=by_id, adjacency=adjacency)
