"""Network ports - Abstractions for the data store and routing.

The repository is the external data-store collaborator: it hands out a
snapshot of locations and links per request and owns persistence of new
links. The solver computes one optimal path per weight selector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import (
        Link,
        LinkView,
        Location,
        NewLink,
        PathResult,
        WeightSelector,
    )
    from ..graph.builder import Graph


class NetworkRepositoryPort(Protocol):
    """Port for reading and extending the transport network.

    Implementations:
    - adapters/network/csv_repository.py (CSVNetworkRepository)
    - adapters/network/memory_repository.py (InMemoryNetworkRepository)
    """

    def list_locations(self) -> Sequence[Location]:
        """Fetch all locations.

        Returns:
            Every known location, in a stable order.
        """
        ...

    def list_links(self) -> Sequence[Link]:
        """Fetch all links.

        Returns:
            Every stored link, in a stable order.
        """
        ...

    def list_link_views(self) -> Sequence[LinkView]:
        """Fetch all links joined with their endpoint names.

        Returns:
            Links with endpoint names, newest first.
        """
        ...

    def get_location_by_name(self, name: str) -> Optional[Location]:
        """Look up a location by its display name.

        Args:
            name: Exact location name.

        Returns:
            The location, or None if unknown.
        """
        ...

    def add_link(self, request: NewLink) -> Link:
        """Persist a new link between two named locations.

        Args:
            request: Endpoint names, distance and mode.

        Returns:
            The stored link with its assigned id.

        Raises:
            InvalidLocationError: If either name is unknown.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (resolve)
    """

    def solve(
        self,
        graph: Graph,
        origin: Location,
        destination: Location,
        weight: WeightSelector,
    ) -> Optional[PathResult]:
        """Find the path minimizing ``weight`` between two locations.

        Args:
            graph: The transport network graph.
            origin: Departure location.
            destination: Arrival location.
            weight: Criterion to optimize.

        Returns:
            The optimal PathResult, or None if no path exists.
        """
        ...
