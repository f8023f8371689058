"""Immutable domain models for the RouteWise engine.

All models are frozen dataclasses with slots. They are built at the
start of a request from the data store snapshot and dropped at its end;
nothing here holds mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from .errors import LinkValidationError
from .metrics import cost_of, emissions_of, time_of


class TransportMode(str, Enum):
    """Transport modes a link can be travelled with."""

    CAR = "CAR"
    BUS = "BUS"
    METRO = "METRO"
    WALK = "WALK"


class WeightSelector(Enum):
    """Scalar used as edge weight for one search invocation."""

    DISTANCE = "distance"
    TIME = "time"
    COST = "cost"
    EMISSIONS = "emissions"


@dataclass(frozen=True, slots=True)
class Location:
    """A named point of the transport network.

    Attributes:
        id: Store identity of the location
        name: Display name, also the caller-facing key
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Link:
    """An undirected transport connection between two locations.

    The stored orientation (``from_id`` -> ``to_id``) only reflects how
    the record was entered; traversal works both ways.

    Attributes:
        id: Store identity of the link
        from_id: Location id of the first endpoint
        to_id: Location id of the second endpoint
        distance_km: Length of the link in kilometers
        mode: Transport mode name; unknown modes price like CAR
    """

    id: int
    from_id: int
    to_id: int
    distance_km: float
    mode: str = TransportMode.CAR.value

    def __post_init__(self) -> None:
        """Validate the distance."""
        if self.distance_km < 0:
            raise ValueError(
                f"Link distance must be non-negative, got {self.distance_km}"
            )

    @property
    def time_minutes(self) -> float:
        return time_of(self.distance_km, self.mode)

    @property
    def cost(self) -> float:
        return cost_of(self.distance_km, self.mode)

    @property
    def emissions_kg(self) -> float:
        return emissions_of(self.distance_km, self.mode)

    def weight(self, selector: WeightSelector) -> float:
        """Return the scalar this link contributes under ``selector``."""
        if selector is WeightSelector.DISTANCE:
            return self.distance_km
        if selector is WeightSelector.TIME:
            return self.time_minutes
        if selector is WeightSelector.COST:
            return self.cost
        if selector is WeightSelector.EMISSIONS:
            return self.emissions_kg
        raise ValueError(f"Unknown weight selector: {selector!r}")

    def other_end(self, location_id: int) -> int:
        """Return the endpoint opposite to ``location_id``."""
        if location_id == self.from_id:
            return self.to_id
        if location_id == self.to_id:
            return self.from_id
        raise ValueError(f"Location {location_id} is not an endpoint of link {self.id}")


@dataclass(frozen=True, slots=True)
class LinkView:
    """A link joined with the names of its endpoints, for listings."""

    link: Link
    from_name: str
    to_name: str


@dataclass(frozen=True, slots=True)
class NewLink:
    """Request to persist a new link between two named locations.

    Attributes:
        from_name: Name of the first endpoint
        to_name: Name of the second endpoint
        distance_km: Strictly positive length in kilometers
        mode: One of the TransportMode values
    """

    from_name: str
    to_name: str
    distance_km: float
    mode: TransportMode

    def __post_init__(self) -> None:
        """Validate distance and normalize the mode."""
        if not self.distance_km > 0:
            raise LinkValidationError(
                f"Distance must be positive, got {self.distance_km}",
                field_name="distance_km",
            )
        try:
            mode = TransportMode(str(getattr(self.mode, "value", self.mode)).upper())
        except ValueError as e:
            raise LinkValidationError(
                f"Unknown transport mode: {self.mode}",
                field_name="mode",
                cause=e,
            )
        object.__setattr__(self, "mode", mode)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Optimal path for one weight selector, with its aggregate metrics.

    The totals are plain sums over ``links``. Only the metric named by
    ``criterion`` is optimal; the other three are whatever that path
    happens to cost.

    Attributes:
        locations: Ordered locations from origin to destination (inclusive)
        links: Links traversed, one fewer than ``locations``
        criterion: The weight the path was optimized for, None for a custom one
        total_distance_km: Sum of link distances
        total_time_minutes: Sum of link travel times
        total_cost: Sum of link costs
        total_emissions_kg: Sum of link emissions
    """

    locations: tuple[Location, ...]
    links: tuple[Link, ...] = field(default_factory=tuple)
    criterion: Optional[WeightSelector] = WeightSelector.DISTANCE
    total_distance_km: float = 0.0
    total_time_minutes: float = 0.0
    total_cost: float = 0.0
    total_emissions_kg: float = 0.0

    @classmethod
    def from_path(
        cls,
        locations: Sequence[Location],
        links: Sequence[Link],
        criterion: Optional[WeightSelector],
    ) -> PathResult:
        """Build a result, summing each metric over ``links``."""
        return cls(
            locations=tuple(locations),
            links=tuple(links),
            criterion=criterion,
            total_distance_km=sum(link.distance_km for link in links),
            total_time_minutes=sum(link.time_minutes for link in links),
            total_cost=sum(link.cost for link in links),
            total_emissions_kg=sum(link.emissions_kg for link in links),
        )

    @property
    def names(self) -> tuple[str, ...]:
        """Return the location names along the path."""
        return tuple(location.name for location in self.locations)

    @property
    def num_stops(self) -> int:
        """Return the number of locations in the path."""
        return len(self.locations)

    @property
    def num_hops(self) -> int:
        """Return the number of links traversed."""
        return len(self.links)

    def total_weight(self, selector: WeightSelector) -> float:
        """Return the aggregate matching ``selector``."""
        return sum(link.weight(selector) for link in self.links)
