"""Typed domain errors for the RouteWise engine.

Every failure the engine can surface to a caller has its own type, so
front-ends can decide how to present it. A missing route is not in this
list as a resolver outcome: the resolver returns ``None`` and only the
single-criterion service call turns that into ``NoRouteFoundError``.

All errors inherit from RouteWiseError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteWiseError(Exception):
    """Base error for the route engine domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidLocationError(RouteWiseError):
    """A requested origin or destination is not a known location.

    Attributes:
        location_name: The name (or id) that could not be resolved
    """

    location_name: str = ""


@dataclass
class SameEndpointError(RouteWiseError):
    """Origin and destination are the same location.

    Attributes:
        location_name: The repeated location name
    """

    location_name: str = ""


@dataclass
class NoRouteFoundError(RouteWiseError):
    """No path connects the requested locations.

    Attributes:
        origin: Origin location name
        destination: Destination location name
        criterion: Name of the weight the search ran with
    """

    origin: str = ""
    destination: str = ""
    criterion: str = ""


@dataclass
class MalformedLinkError(RouteWiseError):
    """A link references a location absent from the location set.

    Raised by the graph builder; the whole request fails because the
    data store handed over an inconsistent snapshot.

    Attributes:
        link_id: Identifier of the offending link
        missing_location_id: The endpoint id that has no location
    """

    link_id: Optional[int] = None
    missing_location_id: Optional[int] = None


@dataclass
class GraphError(RouteWiseError):
    """Network loading, persistence or data integrity error.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class LinkValidationError(RouteWiseError):
    """A new link request carries an invalid field.

    Attributes:
        field_name: Name of the rejected field
    """

    field_name: str = ""


@dataclass
class ConfigurationError(RouteWiseError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
