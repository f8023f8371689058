"""Domain layer - Core business models and errors.

This module contains immutable domain models, the derived-metric
functions and typed errors used throughout the application.
No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidLocationError,
    LinkValidationError,
    MalformedLinkError,
    NoRouteFoundError,
    RouteWiseError,
    SameEndpointError,
)
from .metrics import cost_of, emissions_of, time_of
from .models import (
    Link,
    LinkView,
    Location,
    NewLink,
    PathResult,
    TransportMode,
    WeightSelector,
)

__all__ = [
    # Models
    "Location",
    "Link",
    "LinkView",
    "NewLink",
    "PathResult",
    "TransportMode",
    "WeightSelector",
    # Metrics
    "time_of",
    "cost_of",
    "emissions_of",
    # Errors
    "RouteWiseError",
    "InvalidLocationError",
    "SameEndpointError",
    "NoRouteFoundError",
    "MalformedLinkError",
    "GraphError",
    "LinkValidationError",
    "ConfigurationError",
]
