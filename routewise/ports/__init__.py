"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the route engine and the external
collaborators that supply network data. They enable dependency
injection and make the system testable.
"""

from .network import NetworkRepositoryPort, RouteSolverPort

__all__ = [
    "NetworkRepositoryPort",
    "RouteSolverPort",
]
