"""Network adapters - Implementations of network-related ports.

Available implementations:
- CSVNetworkRepository: Loads and appends network data in CSV files
- InMemoryNetworkRepository: Keeps network data in process memory
- DijkstraRouteSolver: Finds optimal paths using Dijkstra's algorithm
"""

from .csv_repository import CSVNetworkRepository
from .dijkstra_solver import DijkstraRouteSolver
from .memory_repository import InMemoryNetworkRepository

__all__ = ["CSVNetworkRepository", "DijkstraRouteSolver", "InMemoryNetworkRepository"]
