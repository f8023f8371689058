"""Graph construction and path-finding over the transport network.

This subpackage builds an in-memory adjacency structure from location
and link records and runs the label-setting search on top of it.
"""

from .builder import Graph, build_graph
from .dijkstra import resolve

__all__ = ["Graph", "build_graph", "resolve"]
