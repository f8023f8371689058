"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the route engine to its data store (CSV files or memory)
and to the path-finding algorithm.
"""
