"""Services layer - Application orchestration.

Available services:
- RouteFinderService: Finds and compares routes between named locations
"""

from .route_finder import COMPARISON_CRITERIA, COMPARISON_LABELS, RouteFinderService

__all__ = ["RouteFinderService", "COMPARISON_CRITERIA", "COMPARISON_LABELS"]
