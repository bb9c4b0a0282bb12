"""Org chart reporting path toolkit."""

from .models.employee import Employee
from .hierarchy import Hierarchy, PathFinder, PathResult, build_hierarchy, find_shortest_path

__all__ = [
    "Employee",
    "Hierarchy",
    "PathFinder",
    "PathResult",
    "build_hierarchy",
    "find_shortest_path",
]
