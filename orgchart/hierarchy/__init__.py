"""Management tree construction and lowest-common-manager queries."""

from .tree import EMPTY_ORGANISATION, Hierarchy, HierarchyNode
from .builder import HierarchyBuilder, build_hierarchy
from .path_finder import PathFinder, PathResult, find_shortest_path

__all__ = [
    "EMPTY_ORGANISATION",
    "Hierarchy",
    "HierarchyNode",
    "HierarchyBuilder",
    "build_hierarchy",
    "PathFinder",
    "PathResult",
    "find_shortest_path",
]
