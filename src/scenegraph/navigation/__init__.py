"""Navigation over a compiled SceneGraph."""

from .navigator import Navigator
from .path_finder import PathFinder, ShortestPathFinder
from .visitor import NodeVisitor, VisitTracker, noop_visitor

__all__ = [
    "Navigator",
    "PathFinder",
    "ShortestPathFinder",
    "NodeVisitor",
    "VisitTracker",
    "noop_visitor",
]
