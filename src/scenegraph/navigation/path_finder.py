"""Shortest-path search over the routing graph.

The search is an injected capability: anything with a matching
``find_path`` can replace the default. Ties between equally short paths
are resolved by the implementation; callers must not rely on which one
is chosen.
"""

from typing import Protocol

import networkx as nx


class PathFinder(Protocol):
    """Finds a directed, unweighted path between two scenes."""

    def find_path(self, graph: nx.DiGraph, source: str, target: str) -> list[str]:
        """Return the scenes from ``source`` to ``target`` inclusive, or [] if unreachable."""
        ...


class ShortestPathFinder:
    """Breadth-first shortest path via networkx."""

    def find_path(self, graph: nx.DiGraph, source: str, target: str) -> list[str]:
        try:
            return list(nx.shortest_path(graph, source, target))
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            return []
