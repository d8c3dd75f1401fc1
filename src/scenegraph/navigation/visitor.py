"""Traversal visitors.

A NodeVisitor passed to ``Navigator.goto`` is called with the name of each
scene as it is left, not as it is entered.
"""

from collections.abc import Callable, Iterable

NodeVisitor = Callable[[str], None]


def noop_visitor(scene_name: str) -> None:
    pass


class VisitTracker:
    """De-duplicates visits for ``visit_nodes``.

    Every scene passed to ``visit`` is marked visited. The wrapped visitor is
    only called for requested scenes, and only the first time.
    """

    def __init__(self, requested: Iterable[str], visitor: NodeVisitor) -> None:
        self.requested = set(requested)
        self.visitor = visitor
        self.visited: set[str] = set()
        self.reported: set[str] = set()

    def __call__(self, scene_name: str) -> None:
        self.visit(scene_name)

    def has_visited(self, scene_name: str) -> bool:
        return scene_name in self.visited

    def visit(self, scene_name: str) -> None:
        if scene_name in self.requested and scene_name not in self.visited:
            self.visitor(scene_name)
            self.reported.add(scene_name)
        self.visited.add(scene_name)
