"""Navigator - moves the app under test around its SceneGraph.

You can ``goto`` scenes, ``visit_nodes`` several of them, or ``visit_all``,
but mostly you just goto. If the test moves the app by other means, tell the
navigator where it now is with ``now_at``.

Navigation failures are recorded through the FailureReporter and never
raised; the navigator's position only changes on a completed hop or an
explicit resync.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..base_exceptions import SceneGraphException
from ..driver.protocols import FailureReporter, describe_guard
from ..driver.waiting import wait_for
from ..logging import get_navigation_logger
from ..model.call_site import CallSite
from .visitor import NodeVisitor, VisitTracker, noop_visitor

if TYPE_CHECKING:
    from ..model.scene_graph import SceneGraph


class Navigator:
    """Tracks where the app is and replays edges to get somewhere else.

    Not thread-safe: one navigator per test, driven by the test's thread.
    """

    def __init__(self, graph: "SceneGraph", reporter: FailureReporter, initial_scene: str) -> None:
        self.graph = graph
        self.reporter = reporter
        self._current = initial_scene
        self._return_anchor = initial_scene
        self._log = get_navigation_logger()

    @property
    def current_scene(self) -> str:
        return self._current

    @property
    def return_anchor(self) -> str:
        """Most recent scene left that was not ``dismiss_on_use``."""
        return self._return_anchor

    def goto(
        self,
        scene_name: str,
        visitor: NodeVisitor | None = None,
        call_site: CallSite | None = None,
    ) -> bool:
        """Move the application to the named scene.

        Args:
            scene_name: Destination scene
            visitor: Called with each scene name as it is left
            call_site: Where the request was made (captured if omitted)

        Returns:
            True if the destination was reached, False if a failure was recorded
        """
        call_site = call_site or CallSite.capture()
        visitor = visitor or noop_visitor

        if scene_name not in self.graph:
            self._fail(f"Cannot route to {scene_name}, because it doesn't exist", call_site)
            self._log.log_route_failure(self._current, scene_name, "unknown_destination")
            return False

        path = self.graph.find_route(self._current, scene_name)
        if not path:
            self._fail(f"Cannot route from {self._current} to {scene_name}", call_site)
            self._log.log_route_failure(self._current, scene_name, "no_route")
            return False

        for next_name in path[1:]:
            self._hop(next_name, scene_name, visitor, call_site)
        return True

    def _hop(self, next_name: str, destination: str, visitor: NodeVisitor, call_site: CallSite) -> None:
        current = self.graph.scene(self._current)
        next_scene = self.graph.scene(next_name)

        if not current.dismiss_on_use:
            self._return_anchor = current.name

        action = current.action_to(next_name)
        if action is None:
            raise SceneGraphException(
                f"Route uses '{current.name}' -> '{next_name}' but no such edge exists",
                error_code="MISSING_EDGE",
                context={"source": current.name, "destination": next_name},
            )
        action(self.reporter, call_site)

        guard = next_scene.exists_when
        if guard is not None and not wait_for(
            guard, self.graph.settings.guard_timeout, self.graph.settings.guard_poll_interval
        ):
            site = next_scene.declaration_site
            self.reporter.record_failure(
                f"Cannot find {describe_guard(guard)} in {next_scene.name}",
                site.file,
                site.line,
                expected=False,
            )

        if (
            next_scene.has_back
            and next_scene.return_anchor is None
            and self._return_anchor != next_scene.name
        ):
            self.graph.graft_back_edge(next_scene, self._return_anchor)

        if current.return_anchor is not None and current.return_anchor == next_scene.name:
            self.graph.prune_back_edge(current)

        self._log.log_hop(current.name, next_scene.name, destination)
        visitor(current.name)
        self._current = next_scene.name

    def now_at(self, scene_name: str, call_site: CallSite | None = None) -> bool:
        """Re-sync the navigator when the app was moved outside its control.

        Needing this often suggests a missing scene, or a scene that should be
        ``dismiss_on_use``. No edges run and back-edges are left alone.

        Returns:
            True if the position was updated
        """
        call_site = call_site or CallSite.capture()
        if scene_name not in self.graph:
            self._fail(
                f"Cannot force to unknown {scene_name}. Currently at {self._current}", call_site
            )
            return False

        self._log.log_resync(self._current, scene_name)
        self._current = scene_name
        return True

    def visit_nodes(
        self,
        scene_names: Iterable[str],
        visitor: NodeVisitor,
        call_site: CallSite | None = None,
    ) -> set[str]:
        """Visit the named scenes, calling ``visitor`` the first time each is encountered.

        Scenes passed through on the way to a requested scene count as visited,
        so a single goto can satisfy several requests. Unreachable scenes are
        reported and skipped.

        Returns:
            Names the visitor was called with
        """
        call_site = call_site or CallSite.capture()
        # Each requested name is attempted once, even if the first attempt failed.
        scene_names = list(dict.fromkeys(scene_names))
        tracker = VisitTracker(scene_names, visitor)

        for name in scene_names:
            if tracker.has_visited(name):
                continue
            if name == self._current:
                tracker.visit(name)
                continue
            self.goto(name, visitor=tracker, call_site=call_site)

        # Hops only report departures; the scene we end on has not been seen yet.
        tracker.visit(self._current)
        return tracker.reported

    def visit_all(self, visitor: NodeVisitor, call_site: CallSite | None = None) -> set[str]:
        """Visit every scene in the graph, in no particular order.

        Some scenes may not be reachable depending on the state of the app.
        """
        call_site = call_site or CallSite.capture()
        return self.visit_nodes(self.graph.scene_names, visitor, call_site=call_site)

    def revert(self, call_site: CallSite | None = None) -> None:
        """Move the app back to the graph's initial scene, if it has one."""
        call_site = call_site or CallSite.capture()
        if self.graph.initial_scene is not None:
            self.goto(self.graph.initial_scene, call_site=call_site)

    def _fail(self, message: str, call_site: CallSite) -> None:
        self.reporter.record_failure(message, call_site.file, call_site.line, expected=False)
