"""SceneNode - a single named application state and the ways out of it.

Nodes are only ever created through SceneGraph.create_scene. The builder
passed there receives the node and declares its exits with the methods
below, e.g.::

    def settings(scene):
        scene.back_action = lambda: app.buttons["Done"].tap()
        scene.tap(app.cells["About"], to="About")

    graph.create_scene("Settings", settings)
"""

import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..driver.protocols import (
    ExistenceGuard,
    FailureReporter,
    Guard,
    UIElement,
    describe_guard,
)
from ..driver.waiting import wait_for
from ..graph_exceptions import SceneDeclarationError
from .call_site import CallSite

if TYPE_CHECKING:
    from .scene_graph import SceneGraph

# An edge performs the UI interaction; it gets the reporter and the position
# of the navigation call so it can attribute failures to the test.
Edge = Callable[[FailureReporter, CallSite], None]
Gesture = Callable[[], None]
SceneBuilder = Callable[["SceneNode"], None]


class SceneNode:
    """A scene in the graph.

    Attributes:
        back_action: Gesture that returns to wherever this scene was entered
            from. Useful when the same screen is reachable from several places
            and has a back button.
        dismiss_on_use: Once left, this scene can never be returned to via a
            ``back_action``. Meant for menus and dialogs.
        exists_when: Guard that must hold shortly after arriving here.
    """

    def __init__(
        self,
        graph: "SceneGraph",
        name: str,
        builder: SceneBuilder,
        declaration_site: CallSite,
    ) -> None:
        self.name = name
        self.declaration_site = declaration_site
        self.back_action: Gesture | None = None
        self.dismiss_on_use: bool = False
        self.exists_when: Guard | None = None

        self._graph = weakref.ref(graph)
        self._builder = builder
        self._edges: dict[str, Edge] = {}

        # Live only while a synthesized back-edge exists.
        self._return_anchor: str | None = None
        self._back_edge: Edge | None = None

    def __repr__(self) -> str:
        return f"SceneNode({self.name!r})"

    @property
    def graph(self) -> "SceneGraph":
        graph = self._graph()
        if graph is None:
            raise RuntimeError(f"Scene '{self.name}' outlived its graph")
        return graph

    @property
    def edges(self) -> dict[str, Edge]:
        """Declared edges, keyed by destination scene name."""
        return dict(self._edges)

    @property
    def has_back(self) -> bool:
        return self.back_action is not None

    @property
    def return_anchor(self) -> str | None:
        """Scene the live back-edge leads to, or None."""
        return self._return_anchor

    def has_edge_to(self, scene_name: str) -> bool:
        return scene_name in self._edges or scene_name == self._return_anchor

    def action_to(self, scene_name: str) -> Edge | None:
        """Edge to run to get to ``scene_name``; declared edges win over the back-edge."""
        edge = self._edges.get(scene_name)
        if edge is None and scene_name == self._return_anchor:
            edge = self._back_edge
        return edge

    def build(self) -> None:
        """Run the builder so the node registers its edges."""
        self._builder(self)

    def attach_back_edge(self, anchor: str) -> None:
        back_action = self.back_action
        if back_action is None:
            raise ValueError(f"Scene '{self.name}' has no back_action")

        self._return_anchor = anchor
        self._back_edge = lambda reporter, call_site: back_action()

    def detach_back_edge(self) -> None:
        self._return_anchor = None
        self._back_edge = None

    def _add_edge(self, destination: str, edge: Edge) -> None:
        graph = self.graph
        if destination not in graph:
            raise SceneDeclarationError(self.name, destination)

        self._edges[destination] = edge
        if graph.is_compiled:
            graph.connect(self.name, destination)

    # Edge declarations

    def gesture(
        self,
        to: str,
        action: Gesture,
        element: ExistenceGuard | None = None,
        call_site: CallSite | None = None,
    ) -> None:
        """Declare that performing ``action`` moves the app from this scene to ``to``.

        Args:
            to: Destination scene name
            action: Gesture performing the UI interaction
            element: Optional element to wait for before performing the action
            call_site: Where this edge was declared
        """
        declared_at = call_site or CallSite.capture()
        timeout = self.graph.settings.guard_timeout
        poll_interval = self.graph.settings.guard_poll_interval

        def edge(reporter: FailureReporter, navigated_from: CallSite) -> None:
            if element is not None and not wait_for(element, timeout, poll_interval):
                reporter.record_failure(
                    f"Cannot find {describe_guard(element)}",
                    declared_at.file,
                    declared_at.line,
                    expected=False,
                )
                reporter.record_failure(
                    f"Cannot get from {self.name} to {to}. See {declared_at.file}",
                    navigated_from.file,
                    navigated_from.line,
                    expected=False,
                )
            action()

        self._add_edge(to, edge)

    def noop(self, to: str, call_site: CallSite | None = None) -> None:
        """Declare an edge that needs no interaction at all."""
        self.gesture(to, lambda: None, call_site=call_site or CallSite.capture())

    def tap(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(to, element.tap, element=element, call_site=call_site or CallSite.capture())

    def double_tap(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(
            to, element.double_tap, element=element, call_site=call_site or CallSite.capture()
        )

    def type_text(
        self, text: str, into: UIElement, to: str, call_site: CallSite | None = None
    ) -> None:
        self.gesture(
            to,
            lambda: into.type_text(text),
            element=into,
            call_site=call_site or CallSite.capture(),
        )

    def swipe_left(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(
            to, element.swipe_left, element=element, call_site=call_site or CallSite.capture()
        )

    def swipe_right(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(
            to, element.swipe_right, element=element, call_site=call_site or CallSite.capture()
        )

    def swipe_up(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(
            to, element.swipe_up, element=element, call_site=call_site or CallSite.capture()
        )

    def swipe_down(self, element: UIElement, to: str, call_site: CallSite | None = None) -> None:
        self.gesture(
            to, element.swipe_down, element=element, call_site=call_site or CallSite.capture()
        )
