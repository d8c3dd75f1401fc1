"""SceneGraph - the declared map of an app's scenes and how to move between them.

Build one graph for the app, share it across tests, and create a fresh
Navigator per test. Nodes are registered eagerly but their edges are only
collected when the graph is compiled, on the first ``navigator()`` call.
That lets builders refer to scenes declared further down the file.

The graph is mutated while navigating (back-edges are grafted and pruned),
so a graph instance must only be driven from a single thread at a time.
"""

import networkx as nx

from ..config import SceneGraphSettings, get_settings
from ..driver.protocols import FailureReporter
from ..driver.reporting import RecordingFailureReporter
from ..graph_exceptions import (
    InitialSceneException,
    SceneAlreadyExistsException,
    SceneNotFoundException,
)
from ..logging import get_logger, get_navigation_logger
from ..navigation.navigator import Navigator
from ..navigation.path_finder import PathFinder, ShortestPathFinder
from .call_site import CallSite
from .scene_node import SceneBuilder, SceneNode

logger = get_logger(__name__)


class SceneGraph:
    """Owns the scenes and the routable directed graph compiled from them."""

    def __init__(
        self,
        initial_scene: str | None = None,
        path_finder: PathFinder | None = None,
        settings: SceneGraphSettings | None = None,
    ) -> None:
        """Initialize SceneGraph.

        Args:
            initial_scene: Scene navigators start at when not told otherwise
            path_finder: Shortest-path search over the routing graph
            settings: Overrides the global settings (guard timeouts)
        """
        self.initial_scene = initial_scene
        self.path_finder: PathFinder = path_finder or ShortestPathFinder()
        self.settings = settings or get_settings()

        self._scenes: dict[str, SceneNode] = {}
        self._routes = nx.DiGraph()
        self._compiling = False
        self._compiled = False

    def __contains__(self, scene_name: object) -> bool:
        return scene_name in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)

    @property
    def scene_names(self) -> list[str]:
        return list(self._scenes)

    @property
    def is_compiled(self) -> bool:
        return self._compiled

    def create_scene(
        self, name: str, builder: SceneBuilder, call_site: CallSite | None = None
    ) -> SceneNode:
        """Register a scene.

        The builder is not run yet; it documents the exits out of this scene
        and is invoked when the graph compiles.

        Args:
            name: Unique scene name
            builder: Callable receiving the new SceneNode
            call_site: Where the scene was declared (captured if omitted)

        Returns:
            The registered SceneNode

        Raises:
            SceneAlreadyExistsException: If ``name`` is already registered
        """
        if name in self._scenes:
            raise SceneAlreadyExistsException(name)

        scene = SceneNode(self, name, builder, call_site or CallSite.capture())
        self._scenes[name] = scene
        if self._compiled:
            self._routes.add_node(name)
            scene.build()
        return scene

    def scene(self, name: str) -> SceneNode:
        """Look up a scene by name.

        Raises:
            SceneNotFoundException: If no scene has that name
        """
        try:
            return self._scenes[name]
        except KeyError:
            raise SceneNotFoundException(name) from None

    def get_scene(self, name: str) -> SceneNode | None:
        return self._scenes.get(name)

    def compile(self) -> None:
        """Materialize the routing graph. Runs at most once per graph."""
        if self._compiled or self._compiling:
            return

        self._compiling = True
        try:
            scenes = list(self._scenes.values())
            self._routes.add_nodes_from(scene.name for scene in scenes)

            for scene in scenes:
                scene.build()

            for scene in scenes:
                self._routes.add_edges_from(
                    (scene.name, destination) for destination in scene.edges
                )
        finally:
            self._compiling = False

        self._compiled = True
        logger.info(
            "scene_graph_compiled",
            scenes=self._routes.number_of_nodes(),
            edges=self._routes.number_of_edges(),
        )

    def connect(self, source: str, destination: str) -> None:
        self._routes.add_edge(source, destination)

    def disconnect(self, source: str, destination: str) -> None:
        if self._routes.has_edge(source, destination):
            self._routes.remove_edge(source, destination)

    def has_arc(self, source: str, destination: str) -> bool:
        """True if the routing graph currently has a directed arc source -> destination."""
        return self._routes.has_edge(source, destination)

    def find_route(self, source: str, destination: str) -> list[str]:
        """Scene names from ``source`` to ``destination`` inclusive; empty if unreachable."""
        return self.path_finder.find_path(self._routes, source, destination)

    def graft_back_edge(self, scene: SceneNode, anchor: str) -> None:
        """Give ``scene`` a temporary edge back to ``anchor`` using its back_action."""
        scene.attach_back_edge(anchor)
        self.connect(scene.name, anchor)
        get_navigation_logger().log_back_edge(scene.name, anchor, grafted=True)

    def prune_back_edge(self, scene: SceneNode) -> None:
        """Remove ``scene``'s back-edge once it has been travelled.

        A declared edge to the same scene keeps its arc.
        """
        anchor = scene.return_anchor
        if anchor is None:
            return

        scene.detach_back_edge()
        if anchor not in scene.edges:
            self.disconnect(scene.name, anchor)
        get_navigation_logger().log_back_edge(scene.name, anchor, grafted=False)

    def navigator(
        self,
        starting_at: str | None = None,
        reporter: FailureReporter | None = None,
        call_site: CallSite | None = None,
    ) -> Navigator:
        """Create a navigator, the main way of getting around the app.

        Typically done once per test, in setup.

        Args:
            starting_at: Scene the app is in now (defaults to ``initial_scene``)
            reporter: Receives navigation failures (defaults to a RecordingFailureReporter)
            call_site: Where the navigator was requested

        Returns:
            Navigator positioned at the starting scene

        Raises:
            InitialSceneException: If no starting scene can be resolved. The
                failure is reported first.
        """
        call_site = call_site or CallSite.capture()
        if reporter is None:
            reporter = RecordingFailureReporter()

        self.compile()

        name = starting_at if starting_at is not None else self.initial_scene
        if name is None or name not in self._scenes:
            reporter.record_failure(
                "The app's initial state couldn't be established.",
                call_site.file,
                call_site.line,
                expected=False,
            )
            raise InitialSceneException(name)

        return Navigator(self, reporter, name)
