"""Tests for SceneNode edge declarations."""

from scenegraph import CallSite, SceneGraph


def build_graph(fast_settings, home_builder, *others):
    graph = SceneGraph(initial_scene="Home", settings=fast_settings)
    graph.create_scene("Home", home_builder)
    for name in others:
        graph.create_scene(name, lambda scene: None)
    return graph


class TestEdgeDeclarations:
    """Each declaration helper performs its gesture on the element."""

    def test_tap(self, fast_settings, make_element, actions):
        button = make_element("settings")
        graph = build_graph(fast_settings, lambda scene: scene.tap(button, to="Settings"), "Settings")

        graph.navigator().goto("Settings")

        assert actions == ["tap:settings"]

    def test_double_tap(self, fast_settings, make_element, actions):
        image = make_element("photo")
        graph = build_graph(
            fast_settings, lambda scene: scene.double_tap(image, to="Zoomed"), "Zoomed"
        )

        graph.navigator().goto("Zoomed")

        assert actions == ["double_tap:photo"]

    def test_type_text(self, fast_settings, make_element, actions):
        field = make_element("search")
        graph = build_graph(
            fast_settings,
            lambda scene: scene.type_text("coffee\n", into=field, to="Results"),
            "Results",
        )

        graph.navigator().goto("Results")

        assert actions == ["type_text:search:coffee\n"]

    def test_swipes(self, fast_settings, make_element, actions):
        pager = make_element("pager")

        def home(scene):
            scene.swipe_left(pager, to="Left")
            scene.swipe_right(pager, to="Right")
            scene.swipe_up(pager, to="Up")
            scene.swipe_down(pager, to="Down")

        graph = build_graph(fast_settings, home, "Left", "Right", "Up", "Down")
        navigator = graph.navigator()

        for name in ("Left", "Right", "Up", "Down"):
            navigator.now_at("Home")
            navigator.goto(name)

        assert actions == [
            "swipe_left:pager",
            "swipe_right:pager",
            "swipe_up:pager",
            "swipe_down:pager",
        ]

    def test_noop(self, fast_settings, actions, reporter):
        graph = build_graph(fast_settings, lambda scene: scene.noop("Splash"), "Splash")
        navigator = graph.navigator(reporter=reporter)

        assert navigator.goto("Splash")
        assert navigator.current_scene == "Splash"
        assert actions == []
        assert len(reporter) == 0

    def test_gesture_with_callable(self, fast_settings, gesture, actions):
        graph = build_graph(
            fast_settings, lambda scene: scene.gesture("Menu", gesture("open-menu")), "Menu"
        )

        graph.navigator().goto("Menu")

        assert actions == ["open-menu"]

    def test_redeclared_edge_replaces_earlier_one(self, fast_settings, gesture, actions):
        def home(scene):
            scene.gesture("Menu", gesture("first"))
            scene.gesture("Menu", gesture("second"))

        graph = build_graph(fast_settings, home, "Menu")
        graph.navigator().goto("Menu")

        assert actions == ["second"]
        assert list(graph.scene("Home").edges) == ["Menu"]


class TestElementGuardedEdges:
    """Edges declared against an element wait for it first."""

    def test_missing_element_reports_twice_and_still_acts(
        self, fast_settings, make_element, actions, reporter
    ):
        button = make_element("ghost", exists=False)
        declared_at = CallSite("home_scene.py", 12)
        graph = build_graph(
            fast_settings,
            lambda scene: scene.tap(button, to="Settings", call_site=declared_at),
            "Settings",
        )
        navigator = graph.navigator(reporter=reporter)

        navigator.goto("Settings", call_site=CallSite("test_settings.py", 40))

        assert len(reporter) == 2
        assert reporter.failures[0].message == "Cannot find FakeElement('ghost')"
        assert (reporter.failures[0].file, reporter.failures[0].line) == ("home_scene.py", 12)
        assert reporter.failures[1].message == (
            "Cannot get from Home to Settings. See home_scene.py"
        )
        assert (reporter.failures[1].file, reporter.failures[1].line) == ("test_settings.py", 40)
        assert actions == ["tap:ghost"]
        assert navigator.current_scene == "Settings"

    def test_existing_element_reports_nothing(self, fast_settings, make_element, reporter):
        button = make_element("present")
        graph = build_graph(fast_settings, lambda scene: scene.tap(button, to="Settings"), "Settings")

        graph.navigator(reporter=reporter).goto("Settings")

        assert len(reporter) == 0


class TestSceneNodeState:
    """Test the node's exposed state."""

    def test_edges_is_a_copy(self, app_graph):
        app_graph.compile()
        home = app_graph.scene("Home")

        home.edges.clear()

        assert home.has_edge_to("Settings")

    def test_has_back(self, app_graph):
        assert app_graph.scene("About").has_back
        assert not app_graph.scene("Home").has_back

    def test_back_edge_is_not_a_declared_edge(self, app_graph):
        navigator = app_graph.navigator()
        navigator.goto("About")
        about = app_graph.scene("About")

        assert about.return_anchor == "Settings"
        assert about.has_edge_to("Settings")
        assert "Settings" not in about.edges

    def test_repr(self, app_graph):
        assert repr(app_graph.scene("Home")) == "SceneNode('Home')"
