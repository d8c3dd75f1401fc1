"""Pytest configuration and fixtures."""

from collections.abc import Callable

import pytest

from scenegraph import RecordingFailureReporter, SceneGraph, SceneGraphSettings
from scenegraph.config import reset_settings


class FakeElement:
    """Stands in for a UI-driver element; records every interaction."""

    def __init__(self, label: str, exists: bool = True, log: list[str] | None = None) -> None:
        self.label = label
        self.exists = exists
        self.log = log if log is not None else []

    def __repr__(self) -> str:
        return f"FakeElement({self.label!r})"

    def tap(self) -> None:
        self.log.append(f"tap:{self.label}")

    def double_tap(self) -> None:
        self.log.append(f"double_tap:{self.label}")

    def type_text(self, text: str) -> None:
        self.log.append(f"type_text:{self.label}:{text}")

    def swipe_left(self) -> None:
        self.log.append(f"swipe_left:{self.label}")

    def swipe_right(self) -> None:
        self.log.append(f"swipe_right:{self.label}")

    def swipe_up(self) -> None:
        self.log.append(f"swipe_up:{self.label}")

    def swipe_down(self) -> None:
        self.log.append(f"swipe_down:{self.label}")


def record(actions: list[str], label: str) -> Callable[[], None]:
    """Gesture that appends ``label`` to ``actions``."""
    return lambda: actions.append(label)


@pytest.fixture(autouse=True)
def clean_settings():
    """Make sure environment overrides from one test don't leak into another."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fast_settings() -> SceneGraphSettings:
    """Settings with short guard waits so timeouts don't slow the suite down."""
    return SceneGraphSettings(guard_timeout=0.05, guard_poll_interval=0.01)


@pytest.fixture
def reporter() -> RecordingFailureReporter:
    return RecordingFailureReporter()


@pytest.fixture
def actions() -> list[str]:
    return []


@pytest.fixture
def app_graph(actions: list[str], fast_settings: SceneGraphSettings) -> SceneGraph:
    """Home -> Settings -> About, where About has a back button.

    Home --S--> Settings --T--> About (back: B)
    """
    graph = SceneGraph(initial_scene="Home", settings=fast_settings)

    def home(scene):
        scene.gesture("Settings", record(actions, "S"))

    def settings(scene):
        scene.gesture("About", record(actions, "T"))

    def about(scene):
        scene.back_action = record(actions, "B")

    graph.create_scene("Home", home)
    graph.create_scene("Settings", settings)
    graph.create_scene("About", about)
    return graph


@pytest.fixture
def make_element(actions: list[str]) -> Callable[..., FakeElement]:
    """Factory for fake elements that log into the shared ``actions`` list."""

    def factory(label: str, exists: bool = True) -> FakeElement:
        return FakeElement(label, exists=exists, log=actions)

    return factory


@pytest.fixture
def gesture(actions: list[str]) -> Callable[[str], Callable[[], None]]:
    """Factory for gestures that append their label to ``actions``."""
    return lambda label: record(actions, label)
