"""scenegraph: declare an app's screens once, navigate between them in every test.

Describe the app's reachable states ("scenes") and the UI actions that move
between them. A Navigator then works out the shortest sequence of actions
from wherever the app is to wherever a test needs it to be.

Example:
    graph = SceneGraph(initial_scene="Home")
    graph.create_scene("Home", lambda scene: scene.tap(app.settings_button, to="Settings"))
    graph.create_scene("Settings", lambda scene: scene.tap(app.about_cell, to="About"))

    def about(scene):
        scene.back_action = app.back_button.tap

    graph.create_scene("About", about)

    navigator = graph.navigator()
    navigator.goto("About")
"""

from .base_exceptions import SceneGraphException
from .config import SceneGraphSettings, get_settings, reset_settings
from .driver import (
    ExistenceGuard,
    FailureReporter,
    Guard,
    RecordedFailure,
    RecordingFailureReporter,
    UIElement,
    wait_for,
)
from .graph_exceptions import (
    InitialSceneException,
    SceneAlreadyExistsException,
    SceneDeclarationError,
    SceneGraphDefinitionException,
    SceneNotFoundException,
)
from .model import CallSite, SceneGraph, SceneNode
from .navigation import Navigator, NodeVisitor, PathFinder, ShortestPathFinder

__version__ = "0.1.0"

__all__ = [
    "SceneGraph",
    "SceneNode",
    "Navigator",
    "CallSite",
    "NodeVisitor",
    "PathFinder",
    "ShortestPathFinder",
    "UIElement",
    "ExistenceGuard",
    "Guard",
    "FailureReporter",
    "RecordedFailure",
    "RecordingFailureReporter",
    "wait_for",
    "SceneGraphSettings",
    "get_settings",
    "reset_settings",
    "SceneGraphException",
    "SceneGraphDefinitionException",
    "SceneDeclarationError",
    "SceneAlreadyExistsException",
    "SceneNotFoundException",
    "InitialSceneException",
]
