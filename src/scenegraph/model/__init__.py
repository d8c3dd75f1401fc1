"""Scene graph model: scenes, their edges, and the graph that owns them."""

from .call_site import CallSite
from .scene_node import Edge, Gesture, SceneBuilder, SceneNode
from .scene_graph import SceneGraph

__all__ = ["CallSite", "Edge", "Gesture", "SceneBuilder", "SceneNode", "SceneGraph"]
