"""Scene graph declaration and navigation exceptions.

Only programming errors are raised. Runtime navigation failures (unknown
destination, no route, guard timeout) go through a FailureReporter instead.
"""

from .base_exceptions import SceneGraphException


class SceneGraphDefinitionException(SceneGraphException):
    """Base exception for an inconsistent graph definition."""

    pass


class SceneDeclarationError(SceneGraphDefinitionException):
    """Raised when an edge points at a scene that was never created."""

    def __init__(self, source: str, destination: str, **kwargs) -> None:
        """Initialize with the offending edge."""
        super().__init__(
            f"Destination scene '{destination}' has not been created anywhere "
            f"(edge declared on '{source}')",
            error_code="UNDECLARED_SCENE",
            context={"source": source, "destination": destination, **kwargs},
        )


class SceneAlreadyExistsException(SceneGraphDefinitionException):
    """Raised when attempting to create a duplicate scene."""

    def __init__(self, scene_name: str, **kwargs) -> None:
        """Initialize with scene name."""
        super().__init__(
            f"Scene '{scene_name}' already exists",
            error_code="SCENE_EXISTS",
            context={"scene_name": scene_name, **kwargs},
        )


class SceneNotFoundException(SceneGraphException):
    """Raised when a scene lookup by name fails."""

    def __init__(self, scene_name: str, **kwargs) -> None:
        """Initialize with scene name."""
        super().__init__(
            f"Scene '{scene_name}' not found",
            error_code="SCENE_NOT_FOUND",
            context={"scene_name": scene_name, **kwargs},
        )


class InitialSceneException(SceneGraphException):
    """Raised when a navigator cannot establish the app's starting scene."""

    def __init__(self, scene_name: str | None = None, **kwargs) -> None:
        """Initialize with the requested starting scene, if any."""
        message = "The app's initial state couldn't be established"
        if scene_name:
            message += f": no scene named '{scene_name}'"

        super().__init__(
            message,
            error_code="NO_INITIAL_SCENE",
            context={"scene_name": scene_name, **kwargs},
        )
