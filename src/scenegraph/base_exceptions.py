"""Root of the scenegraph exception hierarchy.

Only inconsistent graph definitions are raised. Anything that can go wrong
while the app is being driven is recorded through a FailureReporter.
"""

from typing import Any


class SceneGraphException(Exception):
    """Base exception for scenegraph.

    ``error_code`` is a stable identifier (e.g. ``UNDECLARED_SCENE``) and
    ``context`` carries the scene names involved.
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}" if self.error_code else self.message
