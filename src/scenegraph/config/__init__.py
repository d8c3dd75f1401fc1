"""Configuration package.

Usage:
    from scenegraph.config import get_settings

    settings = get_settings()
    settings.guard_timeout
"""

from .settings import SceneGraphSettings, get_settings, reset_settings

__all__ = ["SceneGraphSettings", "get_settings", "reset_settings"]
