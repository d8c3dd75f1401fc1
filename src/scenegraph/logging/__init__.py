"""Logging module for scenegraph."""

from .logger import (
    NavigationLogger,
    get_logger,
    get_navigation_logger,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "NavigationLogger",
    "get_navigation_logger",
]
