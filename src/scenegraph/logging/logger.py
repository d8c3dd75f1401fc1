"""Structured logging configuration for scenegraph using structlog.

Navigation emits one event per hop, so a failing end-to-end test can be
read back as the exact sequence of scenes the navigator walked through.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
) -> None:
    """Route structlog events through stdlib logging.

    JSON lines suit CI logs; ``structured=False`` gives readable, colored
    console output for debugging a test locally.

    Args:
        level: Log level name
        log_file: Also write events to this file
        structured: Render events as JSON
        console: Write to stderr (forced off by SCENEGRAPH_DISABLE_CONSOLE_LOGGING=1)
    """
    if os.getenv("SCENEGRAPH_DISABLE_CONSOLE_LOGGING") == "1":
        console = False
        log_file = None

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if structured
        else structlog.dev.ConsoleRenderer(colors=console)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    if os.getenv("SCENEGRAPH_DISABLE_CONSOLE_LOGGING") == "1":
        setup_logging(console=False)
        logging.disable(logging.CRITICAL)
        _logging_initialized = True
        return

    try:
        settings = get_settings()
        log_file = None
        if settings.log_path is not None:
            log_file = settings.log_path / f"scenegraph_{datetime.now().strftime('%Y%m%d')}.log"
        setup_logging(
            level="DEBUG" if settings.debug_mode else settings.log_level,
            log_file=log_file,
            structured=settings.structured_logging and not settings.debug_mode,
        )
    except (AttributeError, OSError, ValueError):
        # Invalid settings or log path: fall back to readable console output
        setup_logging(level="INFO", structured=False)

    _logging_initialized = True


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.BoundLogger, structlog.get_logger(name))


class NavigationLogger:
    """Specialized logger for navigator hops and graph mutations."""

    def __init__(self, base_logger: structlog.BoundLogger | None = None) -> None:
        """Initialize navigation logger.

        Args:
            base_logger: Base logger to use
        """
        self.logger = base_logger or get_logger(__name__)

    def log_hop(self, from_scene: str, to_scene: str, destination: str, **kwargs) -> None:
        """Log a single hop executed on the way to ``destination``."""
        self.logger.info(
            "scene_hop",
            from_scene=from_scene,
            to_scene=to_scene,
            destination=destination,
            **kwargs,
        )

    def log_route_failure(self, from_scene: str, destination: str, reason: str, **kwargs) -> None:
        """Log a goto request that could not be routed."""
        self.logger.warning(
            "scene_hop_failed",
            from_scene=from_scene,
            destination=destination,
            reason=reason,
            **kwargs,
        )

    def log_back_edge(self, scene: str, anchor: str, grafted: bool) -> None:
        """Log a back-edge being grafted onto, or pruned from, the routing graph."""
        event = "back_edge_grafted" if grafted else "back_edge_pruned"
        self.logger.debug(event, scene=scene, anchor=anchor)

    def log_resync(self, from_scene: str, to_scene: str) -> None:
        """Log an explicit resync of the navigator's position."""
        self.logger.info("navigator_resynced", from_scene=from_scene, to_scene=to_scene)


navigation_logger: NavigationLogger | None = None


def get_navigation_logger() -> NavigationLogger:
    """Get the shared navigation logger, creating it on first use."""
    global navigation_logger

    if navigation_logger is None:
        navigation_logger = NavigationLogger()

    return navigation_logger
