"""Bounded waits for element and existence guards."""

import time

from ..config import get_settings
from ..logging import get_logger
from .protocols import Guard, describe_guard, guard_satisfied

logger = get_logger(__name__)


def wait_for(
    guard: Guard,
    timeout: float | None = None,
    poll_interval: float | None = None,
) -> bool:
    """Block until ``guard`` holds or ``timeout`` elapses.

    The wait cannot be cancelled. A guard that already holds returns
    immediately without sleeping.

    Args:
        guard: Element or predicate to poll
        timeout: Maximum seconds to wait (defaults to settings.guard_timeout)
        poll_interval: Seconds between checks (defaults to settings.guard_poll_interval)

    Returns:
        True if the guard was satisfied, False on timeout
    """
    settings = get_settings()
    if timeout is None:
        timeout = settings.guard_timeout
    if poll_interval is None:
        poll_interval = settings.guard_poll_interval

    if guard_satisfied(guard):
        return True

    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        time.sleep(min(poll_interval, max(deadline - time.monotonic(), 0.0)))
        if guard_satisfied(guard):
            return True

    logger.debug("guard_timeout", guard=describe_guard(guard), timeout=timeout)
    return False
