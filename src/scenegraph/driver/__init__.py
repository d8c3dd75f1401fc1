"""UI-driver and failure-reporting boundary."""

from .protocols import (
    ExistenceGuard,
    FailureReporter,
    Guard,
    UIElement,
    describe_guard,
    guard_satisfied,
)
from .reporting import RecordedFailure, RecordingFailureReporter
from .waiting import wait_for

__all__ = [
    "UIElement",
    "ExistenceGuard",
    "Guard",
    "FailureReporter",
    "describe_guard",
    "guard_satisfied",
    "wait_for",
    "RecordedFailure",
    "RecordingFailureReporter",
]
