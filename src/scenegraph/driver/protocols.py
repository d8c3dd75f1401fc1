"""Protocols for the UI-automation driver and the failure-reporting host.

scenegraph never touches the application under test itself. Edge actions
call into whatever driver the test suite uses (Appium, Playwright, a
simulator bridge); the only things the navigator needs to know are the
shapes below.
"""

from collections.abc import Callable
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class UIElement(Protocol):
    """An element handle supplied by the UI driver."""

    @property
    def exists(self) -> bool: ...

    def tap(self) -> None: ...

    def double_tap(self) -> None: ...

    def type_text(self, text: str) -> None: ...

    def swipe_left(self) -> None: ...

    def swipe_right(self) -> None: ...

    def swipe_up(self) -> None: ...

    def swipe_down(self) -> None: ...


@runtime_checkable
class ExistenceGuard(Protocol):
    """Anything exposing ``exists``: a full UIElement, a label, a status icon."""

    @property
    def exists(self) -> bool: ...


# A guard is either something that must exist or an opaque predicate.
Guard = Union[ExistenceGuard, Callable[[], bool]]


class FailureReporter(Protocol):
    """Receives recorded, non-fatal failures.

    Implementations must return control to the caller: the navigator keeps
    going (or stops the current goto) after reporting.
    """

    def record_failure(self, message: str, file: str, line: int, expected: bool = False) -> None: ...


def describe_guard(guard: Guard) -> str:
    """Human-readable label for a guard, used in failure messages."""
    if isinstance(guard, ExistenceGuard):
        return repr(guard)
    return getattr(guard, "__name__", repr(guard))


def guard_satisfied(guard: Guard) -> bool:
    """Evaluate a guard once."""
    if isinstance(guard, ExistenceGuard):
        return bool(guard.exists)
    return bool(guard())
