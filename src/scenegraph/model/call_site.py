"""Source positions used to attribute failures to test code."""

import inspect
from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    """A file/line pair naming where a scene, edge or navigation call was written."""

    file: str
    line: int

    @classmethod
    def capture(cls, depth: int = 1) -> "CallSite":
        """Capture the position of a caller.

        Args:
            depth: How many frames above the function calling ``capture`` to look.
                ``1`` is that function's caller.

        Returns:
            CallSite for the requested frame, or ``<unknown>:0`` if the stack is
            shallower than requested
        """
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return cls("<unknown>", 0)
            return cls(target.f_code.co_filename, target.f_lineno)
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"
