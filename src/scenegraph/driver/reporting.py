"""Default failure reporter."""

from dataclasses import dataclass, field

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecordedFailure:
    """A single failure handed to a FailureReporter."""

    message: str
    file: str
    line: int
    expected: bool = False

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.message}"


@dataclass
class RecordingFailureReporter:
    """Keeps failures in order and logs them; never raises.

    Test suites that want failures to surface through their own runner can
    wrap this or supply any object with a matching ``record_failure``.
    """

    failures: list[RecordedFailure] = field(default_factory=list)

    def record_failure(self, message: str, file: str, line: int, expected: bool = False) -> None:
        failure = RecordedFailure(message=message, file=file, line=line, expected=expected)
        self.failures.append(failure)
        logger.error("failure_recorded", message=message, file=file, line=line, expected=expected)

    @property
    def messages(self) -> list[str]:
        return [failure.message for failure in self.failures]

    def clear(self) -> None:
        self.failures.clear()

    def __len__(self) -> int:
        return len(self.failures)
