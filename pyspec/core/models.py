"""Result models for example execution.

An example ends in exactly one of four terminal states. The runner
converts whatever unwound out of an example (nothing, an outcome signal,
an assertion failure or an unexpected exception) into an ExampleResult.
All models use only standard library types.
"""

from dataclasses import dataclass, field
from enum import Enum

from .signals import DeliberateFailure, Pending


class Outcome(Enum):
    """Terminal state of a single example."""

    PASSED = "passed"
    PENDING = "pending"
    FAILED = "failed"
    ERROR = "error"


def classify(exc: BaseException | None) -> Outcome:
    """Map whatever an example raised to its Outcome.

    Args:
        exc: The exception that ended the example, or None if the
            example body returned normally.

    Returns:
        PASSED for None, PENDING for a Pending signal, FAILED for a
        DeliberateFailure or any AssertionError (matcher failures
        included), ERROR for everything else.
    """
    if exc is None:
        return Outcome.PASSED
    if isinstance(exc, Pending):
        return Outcome.PENDING
    if isinstance(exc, (DeliberateFailure, AssertionError)):
        return Outcome.FAILED
    return Outcome.ERROR


@dataclass(frozen=True)
class ExampleResult:
    """The recorded outcome of one example."""

    group: str
    example: str
    outcome: Outcome
    message: str = ""
    exception_type: str | None = None
    duration_seconds: float = 0.0
    shared_from: str | None = None  # shared example class that provided it

    def __post_init__(self) -> None:
        """Validate result invariants on creation."""
        if not self.example:
            raise ValueError("example must be a non-empty string")
        if self.duration_seconds < 0:
            raise ValueError(
                f"duration_seconds must be non-negative, got {self.duration_seconds}"
            )
        if self.outcome is Outcome.PASSED and self.exception_type is not None:
            raise ValueError("a passed example cannot carry an exception type")

    @classmethod
    def from_exception(
        cls,
        group: str,
        example: str,
        exc: BaseException | None,
        duration_seconds: float = 0.0,
        shared_from: str | None = None,
    ) -> "ExampleResult":
        """Build a result by classifying what the example raised."""
        if exc is None:
            return cls(
                group=group,
                example=example,
                outcome=Outcome.PASSED,
                duration_seconds=duration_seconds,
                shared_from=shared_from,
            )
        return cls(
            group=group,
            example=example,
            outcome=classify(exc),
            message=str(exc),
            exception_type=type(exc).__name__,
            duration_seconds=duration_seconds,
            shared_from=shared_from,
        )


@dataclass
class GroupResult:
    """All example results collected for one example group run.

    Results are appended in execution order.
    """

    group: str
    results: list[ExampleResult] = field(default_factory=list)

    def add(self, result: ExampleResult) -> None:
        """Append a result produced for this group."""
        if result.group != self.group:
            raise ValueError(
                f"Result for group {result.group!r} cannot be added to {self.group!r}"
            )
        self.results.append(result)

    def counts(self) -> dict[Outcome, int]:
        """Count results per outcome; every Outcome is present."""
        tally = {outcome: 0 for outcome in Outcome}
        for result in self.results:
            tally[result.outcome] += 1
        return tally

    def by_outcome(self, outcome: Outcome) -> list[ExampleResult]:
        return [r for r in self.results if r.outcome is outcome]

    @property
    def passed(self) -> bool:
        """True when no example failed or errored."""
        return not any(
            r.outcome in (Outcome.FAILED, Outcome.ERROR) for r in self.results
        )
