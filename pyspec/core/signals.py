"""Outcome signals raised from inside an example body.

A signal is a deliberate non-local exit: the example never reaches the
statement after the one that raised it. The runner tells the outcomes
apart by signal type, never by message text.
"""


class ExampleSignal(Exception):
    """Base class for outcome signals. Carries a human-readable message."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Pending(ExampleSignal):
    """The example is intentionally not implemented yet."""


class DeliberateFailure(ExampleSignal):
    """The example author explicitly failed the example."""
