"""Error taxonomy for the pyspec kernel.

Every error raised here unwinds to the caller. Only the example runner
catches, classifies and continues with the next example.
"""


class PySpecError(Exception):
    """Base class for kernel errors."""


class SpecificationError(PySpecError):
    """An example group is configured with an invalid reference.

    Raised when ``it_behaves_like`` names something that is not a
    shared example provider.
    """


class SharedExampleNotFoundError(PySpecError, KeyError):
    """No shared example is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Shared example '{name}' is not registered")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class MissingDependencyError(PySpecError):
    """A double was requested but no mocking library is available."""


class UnknownMatcherError(PySpecError, KeyError):
    """The matcher factory has no matcher registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No matcher registered as '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])


class ExpectationFailure(AssertionError):
    """An expectation evaluated through an interceptor did not match."""
