"""Port interfaces for the pyspec kernel.

These abstract base classes define the boundaries between the kernel
and its collaborators. Concrete collaborators live in the adapters/
package (mocking) or are supplied by a matcher library.

Port Interface Categories:

1. **Capabilities** (probed with isinstance, never by method name)
   - Hookable: optional before/after hooks with no-op defaults

2. **Driven Ports** (kernel calls out to collaborators)
   - Matcher: one comparison strategy obtained from a MatcherFactory
   - DoublerPort: creates test doubles through a mocking library
   - InterceptorFactoryPort: wraps subject values for expectations
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .interceptor import Interceptor


# ============================================================================
# CAPABILITIES
# ============================================================================


class Hookable(ABC):
    """Capability for objects that bracket an example with hooks.

    Both hooks default to no-ops, so implementing classes override only
    what they need. Objects that are not Hookable are valid wherever a
    Hookable is optional; callers simply skip the hook step for them.
    """

    def before(self) -> None:
        """Called before the bracketed example."""

    def after(self) -> None:
        """Called after the bracketed example."""


# ============================================================================
# DRIVEN PORTS (Kernel calls out to collaborators)
# ============================================================================


class Matcher(ABC):
    """Port for a single comparison strategy.

    A matcher is constructed with its expected value(s) by a
    MatcherFactory and evaluated against the actual value held by an
    interceptor. Matchers report mismatch by returning False; the
    interceptor turns that into an ExpectationFailure.
    """

    @abstractmethod
    def matches(self, actual: Any) -> bool:
        """Evaluate the matcher against the actual value.

        Args:
            actual: The subject value wrapped by the interceptor.

        Returns:
            True if the expectation holds.

        Raises:
            Exception: Any error raised while matching propagates to
                the example unmodified.
        """

    @abstractmethod
    def failure_message(self, actual: Any) -> str:
        """Message used when a positive expectation does not hold."""

    @abstractmethod
    def negative_failure_message(self, actual: Any) -> str:
        """Message used when a negated expectation does not hold."""


class DoublerPort(ABC):
    """Port for the mocking library that creates test doubles.

    Implementations are selected by the composition root. The kernel
    asks is_available() before delegating, so an adapter over an
    optional library can report its own absence.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the underlying mocking library can be used."""

    @abstractmethod
    def mock(self, class_name: str) -> Any:
        """Create a double standing in for class_name.

        Args:
            class_name: Name or dotted import path of the class the
                double replaces.

        Returns:
            The created double. Its lifecycle is owned by the adapter.
        """

    @abstractmethod
    def class_name_of(self, double: Any) -> str | None:
        """Return the class name a double was created for.

        Returns:
            The class_name passed to mock(), or None if the object was
            not created by this adapter.
        """


class InterceptorFactoryPort(ABC):
    """Port for wrapping subject values in expectation interceptors."""

    @abstractmethod
    def create(self, *values: Any) -> "Interceptor":
        """Wrap one or more subject values.

        The factory decides the interceptor shape, including what
        several values mean. The returned interceptor is not bound to
        a matcher factory yet.
        """
