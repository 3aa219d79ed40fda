"""Example groups: the unit that holds related examples and their hooks.

An example group is a class whose ``it_*`` methods are examples. The
runner instantiates it once, calls before_all, brackets each example
with before/after and finally calls after_all. Inside an example the
group offers expectations (spec), outcome signals (pending, fail),
test doubles (double, mock, stub) and shared-example composition.

Example:

    class DescribeStack(ExampleGroup):
        it_behaves_like = "myproject.specs.shared.ACollection"

        def before(self):
            self.stack = Stack()

        def it_starts_empty(self):
            self.spec(self.stack).size().should.equal(0)

        def it_pops_pushed_items(self):
            self.pending("pop is not implemented")
"""

import importlib
import logging
from typing import Any, NoReturn

from .errors import MissingDependencyError, SpecificationError
from .interceptor import Interceptor, InterceptorFactory
from .matchers import MatcherFactory
from .ports import DoublerPort, Hookable, InterceptorFactoryPort
from .shared_examples import SharedExampleRegistry
from .signals import DeliberateFailure, Pending

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "RuntimeError:"
FAILURE_INDENT = " " * 7


def _resolve_reference(reference: Any) -> type | None:
    """Resolve a class or dotted import path to a class, or None.

    The longest importable module prefix is imported and the remaining
    parts are looked up as attributes, so nested classes resolve too.

    Raises:
        SpecificationError: If a module on the path fails while importing.
    """
    if isinstance(reference, type):
        return reference
    if not isinstance(reference, str) or "." not in reference:
        return None
    parts = reference.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name and (module_name + ".").startswith(exc.name + "."):
                continue
            raise SpecificationError(f"{reference} is not a SharedExample") from exc
        except Exception as exc:
            raise SpecificationError(f"{reference} is not a SharedExample") from exc
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                return None
        return target if isinstance(target, type) else None
    return None


def _reference_name(reference: Any) -> str:
    if isinstance(reference, type):
        return f"{reference.__module__}.{reference.__qualname__}"
    return str(reference)


class ExampleGroup(Hookable):
    """Base class for example groups.

    Collaborators are optional and keyword-only so subclasses can be
    instantiated with no arguments. A group without a doubler cannot
    create test doubles.
    """

    # SharedExample subclass, dotted path to one, or a list/tuple of those.
    it_behaves_like: Any = None

    def __init__(
        self,
        *,
        matcher_factory: MatcherFactory | None = None,
        interceptor_factory: InterceptorFactoryPort | None = None,
        doubler: DoublerPort | None = None,
    ):
        self._matcher_factory = matcher_factory
        self._interceptor_factory = interceptor_factory or InterceptorFactory()
        self._doubler = doubler
        self._shared_examples = SharedExampleRegistry()

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def before_all(self) -> None:
        """Override to run once before all examples of the group."""

    def before(self) -> None:
        """Override to run before every example of the group."""

    def after(self) -> None:
        """Override to run after every example of the group."""

    def after_all(self) -> None:
        """Override to run once after all examples of the group."""

    # ------------------------------------------------------------------
    # Expectations
    # ------------------------------------------------------------------

    def spec(self, *values: Any) -> Interceptor:
        """Wrap value(s) in an interceptor bound to this group's matchers.

        Returns:
            An interceptor on which ``should`` / ``should_not``
            expectations can be evaluated.
        """
        interceptor = self._interceptor_factory.create(*values)
        interceptor.set_matcher_factory(self.get_matcher_factory())
        return interceptor

    def get_matcher_factory(self) -> MatcherFactory:
        """Return this group's matcher factory, creating it on first use."""
        if self._matcher_factory is None:
            self._matcher_factory = MatcherFactory()
        return self._matcher_factory

    def set_matcher_factory(self, matcher_factory: MatcherFactory) -> None:
        if not isinstance(matcher_factory, MatcherFactory):
            raise TypeError(f"{matcher_factory!r} is not a MatcherFactory")
        self._matcher_factory = matcher_factory

    # ------------------------------------------------------------------
    # Outcome signals
    # ------------------------------------------------------------------

    def pending(self, message: str = "No reason given") -> NoReturn:
        """Mark the example as pending.

        Raises:
            Pending: Always.
        """
        raise Pending(message)

    def fail(self, message: str = "") -> NoReturn:
        """Mark the example as failed.

        Raises:
            DeliberateFailure: Always. The message is "RuntimeError:"
                followed, when message is non-empty, by a newline, seven
                spaces and message.
        """
        detail = f"\n{FAILURE_INDENT}{message}" if message else ""
        raise DeliberateFailure(FAILURE_PREFIX + detail)

    # ------------------------------------------------------------------
    # Test doubles
    # ------------------------------------------------------------------

    def double(self, class_name: str = "object") -> Any:
        """Create a test double through the configured mocking library.

        Raises:
            MissingDependencyError: If no mocking library is available.
        """
        if self._doubler is None or not self._doubler.is_available():
            raise MissingDependencyError(
                "No mocking library is available; configure a doubles backend "
                "(PYSPEC_DOUBLES_BACKEND=unittest_mock)"
            )
        return self._doubler.mock(class_name)

    def mock(self, class_name: str = "object") -> Any:
        """Alias of double()."""
        return self.double(class_name)

    def stub(self, class_name: str = "object") -> Any:
        """Alias of double()."""
        return self.double(class_name)

    # ------------------------------------------------------------------
    # Shared examples
    # ------------------------------------------------------------------

    def get_behaves_like(self) -> Any:
        """Return it_behaves_like exactly as configured."""
        return self.it_behaves_like

    def shared_example_classes(self) -> list[type["SharedExample"]]:
        """Resolve it_behaves_like to a list of SharedExample classes.

        Raises:
            SpecificationError: If any reference is not a SharedExample.
        """
        configured = self.it_behaves_like
        if not configured:
            return []
        references = configured if isinstance(configured, (list, tuple)) else [configured]
        classes: list[type[SharedExample]] = []
        for reference in references:
            resolved = _resolve_reference(reference)
            if (
                resolved is None
                or not issubclass(resolved, SharedExample)
                or resolved is SharedExample
            ):
                raise SpecificationError(f"{_reference_name(reference)} is not a SharedExample")
            classes.append(resolved)
        return classes

    def behaves_like_another_object(self) -> bool:
        """Check whether this group composes shared examples.

        Every configured reference is validated on every call.

        Returns:
            False if it_behaves_like is unset, True otherwise.

        Raises:
            SpecificationError: If a reference is not a SharedExample.
        """
        return bool(self.shared_example_classes())

    def add_shared_example(self, shared_example: "SharedExample", method_name: str) -> None:
        """Register method_name of shared_example as an example of this group."""
        if not isinstance(shared_example, SharedExample):
            raise TypeError(f"{shared_example!r} is not a SharedExample")
        self._shared_examples.add(shared_example, method_name)
        logger.debug(
            f"{type(self).__name__} behaves like {type(shared_example).__name__}.{method_name}"
        )

    def has_shared_example(self, name: str) -> bool:
        return self._shared_examples.has(name)

    def get_shared_example(self, name: str) -> "SharedExample":
        """Return the shared-example instance that defines name.

        Raises:
            SharedExampleNotFoundError: If name is not registered.
        """
        return self._shared_examples.get(name)

    def shared_example_names(self) -> list[str]:
        return self._shared_examples.names()

    def run_shared_example(self, name: str) -> None:
        """Run a shared example between its owner's before and after hooks.

        Raises:
            SharedExampleNotFoundError: If name is not registered.
        """
        self._shared_examples.run(name)


class SharedExample(ExampleGroup):
    """Base class for shared-example providers.

    Subclass it and define ``it_*`` methods; example groups reuse them
    by naming the subclass in ``it_behaves_like``. before/after on the
    subclass bracket each shared example when it runs.
    """
