"""Expectation interceptors.

An interceptor wraps a subject value so expectations read fluently:

    self.spec(total).should.equal(42)
    self.spec(account).balance.should_not.be_negative()
    self.spec([1, 2, 3])[0].should.equal(1)

The name after ``should`` / ``should_not`` is looked up in the matcher
factory the interceptor is bound to. Interceptors are ephemeral: built
per expectation expression and discarded afterwards.
"""

from collections.abc import Callable
from typing import Any

from .errors import ExpectationFailure
from .matchers import MatcherFactory
from .ports import InterceptorFactoryPort

_SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))
_COLLECTION_TYPES = (list, tuple, set, frozenset, dict)


class Expectation:
    """One ``should`` / ``should_not`` step of an expectation chain."""

    def __init__(self, interceptor: "Interceptor", positive: bool = True):
        self._interceptor = interceptor
        self._positive = positive

    def __getattr__(self, matcher_name: str) -> Callable[..., "Interceptor"]:
        if matcher_name.startswith("_"):
            raise AttributeError(matcher_name)

        def _evaluate(*expected: Any, **options: Any) -> "Interceptor":
            return self._interceptor.perform_matching(
                matcher_name, expected, options, positive=self._positive
            )

        _evaluate.__name__ = matcher_name
        return _evaluate

    def __repr__(self) -> str:
        verb = "should" if self._positive else "should_not"
        return f"<Expectation {verb} on {self._interceptor!r}>"


class Interceptor:
    """Base interceptor: holds the actual value and the matcher factory."""

    def __init__(self, actual: Any = None):
        self.actual = actual
        self._matcher_factory: MatcherFactory | None = None

    def set_matcher_factory(self, matcher_factory: MatcherFactory) -> None:
        self._matcher_factory = matcher_factory

    def get_matcher_factory(self) -> MatcherFactory:
        """Return the bound factory.

        Raises:
            RuntimeError: If the interceptor was never bound.
        """
        if self._matcher_factory is None:
            raise RuntimeError(
                "Interceptor has no matcher factory; create it through ExampleGroup.spec()"
            )
        return self._matcher_factory

    @property
    def should(self) -> Expectation:
        return Expectation(self, positive=True)

    @property
    def should_not(self) -> Expectation:
        return Expectation(self, positive=False)

    def perform_matching(
        self,
        matcher_name: str,
        expected: tuple[Any, ...],
        options: dict[str, Any],
        positive: bool = True,
    ) -> "Interceptor":
        """Evaluate a named matcher against the actual value.

        Args:
            matcher_name: Name registered in the bound matcher factory.
            expected: Positional expected values for the matcher.
            options: Keyword options for the matcher.
            positive: False for a ``should_not`` expectation.

        Returns:
            This interceptor, so expectations can be chained.

        Raises:
            ExpectationFailure: If the expectation does not hold.
            UnknownMatcherError: If matcher_name is not registered.
        """
        matcher = self.get_matcher_factory().create(matcher_name, *expected, **options)
        if bool(matcher.matches(self.actual)) is positive:
            return self
        if positive:
            message = matcher.failure_message(self.actual)
        else:
            message = matcher.negative_failure_message(self.actual)
        raise ExpectationFailure(message)

    def _wrap(self, value: Any) -> "Interceptor":
        # Derived interceptors share the parent's matcher factory.
        interceptor = wrap(value)
        if self._matcher_factory is not None:
            interceptor.set_matcher_factory(self._matcher_factory)
        return interceptor

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.actual!r}>"


class ScalarInterceptor(Interceptor):
    """Interceptor over a plain value (numbers, strings, None, ...)."""


class CollectionInterceptor(Interceptor):
    """Interceptor over a list, tuple, set or mapping.

    Indexing yields an interceptor over the item.
    """

    def __getitem__(self, key: Any) -> Interceptor:
        return self._wrap(self.actual[key])

    def __len__(self) -> int:
        return len(self.actual)


class ObjectInterceptor(Interceptor):
    """Interceptor over an arbitrary object.

    Attribute access yields an interceptor over the attribute value.
    Calling the interceptor calls the object and yields an interceptor
    over the return value, so ``spec(obj).method(1)`` and
    ``spec(obj).method.should...`` both work.
    """

    def __getattr__(self, name: str) -> Interceptor:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._wrap(getattr(self.actual, name))

    def __call__(self, *args: Any, **kwargs: Any) -> Interceptor:
        return self._wrap(self.actual(*args, **kwargs))


def wrap(value: Any) -> Interceptor:
    """Pick the interceptor shape for a single value."""
    if isinstance(value, _SCALAR_TYPES):
        return ScalarInterceptor(value)
    if isinstance(value, _COLLECTION_TYPES):
        return CollectionInterceptor(value)
    return ObjectInterceptor(value)


class InterceptorFactory(InterceptorFactoryPort):
    """Default interceptor factory.

    Shape rules:
    - no values: ScalarInterceptor over None
    - one value: shape chosen by wrap()
    - a class followed by arguments: ObjectInterceptor over an instance
      built from those arguments
    - several other values: CollectionInterceptor over the tuple
    """

    def create(self, *values: Any) -> Interceptor:
        if not values:
            return ScalarInterceptor(None)
        if len(values) == 1:
            return wrap(values[0])
        first, *arguments = values
        if isinstance(first, type):
            return ObjectInterceptor(first(*arguments))
        return CollectionInterceptor(tuple(values))
