"""Matcher factory: the protocol for obtaining matchers by name.

The kernel ships no concrete matchers. A matcher library registers its
Matcher subclasses with the @matcher decorator; every MatcherFactory
constructed afterwards starts from a snapshot of those registrations
and can be extended per instance with register().
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .errors import UnknownMatcherError
from .ports import Matcher

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=type[Matcher])

# Process-level defaults populated by @matcher at import time.
_DEFAULT_MATCHERS: dict[str, type[Matcher]] = {}


def matcher(name: str) -> Callable[[M], M]:
    """Register a Matcher subclass under name in the default registry.

    Later registrations for the same name override earlier ones.

    Raises:
        ValueError: If name is empty.
        TypeError: If the decorated object is not a Matcher subclass.
    """
    if not name or not name.strip():
        raise ValueError("matcher name must be a non-empty string")

    def _decorate(matcher_cls: M) -> M:
        if not isinstance(matcher_cls, type) or not issubclass(matcher_cls, Matcher):
            raise TypeError(f"@matcher({name!r}) can only decorate Matcher subclasses")
        setattr(matcher_cls, "__matcher_name__", name)
        _DEFAULT_MATCHERS[name] = matcher_cls
        logger.debug(f"Registered default matcher {name!r}: {matcher_cls.__qualname__}")
        return matcher_cls

    return _decorate


def default_matchers() -> dict[str, type[Matcher]]:
    """Return a copy of the default matcher registry."""
    return dict(_DEFAULT_MATCHERS)


class MatcherFactory:
    """Produces matcher instances on demand.

    One factory is owned by each example group. Registrations made on
    an instance never leak into the default registry or into other
    factories.
    """

    def __init__(self, matchers: dict[str, type[Matcher]] | None = None):
        """Initialize the factory.

        Args:
            matchers: Extra name -> Matcher class entries, applied on
                top of the default registry snapshot.
        """
        self._matchers: dict[str, type[Matcher]] = default_matchers()
        if matchers:
            for name, matcher_cls in matchers.items():
                self.register(name, matcher_cls)

    def register(self, name: str, matcher_cls: type[Matcher]) -> None:
        """Register or override a matcher on this factory only."""
        if not name:
            raise ValueError("matcher name must be a non-empty string")
        if not isinstance(matcher_cls, type) or not issubclass(matcher_cls, Matcher):
            raise TypeError(f"{matcher_cls!r} is not a Matcher subclass")
        self._matchers[name] = matcher_cls

    def has(self, name: str) -> bool:
        return name in self._matchers

    def names(self) -> list[str]:
        return sorted(self._matchers)

    def create(self, name: str, *expected: Any, **options: Any) -> Matcher:
        """Instantiate the matcher registered under name.

        Args:
            name: Registered matcher name (e.g. "equal").
            *expected: Expected value(s) passed to the matcher constructor.
            **options: Keyword options passed to the matcher constructor.

        Returns:
            A new Matcher instance.

        Raises:
            UnknownMatcherError: If no matcher is registered under name.
        """
        try:
            matcher_cls = self._matchers[name]
        except KeyError:
            raise UnknownMatcherError(name) from None
        return matcher_cls(*expected, **options)
