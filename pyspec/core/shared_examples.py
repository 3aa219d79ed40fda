"""Registry of shared examples composed into an example group.

Each entry maps an example method name to a deferred invocation of that
method on the shared-example instance that defines it. Running an entry
brackets the call with the owning instance's hooks, not the group's.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import SharedExampleNotFoundError
from .ports import Hookable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharedExampleEntry:
    """A registered shared example."""

    invocation: Callable[[], Any]
    owner: Any  # instance whose hooks bracket the invocation


class SharedExampleRegistry:
    """Per-group mapping of example name -> SharedExampleEntry.

    Owned by exactly one example group instance and never shared.
    """

    def __init__(self) -> None:
        self._entries: dict[str, SharedExampleEntry] = {}

    def add(self, owner: Any, method_name: str) -> None:
        """Register method_name of owner as a shared example.

        Overwrites any existing entry for the same name. The method is
        looked up when the example runs, not at registration.

        Args:
            owner: Instance defining the shared example method.
            method_name: Name of the method; also the registry key.
        """
        if not method_name:
            raise ValueError("method_name must be a non-empty string")

        def _invoke() -> Any:
            return getattr(owner, method_name)()

        if method_name in self._entries:
            logger.debug(
                f"Shared example {method_name!r} overwritten",
                extra={"example": method_name, "owner": type(owner).__name__},
            )
        self._entries[method_name] = SharedExampleEntry(invocation=_invoke, owner=owner)

    def has(self, name: str) -> bool:
        return name in self._entries

    def entry(self, name: str) -> SharedExampleEntry:
        """Return the entry registered under name.

        Raises:
            SharedExampleNotFoundError: If name is not registered.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise SharedExampleNotFoundError(name) from None

    def get(self, name: str) -> Any:
        """Return the owning shared-example instance for name.

        Raises:
            SharedExampleNotFoundError: If name is not registered.
        """
        return self.entry(name).owner

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._entries)

    def run(self, name: str) -> None:
        """Run a shared example bracketed by its owner's hooks.

        Order: owner.before(), the shared method, owner.after(). Hooks
        are skipped for owners that are not Hookable. An exception from
        any step propagates and the remaining steps do not run.

        Raises:
            SharedExampleNotFoundError: If name is not registered.
        """
        entry = self.entry(name)
        hookable = isinstance(entry.owner, Hookable)
        if hookable:
            entry.owner.before()
        entry.invocation()
        if hookable:
            entry.owner.after()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
