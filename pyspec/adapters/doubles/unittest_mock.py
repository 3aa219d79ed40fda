"""unittest.mock doubles adapter.

Implements DoublerPort with the standard library's unittest.mock.
Doubles for importable classes are autospecced, so calling a method the
real class does not have fails; doubles for unknown names accept any
attribute.
"""

import builtins
import importlib
import logging
from typing import Any
from unittest import mock

from pyspec.core.ports import DoublerPort

logger = logging.getLogger(__name__)


class UnittestMockDoubler(DoublerPort):
    """Creates doubles with unittest.mock and remembers what each stands for."""

    def __init__(self, autospec: bool = True):
        """Initialize the adapter.

        Args:
            autospec: If True, doubles for resolvable classes are built
                with create_autospec. If False, every double is a
                MagicMock named after the class.
        """
        self.autospec = autospec
        self.created: list[tuple[str, Any]] = []

    def is_available(self) -> bool:
        return True

    def mock(self, class_name: str) -> Any:
        """Create a double for class_name.

        Args:
            class_name: Builtin class name ("dict") or dotted import
                path ("pkg.module.Class"). Names that do not resolve to
                a class still get a double.

        Returns:
            An autospecced NonCallableMagicMock for resolvable classes,
            a MagicMock otherwise.
        """
        target = self._resolve(class_name) if self.autospec else None
        if target is None or target is object:
            double = mock.MagicMock(name=class_name)
        else:
            double = mock.create_autospec(target, instance=True, name=class_name)
        self.created.append((class_name, double))
        logger.debug(
            f"Created double for {class_name}",
            extra={"class_name": class_name, "autospecced": target not in (None, object)},
        )
        return double

    def class_name_of(self, double: Any) -> str | None:
        for class_name, created in self.created:
            if created is double:
                return class_name
        return None

    def reset(self) -> None:
        """Forget every double created so far."""
        self.created.clear()

    @staticmethod
    def _resolve(class_name: str) -> type | None:
        # Dotted paths are imported; bare names are looked up in builtins.
        if "." in class_name:
            module_name, _, attr = class_name.rpartition(".")
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.debug(f"Module {module_name} not importable; using a plain double")
                return None
            target = getattr(module, attr, None)
        else:
            target = getattr(builtins, class_name, None)
        return target if isinstance(target, type) else None
