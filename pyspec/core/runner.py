"""Example runner: drives example groups and classifies outcomes.

The runner is the only place that catches what an example raises. For
each group it:

1. instantiates the group once with the runner's collaborators
2. composes shared examples named by ``it_behaves_like``
3. calls before_all
4. for each example: before, the example (or the shared example),
   after; then records an ExampleResult
5. calls after_all

Nothing is printed; results are returned and logged.
"""

import inspect
import logging
import time
from collections.abc import Callable, Iterable
from typing import Any

from .example_group import ExampleGroup
from .interceptor import InterceptorFactory
from .matchers import MatcherFactory
from .models import ExampleResult, GroupResult, Outcome
from .ports import DoublerPort, InterceptorFactoryPort

logger = logging.getLogger(__name__)

_STOPPING_OUTCOMES = (Outcome.FAILED, Outcome.ERROR)


class ExampleRunner:
    """Runs example groups sequentially in the calling thread."""

    def __init__(
        self,
        matcher_factory_cls: Callable[[], MatcherFactory] = MatcherFactory,
        interceptor_factory: InterceptorFactoryPort | None = None,
        doubler: DoublerPort | None = None,
        example_prefix: str = "it_",
        fail_fast: bool = False,
    ):
        """Initialize the runner.

        Args:
            matcher_factory_cls: Builds one matcher factory per group.
            interceptor_factory: Interceptor factory shared by all groups.
            doubler: Mocking adapter handed to every group, or None.
            example_prefix: Methods starting with this prefix are examples.
            fail_fast: Stop a group after its first failed/errored example.
        """
        if not example_prefix:
            raise ValueError("example_prefix must be a non-empty string")
        self.matcher_factory_cls = matcher_factory_cls
        self.interceptor_factory = interceptor_factory or InterceptorFactory()
        self.doubler = doubler
        self.example_prefix = example_prefix
        self.fail_fast = fail_fast

    def example_names(self, group_cls: type[ExampleGroup]) -> list[str]:
        """Names of example methods in definition order, base classes first.

        Kernel methods (spec, stub, before_all, ...) and their overrides
        are never examples, whatever the prefix.
        """
        names: list[str] = []
        for klass in reversed(group_cls.__mro__):
            for name, value in vars(klass).items():
                if (
                    name.startswith(self.example_prefix)
                    and inspect.isfunction(value)
                    and not hasattr(ExampleGroup, name)
                    and name not in names
                ):
                    names.append(name)
        return names

    def instantiate(self, group_cls: type[ExampleGroup]) -> ExampleGroup:
        return group_cls(
            matcher_factory=self.matcher_factory_cls(),
            interceptor_factory=self.interceptor_factory,
            doubler=self.doubler,
        )

    def compose(self, group: ExampleGroup) -> None:
        """Register the examples of every shared example the group behaves like.

        Raises:
            SpecificationError: If it_behaves_like names a non SharedExample.
        """
        if not group.behaves_like_another_object():
            return
        for shared_cls in group.shared_example_classes():
            shared = self.instantiate(shared_cls)
            for name in self.example_names(shared_cls):
                group.add_shared_example(shared, name)
            logger.debug(
                f"Composed {shared_cls.__name__} into {type(group).__name__}",
                extra={"group": type(group).__name__, "shared": shared_cls.__name__},
            )

    def run(self, group_cls: type[ExampleGroup]) -> GroupResult:
        """Run every example of one group.

        Returns:
            GroupResult with one ExampleResult per example that ran, or a
            single "before_all" result if the group could not be set up.
        """
        group_name = group_cls.__name__
        result = GroupResult(group=group_name)

        started = time.perf_counter()
        try:
            group = self.instantiate(group_cls)
            self.compose(group)
            group.before_all()
        except Exception as exc:
            setup = ExampleResult.from_exception(
                group_name, "before_all", exc, time.perf_counter() - started
            )
            self._record(result, setup)
            logger.error(
                f"Group {group_name} could not be set up: {setup.message}",
                extra={"group": group_name},
            )
            return result

        for name, shared_from in self._plan(group):
            example_result = self._run_example(group, name, shared_from)
            self._record(result, example_result)
            if self.fail_fast and example_result.outcome in _STOPPING_OUTCOMES:
                logger.info(f"Stopping {group_name} after first failure")
                break

        started = time.perf_counter()
        try:
            group.after_all()
        except Exception as exc:
            self._record(
                result,
                ExampleResult.from_exception(
                    group_name, "after_all", exc, time.perf_counter() - started
                ),
            )

        return result

    def run_all(self, group_classes: Iterable[type[ExampleGroup]]) -> list[GroupResult]:
        return [self.run(group_cls) for group_cls in group_classes]

    def _plan(self, group: ExampleGroup) -> list[tuple[str, str | None]]:
        # Own examples first; shared examples unless shadowed by an own one.
        own = self.example_names(type(group))
        plan: list[tuple[str, str | None]] = [(name, None) for name in own]
        for name in group.shared_example_names():
            if name in own:
                continue
            owner = group.get_shared_example(name)
            plan.append((name, type(owner).__name__))
        return plan

    def _run_example(
        self, group: ExampleGroup, name: str, shared_from: str | None
    ) -> ExampleResult:
        started = time.perf_counter()
        error: BaseException | None = None
        try:
            group.before()
            if shared_from is None:
                getattr(group, name)()
            else:
                group.run_shared_example(name)
        except Exception as exc:
            error = exc
        finally:
            try:
                group.after()
            except Exception as exc:
                # An example that already failed keeps its own error.
                if error is None:
                    error = exc
        return ExampleResult.from_exception(
            type(group).__name__,
            name,
            error,
            time.perf_counter() - started,
            shared_from=shared_from,
        )

    @staticmethod
    def _record(result: GroupResult, example_result: ExampleResult) -> None:
        result.add(example_result)
        extra: dict[str, Any] = {
            "group": example_result.group,
            "example": example_result.example,
            "outcome": example_result.outcome.value,
        }
        if example_result.outcome is Outcome.PASSED:
            logger.info(f"{example_result.group}.{example_result.example} passed", extra=extra)
        elif example_result.outcome is Outcome.PENDING:
            logger.info(
                f"{example_result.group}.{example_result.example} pending: {example_result.message}",
                extra=extra,
            )
        else:
            logger.warning(
                f"{example_result.group}.{example_result.example} {example_result.outcome.value}: "
                f"{example_result.message}",
                extra=extra,
            )
