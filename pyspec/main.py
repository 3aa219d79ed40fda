"""Wiring for pyspec: settings in, a ready ExampleRunner out.

Only this module knows about both the kernel in pyspec.core and the
adapters in pyspec.adapters. bootstrap() reads Settings, configures
logging, imports the configured matcher modules so their @matcher
registrations run, picks the doubles adapter and builds the runner.
"""

import importlib
import logging
import sys
from collections.abc import Iterable

from pyspec.adapters.doubles.unittest_mock import UnittestMockDoubler
from pyspec.config import Settings, load_settings
from pyspec.core.example_group import ExampleGroup
from pyspec.core.interceptor import InterceptorFactory
from pyspec.core.models import GroupResult
from pyspec.core.ports import DoublerPort
from pyspec.core.runner import ExampleRunner

_LOG_FORMATS = {
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
    "text": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
}


def configure_logging(log_level: str, log_format: str) -> None:
    """Send pyspec's records (and the root logger's) to stdout.

    Example outcomes are logged by pyspec.core.runner at INFO for passed
    and pending examples and at WARNING for failures and errors, so
    log_level="WARNING" shows only what went wrong.

    Args:
        log_level: Name of a logging level, e.g. "DEBUG".
        log_format: "json" for one JSON object per line, "text" otherwise.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=_LOG_FORMATS.get(log_format, _LOG_FORMATS["text"]),
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def load_matcher_modules(module_names: Iterable[str]) -> None:
    """Import matcher modules so their @matcher registrations run.

    Raises:
        ImportError: If a module cannot be imported.
    """
    logger = logging.getLogger(__name__)
    for name in module_names:
        importlib.import_module(name)
        logger.debug(f"Loaded matcher module {name}")


def build_doubler(settings: Settings) -> DoublerPort | None:
    """Select the doubles adapter named by settings.

    Returns:
        The adapter, or None when doubles are disabled.
    """
    logger = logging.getLogger(__name__)
    if settings.doubles_backend == "unittest_mock":
        logger.info("Doubles adapter: unittest.mock")
        return UnittestMockDoubler(autospec=settings.doubles_autospec)
    logger.info("Doubles adapter: none (double() will raise MissingDependencyError)")
    return None


def bootstrap(settings: Settings | None = None) -> ExampleRunner:
    """Load configuration and wire an ExampleRunner.

    Steps:
    1. Load configuration from environment (unless given)
    2. Configure logging
    3. Import matcher modules
    4. Instantiate the doubles adapter
    5. Initialize the runner

    Args:
        settings: Pre-built settings; loaded from environment if None.

    Returns:
        A runner ready to run example groups.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Bootstrapping pyspec runner...")

    load_matcher_modules(settings.matcher_modules)
    doubler = build_doubler(settings)

    return ExampleRunner(
        interceptor_factory=InterceptorFactory(),
        doubler=doubler,
        example_prefix=settings.example_prefix,
        fail_fast=settings.fail_fast,
    )


def run_example_groups(
    groups: Iterable[type[ExampleGroup]],
    settings: Settings | None = None,
) -> list[GroupResult]:
    """Run example groups with a freshly bootstrapped runner.

    Returns:
        One GroupResult per group, in the order given.
    """
    runner = bootstrap(settings)
    return runner.run_all(groups)
