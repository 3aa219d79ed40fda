"""Core example-execution kernel for pyspec.

This package has zero external dependencies. Mocking libraries and
matcher libraries plug in through the ports defined in ports.py.
"""

from .errors import (
    ExpectationFailure,
    MissingDependencyError,
    PySpecError,
    SharedExampleNotFoundError,
    SpecificationError,
    UnknownMatcherError,
)
from .example_group import ExampleGroup, SharedExample
from .interceptor import (
    CollectionInterceptor,
    Expectation,
    Interceptor,
    InterceptorFactory,
    ObjectInterceptor,
    ScalarInterceptor,
)
from .matchers import MatcherFactory, matcher
from .models import ExampleResult, GroupResult, Outcome, classify
from .ports import DoublerPort, Hookable, InterceptorFactoryPort, Matcher
from .runner import ExampleRunner
from .shared_examples import SharedExampleEntry, SharedExampleRegistry
from .signals import DeliberateFailure, ExampleSignal, Pending

__all__ = [
    "CollectionInterceptor",
    "DeliberateFailure",
    "DoublerPort",
    "ExampleGroup",
    "ExampleResult",
    "ExampleRunner",
    "ExampleSignal",
    "Expectation",
    "ExpectationFailure",
    "GroupResult",
    "Hookable",
    "Interceptor",
    "InterceptorFactory",
    "InterceptorFactoryPort",
    "Matcher",
    "MatcherFactory",
    "MissingDependencyError",
    "ObjectInterceptor",
    "Outcome",
    "Pending",
    "PySpecError",
    "ScalarInterceptor",
    "SharedExample",
    "SharedExampleEntry",
    "SharedExampleNotFoundError",
    "SharedExampleRegistry",
    "SpecificationError",
    "UnknownMatcherError",
    "classify",
    "matcher",
]
