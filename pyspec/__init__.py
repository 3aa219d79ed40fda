"""pyspec: example-execution kernel for BDD-style specifications.

Write example groups by subclassing ExampleGroup, reuse behavior with
SharedExample, and run them with an ExampleRunner (see pyspec.main for
a runner wired from configuration).
"""

from pyspec.core import (
    DeliberateFailure,
    ExampleGroup,
    ExampleResult,
    ExampleRunner,
    ExpectationFailure,
    GroupResult,
    Matcher,
    MatcherFactory,
    Outcome,
    Pending,
    SharedExample,
    matcher,
)

__version__ = "0.1.0"

__all__ = [
    "DeliberateFailure",
    "ExampleGroup",
    "ExampleResult",
    "ExampleRunner",
    "ExpectationFailure",
    "GroupResult",
    "Matcher",
    "MatcherFactory",
    "Outcome",
    "Pending",
    "SharedExample",
    "matcher",
]
