"""Fake implementations of kernel ports for testing.

These in-memory implementations allow kernel logic to be tested
without a matcher library or a mocking library:

- FakeDoubler: DoublerPort that records requested doubles
- EqualMatcher, BeTruthyMatcher, RaisingMatcher: minimal matchers
- RecordingSharedExample, BareOwner: instrumented shared examples
"""

from .doubler import FakeDoubler
from .matchers import BeTruthyMatcher, EqualMatcher, RaisingMatcher, fake_matcher_factory
from .shared import BareOwner, CallLog, FailingSharedExample, NotShared, RecordingSharedExample

__all__ = [
    "BareOwner",
    "BeTruthyMatcher",
    "CallLog",
    "EqualMatcher",
    "FailingSharedExample",
    "FakeDoubler",
    "NotShared",
    "RaisingMatcher",
    "RecordingSharedExample",
    "fake_matcher_factory",
]
