"""Sanity tests for the fakes themselves.

The fakes stand in for real collaborators in core tests, so they must
honor the same port contracts.
"""

import pytest

from pyspec.core.ports import DoublerPort, Hookable, Matcher
from pyspec.tests.fakes import (
    BareOwner,
    BeTruthyMatcher,
    CallLog,
    EqualMatcher,
    FakeDoubler,
    RecordingSharedExample,
    fake_matcher_factory,
)


class TestFakeDoubler:
    def test_is_a_doubler_port(self) -> None:
        assert isinstance(FakeDoubler(), DoublerPort)

    def test_records_requests(self) -> None:
        doubler = FakeDoubler()
        double = doubler.mock("Repository")
        assert doubler.requested == ["Repository"]
        assert doubler.class_name_of(double) == "Repository"

    def test_foreign_objects_are_unknown(self) -> None:
        assert FakeDoubler().class_name_of(object()) is None

    def test_availability_switch(self) -> None:
        assert FakeDoubler(available=False).is_available() is False


class TestFakeMatchers:
    @pytest.mark.parametrize("matcher_cls", [EqualMatcher, BeTruthyMatcher])
    def test_are_matchers(self, matcher_cls: type) -> None:
        assert issubclass(matcher_cls, Matcher)

    def test_equal(self) -> None:
        assert EqualMatcher(3).matches(3) is True
        assert EqualMatcher(3).matches(4) is False

    def test_preloaded_factory(self) -> None:
        factory = fake_matcher_factory()
        assert {"equal", "be_truthy", "explode"} <= set(factory.names())


class TestSharedFakes:
    def test_recording_shared_example_is_hookable(self) -> None:
        assert isinstance(RecordingSharedExample(CallLog()), Hookable)

    def test_bare_owner_is_not_hookable(self) -> None:
        assert not isinstance(BareOwner(CallLog()), Hookable)

    def test_call_log_clear(self) -> None:
        log = CallLog()
        log.record("x")
        log.clear()
        assert log.calls == []
