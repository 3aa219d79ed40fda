"""Integration tests for the composition root.

These tests verify that configuration is loaded and validated, that the
doubles adapter is selected from configuration, and that bootstrap()
wires a runner able to run example groups end to end.
"""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pyspec.adapters.doubles.unittest_mock import UnittestMockDoubler
from pyspec.config import Settings, load_settings
from pyspec.core.example_group import ExampleGroup
from pyspec.core.matchers import default_matchers
from pyspec.core.models import Outcome
from pyspec.core.runner import ExampleRunner
from pyspec.main import (
    bootstrap,
    build_doubler,
    configure_logging,
    load_matcher_modules,
    run_example_groups,
)

MATCHER_MODULE = "pyspec.tests.fakes.matcher_module"


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.example_prefix == "it_"
        assert settings.fail_fast is False
        assert settings.doubles_backend == "unittest_mock"
        assert settings.doubles_autospec is True
        assert settings.matcher_modules == []
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "PYSPEC_EXAMPLE_PREFIX": "should_",
                "PYSPEC_FAIL_FAST": "true",
                "PYSPEC_DOUBLES_BACKEND": "none",
                "PYSPEC_MATCHER_MODULES": '["myproject.matchers"]',
                "PYSPEC_LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.example_prefix == "should_"
            assert settings.fail_fast is True
            assert settings.doubles_backend == "none"
            assert settings.matcher_modules == ["myproject.matchers"]
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "pyspec.env"
        env_file.write_text("PYSPEC_EXAMPLE_PREFIX=spec_\nPYSPEC_LOG_FORMAT=json\n")

        settings = load_settings(str(env_file))
        assert settings.example_prefix == "spec_"
        assert settings.log_format == "json"

    def test_environment_overrides_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "pyspec.env"
        env_file.write_text("PYSPEC_FAIL_FAST=false\n")

        with patch.dict(os.environ, {"PYSPEC_FAIL_FAST": "true"}):
            assert load_settings(str(env_file)).fail_fast is True

    @pytest.mark.parametrize("prefix", ["", "1st_", "it-"])
    def test_rejects_invalid_example_prefix(self, prefix: str) -> None:
        with patch.dict(os.environ, {"PYSPEC_EXAMPLE_PREFIX": prefix}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_rejects_unknown_doubles_backend(self) -> None:
        with patch.dict(os.environ, {"PYSPEC_DOUBLES_BACKEND": "mockery"}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_rejects_blank_matcher_module(self) -> None:
        with pytest.raises(ValidationError):
            Settings(matcher_modules=["ok.module", "  "])


class TestLoggingSetup:
    """Test that logging goes to stdout in the configured format."""

    @pytest.mark.parametrize(
        ("log_format", "marker"), [("json", '"level": "%(levelname)s"'), ("text", "%(levelname)-7s")]
    )
    def test_format_is_selected(self, log_format: str, marker: str) -> None:
        with patch("pyspec.main.logging.basicConfig") as basic_config:
            configure_logging("WARNING", log_format)

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert marker in kwargs["format"]
        [handler] = kwargs["handlers"]
        assert handler.stream is sys.stdout

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch("pyspec.main.logging.basicConfig") as basic_config:
            configure_logging("CHATTY", "text")

        assert basic_config.call_args.kwargs["level"] == logging.INFO


class TestAdapterSelection:
    def test_unittest_mock_backend(self) -> None:
        doubler = build_doubler(Settings(doubles_backend="unittest_mock"))
        assert isinstance(doubler, UnittestMockDoubler)
        assert doubler.autospec is True

    def test_autospec_setting_is_passed(self) -> None:
        doubler = build_doubler(Settings(doubles_autospec=False))
        assert isinstance(doubler, UnittestMockDoubler)
        assert doubler.autospec is False

    def test_none_backend(self) -> None:
        assert build_doubler(Settings(doubles_backend="none")) is None


class TestMatcherModules:
    def test_loading_registers_matchers(self) -> None:
        load_matcher_modules([MATCHER_MODULE])
        assert "be_even" in default_matchers()

    def test_missing_module_propagates(self) -> None:
        with pytest.raises(ImportError):
            load_matcher_modules(["pyspec.tests.fakes.does_not_exist"])


class TestBootstrap:
    def test_bootstrap_wires_runner(self) -> None:
        runner = bootstrap(Settings(example_prefix="should_", fail_fast=True))
        assert isinstance(runner, ExampleRunner)
        assert runner.example_prefix == "should_"
        assert runner.fail_fast is True
        assert isinstance(runner.doubler, UnittestMockDoubler)

    def test_bootstrap_without_doubles(self) -> None:
        runner = bootstrap(Settings(doubles_backend="none"))
        assert runner.doubler is None

    def test_bootstrap_loads_settings_from_env(self) -> None:
        with patch.dict(os.environ, {"PYSPEC_EXAMPLE_PREFIX": "check_"}):
            assert bootstrap().example_prefix == "check_"


class DescribeCalculator(ExampleGroup):
    def before(self) -> None:
        self.numbers = [2, 4, 7]

    def it_has_even_numbers(self) -> None:
        self.spec(self.numbers)[0].should.be_even()
        self.spec(self.numbers)[2].should_not.be_even()

    def it_talks_to_a_collaborator(self) -> None:
        counter = self.double("collections.Counter")
        counter.update("abc")
        counter.update.assert_called_once_with("abc")

    def it_detects_odd_numbers(self) -> None:
        self.spec(self.numbers[2]).should.be_even()

    def it_is_pending(self) -> None:
        self.pending()


class TestEndToEnd:
    def test_run_example_groups(self) -> None:
        settings = Settings(matcher_modules=[MATCHER_MODULE])
        [result] = run_example_groups([DescribeCalculator], settings)

        outcomes = {r.example: r.outcome for r in result.results}
        assert outcomes == {
            "it_has_even_numbers": Outcome.PASSED,
            "it_talks_to_a_collaborator": Outcome.PASSED,
            "it_detects_odd_numbers": Outcome.FAILED,
            "it_is_pending": Outcome.PENDING,
        }
        failed = result.by_outcome(Outcome.FAILED)[0]
        assert failed.message == "expected 7 to be even"
