"""Runner settings read from PYSPEC_* environment variables.

Values can also come from a dotenv file; pydantic validates them before
the composition root uses them.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for example discovery, test doubles and logging.

    PYSPEC_MATCHER_MODULES takes a JSON list, e.g. ["myproject.matchers"].
    """

    model_config = SettingsConfigDict(
        env_prefix="PYSPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Example discovery within a group class
    example_prefix: str = Field(
        default="it_",
        description="Methods whose name starts with this prefix are examples",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop a group after its first failed or errored example",
    )

    # Collaborators
    doubles_backend: Literal["unittest_mock", "none"] = Field(
        default="unittest_mock",
        description="Mocking library used by double(), mock() and stub()",
    )
    doubles_autospec: bool = Field(
        default=True,
        description="Autospec doubles for classes that can be imported",
    )
    matcher_modules: list[str] = Field(
        default_factory=list,
        description="Modules imported at bootstrap to register matchers",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("example_prefix")
    @classmethod
    def validate_example_prefix(cls, v: str) -> str:
        """Ensure the prefix can start a method name."""
        if not v or not v.isidentifier():
            raise ValueError("example_prefix must be a non-empty identifier prefix")
        return v

    @field_validator("matcher_modules")
    @classmethod
    def validate_matcher_modules(cls, v: list[str]) -> list[str]:
        """Reject blank module names."""
        if any(not name.strip() for name in v):
            raise ValueError("matcher_modules must not contain blank names")
        return [name.strip() for name in v]


def load_settings(env_file: str | None = None) -> Settings:
    """Read runner settings from PYSPEC_* variables and a dotenv file.

    Variables already set in the environment take precedence over the
    file. Without env_file, ".env" in the working directory is used if
    it exists.

    Raises:
        ValidationError: If a value is rejected, e.g. a non-identifier
            example_prefix or an unknown doubles_backend.
    """
    if env_file is None:
        return Settings()
    return Settings(_env_file=env_file)  # type: ignore[call-arg]


__all__ = ["Settings", "load_settings"]
