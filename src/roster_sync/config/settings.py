"""Application settings using Pydantic Settings."""

import re
from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roster_sync.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Roster
    input_file: str = "clone.txt"
    identifier_pattern: str = r"s[0-9]{5}"

    # Working copies
    dest_dir: str = "."
    remote_name: str = "origin"
    fallback_branches: list[str] = Field(default_factory=lambda: ["main", "master"])

    # Abort the batch on the first git command that must succeed but fails
    fail_fast: bool = True

    @field_validator("identifier_pattern")
    @classmethod
    def _compile_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid identifier pattern {value!r}: {e}") from e
        return value

    @field_validator("remote_name")
    @classmethod
    def _non_empty_remote(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("remote_name must not be empty")
        return value

    @property
    def dest_path(self) -> Path:
        return Path(self.dest_dir).expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If a setting from the environment is invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {problems}",
            details={"errors": e.errors(include_url=False)},
        ) from e
