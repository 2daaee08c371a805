"""Runtime configuration for Git Changelog."""

import os
from pathlib import Path

from pydantic import BaseModel, field_validator

OUTPUT_FILE = "CHANGELOG.md"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ChangelogConfig(BaseModel):
    """Settings for a single changelog run."""

    repo_path: Path = Path(".")
    output_file: str = OUTPUT_FILE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value

    @classmethod
    def from_env(cls) -> "ChangelogConfig":
        """Build the config from GIT_CHANGELOG_* environment variables."""
        return cls(
            repo_path=Path(os.environ.get("GIT_CHANGELOG_REPO", ".")).resolve(),
            log_level=os.environ.get("GIT_CHANGELOG_LOG_LEVEL", "WARNING"),
        )
