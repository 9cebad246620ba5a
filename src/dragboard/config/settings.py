"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    initial_columns: list[str] = Field(
        default_factory=list,
        description="Titles of dynamic columns created at startup",
    )

    model_config = {
        "env_prefix": "DRAGBOARD_",
    }
