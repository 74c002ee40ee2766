"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class PromptSettings(BaseModel):
    """Interactive confirmation settings."""

    affirmative_token: str = Field(
        default="y", description="Exact answer that confirms a prompt; anything else declines"
    )

    @field_validator("affirmative_token")
    @classmethod
    def token_not_empty(cls, v: str) -> str:
        """An empty token would make an empty line count as consent."""
        if not v:
            raise ValueError("affirmative_token must not be empty")
        return v


class BehaviorSettings(BaseModel):
    """Settings for discovery and move execution."""

    continue_on_error: bool = Field(
        default=False, description="Keep moving remaining files after a failed move"
    )
    confirm_plan: bool = Field(
        default=False, description="Ask once for confirmation before any move is made"
    )
    ignored_prefixes: list[str] = Field(
        default_factory=lambda: ["@"],
        description="Entry name prefixes skipped while walking in date mode",
    )

    @field_validator("ignored_prefixes")
    @classmethod
    def prefixes_not_empty(cls, v: list[str]) -> list[str]:
        """Reject empty prefixes, which would skip every entry."""
        if any(not prefix for prefix in v):
            raise ValueError("ignored_prefixes must not contain empty strings")
        return v


class FileMoverConfig(BaseModel):
    """Main configuration for filemover."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    prompts: PromptSettings = Field(
        default_factory=PromptSettings, description="Confirmation prompt settings"
    )

    behavior: BehaviorSettings = Field(
        default_factory=BehaviorSettings, description="Move behavior settings"
    )
