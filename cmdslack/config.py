# cmdslack/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
Command definitions and Slack tokens live in the bridge config file (see
cmdslack.core.commands.loader); this module only covers process-level knobs.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Bridge config file location and parser override (yaml / toml)
    cmdslack_config: str = ""
    cmdslack_parser: str = ""

    # Process execution
    command_timeout: float = 300.0  # Seconds, 0 disables the timeout

    # Slack response visibility
    response_type: Literal["in_channel", "ephemeral"] = "in_channel"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @property
    def timeout(self) -> float | None:
        """Get the process timeout, or None when disabled.

        Returns:
            Timeout in seconds, or None if command_timeout is not positive.
        """
        return self.command_timeout if self.command_timeout > 0 else None


# Singleton instance - import this in your code
settings = Settings()
