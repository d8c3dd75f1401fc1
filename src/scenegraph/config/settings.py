"""Configuration management for scenegraph using pydantic-settings.

Settings are read from the environment (``SCENEGRAPH_`` prefix) and an
optional ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SceneGraphSettings(BaseSettings):
    """Main configuration settings for scenegraph."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SCENEGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Navigation settings
    guard_timeout: float = Field(
        5.0, gt=0.0, description="Seconds to wait for an element or existence guard"
    )
    guard_poll_interval: float = Field(
        0.1, gt=0.0, description="Seconds between guard evaluations while waiting"
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug mode is off")
    log_path: Path | None = Field(None, description="Directory for log files")
    structured_logging: bool = Field(True, description="Render logs as JSON")

    def model_post_init(self, __context) -> None:
        """Post-initialization validation."""
        if self.guard_poll_interval > self.guard_timeout:
            raise ValueError(
                f"guard_poll_interval ({self.guard_poll_interval}) must not exceed "
                f"guard_timeout ({self.guard_timeout})"
            )


# Singleton instance
_settings: SceneGraphSettings | None = None


def get_settings() -> SceneGraphSettings:
    """Get the singleton settings instance.

    Returns:
        SceneGraphSettings instance
    """
    global _settings

    if _settings is None:
        _settings = SceneGraphSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
