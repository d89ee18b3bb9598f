"""Configuration management using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lathe import __version__


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    lathe_home: Path | None = Field(
        default=None,
        description="Lathe home directory (defaults to ~/.lathe)",
    )
    lathe_version: str = Field(
        default=__version__,
        description="Running tool version, checked against min-lathe-version",
    )
    lathe_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    lathe_log_to_file: bool = Field(
        default=True,
        description="Also write logs under <home>/logs",
    )
    lathe_project_file: str = Field(
        default="project.toml",
        description="Name of the project file looked up in the working directory",
    )
    lathe_task_packages: list[str] = Field(
        default_factory=lambda: ["lathe.tasks", "lathe_tasks"],
        description="Packages searched, in order, for task modules",
    )
    lathe_hook_package: str = Field(
        default="lathe_hooks",
        description="Package scanned for hook modules when implicit-hooks is set",
    )
    debug: bool = Field(
        default=False,
        description="Print stack traces for hook loading failures",
    )

    def home_dir(self) -> Path:
        """Return the absolute home directory, creating it if needed."""
        home = self.lathe_home or Path.home() / ".lathe"
        home = home.expanduser().absolute()
        home.mkdir(parents=True, exist_ok=True)
        return home


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance loaded from environment.

    Example:
        >>> settings = get_settings()
        >>> settings.lathe_project_file
        'project.toml'
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
