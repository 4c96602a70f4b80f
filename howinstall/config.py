"""Configuration management for how-install using Pydantic Settings.

Loads configuration from environment variables and YAML config files.
Config file locations:
  - Linux: ~/.config/how-install/config.yaml
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from platformdirs import user_config_dir

from howinstall import __version__

APP_NAME = "how-install"


def default_config_path() -> Path:
    """Default location of the YAML config file."""
    return Path(user_config_dir(APP_NAME, appauthor=False)) / "config.yaml"


class HowInstallConfig(BaseSettings):
    """Main configuration class for how-install.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. Config file at ~/.config/how-install/config.yaml
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="HOW_INSTALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Lookup sources
    base_url: str = Field(
        default="https://command-not-found.com",
        description="Site serving per-command install pages"
    )

    tldr_base_url: str = Field(
        default="https://raw.githubusercontent.com/tldr-pages/tldr/main/pages",
        description="Base URL of the tldr-pages tree"
    )

    tldr_platforms: list[str] = Field(
        default_factory=lambda: ["common", "linux"],
        description="tldr page directories to search, in order"
    )

    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout in seconds"
    )

    user_agent: str = Field(
        default=f"how-install/{__version__}",
        description="User-Agent header sent with lookups"
    )

    # Application Settings
    shell: str = Field(
        default="bash",
        description="Shell used to run install commands"
    )

    show_tldr: bool = Field(
        default=True,
        description="Show tldr usage notes before the install command"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    config_path: Optional[Path] = Field(
        default=None,
        description="Custom config file path"
    )

    def __init__(self, **kwargs):
        """Initialize configuration with default paths."""
        super().__init__(**kwargs)

        if self.config_path is None:
            self.config_path = default_config_path()

    def page_url(self, command: str) -> str:
        """URL of the install page for a command."""
        return f"{self.base_url.rstrip('/')}/{command}"

    @classmethod
    def load_from_file(cls, config_path: Optional[Path] = None) -> "HowInstallConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Optional custom config file path

        Returns:
            HowInstallConfig instance with loaded settings
        """
        import yaml

        if config_path is None:
            config_path = default_config_path()

        if config_path.exists():
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            data = cls._without_env_overrides(data)
            data.setdefault("config_path", config_path)
            return cls(**data)

        return cls(config_path=config_path)

    @classmethod
    def _without_env_overrides(cls, data: dict) -> dict:
        """Drop file settings that a HOW_INSTALL_* variable also sets.

        File values are passed as init arguments, which pydantic-settings
        ranks above the environment.
        """
        prefix = cls.model_config["env_prefix"]
        env_names = {name.upper() for name in os.environ}
        return {
            key: value for key, value in data.items()
            if f"{prefix}{key}".upper() not in env_names
        }
