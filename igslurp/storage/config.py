"""Configuration management with validation."""

import json
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.exceptions import ConfigurationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "instagram"
API_HOST = "instagram-api-fast-reliable-data-scraper.p.rapidapi.com"


class AppConfig(BaseModel):
    """Application configuration with validation."""

    # Directories and files
    config_dir: Path = Field(
        default=DEFAULT_CONFIG_DIR,
        description="Directory for configuration files"
    )
    api_key_file: Optional[Path] = Field(
        default=None,
        validate_default=True,
        description="File holding the RapidAPI key (defaults to config_dir/api_key)"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        validate_default=True,
        description="Directory for log files (defaults to config_dir/logs)"
    )

    # API
    base_url: str = Field(
        default=f"https://{API_HOST}",
        description="Base URL of the scraper API"
    )
    api_host: str = Field(
        default=API_HOST,
        description="Value sent in the x-rapidapi-host header"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Per-request timeout in seconds"
    )

    # Pagination
    default_count: int = Field(
        default=25,
        ge=1,
        le=1000,
        description="Default number of items requested per page"
    )
    max_pages: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Hard cap on pages fetched by auto-pagination"
    )
    page_delay: float = Field(
        default=0.5,
        ge=0,
        le=10,
        description="Courtesy delay between pages in seconds"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    class Config:
        """Pydantic configuration."""
        validate_assignment = True

    @field_validator("api_key_file")
    @classmethod
    def set_api_key_file_default(cls, v: Optional[Path], info) -> Path:
        """Set api_key_file default based on config_dir."""
        if v is None:
            v = info.data.get("config_dir", DEFAULT_CONFIG_DIR) / "api_key"
        return v

    @field_validator("log_dir")
    @classmethod
    def set_log_dir_default(cls, v: Optional[Path], info) -> Path:
        """Set log_dir default based on config_dir."""
        if v is None:
            v = info.data.get("config_dir", DEFAULT_CONFIG_DIR) / "logs"
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so endpoints can be appended with a single slash."""
        return v.rstrip("/")

    def save(self, config_file: Optional[Path] = None) -> None:
        """
        Save configuration to JSON file.

        Args:
            config_file: Path to config file. If None, uses config_dir/config.json
        """
        if config_file is None:
            config_file = self.get_config_file()

        try:
            config_dict = self.model_dump(mode='json')

            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2)

            logger.info(f"Configuration saved to {config_file}")

        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}") from e

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "AppConfig":
        """
        Load configuration from JSON file.

        Args:
            config_file: Path to config file. If None, uses default location

        Returns:
            AppConfig instance

        Raises:
            ConfigurationError: If the file holds values that fail validation
        """
        if config_file is None:
            config_file = DEFAULT_CONFIG_DIR / "config.json"

        if not config_file.exists():
            logger.debug("No config file found, using defaults")
            return cls()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read configuration: {e}")
            logger.info("Using default configuration")
            return cls()

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Invalid configuration in {config_file}: expected a JSON object")

        try:
            config = cls(**config_data)
        except ValidationError as e:
            logger.error(f"Invalid configuration in {config_file}: {e}")
            raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e

        logger.info(f"Configuration loaded from {config_file}")
        return config

    def get_config_file(self) -> Path:
        """Get path to the JSON config file."""
        return self.config_dir / "config.json"


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration instance.

    Returns:
        AppConfig instance
    """
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config
