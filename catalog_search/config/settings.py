"""
Catalog search settings
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import AppPaths

logger = logging.getLogger("CatalogSearch.Settings")


class ServiceSettings(BaseModel):
    """Search service connection settings"""
    uri: str = Field(
        default="ws://localhost:8765",
        description="WebSocket URI of the search service"
    )
    max_size: int = Field(
        default=5 * 1024 * 1024,
        ge=1024,
        description="Maximum size of one reply in bytes"
    )
    open_timeout: float = Field(
        default=5.0,
        gt=0,
        le=120,
        description="Seconds to wait for the connection to open"
    )

    @field_validator('uri')
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Only websocket schemes are supported"""
        v = v.strip()
        if not v.startswith(("ws://", "wss://")):
            raise ValueError("uri must start with ws:// or wss://")
        return v


class DisplaySettings(BaseModel):
    """Result list display settings"""
    columns: int = Field(
        default=2,
        ge=1,
        le=6,
        description="Number of grid columns in the result list (1-6)"
    )
    end_reached_threshold: float = Field(
        default=0.1,
        gt=0,
        le=1,
        description="Distance from the list end, in viewport lengths, that triggers load more"
    )


class CoordinatorSettings(BaseModel):
    """Pagination coordinator behaviour"""
    discard_stale_responses: bool = Field(
        default=True,
        description="Drop replies that belong to a superseded search or refresh"
    )


class Settings(BaseModel):
    """Main settings model"""
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    coordinator: CoordinatorSettings = Field(default_factory=CoordinatorSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        self.config_path = Path(config_path) if config_path else AppPaths.default().config_path
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Could not read {self.config_path}: {e}; using defaults")
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        if not isinstance(config_data, dict):
            logger.error(f"Settings file {self.config_path} must contain a mapping; using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}; using defaults")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(f"  - Service URI: {settings.service.uri}")
        return settings

    def reload(self) -> Settings:
        """Reload settings from file"""
        self.settings = self._load_settings()
        return self.settings

    def save_settings(self, settings: Optional[Settings] = None) -> None:
        """Write settings back to the YAML file"""
        if settings is not None:
            self.settings = settings
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.safe_dump(self.settings.model_dump(), f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved settings to {self.config_path}")


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from the given path (or ./settings.yml)"""
    return SettingsManager(config_path).settings
