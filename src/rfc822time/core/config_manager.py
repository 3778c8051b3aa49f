"""Configuration Management for rfc822time

Loads and validates configuration for the command line front end.
Supports hierarchical YAML files with environment variable overrides.
"""

import copy
import logging
import os
import re
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .error_handler import ConfigurationError


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=True)
    file_path: Optional[str] = None
    max_file_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('max_file_size')
    @classmethod
    def validate_file_size(cls, v):
        """Validate file size format"""
        if not re.match(r'^\d+[KMG]B$', v.upper()):
            raise ValueError("File size must be in format: 10KB, 10MB, or 1GB")
        return v.upper()


class CLIConfig(BaseModel):
    """Configuration for the command line front end."""
    skip_invalid: bool = Field(default=True)
    show_tokens: bool = Field(default=False)


class AppConfig(BaseModel):
    """Main application configuration."""
    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="rfc822time")
    environment: str = Field(default="development", pattern="^(development|staging|production|testing)$")
    debug_mode: bool = Field(default=False)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)


class ConfigManager:
    """Manages configuration loading and validation."""

    ENV_PREFIX = "RFC822TIME_"
    SECTIONS = ("logging", "cli")

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional configuration directory
            environment: Environment name (development, staging, production, testing)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('RFC822TIME_ENV', 'development')
        self._config: Optional[AppConfig] = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".rfc822time",
            Path("/etc/rfc822time"),
        ]

        for location in config_locations:
            if location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths in load order."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'  # For development overrides
        }

    @property
    def config(self) -> AppConfig:
        return self.load_config()

    def load_config(self) -> AppConfig:
        """Load and validate configuration with hierarchical overrides.

        Returns:
            Validated application configuration

        Raises:
            ConfigurationError: If a file is not valid YAML or validation fails
        """
        with self._lock:
            if self._config is not None:
                return self._config

            config_data: Dict[str, Any] = {}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            config_data.setdefault('environment', self.environment)
            self._config = self._validate(config_data)
            return self._config

    def reload_config(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.load_config()

    def update_config(self, updates: Dict[str, Any]) -> AppConfig:
        """Apply in-memory updates on top of the loaded configuration.

        Args:
            updates: Nested dictionary of configuration updates

        Returns:
            Updated configuration; the previous one is kept if validation fails
        """
        current = self.load_config()
        with self._lock:
            config_dict = current.model_dump()
            self._deep_merge(config_dict, copy.deepcopy(updates))
            self._config = self._validate(config_dict)
            return self._config

    def _validate(self, config_data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig(**config_data)
        except ValidationError as e:
            self.logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {file_path} must be a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: RFC822TIME_<SECTION>_<KEY>
        Example: RFC822TIME_CLI_SKIP_INVALID -> cli.skip_invalid
        Top-level fields use RFC822TIME_<KEY>, e.g. RFC822TIME_DEBUG_MODE.
        """
        overrides: Dict[str, Any] = {}
        top_level = set(AppConfig.model_fields) - set(self.SECTIONS)

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == 'RFC822TIME_ENV':
                continue

            name = key[len(self.ENV_PREFIX):].lower()
            section, _, field_name = name.partition('_')

            if section in self.SECTIONS and field_name:
                overrides.setdefault(section, {})[field_name] = self._convert_env_value(value)
            elif name in top_level:
                overrides[name] = self._convert_env_value(value)

        return overrides

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
