"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from vacation_pay_calculator.core.errors import ConfigurationError
from vacation_pay_calculator.data.schemas import Config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. Falls back to the
                VACATION_CONFIG environment variable, then the bundled default.
        """
        self.config_path = (
            config_path or os.environ.get("VACATION_CONFIG") or self._get_default_config_path()
        )

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ConfigurationError: If the file or any value is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML config file: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")
        if not config:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
        return self._flatten_config(config)

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        vacation = config.get("vacation") or {}
        if "holidays" in vacation:
            result["holidays"] = vacation["holidays"]

        api = config.get("api") or {}
        if "host" in api:
            result["api_host"] = api["host"]
        if "port" in api:
            result["api_port"] = api["port"]

        log = config.get("logging") or {}
        if "level" in log:
            result["log_level"] = log["level"]

        out = config.get("output") or {}
        if "directory" in out:
            result["output_directory"] = out["directory"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - VACATION_HOLIDAYS -> holidays (comma-separated YYYY-MM-DD)
        - VACATION_API_HOST -> api_host
        - VACATION_API_PORT -> api_port
        - VACATION_LOG_LEVEL -> log_level
        - VACATION_OUTPUT_DIRECTORY -> output_directory

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "VACATION_HOLIDAYS": ("holidays", self._parse_list),
            "VACATION_API_HOST": "api_host",
            "VACATION_API_PORT": "api_port",
            "VACATION_LOG_LEVEL": "log_level",
            "VACATION_OUTPUT_DIRECTORY": "output_directory",
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if isinstance(mapping, tuple):
                    config_key, type_converter = mapping
                    config_dict[config_key] = type_converter(env_value)
                else:
                    config_dict[mapping] = env_value

        return config_dict

    def _parse_list(self, value: str) -> list:
        """Parse a comma-separated list from string."""
        return [item.strip() for item in value.split(",") if item.strip()]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and API entry points."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(log_level)
