"""Configuration management utilities for postboard.

This module provides utilities for loading and managing application configuration
from TOML files, with support for environment variable overrides and default values.
"""
import logging
import os
import toml
from pathlib import Path
from typing import Any, Dict, Optional, Union
from functools import lru_cache

logger = logging.getLogger(__name__)

# Environment variable naming the config file when no explicit path is given
CONFIG_ENV_VAR = "POSTBOARD_CONFIG"

# Environment variables that override configuration keys
ENV_OVERRIDES = {
    "database.uri": "MONGODB_URI",
    "database.name": "MONGODB_DB",
    "api.port": "PORT",
}


class ConfigManager:
    """Configuration manager for postboard application.

    This class handles loading configuration from TOML files and provides
    convenient access to configuration values with support for environment
    variable overrides and default values.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to the configuration file. If None, the path in
                        POSTBOARD_CONFIG is used; without it, config.toml is
                        searched in standard locations, falling back to
                        defaults plus environment variables if none exists.
        """
        self._config_path = self._find_config_file(config_path)
        self._config_data = self._load_config()

    @property
    def config_path(self) -> Optional[str]:
        """Get the path to the configuration file as a string.

        Returns:
            String representation of the configuration file path, or None
            when running on defaults
        """
        return str(self._config_path) if self._config_path else None

    def _find_config_file(self, config_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """Find the configuration file.

        Args:
            config_path: Explicit path to config file

        Returns:
            Path to the configuration file, or None if no file was found

        Raises:
            FileNotFoundError: If an explicit configuration file does not exist
        """
        config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        if config_path:
            path = Path(config_path)
            if path.exists():
                return path
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        # Search in standard locations
        search_paths = [
            Path("config/config.toml"),
            Path("config.toml"),
            Path(__file__).resolve().parents[4] / "config" / "config.toml",
        ]

        for path in search_paths:
            if path.exists():
                return path

        logger.warning(
            "No configuration file found (searched: %s), using defaults",
            ", ".join(str(p) for p in search_paths),
        )
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from TOML file.

        Returns:
            Dictionary containing configuration data

        Raises:
            ValueError: If configuration file is invalid
        """
        if self._config_path is None:
            return {}

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            raise ValueError(f"Invalid TOML configuration file: {e}")
        except OSError as e:
            raise ValueError(f"Error loading configuration file: {e}")

    def get(self, key_path: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """Get configuration value with support for nested keys and environment overrides.

        Args:
            key_path: Dot-separated path to the configuration key (e.g., 'database.uri')
            default: Default value if key is not found
            env_var: Environment variable name to check for override. Keys listed
                in ENV_OVERRIDES use their registered variable when omitted.

        Returns:
            Configuration value or default

        Examples:
            >>> config = ConfigManager()
            >>> config.get('database.collection')
            'posts'
            >>> config.get('api.port', default=4000)
            4000
            >>> config.get('database.uri', env_var='MONGODB_URI')
            # Returns value from MONGODB_URI env var if set, otherwise config value
        """
        env_var = env_var or ENV_OVERRIDES.get(key_path)

        # Check environment variable first if specified
        if env_var and env_var in os.environ:
            value = os.environ[env_var]
            # Try to convert to appropriate type based on default
            if default is not None:
                try:
                    if isinstance(default, bool):
                        return value.lower() in ('true', '1', 'yes', 'on')
                    elif isinstance(default, int):
                        return int(value)
                    elif isinstance(default, float):
                        return float(value)
                except (ValueError, TypeError):
                    pass
            return value

        # Navigate through nested dictionary
        keys = key_path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing section data or empty dict if not found
        """
        return self._config_data.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config_data = self._load_config()


# Global configuration instance with caching
@lru_cache(maxsize=1)
def get_config(config_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Get global configuration manager instance.

    The cache ensures that the configuration is loaded only once per application run.

    Args:
        config_path: Path to configuration file (only used on first call)

    Returns:
        ConfigManager instance
    """
    return ConfigManager(config_path)

