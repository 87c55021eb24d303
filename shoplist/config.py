"""
Configuration management for ShopList.
Loads and manages YAML configuration files.
"""

import yaml
import os
from typing import Any, Dict
import logging


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'data', 'config.yaml')


class Config:
    """
    Application configuration manager
    """

    def __init__(self, config_path: str):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to config.yaml

        Raises:
            FileNotFoundError: If config_path does not exist
            yaml.YAMLError: If the file is not valid YAML
            ValueError: If the top level is not a mapping
        """
        self.logger = logging.getLogger(__name__)

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(loaded).__name__}: {config_path}")
        self._config = loaded

        self._expand_paths(self._config)

        self.logger.info(f"Configuration loaded from {config_path}")

    def _expand_paths(self, config: Dict):
        """Recursively expand ~ and environment variables in strings"""
        for key, value in config.items():
            if isinstance(value, dict):
                self._expand_paths(value)
            elif isinstance(value, str) and ('$' in value or '~' in value):
                config[key] = os.path.expandvars(os.path.expanduser(value))

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'storage.data_file')
            default: Default value if path doesn't exist

        Returns:
            Configuration value
        """
        value = self._config
        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def set(self, path: str, value: Any):
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            config = config.setdefault(key, {})

        config[keys[-1]] = value
        self.logger.debug(f"Config set: {path} = {value}")

    def save(self, config_path: str):
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self._config, f, default_flow_style=False, allow_unicode=True)

        self.logger.info(f"Configuration saved to {config_path}")
