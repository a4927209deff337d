# config/config_manager.py

"""
Main configuration manager for the trading core.
"""

import copy
import json
import os

import yaml

from tradecore.errors import ConfigurationError
from tradecore.num import configure_context


class ConfigManager:
    """
    Central configuration management for the trading core.
    """

    def __init__(self, config_dict=None, config_file=None):
        """
        Initialize with configuration from dictionary or file.

        Args:
            config_dict: Optional configuration dictionary
            config_file: Optional path to JSON/YAML config file
        """
        self.config = {}

        # Load defaults
        self._load_defaults()

        # Override with provided config
        if config_file:
            self._load_from_file(config_file)

        if config_dict:
            self._update_config(config_dict)

        self.validate()

    def _load_defaults(self):
        """Load default configuration values."""
        from .defaults import DEFAULT_CONFIG
        self.config = copy.deepcopy(DEFAULT_CONFIG)

    def _load_from_file(self, config_file):
        """Load configuration from file."""
        _, ext = os.path.splitext(config_file)

        if ext.lower() == '.json':
            self._load_from_json(config_file)
        elif ext.lower() in ('.yaml', '.yml'):
            self._load_from_yaml(config_file)
        else:
            raise ConfigurationError(f"Unsupported config file format: {ext}")

    def _load_from_json(self, json_file):
        """Load configuration from JSON file."""
        try:
            with open(json_file, 'r') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Error loading JSON config: {str(e)}") from e

        self._update_config(config or {})

    def _load_from_yaml(self, yaml_file):
        """Load configuration from YAML file."""
        try:
            with open(yaml_file, 'r') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading YAML config: {str(e)}") from e

        self._update_config(config or {})

    def _update_config(self, config_dict):
        """Update configuration with new values."""
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration must be a dictionary, got {type(config_dict).__name__}")
        self._recursive_update(self.config, config_dict)

    def _recursive_update(self, target, source):
        """Recursively update nested dictionaries."""
        for key, value in source.items():
            # If both are dicts, recurse
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._recursive_update(target[key], value)
            else:
                target[key] = copy.deepcopy(value)

    def validate(self):
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If the configuration does not match the schema
        """
        from .validators import validate_config
        validate_config(self.config)

    def get(self, path, default=None):
        """
        Get a configuration value using dot notation path.

        Args:
            path: Dot notation path (e.g., "rules.moving_stop_gain.frames")
            default: Default value if path not found

        Returns:
            The configuration value or default
        """
        parts = path.split('.')
        current = self.config

        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        return current

    def set(self, path, value):
        """
        Set a configuration value using dot notation path.

        The previous value is restored if the new one fails validation.

        Args:
            path: Dot notation path
            value: Value to set

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        previous = copy.deepcopy(self.config)

        parts = path.split('.')
        current = self.config

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

        try:
            self.validate()
        except ConfigurationError:
            self.config = previous
            raise

    def save(self, file_path):
        """
        Save configuration to file.

        Args:
            file_path: Path to save the config
        """
        _, ext = os.path.splitext(file_path)

        if ext.lower() == '.json':
            with open(file_path, 'w') as f:
                json.dump(self.config, f, indent=2)
        elif ext.lower() in ('.yaml', '.yml'):
            with open(file_path, 'w') as f:
                yaml.safe_dump(self.config, f, default_flow_style=False)
        else:
            raise ConfigurationError(f"Unsupported config file format: {ext}")

    def apply_numeric_context(self):
        """Apply the numeric section to the Num decimal context."""
        configure_context(self.get('numeric.precision'), self.get('numeric.rounding'))

    def apply_logging(self):
        """Apply the logging section to the package loggers."""
        from tradecore.log_system import configure_logging
        configure_logging(self.get('logging.level'), self.get('logging.trace_rules'))

    def create_trading_record(self, price_indicator=None):
        """
        Create an empty trading record using the configured entry type.

        Args:
            price_indicator: Optional indicator giving default execution prices

        Returns:
            TradingRecord
        """
        from tradecore.trading import TradingRecord
        return TradingRecord(self.get('trading.entry_type'), price_indicator)

    def to_dict(self):
        """
        Get the full configuration as a dictionary.

        Returns:
            dict: Complete configuration
        """
        return copy.deepcopy(self.config)
