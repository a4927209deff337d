"""
Configuration handling for the logging system.

This module provides functions for loading, validating, and applying
logging configurations for the tradecore loggers.
"""
import json
import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tradecore.errors import ConfigurationError

PACKAGE_LOGGER = 'tradecore'
RULES_LOGGER = 'tradecore.rules'


def load_config_from_file(config_file: str) -> Dict[str, Any]:
    """
    Load logging configuration from a file.

    Args:
        config_file (str): Path to configuration file (JSON or YAML)

    Returns:
        dict: Loaded configuration

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the file format is invalid
    """
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Logging config file not found: {config_file}")

    file_ext = Path(config_file).suffix.lower()

    if file_ext == '.json':
        with open(config_file, 'r') as f:
            config = json.load(f)
    elif file_ext in ('.yaml', '.yml'):
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    else:
        raise ConfigurationError(f"Unsupported config file format: {file_ext}")

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate logging configuration.

    Args:
        config (dict): Logging configuration dictionary

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if not isinstance(config, dict):
        raise ConfigurationError("Logging configuration must be a dictionary")

    if 'version' not in config:
        raise ConfigurationError("Logging configuration missing 'version' key")

    for key in ('formatters', 'handlers', 'loggers'):
        if key in config and not isinstance(config[key], dict):
            raise ConfigurationError(f"'{key}' must be a dictionary")


def apply_config(config: Dict[str, Any]) -> None:
    """
    Apply logging configuration.

    Args:
        config (dict): Logging configuration dictionary
    """
    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # Fall back to basic configuration
        logging.basicConfig(level=logging.INFO)
        logging.getLogger(PACKAGE_LOGGER).error(f"Failed to apply logging configuration: {str(e)}")


def get_default_config(level: str = 'INFO') -> Dict[str, Any]:
    """
    Get default logging configuration.

    Args:
        level (str, optional): Level of the package logger

    Returns:
        dict: Default configuration
    """
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] [%(name)s] %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': 'DEBUG',
                'formatter': 'standard',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            PACKAGE_LOGGER: {
                'level': level,
                'handlers': ['console'],
                'propagate': False
            }
        }
    }


def configure_logging(level: str = 'INFO', trace_rules: bool = False,
                      config: Optional[Dict[str, Any]] = None) -> None:
    """
    Configure the tradecore loggers.

    Args:
        level (str, optional): Level of the package logger
        trace_rules (bool, optional): Log every rule evaluation at DEBUG
        config (dict, optional): Full dictConfig to apply instead of the default
    """
    if config is None:
        config = get_default_config(level.upper())
    else:
        validate_config(config)

    apply_config(config)

    logging.getLogger(RULES_LOGGER).setLevel(logging.DEBUG if trace_rules else logging.NOTSET)
