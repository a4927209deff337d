"""
Logging Module for the trading core.

All modules log through the standard library; this package only configures
handlers and levels.
"""

from .log_config import (
    apply_config,
    configure_logging,
    get_default_config,
    load_config_from_file,
    validate_config
)

__all__ = [
    'apply_config',
    'configure_logging',
    'get_default_config',
    'load_config_from_file',
    'validate_config'
]
