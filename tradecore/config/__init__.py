# Directory structure: config/__init__.py

"""
Configuration management for the trading core.

This module provides a centralized way to manage numeric precision, trading
defaults, rule defaults and logging settings, with validation and defaults.
"""

from .config_manager import ConfigManager
from .defaults import DEFAULT_CONFIG

__all__ = ['ConfigManager', 'DEFAULT_CONFIG']
