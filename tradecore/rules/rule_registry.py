"""
Rule Registry Module

This module provides a registry system for rules, allowing them to be
registered, discovered, and built by name from configuration.
"""

from typing import List, Optional, Type
import logging

from tradecore.errors import ConfigurationError
from tradecore.rules.rule_base import Rule

# Set up logging
logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Registry for rule classes.

    Maintains a mapping of rule names to their implementing classes so rule
    definitions in configuration can refer to them by name.
    """

    _instance = None

    def __new__(cls):
        """Implement singleton pattern for the registry."""
        if cls._instance is None:
            cls._instance = super(RuleRegistry, cls).__new__(cls)
            cls._instance._rules = {}
            cls._instance._categories = {}
        return cls._instance

    def register(self,
                 rule_class: Type[Rule],
                 name: Optional[str] = None,
                 category: str = "general") -> None:
        """
        Register a rule class with the registry.

        Args:
            rule_class: The Rule class to register
            name: Optional name to register the rule under (defaults to class name)
            category: Category to group the rule under
        """
        if name is None:
            name = rule_class.__name__

        if name in self._rules and self._rules[name] is not rule_class:
            logger.warning(f"Rule '{name}' is already registered. Overwriting.")

        self._rules[name] = rule_class

        names = self._categories.setdefault(category, [])
        if name not in names:
            names.append(name)

        logger.debug(f"Registered rule '{name}' in category '{category}'")

    def get_rule_class(self, name: str) -> Type[Rule]:
        """
        Get a rule class by name.

        Raises:
            ConfigurationError: If no rule with the given name is registered
        """
        if name not in self._rules:
            raise ConfigurationError(f"No rule registered with name '{name}'")
        return self._rules[name]

    def list_rules(self, category: Optional[str] = None) -> List[str]:
        if category:
            return list(self._categories.get(category, []))
        return list(self._rules.keys())

    def list_categories(self) -> List[str]:
        return list(self._categories.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._rules


def register_rule(name: Optional[str] = None, category: str = "general"):
    """
    Decorator for registering rule classes with the registry.

    Args:
        name: Optional name for the rule (defaults to class name)
        category: Category to group the rule under

    Returns:
        Decorator function that registers the rule class
    """
    def decorator(cls):
        get_registry().register(cls, name, category)
        return cls
    return decorator


def get_registry() -> RuleRegistry:
    """Get the global rule registry instance."""
    return RuleRegistry()
