# config/validators.py

"""
Validation utilities for configuration.
"""

from tradecore.errors import ConfigurationError


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


# Schema type name -> (check, description used in error messages)
TYPE_CHECKS = {
    'dict': (lambda value: isinstance(value, dict), 'dictionary'),
    'int': (_is_int, 'integer'),
    'float': (_is_number, 'number'),
    'str': (lambda value: isinstance(value, str), 'string'),
    'bool': (lambda value: isinstance(value, bool), 'boolean')
}


def validate_config(config):
    """
    Validate the configuration against schema.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: If validation fails
    """
    from .schema import CONFIG_SCHEMA

    validate_section(config, CONFIG_SCHEMA)


def validate_section(value, schema, path=""):
    """
    Recursively validate a configuration section.

    Keys missing from the schema are accepted as-is; only known keys are
    checked.

    Args:
        value: Configuration value to validate
        schema: Schema entry with 'type' and optional 'min'/'max'/'enum'/'properties'
        path: Dot path of the value for error messages

    Raises:
        ConfigurationError: On the first violation found
    """
    label = path or "<root>"

    check, description = TYPE_CHECKS[schema['type']]
    if not check(value):
        raise ConfigurationError(f"{label}: Expected {description}, got {type(value).__name__}")

    if 'min' in schema and value < schema['min']:
        raise ConfigurationError(f"{label}: Value {value} is less than minimum {schema['min']}")

    if 'max' in schema and value > schema['max']:
        raise ConfigurationError(f"{label}: Value {value} is greater than maximum {schema['max']}")

    if 'enum' in schema and value not in schema['enum']:
        raise ConfigurationError(f"{label}: Value {value} not in allowed values {schema['enum']}")

    for key, child_schema in schema.get('properties', {}).items():
        if key in value:
            validate_section(value[key], child_schema, f"{path}.{key}" if path else key)
