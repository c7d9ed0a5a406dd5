"""Configuration loading and validation package."""

from .loader import load_config, get_config_value, default_config, ConfigError
from .validator import validate_config, ValidationError

__all__ = [
    "load_config",
    "get_config_value",
    "default_config",
    "ConfigError",
    "validate_config",
    "ValidationError",
]
