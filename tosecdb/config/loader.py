"""Configuration loading and parsing."""

import yaml
from copy import deepcopy
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG_NAME = "tosecdb.yaml"


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


def default_config() -> Dict[str, Any]:
    """
    Build the default configuration.

    The output directory is timestamped at call time, e.g.
    ~/TOSEC_ROM_2020-04-26_18:42:07
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
    return {
        'output': {
            'directory': str(Path.home() / f"TOSEC_ROM_{timestamp}"),
            'csv_separator': ';',
            'rom_list': 'roms.list',
            'csv_file': 'roms.csv',
            'json_file': 'roms.json',
            'write_rom_list': True,
        },
        'logging': {
            'level': 'INFO',
            'console': True,
            'file': None,
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, merging an optional YAML file over the defaults.
    
    Args:
        config_path: Path to a YAML config file. If None, uses tosecdb.yaml
                     from the current directory when present, else defaults.
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigError: If the given config file cannot be loaded or parsed
    """
    config = default_config()

    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return config
    else:
        config_path = Path(config_path)
    
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")
    
    # Load YAML
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except Exception as e:
        raise ConfigError(f"Failed to read config file: {e}")
    
    # Empty file means defaults
    if user_config is None:
        return config

    if not isinstance(user_config, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")
    
    return merge_config(config, user_config)


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge override sections into a copy of base, one level deep.

    Args:
        base: Base configuration
        overrides: Sections to merge over base

    Returns:
        Merged configuration (base is left untouched)
    """
    merged = deepcopy(base)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.
    
    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'output.csv_separator')
        default: Default value if path not found
        
    Returns:
        Configuration value or default
        
    Example:
        >>> get_config_value(config, 'output.csv_separator')
        ';'
    """
    keys = path.split('.')
    value = config
    
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    
    return value
