"""Configuration validation."""

from typing import Dict, Any, List


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    # Validate output section
    errors.extend(_validate_output(config.get('output', {})))

    # Validate logging section
    errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_output(section: Dict[str, Any]) -> List[str]:
    """Validate output section."""
    errors = []

    if not isinstance(section, dict):
        return ["output must be a mapping"]

    directory = section.get('directory')
    if not isinstance(directory, str) or not directory.strip():
        errors.append("output.directory is required")

    # CSV separator must be a single character
    separator = section.get('csv_separator', ';')
    if not isinstance(separator, str) or len(separator) != 1:
        errors.append("output.csv_separator must be a single character")
    elif separator in ('"', '\n', '\r'):
        errors.append("output.csv_separator cannot be a quote or line break")

    # Output file names
    for key in ('rom_list', 'csv_file', 'json_file'):
        if key in section:
            name = section[key]
            if not isinstance(name, str) or not name.strip():
                errors.append(f"output.{key} must be a non-empty file name")
            elif '/' in name or '\\' in name:
                errors.append(f"output.{key} must be a file name, not a path")

    if 'write_rom_list' in section:
        if not isinstance(section['write_rom_list'], bool):
            errors.append("output.write_rom_list must be a boolean")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    errors = []

    if not isinstance(section, dict):
        return ["logging must be a mapping"]

    # Validate level
    level = section.get('level', 'INFO')
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    if level not in valid_levels:
        errors.append(f"logging.level must be one of: {', '.join(valid_levels)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors
