"""
Configuration management for model conversion.

Handles loading and merging configuration from JSON files,
providing defaults and validation for converter settings.
"""

import json
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class EnumValues(Enum):
    """How enum members are given values in the generated code."""

    NUMERIC = "numeric"  # explicit source values only, the rest auto-increment
    STRING = "string"  # every member = '<member>'


class PathStyle(Enum):
    """Naming style of generated files and folders."""

    DEFAULT = "default"  # camelCase file names, folders unchanged
    KEBAB = "kebab"  # kebab-case file names and folders


_ENUM_VALUE_ALIASES = {
    "numeric": EnumValues.NUMERIC,
    "numbers": EnumValues.NUMERIC,
    "number": EnumValues.NUMERIC,
    "string": EnumValues.STRING,
    "strings": EnumValues.STRING,
}

_PATH_STYLE_ALIASES = {
    "default": PathStyle.DEFAULT,
    "kebab": PathStyle.KEBAB,
    "kebab-case": PathStyle.KEBAB,
    "kebabcase": PathStyle.KEBAB,
}


def parse_enum_values(value: Union[str, EnumValues, None]) -> EnumValues:
    """Parse an enum value mode, accepting the spellings used in build files."""
    if value is None or value == "":
        return EnumValues.NUMERIC
    if isinstance(value, EnumValues):
        return value
    try:
        return _ENUM_VALUE_ALIASES[str(value).strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Invalid enum_values: {value!r} (expected 'numeric' or 'string')"
        ) from None


def parse_path_style(value: Union[str, PathStyle, None]) -> PathStyle:
    """Parse a path style, accepting 'kebab-case' as an alias of 'kebab'."""
    if value is None or value == "":
        return PathStyle.DEFAULT
    if isinstance(value, PathStyle):
        return value
    try:
        return _PATH_STYLE_ALIASES[str(value).strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Invalid path_style: {value!r} (expected 'default' or 'kebab')"
        ) from None


@dataclass
class ConvertConfig:
    """Settings consumed by the conversion pipeline."""

    # Input settings
    working_directory: Optional[str] = None
    working_directories: Optional[str] = None  # ';' separated
    source_extension: str = ".cs"

    # Output settings
    convert_directory: Optional[str] = None
    auto_generated_tag: bool = True

    # Generation style
    enum_values: EnumValues = EnumValues.NUMERIC
    path_style: PathStyle = PathStyle.DEFAULT

    def __post_init__(self):
        self.enum_values = parse_enum_values(self.enum_values)
        self.path_style = parse_path_style(self.path_style)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "working_directory": None,
            "working_directories": None,
            "source_extension": ".cs",
            "convert_directory": None,
            "auto_generated_tag": True,
            "enum_values": EnumValues.NUMERIC.value,
            "path_style": PathStyle.DEFAULT.value,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> ConvertConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Explicit overrides, applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = self._defaults.copy()

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides, ignoring unset values
        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ConvertConfig:
        """Convert dictionary to ConvertConfig instance."""
        known_fields = {f.name for f in fields(ConvertConfig)}

        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return ConvertConfig(**config_dict)

    def save_config(self, config: ConvertConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "working_directory": config.working_directory,
            "working_directories": config.working_directories,
            "source_extension": config.source_extension,
            "convert_directory": config.convert_directory,
            "auto_generated_tag": config.auto_generated_tag,
            "enum_values": config.enum_values.value,
            "path_style": config.path_style.value,
        }

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: ConvertConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.source_extension.startswith("."):
            warnings.append(
                f"source_extension should start with '.': {config.source_extension}"
            )

        if not config.convert_directory:
            warnings.append(
                "No convert_directory set - output goes to the current directory "
                "and is not cleared between runs"
            )

        directories = f"{config.working_directory or ''};{config.working_directories or ''}"
        items = [item.strip() for item in directories.split(";") if item.strip()]
        if len(items) != len(set(items)):
            warnings.append("The same working directory is listed more than once")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> ConvertConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Explicit overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

