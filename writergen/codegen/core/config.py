"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_MODULE_NAME = "Ovirt::SDK::V4"

_MODULE_SEGMENT = re.compile(r"^[A-Z][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class ModuleConfig:
    """Name of the generated module and the file path derived from it."""

    module_name: str
    module_path: str

    @classmethod
    def from_name(cls, module_name: str) -> "ModuleConfig":
        """Derive the module path by lowercasing each ``::`` segment."""
        path = "/".join(segment.lower() for segment in module_name.split("::"))
        return cls(module_name=module_name, module_path=path)

    @property
    def segments(self) -> List[str]:
        return self.module_name.split("::")


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for the writers generator."""

    # Output settings
    module_name: str = DEFAULT_MODULE_NAME
    version: Optional[str] = None

    # Code style settings
    indent_size: int = 2
    line_ending: str = "\n"

    # Naming settings
    extra_reserved_words: Tuple[str, ...] = ()

    # Schema settings
    attribute_names: Tuple[str, ...] = ("href", "id")

    # Additional metadata
    add_comments: bool = True

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    def module_config(self) -> ModuleConfig:
        return ModuleConfig.from_name(self.module_name)

    @property
    def indent(self) -> str:
        return " " * self.indent_size


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "module_name": DEFAULT_MODULE_NAME,
            "indent_size": 2,
            "attribute_names": ["href", "id"],
            "add_comments": True,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration: defaults, then file, then overrides
        """
        base_config = dict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

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

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args: Dict[str, Any] = {}
        custom_args: Dict[str, Any] = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # JSON lists become tuples
        for key in ("extra_reserved_words", "attribute_names"):
            if key in config_args:
                value = config_args[key]
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise ConfigError(f"'{key}' must be a list of strings")
                config_args[key] = tuple(str(item) for item in value)

        if custom_args:
            merged_custom = dict(config_args.get("custom", {}))
            merged_custom.update(custom_args)
            config_args["custom"] = merged_custom

        try:
            return GeneratorConfig(**config_args)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation warnings
        """
        warnings = []

        for segment in config.module_config().segments:
            if not _MODULE_SEGMENT.match(segment):
                warnings.append(f"Invalid module name segment: '{segment}'")

        if config.indent_size <= 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in ("\n", "\r\n"):
            warnings.append(f"Unusual line_ending: {config.line_ending!r}")

        if not config.attribute_names:
            warnings.append("No attribute names configured, all members become elements")

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
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)

