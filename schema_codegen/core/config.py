"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files, providing
defaults and validation for generator settings. A loaded configuration
is frozen: it is resolved once per run and shared read-only by every
generated unit.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union

from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


_MAPPING_FIELDS = (
    "name_mapping",
    "parameter_name_mapping",
    "model_name_mapping",
    "enum_name_mapping",
    "reserved_words_mapping",
    "type_mapping",
    "custom",
)


@dataclass(frozen=True)
class CodegenConfig:
    """Base configuration for code generators."""

    # Model naming
    model_name_prefix: str = ""
    model_name_suffix: str = ""
    model_package: str = ""

    # Override tables, consulted before any computed naming rule
    name_mapping: Mapping[str, str] = field(default_factory=dict)
    parameter_name_mapping: Mapping[str, str] = field(default_factory=dict)
    model_name_mapping: Mapping[str, str] = field(default_factory=dict)
    enum_name_mapping: Mapping[str, str] = field(default_factory=dict)
    reserved_words_mapping: Mapping[str, str] = field(default_factory=dict)

    # Additional words to treat as reserved
    extra_reserved_words: Tuple[str, ...] = ()

    # Primitive token -> target type overrides
    type_mapping: Mapping[str, str] = field(default_factory=dict)

    # Import path -> replacement path(s)
    import_mapping: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    # External formatter, e.g. "gofmt -w"; None disables post-processing
    post_process_command: Optional[str] = None

    # Custom settings (language-specific)
    custom: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze every table so the config can be shared safely."""
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name) or {})))

        imports = {}
        for path, replacement in dict(self.import_mapping or {}).items():
            if isinstance(replacement, str):
                replacement = (replacement,)
            imports[path] = tuple(replacement)
        object.__setattr__(self, "import_mapping", MappingProxyType(imports))
        object.__setattr__(self, "extra_reserved_words", tuple(self.extra_reserved_words or ()))

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON serializable view of the configuration."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "import_mapping":
                value = {k: list(v) for k, v in value.items()}
            elif isinstance(value, Mapping):
                value = dict(value)
            elif isinstance(value, tuple):
                value = list(value)
            result[f.name] = value
        return result


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._config_classes: Dict[str, Type[CodegenConfig]] = {}

    def register(
        self,
        language: str,
        config_class: Type[CodegenConfig],
        defaults: Optional[Dict[str, Any]] = None,
    ):
        """Register the config class and defaults for a language."""
        key = language.lower()
        self._config_classes[key] = config_class
        self._configs[key] = dict(defaults or {})

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> CodegenConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged, frozen configuration for the language

        Raises:
            ConfigError: If the language is unknown or a value is invalid
        """
        key = language.lower()
        if key not in self._config_classes:
            raise ConfigError(
                f"No configuration registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )

        # Start with defaults
        base_config = dict(self._configs[key])

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(self._config_classes[key], base_config)

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

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(
        self, config_class: Type[CodegenConfig], config_dict: Dict[str, Any]
    ) -> CodegenConfig:
        """Convert dictionary to a config instance."""
        known_fields = {f.name for f in fields(config_class)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        try:
            return config_class(**config_args)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def save_config(self, config: CodegenConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        config_dict = config.to_dict()

        # Custom settings are stored flat, as they are read back
        custom = config_dict.pop("custom", {})
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of supported languages."""
        return sorted(self._config_classes.keys())


def validate_config(config: CodegenConfig) -> list[str]:
    """
    Validate the language independent part of a configuration.

    Returns:
        List of validation warnings
    """
    warnings = []

    for name in _MAPPING_FIELDS:
        if name in ("custom", "type_mapping"):
            continue
        for key, value in getattr(config, name).items():
            if not value:
                warnings.append(f"Empty value for '{key}' in {name}")

    for key, value in config.type_mapping.items():
        if not value:
            warnings.append(f"Empty type for '{key}' in type_mapping")

    for path, replacement in config.import_mapping.items():
        if not replacement:
            warnings.append(f"Import '{path}' is mapped to nothing in import_mapping")

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
    language: str = "go",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> CodegenConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
