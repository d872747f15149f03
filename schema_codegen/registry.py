"""
Generator registry system for managing available code generators.

Maps language names and aliases to generator classes and builds
configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import CodegenConfig, ConfigError, load_config
from .core.generator import CodeGenerator


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()

        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(f"Alias '{alias}' conflicts with existing primary language")
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(f"Alias '{alias}' already points to '{self._aliases[alias_key]}'")

            self._aliases[alias_key] = language_key

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        language_key = self._aliases.get(language_key, language_key)

        if language_key in self._generators:
            return self._generators[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self,
        language: str,
        config: Optional[Union[CodegenConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Args:
            language: Language name or alias
            config: Configuration as a config object, dict of overrides, or JSON file path

        Raises:
            RegistryError: If the language is unknown or the configuration is invalid
        """
        generator_class = self.get_generator_class(language)
        language_key = self._aliases.get(language.lower(), language.lower())

        try:
            if isinstance(config, CodegenConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict) or config is None:
                final_config = load_config(language_key, custom_config=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

        return generator_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases


# Global registry instance
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def get_generator(
    language: str,
    config: Optional[Union[CodegenConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Convenience function to create a generator from the global registry."""
    return _registry.create_generator(language, config)


def list_supported_languages() -> List[str]:
    return _registry.list_languages()
