"""
Schema Codegen

Naming and type-mapping engine that turns API schema descriptions into
Go identifiers, type declarations, struct tags and imports.
"""

from .core.config import CodegenConfig, ConfigError, ConfigManager, load_config
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.naming import InvalidMappingError, NamingError
from .logging_config import configure_logging, get_logger
from .registry import GeneratorRegistry, get_generator, get_registry, list_supported_languages
from .languages.go import GoCodegen, GoConfig

get_registry().register("go", GoCodegen, aliases=["golang"])

# Version info
__version__ = "0.1.0"

__all__ = [
    "CodeGenerator",
    "CodegenConfig",
    "ConfigError",
    "ConfigManager",
    "GenerationResult",
    "GeneratorError",
    "GeneratorRegistry",
    "GoCodegen",
    "GoConfig",
    "InvalidMappingError",
    "NamingError",
    "configure_logging",
    "generate_code",
    "get_generator",
    "get_logger",
    "list_supported_languages",
    "load_config",
]
