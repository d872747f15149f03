"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .config import CodegenConfig, ConfigError, ConfigManager, get_config_manager, load_config
from .generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .imports import ImportSet
from .naming import (
    ErrorKind,
    InvalidMappingError,
    NamingCase,
    NamingError,
    ReservedWordGuard,
    camelize,
    convert_case,
    sanitize_name,
    underscore,
)
from .schema import (
    AnyType,
    ArrayType,
    ComposedType,
    CompositionKind,
    EnumType,
    FieldDescriptor,
    FreeFormObject,
    IdentifierCategory,
    IdentifierRequest,
    MapType,
    ModelDescriptor,
    ObjectReference,
    OperationDescriptor,
    ParameterDescriptor,
    ParameterLocation,
    PrimitiveType,
    SchemaType,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema descriptors
    "AnyType",
    "ArrayType",
    "ComposedType",
    "CompositionKind",
    "EnumType",
    "FieldDescriptor",
    "FreeFormObject",
    "IdentifierCategory",
    "IdentifierRequest",
    "MapType",
    "ModelDescriptor",
    "ObjectReference",
    "OperationDescriptor",
    "ParameterDescriptor",
    "ParameterLocation",
    "PrimitiveType",
    "SchemaType",
    # Naming utilities - language-agnostic
    "ErrorKind",
    "InvalidMappingError",
    "NamingCase",
    "NamingError",
    "ReservedWordGuard",
    "camelize",
    "convert_case",
    "sanitize_name",
    "underscore",
    # Imports
    "ImportSet",
    # Configuration system
    "CodegenConfig",
    "ConfigManager",
    "ConfigError",
    "get_config_manager",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
