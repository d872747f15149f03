"""
Go-specific configuration and validation.

Extends the base configuration system with Go-specific settings.
"""

from dataclasses import dataclass
from typing import List

from ...core.config import CodegenConfig, get_config_manager, validate_config
from .naming import validate_go_package_name


@dataclass(frozen=True)
class GoConfig(CodegenConfig):
    """Go-specific configuration."""

    package_name: str = "openapi"
    api_package: str = ""

    # Struct tags
    with_xml: bool = False
    with_validate: bool = True

    # Marshaling helpers on generated models
    generate_marshal_json: bool = True
    generate_unmarshal_json: bool = True

    # Enum models get a String() helper that needs "fmt" (client generators)
    enum_fmt_import: bool = False

    # Prefix enum constants with the upper-cased type name (PETSTATUS_AVAILABLE)
    enum_class_prefix: bool = False


GO_DEFAULTS = {
    "package_name": "openapi",
    "with_xml": False,
    "with_validate": True,
    "generate_marshal_json": True,
    "generate_unmarshal_json": True,
    "enum_fmt_import": False,
    "enum_class_prefix": False,
}

# Default configurations for different Go use cases
CLIENT_CONFIG = {
    "package_name": "openapi",
    "enum_fmt_import": True,
}

SERVER_CONFIG = {
    "package_name": "openapi",
    "generate_marshal_json": False,
    "generate_unmarshal_json": False,
}

XML_CONFIG = {
    "with_xml": True,
}


def validate_go_config(config: GoConfig) -> List[str]:
    """
    Validate configuration for Go generation.

    Returns:
        List of validation warnings
    """
    warnings = validate_config(config)
    warnings.extend(validate_go_package_name(config.package_name))
    return warnings


get_config_manager().register("go", GoConfig, GO_DEFAULTS)
