"""
Go code generator module.

Names, types, struct tags and imports for Go models and API files.
"""

from .config import CLIENT_CONFIG, GO_DEFAULTS, SERVER_CONFIG, XML_CONFIG, GoConfig
from .generator import (
    GoCodegen,
    ModelResult,
    OperationResult,
    OperationsResult,
    ParameterResult,
    PropertyResult,
    create_go_generator,
)
from .naming import GoNamingStrategy
from .postprocess import GoFormatter, PostProcessError
from .tags import compose_tag
from .types import GoType, GoTypeResolver

__all__ = [
    "GoCodegen",
    "GoConfig",
    "GoFormatter",
    "GoNamingStrategy",
    "GoType",
    "GoTypeResolver",
    "ModelResult",
    "OperationResult",
    "OperationsResult",
    "ParameterResult",
    "PostProcessError",
    "PropertyResult",
    "compose_tag",
    # Factory functions
    "create_generator",
    "create_client_generator",
    "create_server_generator",
    "create_xml_generator",
    # Presets
    "GO_DEFAULTS",
    "CLIENT_CONFIG",
    "SERVER_CONFIG",
    "XML_CONFIG",
]


def create_generator(**kwargs) -> GoCodegen:
    """
    Create a Go generator.

    Args:
        **kwargs: GoConfig fields (package_name, with_xml, type_mapping, ...)

    Returns:
        Configured GoCodegen instance
    """
    return create_go_generator(kwargs)


def create_client_generator(**kwargs) -> GoCodegen:
    """
    Create generator for API clients.

    Features:
    - Enum models import fmt for their String() helper
    - Marshal and unmarshal helpers on every model
    """
    return create_go_generator({**CLIENT_CONFIG, **kwargs})


def create_server_generator(**kwargs) -> GoCodegen:
    """
    Create generator for server stubs.

    Features:
    - No marshal/unmarshal helpers
    - oneOf models do not pull in the validator
    """
    return create_go_generator({**SERVER_CONFIG, **kwargs})


def create_xml_generator(**kwargs) -> GoCodegen:
    """Create generator that emits xml directives next to json ones."""
    return create_go_generator({**XML_CONFIG, **kwargs})
