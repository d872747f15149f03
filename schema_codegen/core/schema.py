"""
Core schema representation for code generation.

Language-neutral description of API data shapes and operations, as
handed over by the external document parser. Generators only read
these objects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class IdentifierCategory(Enum):
    """Syntactic role an identifier will play in generated code."""

    VARIABLE = "variable"
    PARAMETER = "parameter"
    MODEL_NAME = "model_name"
    MODEL_FILE_NAME = "model_file_name"
    OPERATION_FILE_NAME = "operation_file_name"
    OPERATION_TEST_FILE_NAME = "operation_test_file_name"
    ENUM_CONSTANT = "enum_constant"
    ENUM_TYPE_NAME = "enum_type_name"
    OPERATION = "operation"


class CompositionKind(Enum):
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    ALL_OF = "allOf"


class ParameterLocation(Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"
    FORM = "form"
    BODY = "body"


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive type token such as ``integer``, ``string`` or ``DateTime``."""

    name: str


@dataclass(frozen=True)
class ArrayType:
    """An array; ``element`` is None when the items are unconstrained."""

    element: Optional["SchemaType"] = None
    element_nullable: bool = False


@dataclass(frozen=True)
class MapType:
    """A string keyed map (``additionalProperties``)."""

    value_type: Optional["SchemaType"] = None
    # Outer container spelling when the schema names one, e.g. a type alias
    instantiation_type: Optional[str] = None


@dataclass(frozen=True)
class ObjectReference:
    """A reference to a named model, e.g. ``#/components/schemas/Pet``."""

    model_name: str
    ref: Optional[str] = None


@dataclass(frozen=True)
class FreeFormObject:
    """``type: object`` without properties, an untyped bag of values."""


@dataclass(frozen=True)
class AnyType:
    """A single unconstrained value."""


@dataclass(frozen=True)
class EnumType:
    backing: PrimitiveType
    values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ComposedType:
    kind: CompositionKind
    members: Tuple["SchemaType", ...] = ()
    # Set when the composition is itself a named model
    model_name: Optional[str] = None


SchemaType = Union[
    PrimitiveType,
    ArrayType,
    MapType,
    ObjectReference,
    FreeFormObject,
    AnyType,
    EnumType,
    ComposedType,
]


def is_null_type(schema: "SchemaType") -> bool:
    """True for the literal ``null`` type."""
    return isinstance(schema, PrimitiveType) and schema.name == "null"


@dataclass(frozen=True)
class IdentifierRequest:
    """A raw name to resolve for a given category."""

    raw_name: str
    category: IdentifierCategory
    # Looked up in the override table instead of raw_name when given
    override_key: Optional[str] = None
    # Backing type name, used by enum constants
    datatype: Optional[str] = None


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a single property of a model."""

    base_name: str  # Wire name, used verbatim in tags
    schema_type: SchemaType
    required: bool = False
    nullable: bool = False
    is_xml_attribute: bool = False
    pattern: Optional[str] = None
    custom_tag: Optional[str] = None  # x-go-custom-tag
    description: Optional[str] = None


@dataclass(frozen=True)
class ParameterDescriptor:
    raw_name: str
    schema_type: SchemaType
    location: ParameterLocation = ParameterLocation.QUERY
    required: bool = False
    collection_format: Optional[str] = None  # csv, ssv, tsv, pipes, multi


@dataclass(frozen=True)
class OperationDescriptor:
    operation_id: str
    http_method: str
    parameters: Tuple[ParameterDescriptor, ...] = ()
    return_type: Optional[SchemaType] = None


@dataclass(frozen=True)
class ModelDescriptor:
    """A named model: plain object, enum or composition."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    enum: Optional[EnumType] = None
    composition: Optional[ComposedType] = None
    description: Optional[str] = None
    imports: Tuple[str, ...] = ()
