"""
Go-specific type system for code generation.

Maps language-neutral schema types to Go type declarations. Resolution
is total: every schema shape produces a declaration, unknown shapes fall
back to ``interface{}``.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from ...core.naming import InvalidMappingError
from ...core.schema import (
    AnyType,
    ArrayType,
    ComposedType,
    EnumType,
    FreeFormObject,
    MapType,
    ObjectReference,
    PrimitiveType,
    SchemaType,
    is_null_type,
)
from ...logging_config import get_logger
from .naming import GoNamingStrategy

logger = get_logger(__name__)


ANY_TYPE = "interface{}"
FREE_FORM_TYPE = "map[string]interface{}"
TIME_TYPE = "time.Time"
STREAM_TYPE = "io.ReadCloser"
FILE_TYPE = "*os.File"
NIL_TYPE = "nil"

DEFAULT_TYPE_MAPPING: Mapping[str, str] = MappingProxyType(
    {
        "integer": "int32",
        "long": "int64",
        "number": "float32",
        "float": "float32",
        "double": "float64",
        "decimal": "float64",
        "boolean": "bool",
        "string": "string",
        "UUID": "string",
        "uuid": "string",
        "URI": "string",
        "uri": "string",
        "password": "string",
        "date": TIME_TYPE,
        "date-time": TIME_TYPE,
        "DateTime": TIME_TYPE,
        "ByteArray": "string",
        "byte": "string",
        "File": STREAM_TYPE,
        "file": STREAM_TYPE,
        "binary": STREAM_TYPE,
        "null": NIL_TYPE,
        # A free-form object maps string keys to anything, while an
        # arbitrary type is a single unconstrained value
        "object": FREE_FORM_TYPE,
        "AnyType": ANY_TYPE,
    }
)

GO_LANGUAGE_PRIMITIVES = frozenset(
    {
        "string",
        "bool",
        "uint",
        "uint32",
        "uint64",
        "int",
        "int32",
        "int64",
        "float32",
        "float64",
        "complex64",
        "complex128",
        "rune",
        "byte",
        FREE_FORM_TYPE,
        ANY_TYPE,
    }
)

# Types that never need an import of their own
DEFAULT_INCLUDES = frozenset({"map", "array"})


def package_of(type_name: str) -> Optional[str]:
    """Package qualifier of a Go type name (``*os.File`` -> ``os``)."""
    bare = type_name.lstrip("*")
    if "." not in bare or "[" in bare:
        return None
    return bare.split(".", 1)[0]


def needs_import(type_name: str) -> bool:
    """False for containers and Go primitives, which are always available."""
    return type_name not in DEFAULT_INCLUDES and type_name not in GO_LANGUAGE_PRIMITIVES


@dataclass(frozen=True)
class GoType:
    """
    Immutable representation of a resolved Go type.

    Carries the declaration string plus what the rest of the pipeline
    needs to know about it: imports, nil-ability and container-ness.
    """

    name: str  # The Go type declaration (e.g. "[]*Pet")
    base_name: str = field(default="")  # Declaration without pointer
    is_pointer: bool = field(default=False)
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)
    is_nilable: bool = field(default=False)
    is_container: bool = field(default=False)  # slice or map
    is_free_form: bool = field(default=False)
    is_any_type: bool = field(default=False)
    is_model: bool = field(default=False)
    element: Optional["GoType"] = field(default=None)  # Items or map values
    validation_hints: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        """Set base_name if not provided."""
        if not self.base_name:
            object.__setattr__(self, "base_name", self.name.lstrip("*"))

    @property
    def is_container_like(self) -> bool:
        """
        Whether generated accessors return the value directly.

        Containers, free-form objects and non-model arbitrary types have
        no wrapper type.
        """
        return self.is_container or self.is_free_form or (self.is_any_type and not self.is_model)

    def with_validation_hint(self, hint: str) -> "GoType":
        """Add a validation hint to this type."""
        return replace(self, validation_hints=self.validation_hints + (hint,))


class GoTypeResolver:
    """
    Central engine for mapping schema types to Go types.

    Model references are only accepted for models registered with
    register_model(), so a dangling reference is reported instead of
    producing a type that does not exist.
    """

    def __init__(
        self,
        naming: Optional[GoNamingStrategy] = None,
        type_mapping: Optional[Mapping[str, str]] = None,
        known_models: Iterable[str] = (),
    ):
        """
        Initialize the resolver.

        Args:
            naming: Naming strategy used for model names
            type_mapping: Overrides for the primitive mapping table
            known_models: Raw names of models that references may target

        Raises:
            InvalidMappingError: If a type mapping entry is empty
        """
        self.naming = naming or GoNamingStrategy()
        self._type_mapping = self._build_type_mapping(
            type_mapping if type_mapping is not None else self.naming.config.type_mapping
        )
        self._models: Set[str] = set(known_models)

    @staticmethod
    def _build_type_mapping(overrides: Mapping[str, str]) -> Mapping[str, str]:
        table = dict(DEFAULT_TYPE_MAPPING)
        for token, go_type in overrides.items():
            if not go_type:
                raise InvalidMappingError(token, "type mapping is empty")
            table[token] = go_type
        return MappingProxyType(table)

    @property
    def type_mapping(self) -> Mapping[str, str]:
        return self._type_mapping

    def register_model(self, name: str) -> None:
        """Declare a model that references may point to."""
        self._models.add(name)

    def is_registered(self, name: str) -> bool:
        return name in self._models

    def type_declaration(self, schema: Optional[SchemaType]) -> str:
        """Return the Go declaration string for a schema type."""
        return self.resolve(schema).name

    def resolve(self, schema: Optional[SchemaType]) -> GoType:
        """
        Resolve a schema type to a GoType.

        Raises:
            InvalidMappingError: For a reference to an unregistered model
        """
        if schema is None:
            return self._any_type()

        if isinstance(schema, ArrayType):
            return self._resolve_array(schema)
        elif isinstance(schema, MapType):
            return self._resolve_map(schema)
        elif isinstance(schema, ObjectReference):
            return self._resolve_reference(schema)
        elif isinstance(schema, FreeFormObject):
            return GoType(name=FREE_FORM_TYPE, is_nilable=True, is_free_form=True)
        elif isinstance(schema, AnyType):
            return self._any_type()
        elif isinstance(schema, EnumType):
            return self.resolve(schema.backing)
        elif isinstance(schema, ComposedType):
            return self._resolve_composed(schema)
        elif isinstance(schema, PrimitiveType):
            return self._resolve_primitive(schema.name)

        logger.warning("Unknown schema type %r, using fallback: %s", schema, ANY_TYPE)
        return self._any_type().with_validation_hint(f"Unknown schema type, using fallback: {ANY_TYPE}")

    def _any_type(self) -> GoType:
        return GoType(name=ANY_TYPE, is_nilable=True, is_any_type=True)

    def _resolve_array(self, schema: ArrayType) -> GoType:
        """Map array/slice types."""
        # OAS 3.1 allows arrays without items, the elements may be anything
        if schema.element is None:
            element = self._any_type()
            declaration = ANY_TYPE
        else:
            element = self.resolve(schema.element)
            declaration = element.name
            if schema.element_nullable:
                declaration = "*" + declaration

        return GoType(
            name=f"[]{declaration}",
            imports_needed=element.imports_needed,
            is_nilable=True,  # Slices can be nil
            is_container=True,
            element=element,
        )

    def _resolve_map(self, schema: MapType) -> GoType:
        """Map additionalProperties to a string keyed map."""
        value = self.resolve(schema.value_type)
        container = schema.instantiation_type or "map"
        return GoType(
            name=f"{container}[string]{value.name}",
            imports_needed=value.imports_needed,
            is_nilable=True,
            is_container=True,
            element=value,
        )

    def _resolve_reference(self, schema: ObjectReference) -> GoType:
        if schema.model_name not in self._models:
            raise InvalidMappingError(schema.model_name, "reference to a model that was never registered")
        return GoType(name=self.naming.to_model_name(schema.model_name), is_model=True)

    def _resolve_composed(self, schema: ComposedType) -> GoType:
        """
        The composed type itself is generated as a model; an anonymous
        composition can only be held as an arbitrary value.
        """
        if schema.model_name:
            return GoType(name=self.naming.to_model_name(schema.model_name), is_model=True)
        return self._any_type().with_validation_hint(
            f"Anonymous {schema.kind.value} composition, using {ANY_TYPE}"
        )

    def _resolve_primitive(self, token: str) -> GoType:
        if token in self._type_mapping:
            name = self._type_mapping[token]
        elif token in self._type_mapping.values() or token in GO_LANGUAGE_PRIMITIVES:
            name = token
        else:
            # Unrecognized tokens are treated as named external types
            name = self.naming.to_model_name(token)
            logger.debug("Unmapped type token %s resolved as model %s", token, name)
            return GoType(name=name, is_model=True)

        package = package_of(name) if needs_import(name) else None
        return GoType(
            name=name,
            imports_needed=frozenset({package}) if package else frozenset(),
            is_nilable=name in (ANY_TYPE, FREE_FORM_TYPE, NIL_TYPE) or name.startswith("*"),
            is_pointer=name.startswith("*"),
            is_free_form=name == FREE_FORM_TYPE,
            is_any_type=name == ANY_TYPE,
        )

    def split_null_members(self, schema: ComposedType) -> Tuple[Tuple[SchemaType, ...], bool]:
        """
        Remove literal ``null`` members from a composition.

        Returns:
            The remaining members and whether a null member was present,
            which marks the owning model as nullable.
        """
        members = tuple(m for m in schema.members if not is_null_type(m))
        return members, len(members) != len(schema.members)

    def member_declarations(self, schema: ComposedType) -> List[str]:
        """Declarations of the non-null members, in order, without duplicates."""
        members, _ = self.split_null_members(schema)
        declarations: List[str] = []
        for member in members:
            declaration = self.type_declaration(member)
            if declaration not in declarations:
                declarations.append(declaration)
        return declarations

    def get_validation_summary(self, types: Iterable[GoType]) -> List[str]:
        """Get all validation hints from a list of types."""
        all_hints: List[str] = []
        for go_type in types:
            all_hints.extend(go_type.validation_hints)
        return all_hints
