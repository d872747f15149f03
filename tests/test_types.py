"""Tests for schema_codegen/languages/go/types.py."""

import pytest

from schema_codegen.core.config import CodegenConfig
from schema_codegen.core.naming import InvalidMappingError
from schema_codegen.core.schema import (
    AnyType,
    ArrayType,
    ComposedType,
    CompositionKind,
    EnumType,
    FreeFormObject,
    MapType,
    ObjectReference,
    PrimitiveType,
)
from schema_codegen.languages.go.naming import GoNamingStrategy
from schema_codegen.languages.go.types import GoType, GoTypeResolver, needs_import, package_of


class TestPrimitives:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("integer", "int32"),
            ("long", "int64"),
            ("number", "float32"),
            ("double", "float64"),
            ("boolean", "bool"),
            ("string", "string"),
            ("uuid", "string"),
            ("password", "string"),
            ("date", "time.Time"),
            ("date-time", "time.Time"),
            ("binary", "io.ReadCloser"),
            ("object", "map[string]interface{}"),
            ("AnyType", "interface{}"),
        ],
    )
    def test_default_mapping(self, resolver: GoTypeResolver, token: str, expected: str):
        assert resolver.type_declaration(PrimitiveType(token)) == expected

    def test_imports(self, resolver: GoTypeResolver):
        assert resolver.resolve(PrimitiveType("date-time")).imports_needed == frozenset({"time"})
        assert resolver.resolve(PrimitiveType("file")).imports_needed == frozenset({"io"})
        assert resolver.resolve(PrimitiveType("string")).imports_needed == frozenset()

    def test_go_type_passes_through(self, resolver: GoTypeResolver):
        assert resolver.type_declaration(PrimitiveType("int64")) == "int64"

    def test_unknown_token_is_a_model(self, resolver: GoTypeResolver):
        go_type = resolver.resolve(PrimitiveType("phone_number"))
        assert go_type.name == "PhoneNumber"
        assert go_type.is_model

    def test_mapping_override(self):
        naming = GoNamingStrategy(CodegenConfig(type_mapping={"integer": "int64", "file": "*os.File"}))
        resolver = GoTypeResolver(naming)
        assert resolver.type_declaration(PrimitiveType("integer")) == "int64"

        file_type = resolver.resolve(PrimitiveType("file"))
        assert file_type.name == "*os.File"
        assert file_type.is_pointer
        assert file_type.imports_needed == frozenset({"os"})

    def test_empty_mapping_rejected(self):
        with pytest.raises(InvalidMappingError, match="integer"):
            GoTypeResolver(type_mapping={"integer": ""})


class TestContainers:
    def test_array(self, resolver: GoTypeResolver):
        go_type = resolver.resolve(ArrayType(PrimitiveType("date")))
        assert go_type.name == "[]time.Time"
        assert go_type.is_container
        assert go_type.is_container_like
        assert go_type.imports_needed == frozenset({"time"})
        assert go_type.element.name == "time.Time"

    def test_array_of_integers(self, resolver: GoTypeResolver):
        assert resolver.type_declaration(ArrayType(PrimitiveType("integer"))) == "[]int32"

    def test_array_without_items(self, resolver: GoTypeResolver):
        assert resolver.type_declaration(ArrayType()) == "[]interface{}"

    def test_array_of_nullable_models(self, resolver: GoTypeResolver):
        schema = ArrayType(ObjectReference("Pet"), element_nullable=True)
        assert resolver.type_declaration(schema) == "[]*Pet"

    def test_nested_array(self, resolver: GoTypeResolver):
        schema = ArrayType(ArrayType(PrimitiveType("integer")))
        assert resolver.type_declaration(schema) == "[][]int32"

    def test_map(self, resolver: GoTypeResolver):
        go_type = resolver.resolve(MapType(PrimitiveType("date-time")))
        assert go_type.name == "map[string]time.Time"
        assert go_type.imports_needed == frozenset({"time"})

    def test_map_without_value_type(self, resolver: GoTypeResolver):
        assert resolver.type_declaration(MapType()) == "map[string]interface{}"

    def test_map_of_arrays(self, resolver: GoTypeResolver):
        schema = MapType(ArrayType(ObjectReference("Tag")))
        assert resolver.type_declaration(schema) == "map[string][]Tag"


class TestObjects:
    def test_reference(self, resolver: GoTypeResolver):
        go_type = resolver.resolve(ObjectReference("Pet", ref="#/components/schemas/Pet"))
        assert go_type.name == "Pet"
        assert go_type.is_model
        assert not go_type.is_container_like

    def test_dangling_reference(self, resolver: GoTypeResolver):
        with pytest.raises(InvalidMappingError, match="Owner") as exc_info:
            resolver.resolve(ObjectReference("Owner"))
        assert exc_info.value.raw_name == "Owner"

    def test_registered_reference(self, resolver: GoTypeResolver):
        resolver.register_model("Owner")
        assert resolver.is_registered("Owner")
        assert resolver.type_declaration(ObjectReference("Owner")) == "Owner"

    def test_free_form_and_any(self, resolver: GoTypeResolver):
        free_form = resolver.resolve(FreeFormObject())
        assert free_form.name == "map[string]interface{}"
        assert free_form.is_free_form
        assert free_form.is_container_like

        any_type = resolver.resolve(AnyType())
        assert any_type.name == "interface{}"
        assert any_type.is_container_like
        assert resolver.resolve(None).name == "interface{}"

    def test_enum_resolves_to_backing_type(self, resolver: GoTypeResolver):
        assert resolver.type_declaration(EnumType(PrimitiveType("integer"), ("1", "2"))) == "int32"


class TestComposed:
    def test_named_composition(self, resolver: GoTypeResolver):
        schema = ComposedType(CompositionKind.ONE_OF, (ObjectReference("Pet"),), model_name="pet_or_tag")
        assert resolver.type_declaration(schema) == "PetOrTag"

    def test_anonymous_composition(self, resolver: GoTypeResolver):
        go_type = resolver.resolve(ComposedType(CompositionKind.ANY_OF, (PrimitiveType("string"),)))
        assert go_type.name == "interface{}"
        assert resolver.get_validation_summary([go_type]) == ["Anonymous anyOf composition, using interface{}"]

    def test_null_members_removed(self, resolver: GoTypeResolver):
        schema = ComposedType(
            CompositionKind.ONE_OF,
            (ObjectReference("Pet"), PrimitiveType("null"), ObjectReference("Tag")),
        )
        members, nullable = resolver.split_null_members(schema)
        assert members == (ObjectReference("Pet"), ObjectReference("Tag"))
        assert nullable
        assert resolver.member_declarations(schema) == ["Pet", "Tag"]

    def test_no_null_member(self, resolver: GoTypeResolver):
        schema = ComposedType(CompositionKind.ANY_OF, (PrimitiveType("string"), PrimitiveType("string")))
        _, nullable = resolver.split_null_members(schema)
        assert not nullable
        assert resolver.member_declarations(schema) == ["string"]


class TestGoType:
    def test_base_name_defaults(self):
        assert GoType(name="*Pet").base_name == "Pet"

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            GoType(name="string").name = "int"


class TestHelpers:
    def test_package_of(self):
        assert package_of("time.Time") == "time"
        assert package_of("*os.File") == "os"
        assert package_of("string") is None
        assert package_of("map[string]time.Time") is None

    def test_needs_import(self):
        assert not needs_import("string")
        assert not needs_import("map")
        assert needs_import("time.Time")
