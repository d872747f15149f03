"""Tests for schema_codegen/core/imports.py and schema_codegen/languages/go/imports.py."""

from schema_codegen.core.imports import ImportSet
from schema_codegen.core.schema import (
    ArrayType,
    ObjectReference,
    OperationDescriptor,
    ParameterDescriptor,
    ParameterLocation,
    PrimitiveType,
)
from schema_codegen.languages.go.imports import (
    FMT_IMPORT,
    REFLECT_IMPORT,
    STRINGS_IMPORT,
    VALIDATOR_IMPORT,
    collect_model_imports,
    collect_operation_imports,
)
from schema_codegen.languages.go.types import GoTypeResolver


class TestImportSet:
    def test_insertion_order_without_duplicates(self):
        imports = ImportSet()
        assert imports.add("time")
        assert imports.add("io")
        assert not imports.add("time")
        assert imports.to_list() == ["time", "io"]
        assert len(imports) == 2
        assert "io" in imports

    def test_discard_prefix(self):
        imports = ImportSet(["github.com/acme/models/pet", "time", "github.com/acme/models/tag"])
        dropped = imports.discard_prefix("github.com/acme/models")
        assert dropped == ["github.com/acme/models/pet", "github.com/acme/models/tag"]
        assert list(imports) == ["time"]

    def test_discard_empty_prefix_keeps_everything(self):
        imports = ImportSet(["time"])
        assert imports.discard_prefix("") == []
        assert list(imports) == ["time"]

    def test_expanded_replaces_in_place(self):
        imports = ImportSet(["io", "time", "os"])
        expanded = imports.expanded({"time": ("github.com/acme/clock", "github.com/acme/tz")})
        assert expanded.to_list() == ["io", "github.com/acme/clock", "github.com/acme/tz", "os"]
        assert imports.to_list() == ["io", "time", "os"]

    def test_expanded_deduplicates(self):
        imports = ImportSet(["io", "time"])
        assert imports.expanded({"time": "io"}).to_list() == ["io"]

    def test_equality(self):
        assert ImportSet(["a", "b"]) == ImportSet(["a", "b", "a"])
        assert ImportSet(["a", "b"]) != ImportSet(["b", "a"])


class TestModelImports:
    def test_type_imports(self, resolver: GoTypeResolver):
        types = [resolver.resolve(PrimitiveType(t)) for t in ("string", "date-time", "binary")]
        assert collect_model_imports(types).to_list() == ["time", "io"]

    def test_model_package_dropped(self, resolver: GoTypeResolver):
        types = [resolver.resolve(PrimitiveType("date"))]
        imports = collect_model_imports(
            types,
            existing=["github.com/acme/petstore/Tag"],
            model_package="github.com/acme/petstore",
        )
        assert imports.to_list() == ["time"]

    def test_enum_fmt(self):
        assert FMT_IMPORT in collect_model_imports([], is_enum=True, enum_fmt_import=True)
        assert FMT_IMPORT not in collect_model_imports([], is_enum=True, enum_fmt_import=False)
        assert FMT_IMPORT not in collect_model_imports([], is_enum=False, enum_fmt_import=True)

    def test_one_of_validator(self):
        assert VALIDATOR_IMPORT in collect_model_imports([], has_one_of=True)
        assert VALIDATOR_IMPORT not in collect_model_imports([], has_one_of=True, generate_unmarshal_json=False)

    def test_mapping_applied_last(self, resolver: GoTypeResolver):
        types = [resolver.resolve(PrimitiveType("date"))]
        imports = collect_model_imports(
            types,
            has_one_of=True,
            import_mapping={"time": ("github.com/acme/clock",), VALIDATOR_IMPORT: ("github.com/acme/validator",)},
        )
        assert imports.to_list() == ["github.com/acme/clock", "github.com/acme/validator"]


class TestOperationImports:
    def _resolved(self, resolver, operations):
        return [
            (
                op,
                [resolver.resolve(p.schema_type) for p in op.parameters],
                resolver.resolve(op.return_type) if op.return_type is not None else None,
            )
            for op in operations
        ]

    def test_path_parameter_adds_strings_once(self, resolver: GoTypeResolver):
        get_pet = OperationDescriptor(
            "getPetById",
            "GET",
            (ParameterDescriptor("petId", PrimitiveType("long"), ParameterLocation.PATH, required=True),),
            ObjectReference("Pet"),
        )
        delete_pet = OperationDescriptor(
            "deletePet",
            "DELETE",
            (ParameterDescriptor("petId", PrimitiveType("long"), ParameterLocation.PATH, required=True),),
        )
        imports = collect_operation_imports(self._resolved(resolver, [get_pet, delete_pet]))
        assert imports.to_list() == [STRINGS_IMPORT]

    def test_multi_collection_format(self, resolver: GoTypeResolver):
        find = OperationDescriptor(
            "findPetsByTags",
            "GET",
            (ParameterDescriptor("tags", ArrayType(PrimitiveType("string")), collection_format="multi"),),
        )
        imports = collect_operation_imports(self._resolved(resolver, [find]))
        assert imports.to_list() == [REFLECT_IMPORT]

    def test_type_imports(self, resolver: GoTypeResolver):
        upload = OperationDescriptor(
            "uploadFile",
            "POST",
            (
                ParameterDescriptor("petId", PrimitiveType("long"), ParameterLocation.PATH),
                ParameterDescriptor("since", PrimitiveType("date-time")),
                ParameterDescriptor("file", PrimitiveType("file"), ParameterLocation.FORM),
            ),
            PrimitiveType("binary"),
        )
        imports = collect_operation_imports(self._resolved(resolver, [upload]))
        assert imports.to_list() == [STRINGS_IMPORT, "io", "time"]

    def test_api_package_and_mapping(self, resolver: GoTypeResolver):
        op = OperationDescriptor(
            "listPets",
            "GET",
            (ParameterDescriptor("since", PrimitiveType("date")),),
        )
        imports = collect_operation_imports(
            self._resolved(resolver, [op]),
            existing=["github.com/acme/api/internal"],
            api_package="github.com/acme/api",
            import_mapping={"time": "github.com/acme/clock"},
        )
        assert imports.to_list() == ["github.com/acme/clock"]
