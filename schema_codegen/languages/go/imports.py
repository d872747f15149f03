"""
Import triggers for generated Go units.

Each function builds the ImportSet of one unit (a model file or an API
file) from the resolved types it uses, then applies the configured
substitution table.
"""

from typing import Iterable, Mapping, Optional, Sequence, Tuple

from ...core.imports import ImportSet
from ...core.schema import OperationDescriptor, ParameterLocation
from .types import GoType

STRINGS_IMPORT = "strings"
REFLECT_IMPORT = "reflect"
FMT_IMPORT = "fmt"
VALIDATOR_IMPORT = "gopkg.in/validator.v2"

MULTI_COLLECTION_FORMAT = "multi"


def _add_type_imports(imports: ImportSet, go_type: Optional[GoType]) -> None:
    if go_type is None:
        return
    for package in sorted(go_type.imports_needed):
        imports.add(package)


def collect_model_imports(
    property_types: Iterable[GoType],
    *,
    existing: Iterable[str] = (),
    model_package: str = "",
    is_enum: bool = False,
    has_one_of: bool = False,
    enum_fmt_import: bool = False,
    generate_unmarshal_json: bool = True,
    import_mapping: Optional[Mapping[str, Sequence[str]]] = None,
) -> ImportSet:
    """
    Imports of one model file.

    Args:
        property_types: Resolved types of the model properties, or of
            the oneOf/anyOf members for a composed model
        existing: Imports already attached to the model by the parser
        model_package: Imports under this prefix are dropped, models
            share a package
        is_enum: The model is an enum
        has_one_of: The model is a oneOf composition
        enum_fmt_import: Enum models need ``fmt`` for their String() helper
        generate_unmarshal_json: oneOf models validate during unmarshaling
        import_mapping: Substitution table applied last
    """
    imports = ImportSet(existing)
    imports.discard_prefix(model_package)

    for go_type in property_types:
        _add_type_imports(imports, go_type)

    if is_enum and enum_fmt_import:
        imports.add(FMT_IMPORT)

    if has_one_of and generate_unmarshal_json:
        imports.add(VALIDATOR_IMPORT)

    return imports.expanded(import_mapping or {})


def collect_operation_imports(
    operations: Sequence[Tuple[OperationDescriptor, Sequence[GoType], Optional[GoType]]],
    *,
    existing: Iterable[str] = (),
    api_package: str = "",
    import_mapping: Optional[Mapping[str, Sequence[str]]] = None,
) -> ImportSet:
    """
    Imports of one API file.

    Args:
        operations: Each operation with its resolved parameter types (in
            parameter order) and resolved return type
        existing: Imports already attached by the parser
        api_package: Imports under this prefix are dropped
        import_mapping: Substitution table applied last
    """
    imports = ImportSet(existing)
    imports.discard_prefix(api_package)

    # path parameters are substituted into the URL with strings.Replace
    for operation, _, _ in operations:
        if any(p.location == ParameterLocation.PATH for p in operation.parameters):
            imports.add(STRINGS_IMPORT)
            break

    for operation, param_types, return_type in operations:
        _add_type_imports(imports, return_type)
        for param, go_type in zip(operation.parameters, param_types):
            _add_type_imports(imports, go_type)

            # collectionFormat=multi is expanded through reflection
            if param.collection_format == MULTI_COLLECTION_FORMAT:
                imports.add(REFLECT_IMPORT)

    return imports.expanded(import_mapping or {})
