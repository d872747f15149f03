"""
Go code generator implementation.

Turns model and operation descriptors into typed records holding every
Go identifier, type declaration, struct tag and import a template needs,
and renders model files from those records.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ...core.config import CodegenConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import InvalidMappingError, camelize, sanitize_name
from ...core.schema import (
    CompositionKind,
    EnumType,
    FieldDescriptor,
    ModelDescriptor,
    ObjectReference,
    OperationDescriptor,
    ParameterDescriptor,
    ParameterLocation,
)
from ...logging_config import get_logger
from .config import GoConfig, validate_go_config
from .imports import collect_model_imports, collect_operation_imports
from .naming import GO_NUMBER_TYPES, GoNamingStrategy
from .postprocess import GoFormatter
from .tags import compose_tag
from .types import GoType, GoTypeResolver

logger = get_logger(__name__)


def composed_field_name(declaration: str) -> str:
    """
    Field holding one member of a composed model.

        Pet                    -> Pet
        []string               -> ArrayOfString
        map[string]interface{} -> MapStringinterface
    """
    name = declaration.replace("*", "").replace("[]", "array_of_")
    return camelize(sanitize_name(name))


@dataclass(frozen=True)
class PropertyResult:
    """One struct field of a generated model."""

    name: str
    base_name: str
    data_type: str
    tag: str
    required: bool
    is_nullable: bool
    is_container_like: bool
    go_type: GoType
    enum_name: Optional[str] = None  # Set for inline enums
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumVarResult:
    name: str
    value: str


@dataclass(frozen=True)
class ModelResult:
    """Everything a model template needs."""

    name: str
    file_name: str
    properties: Tuple[PropertyResult, ...] = ()
    is_enum: bool = False
    enum_data_type: Optional[str] = None
    enum_vars: Tuple[EnumVarResult, ...] = ()
    one_of: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()
    # (field name, declaration) of each oneOf/anyOf member
    composed_fields: Tuple[Tuple[str, str], ...] = ()
    is_nullable: bool = False
    imports: Tuple[str, ...] = ()
    generate_marshal_json: bool = True
    generate_unmarshal_json: bool = True
    description: Optional[str] = None


@dataclass(frozen=True)
class ParameterResult:
    name: str
    export_name: str
    base_name: str
    data_type: str
    location: ParameterLocation
    required: bool
    is_collection_format_multi: bool


@dataclass(frozen=True)
class OperationResult:
    nickname: str
    operation_id: str
    http_method: str  # Go spelling, e.g. Put
    params: Tuple[ParameterResult, ...]
    return_type: Optional[str]


@dataclass(frozen=True)
class OperationsResult:
    """One API file: its operations and imports."""

    name: str
    file_name: str
    test_file_name: str
    operations: Tuple[OperationResult, ...]
    imports: Tuple[str, ...]


class GoCodegen(CodeGenerator):
    """Code generator for Go models and API files."""

    def __init__(self, config: Optional[Union[GoConfig, Dict[str, Any]]] = None):
        """
        Initialize Go generator with configuration.

        Args:
            config: A GoConfig, or a dict of overrides for the Go defaults
        """
        if isinstance(config, CodegenConfig) and not isinstance(config, GoConfig):
            config = config.to_dict()
        if not isinstance(config, GoConfig):
            config = load_config("go", custom_config=config)
        self.config = config

        self.naming = GoNamingStrategy(self.config)
        self.type_resolver = GoTypeResolver(self.naming)

        super().__init__()

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    def register_models(self, models: Sequence[ModelDescriptor]) -> None:
        """Declare the models of the run so references to them resolve."""
        for model in models:
            self.type_resolver.register_model(model.name)

    # Models

    def process_property(self, field: FieldDescriptor) -> PropertyResult:
        """Name, type and tag of one model property."""
        go_type = self.type_resolver.resolve(field.schema_type)
        enum_name = None
        if isinstance(field.schema_type, EnumType):
            enum_name = self.naming.to_enum_name(field.base_name)

        return PropertyResult(
            name=self.naming.to_var_name(field.base_name),
            base_name=field.base_name,
            data_type=go_type.name,
            tag=compose_tag(field, with_xml=self.config.with_xml, with_validate=self.config.with_validate),
            required=field.required,
            is_nullable=field.nullable,
            is_container_like=go_type.is_container_like,
            go_type=go_type,
            enum_name=enum_name,
            description=field.description,
        )

    def process_model(self, model: ModelDescriptor) -> ModelResult:
        """
        Compute names, types, tags and imports for one model.

        Raises:
            InvalidMappingError: For a dangling model reference or an
                empty override
        """
        name = self.naming.to_model_name(model.name)
        properties = tuple(self.process_property(f) for f in model.fields)

        one_of: List[str] = []
        any_of: List[str] = []
        is_nullable = False
        # Composed models import what their members need, the others
        # what their properties need
        import_types: List[GoType] = [p.go_type for p in properties]

        composition = model.composition
        if composition is not None and composition.kind != CompositionKind.ALL_OF:
            members, is_nullable = self.type_resolver.split_null_members(composition)
            import_types = [self.type_resolver.resolve(m) for m in members]
            declarations = self.type_resolver.member_declarations(composition)
            if composition.kind == CompositionKind.ONE_OF:
                one_of = declarations
            else:
                any_of = declarations

        enum_data_type = None
        enum_vars: Tuple[EnumVarResult, ...] = ()
        if model.enum is not None:
            enum_data_type = self.type_resolver.type_declaration(model.enum.backing)
            enum_vars = tuple(
                EnumVarResult(
                    name=self.naming.to_enum_var_name(value, enum_data_type),
                    value=self.to_enum_value(value, enum_data_type),
                )
                for value in model.enum.values
            )

        imports = collect_model_imports(
            import_types,
            existing=model.imports,
            model_package=self.config.model_package,
            is_enum=model.enum is not None,
            has_one_of=bool(one_of),
            enum_fmt_import=self.config.enum_fmt_import,
            generate_unmarshal_json=self.config.generate_unmarshal_json,
            import_mapping=self.config.import_mapping,
        )

        logger.debug("Processed model %s as %s", model.name, name)
        return ModelResult(
            name=name,
            file_name=self.naming.to_model_filename(model.name),
            properties=properties,
            is_enum=model.enum is not None,
            enum_data_type=enum_data_type,
            enum_vars=enum_vars,
            one_of=tuple(one_of),
            any_of=tuple(any_of),
            composed_fields=tuple((composed_field_name(d), d) for d in one_of + any_of),
            is_nullable=is_nullable,
            imports=tuple(imports),
            generate_marshal_json=self.config.generate_marshal_json,
            generate_unmarshal_json=self.config.generate_unmarshal_json,
            description=model.description,
        )

    # Operations

    def process_parameter(self, param: ParameterDescriptor, go_type: Optional[GoType] = None) -> ParameterResult:
        go_type = go_type or self.type_resolver.resolve(param.schema_type)
        name = self.naming.to_param_name(param.raw_name)
        return ParameterResult(
            name=name,
            export_name=self.naming.to_export_param_name(name),
            base_name=param.raw_name,
            data_type=go_type.name,
            location=param.location,
            required=param.required,
            is_collection_format_multi=param.collection_format == "multi",
        )

    def process_operations(self, group: str, operations: Sequence[OperationDescriptor]) -> OperationsResult:
        """
        Compute names, types and imports for one API group.

        Args:
            group: API name the operations are tagged with
            operations: Operations of the group, in order
        """
        resolved = []
        results = []
        for operation in operations:
            param_types = [self.type_resolver.resolve(p.schema_type) for p in operation.parameters]
            return_type = (
                self.type_resolver.resolve(operation.return_type) if operation.return_type is not None else None
            )
            resolved.append((operation, param_types, return_type))

            results.append(
                OperationResult(
                    nickname=self.naming.to_operation_id(operation.operation_id),
                    operation_id=operation.operation_id,
                    http_method=camelize(operation.http_method.lower()),
                    params=tuple(
                        self.process_parameter(p, t) for p, t in zip(operation.parameters, param_types)
                    ),
                    return_type=return_type.name if return_type is not None else None,
                )
            )

        imports = collect_operation_imports(
            resolved,
            api_package=self.config.api_package,
            import_mapping=self.config.import_mapping,
        )

        return OperationsResult(
            name=group,
            file_name=self.naming.to_api_filename(group),
            test_file_name=self.naming.to_api_test_filename(group),
            operations=tuple(results),
            imports=tuple(imports),
        )

    # Enum and literal helpers

    def to_enum_value(self, value: str, datatype: str) -> str:
        """Go literal of an enum value: numbers and booleans raw, strings quoted."""
        if datatype in GO_NUMBER_TYPES or datatype == "bool":
            return value
        return '"' + self.escape_text(value) + '"'

    @staticmethod
    def to_enum_default_value(value: str, datatype: str) -> str:
        return f"{datatype}_{value}"

    @staticmethod
    def escape_text(value: str) -> str:
        """Escape a string for an interpreted Go string literal."""
        return (
            value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\t", "\\t")
        )

    @staticmethod
    def escape_quotation_mark(value: str) -> str:
        # remove " to avoid code injection
        return value.replace('"', "")

    @staticmethod
    def escape_unsafe_characters(value: str) -> str:
        """Break comment delimiters so text can sit inside a Go comment."""
        return value.replace("*/", "*_/").replace("/*", "/_*")

    # Validation

    def validate_models(self, models: Sequence[ModelDescriptor]) -> List[str]:
        """Validate models and configuration for Go generation."""
        warnings = super().validate_models(models)
        warnings.extend(validate_go_config(self.config))

        all_go_types = []
        for model in models:
            for field in model.fields:
                try:
                    all_go_types.append(self.type_resolver.resolve(field.schema_type))
                except InvalidMappingError as e:
                    warnings.append(f"Model {model.name}.{field.base_name}: {e}")

                var_name = self.naming.to_var_name(field.base_name)
                if var_name != camelize(sanitize_name(field.base_name)):
                    warnings.append(f"Field {model.name}.{field.base_name} renamed to {var_name}")

            if model.composition is not None:
                for member in model.composition.members:
                    if isinstance(member, ObjectReference) and not self.type_resolver.is_registered(
                        member.model_name
                    ):
                        warnings.append(
                            f"Model {model.name} composes unregistered model {member.model_name}"
                        )

        warnings.extend(self.type_resolver.get_validation_summary(all_go_types))

        for template_name in ("model.go.j2", "imports.go.j2"):
            if not self.template_exists(template_name):
                warnings.append(f"Template {template_name} not found")

        return warnings

    # Rendering

    def render_model(self, model: ModelResult) -> str:
        """Render a model file from its processed record."""
        context = {
            "package_name": self.config.package_name,
            "enum_class_prefix": self.config.enum_class_prefix,
            "imports": list(model.imports),
            "model": model,
        }
        return self.render_template("model.go.j2", context)

    def write_models(self, models: Sequence[ModelResult], output_dir: Union[str, Path]) -> List[Path]:
        """
        Render and write model files, then run the configured formatter.

        Returns:
            Paths of the written files
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        with GoFormatter(self.config.post_process_command) as formatter:
            for model in models:
                path = output_dir / (model.file_name + self.file_extension)
                path.write_text(self.render_model(model), encoding="utf-8")
                formatter.process(path, "model")
                written.append(path)

        logger.info("Wrote %d model file(s) to %s", len(written), output_dir)
        return written


def create_go_generator(config: Optional[Mapping[str, Any]] = None) -> GoCodegen:
    """Create a Go generator with default configuration."""
    return GoCodegen(dict(config) if config else None)
