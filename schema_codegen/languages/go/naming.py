"""
Go-specific naming utilities and sanitization.

Handles Go reserved words, file name restrictions and the naming
conventions of every identifier category. Each rule consults its
override table first and is idempotent: feeding a resolved name back
in returns it unchanged.
"""

import re
from typing import Optional

from ...core.config import CodegenConfig
from ...core.naming import (
    InvalidMappingError,
    ReservedWordGuard,
    camelize,
    lookup_override,
    sanitize_name,
    starts_with_digit,
    symbol_name,
    underscore,
)
from ...core.schema import IdentifierCategory, IdentifierRequest
from ...logging_config import get_logger

logger = get_logger(__name__)


# Go keywords
GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Go builtin primitive types
GO_BUILTIN_TYPES = frozenset(
    {
        "bool",
        "byte",
        "complex64",
        "complex128",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

# Not keywords, but used so often in generated code that they may as well be
GO_GENERATOR_RESERVED = frozenset({"error", "nil"})

GO_RESERVED_WORDS = GO_KEYWORDS | GO_BUILTIN_TYPES | GO_GENERATOR_RESERVED

# File name suffixes the go tool treats as build constraints or tests
GO_RESERVED_FILENAME_SUFFIXES = frozenset(
    {
        # Test
        "test",
        # $GOOS
        "aix",
        "android",
        "darwin",
        "dragonfly",
        "freebsd",
        "illumos",
        "js",
        "linux",
        "netbsd",
        "openbsd",
        "plan9",
        "solaris",
        "windows",
        # $GOARCH
        "386",
        "amd64",
        "arm",
        "arm64",
        "mips",
        "mips64",
        "mips64le",
        "mipsle",
        "ppc64",
        "ppc64le",
        "s390x",
        "wasm",
    }
)

GO_NUMBER_TYPES = frozenset(
    {
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "float32",
        "float64",
    }
)

# Field name the generated models use for additionalProperties
ADDITIONAL_PROPERTIES_FIELD = "AdditionalProperties"

VAR_DIGIT_PREFIX = "Var"
EMPTY_VAR_NAME = "Empty"
MODEL_PREFIX = "model_"
MODEL_FILE_PREFIX = "model_"
API_FILE_PREFIX = "api_"
API_TEST_FILE_SUFFIX = "_test"
OPERATION_PREFIX = "call_"
NUMERIC_ENUM_PREFIX = "_"
EMPTY_ENUM_NAME = "EMPTY"

_ALL_UPPERCASE = re.compile(r"^[A-Z_]*$")
_UPPER_SNAKE = re.compile(r"^[A-Z0-9_]+$")
_LOWER_SNAKE = re.compile(r"^[a-z0-9_]+$")
_NUMERIC_ENUM_REPLACEMENTS = (("-", "MINUS_"), ("+", "PLUS_"), (".", "_DOT_"))


def create_go_guard(config: Optional[CodegenConfig] = None) -> ReservedWordGuard:
    """Create the reserved word guard configured for Go."""
    if config is None:
        return ReservedWordGuard(GO_RESERVED_WORDS)
    words = GO_RESERVED_WORDS | frozenset(config.extra_reserved_words)
    return ReservedWordGuard(words, config.reserved_words_mapping)


def is_reserved_filename(name: str) -> bool:
    """True when the last ``_`` separated part is a build-significant suffix."""
    return name.split("_")[-1] in GO_RESERVED_FILENAME_SUFFIXES


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    # Check basic identifier rules
    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    # Go-specific rules
    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    # Check against reserved words
    if name.lower() in GO_KEYWORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors


class GoNamingStrategy:
    """Naming rules for every Go identifier category."""

    def __init__(self, config: Optional[CodegenConfig] = None, guard: Optional[ReservedWordGuard] = None):
        self.config = config or CodegenConfig()
        self.guard = guard or create_go_guard(self.config)

    def is_reserved(self, name: Optional[str]) -> bool:
        return self.guard.is_reserved(name)

    def escape_reserved_word(self, name: str) -> str:
        """``import`` -> ``Import_``; exported fields cannot start with ``_``."""
        return self.guard.escape(name)

    # Variables and parameters

    def to_var_name(self, name: str) -> str:
        """
        Struct field name for a property.

            created-at -> CreatedAt
            import     -> Import_
            200        -> Var200
            API_KEY    -> API_KEY
        """
        mapped = lookup_override(self.config.name_mapping, name)
        if mapped is not None:
            return mapped

        # replace - with _ e.g. created-at => created_at
        name = sanitize_name(name)

        # all upper case with underscores is kept as written
        if _ALL_UPPERCASE.match(name) and any(c.isalpha() for c in name):
            if self.is_reserved(name):
                escaped = self.escape_reserved_word(name)
                logger.warning(
                    "%s (reserved word) cannot be used as variable name. Renamed to %s", name, escaped
                )
                return escaped
            return name

        # pet_id => PetId
        camelized = camelize(name)
        if not camelized:
            return EMPTY_VAR_NAME

        if self.is_reserved(camelized):
            escaped = self.escape_reserved_word(camelized)
            logger.warning(
                "%s (reserved word) cannot be used as variable name. Renamed to %s", camelized, escaped
            )
            camelized = escaped

        if starts_with_digit(camelized):
            camelized = VAR_DIGIT_PREFIX + camelized

        if camelized == ADDITIONAL_PROPERTIES_FIELD:
            # AdditionalProperties holds unmodeled fields in generated models
            return ADDITIONAL_PROPERTIES_FIELD + "Field"

        return camelized

    def to_param_name(self, name: str) -> str:
        """Parameter name, the field name with a lower case first letter."""
        mapped = lookup_override(self.config.parameter_name_mapping, name)
        if mapped is not None:
            return mapped

        # API_KEY => APIKEY => aPIKEY, stable when fed back in
        param_name = camelize(self.to_var_name(name), lower_first=True)

        if self.is_reserved(param_name):
            logger.warning(
                "%s (reserved word) cannot be used as parameter name. Renamed to %s_",
                param_name,
                param_name,
            )
            param_name = param_name + "_"

        return param_name

    @staticmethod
    def to_export_param_name(param_name: str) -> str:
        """Exported spelling of a parameter name (first letter upper case)."""
        return param_name[:1].upper() + param_name[1:]

    # Models

    def to_model(self, name: str) -> str:
        """
        Snake case model name with prefix, suffix and keyword handling.

        The reserved word check runs on the prefixed name, before the
        final snake casing.
        """
        mapped = lookup_override(self.config.model_name_mapping, name)
        if mapped is not None:
            return mapped
        return self._snake_model(self._apply_affixes(name))

    def _snake_model(self, name: str) -> str:
        name = sanitize_name(name)
        camelized = camelize(underscore(name))

        # model name cannot use reserved keyword, e.g. return
        if self.is_reserved(name) or self.is_reserved(camelized):
            logger.warning(
                "%s (reserved word) cannot be used as model name. Renamed to %s",
                name,
                MODEL_PREFIX + name,
            )
            name = MODEL_PREFIX + name  # e.g. return => ModelReturn (after camelize)

        # model name starts with number
        elif not camelized or starts_with_digit(name) or starts_with_digit(camelized):
            logger.warning(
                "%s (model name starts with number) cannot be used as model name. Renamed to %s",
                name,
                MODEL_PREFIX + name,
            )
            name = MODEL_PREFIX + name  # e.g. 200Response => Model200Response (after camelize)

        return underscore(name)

    def _apply_affixes(self, name: str) -> str:
        prefix = self.config.model_name_prefix
        suffix = self.config.model_name_suffix
        snake = underscore(sanitize_name(name))

        if prefix:
            snake_prefix = underscore(sanitize_name(prefix))
            if not snake.startswith(snake_prefix + "_"):
                name = prefix + "_" + name

        if suffix:
            snake_suffix = underscore(sanitize_name(suffix))
            if not snake.endswith("_" + snake_suffix):
                name = name + "_" + suffix

        return name

    def to_model_name(self, name: str) -> str:
        """Go type name of a model (``phone_number`` -> ``PhoneNumber``)."""
        mapped = lookup_override(self.config.model_name_mapping, name)
        if mapped is not None:
            return mapped
        return camelize(self.to_model(name))

    # Files

    def to_model_filename(self, name: str) -> str:
        """File name (without extension) of a model, e.g. ``model_pet``."""
        mapped = lookup_override(self.config.model_name_mapping, name)
        if mapped is not None:
            name = mapped

        sanitized = sanitize_name(name)
        if sanitized.startswith(MODEL_FILE_PREFIX) and _LOWER_SNAKE.match(sanitized):
            # already a model file name
            filename = sanitized
        else:
            filename = self._snake_model(MODEL_FILE_PREFIX + self._apply_affixes(name))

        if is_reserved_filename(filename):
            logger.warning(
                "%s.go with suffix (reserved word) cannot be used as filename. Renamed to %s_.go",
                filename,
                filename,
            )
            filename += "_"
        return filename

    def to_api_filename(self, name: str) -> str:
        """File name of an API group, e.g. ``PetApi`` -> ``api_pet_api``."""
        # replace - with _ e.g. created-at => created_at
        sanitized = sanitize_name(name)
        if sanitized.startswith(API_FILE_PREFIX) and _LOWER_SNAKE.match(sanitized):
            # already an api file name
            api = sanitized
        else:
            # e.g. PetApi.go => api_pet_api.go
            api = API_FILE_PREFIX + (underscore(sanitized) or "default")

        if is_reserved_filename(api):
            logger.warning(
                "%s.go with suffix (reserved word) cannot be used as filename. Renamed to %s_.go",
                name,
                api,
            )
            api += "_"
        return api

    def to_api_test_filename(self, name: str) -> str:
        base = sanitize_name(name)
        if base.endswith(API_TEST_FILE_SUFFIX) and _LOWER_SNAKE.match(base):
            base = base[: -len(API_TEST_FILE_SUFFIX)]
        return self.to_api_filename(base) + API_TEST_FILE_SUFFIX

    # Operations

    def to_operation_id(self, operation_id: str) -> str:
        """Method name of an operation (``get_pet_by_id`` -> ``GetPetById``)."""
        sanitized = sanitize_name(operation_id)
        camelized = camelize(sanitized)

        # method name cannot use reserved keyword, e.g. return
        if self.is_reserved(sanitized) or self.is_reserved(camelized):
            logger.warning(
                "%s (reserved word) cannot be used as method name. Renamed to %s",
                operation_id,
                camelize(OPERATION_PREFIX + sanitized),
            )
            sanitized = OPERATION_PREFIX + sanitized

        # operationId starts with a number
        elif not camelized or starts_with_digit(camelized):
            logger.warning(
                "%s (starting with a number) cannot be used as method name. Renamed to %s",
                operation_id,
                camelize(OPERATION_PREFIX + sanitized),
            )
            sanitized = OPERATION_PREFIX + sanitized

        return camelize(sanitized)

    # Enums

    def to_enum_var_name(self, value: str, datatype: str = "string") -> str:
        """
        Constant name for one enum value.

            available (string) -> AVAILABLE
            -1.5 (float32)     -> _MINUS_1_DOT_5
            $ (string)         -> DOLLAR
        """
        mapped = lookup_override(self.config.enum_name_mapping, value)
        if mapped is not None:
            return mapped

        if len(value) == 0:
            return EMPTY_ENUM_NAME

        # number
        if datatype in GO_NUMBER_TYPES or datatype == "bool":
            if value.startswith(NUMERIC_ENUM_PREFIX):
                return value
            var_name = value
            for symbol, word in _NUMERIC_ENUM_REPLACEMENTS:
                var_name = var_name.replace(symbol, word)
            return NUMERIC_ENUM_PREFIX + var_name

        # for symbol, e.g. $, #
        symbol = symbol_name(value)
        if symbol is not None:
            return symbol.upper()

        # string
        if _UPPER_SNAKE.match(value):
            enum_name = value
        else:
            enum_name = sanitize_name(underscore(value).upper())
        enum_name = enum_name.strip("_")
        if not enum_name:
            return EMPTY_ENUM_NAME

        if self.is_reserved(enum_name):
            escaped = self.escape_reserved_word(enum_name)
            logger.warning("%s (reserved word) cannot be used as enum value. Renamed to %s", value, escaped)
            return escaped
        elif starts_with_digit(enum_name):
            return NUMERIC_ENUM_PREFIX + enum_name
        else:
            return enum_name

    def to_enum_name(self, name: str) -> str:
        """Enum type name for a property (``status`` -> ``STATUS``)."""
        mapped = lookup_override(self.config.enum_name_mapping, name)
        if mapped is not None:
            return mapped

        enum_name = underscore(self.to_model_name(name)).upper()

        # remove [] for array or map of enum
        enum_name = enum_name.replace("[]", "")

        if starts_with_digit(enum_name):
            return NUMERIC_ENUM_PREFIX + enum_name
        return enum_name

    # Dispatch

    def resolve(self, request: IdentifierRequest) -> str:
        """
        Resolve an identifier request according to its category.

        Raises:
            InvalidMappingError: If the matching override entry is empty.
        """
        category = request.category
        if request.override_key is not None:
            table = self._override_table(category)
            if table is not None:
                mapped = lookup_override(table, request.override_key)
                if mapped is not None:
                    return mapped

        name = request.raw_name
        if category == IdentifierCategory.VARIABLE:
            return self.to_var_name(name)
        elif category == IdentifierCategory.PARAMETER:
            return self.to_param_name(name)
        elif category == IdentifierCategory.MODEL_NAME:
            return self.to_model_name(name)
        elif category == IdentifierCategory.MODEL_FILE_NAME:
            return self.to_model_filename(name)
        elif category == IdentifierCategory.OPERATION_FILE_NAME:
            return self.to_api_filename(name)
        elif category == IdentifierCategory.OPERATION_TEST_FILE_NAME:
            return self.to_api_test_filename(name)
        elif category == IdentifierCategory.ENUM_CONSTANT:
            return self.to_enum_var_name(name, request.datatype or "string")
        elif category == IdentifierCategory.ENUM_TYPE_NAME:
            return self.to_enum_name(name)
        elif category == IdentifierCategory.OPERATION:
            return self.to_operation_id(name)

        raise InvalidMappingError(name, f"unsupported identifier category {category!r}")

    def _override_table(self, category: IdentifierCategory):
        if category == IdentifierCategory.VARIABLE:
            return self.config.name_mapping
        elif category == IdentifierCategory.PARAMETER:
            return self.config.parameter_name_mapping
        elif category in (IdentifierCategory.MODEL_NAME, IdentifierCategory.MODEL_FILE_NAME):
            return self.config.model_name_mapping
        elif category in (IdentifierCategory.ENUM_CONSTANT, IdentifierCategory.ENUM_TYPE_NAME):
            return self.config.enum_name_mapping
        return None
