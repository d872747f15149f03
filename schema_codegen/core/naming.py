"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions and reserved word
detection shared by every target language.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .config import ConfigError


class ErrorKind(Enum):
    """Classification of naming errors surfaced to callers."""

    INVALID_MAPPING = "invalid_mapping"


class NamingError(Exception):
    """Base exception for naming and mapping errors."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, raw_name: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.raw_name = raw_name


class InvalidMappingError(NamingError):
    """An override entry is unusable or a reference points nowhere."""

    def __init__(self, raw_name: str, reason: str):
        super().__init__(
            ErrorKind.INVALID_MAPPING,
            raw_name,
            f"Invalid mapping for '{raw_name}': {reason}",
        )
        self.reason = reason


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


# Names for values made only of symbols, e.g. an enum value of "$"
SPECIAL_CHAR_REPLACEMENTS: Mapping[str, str] = MappingProxyType(
    {
        "$": "Dollar",
        "^": "Caret",
        "|": "Pipe",
        "=": "Equal",
        "*": "Star",
        "-": "Minus",
        "&": "Ampersand",
        "%": "Percent",
        "#": "Hash",
        "@": "At",
        "!": "Exclamation",
        "+": "Plus",
        ":": "Colon",
        ";": "Semicolon",
        ">": "Greater_Than",
        "<": "Less_Than",
        ".": "Period",
        "_": "Underscore",
        "?": "Question_Mark",
        ",": "Comma",
        "'": "Quote",
        '"': "Double_Quote",
        "/": "Slash",
        "\\": "Back_Slash",
        "(": "Left_Parenthesis",
        ")": "Right_Parenthesis",
        "{": "Left_Curly_Bracket",
        "}": "Right_Curly_Bracket",
        "[": "Left_Square_Bracket",
        "]": "Right_Square_Bracket",
        "~": "Tilde",
        "`": "Backtick",
        "<=": "Less_Than_Or_Equal_To",
        ">=": "Greater_Than_Or_Equal_To",
        "!=": "Not_Equal",
    }
)

_SEPARATORS = re.compile(r"[.\-| /]")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z][a-z]+)")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def sanitize_name(name: str) -> str:
    """
    Turn an arbitrary schema string into a bare identifier body.

    Separators become underscores and anything that is not a letter,
    digit or underscore is dropped. Casing is left for the caller.

        input[]        -> input
        input[a][b]    -> input_a_b
        created-at     -> created_at
        /api/films/get -> _api_films_get
        $php_variable  -> php_variable

    The empty string is returned unchanged.
    """
    if not name:
        return ""

    name = name.replace("[]", "")
    name = name.replace("[", "_").replace("]", "")
    name = name.replace("(", "_").replace(")", "")
    name = _SEPARATORS.sub("_", name)
    return _INVALID_CHARS.sub("", name)


def camelize(word: str, lower_first: bool = False) -> str:
    """
    Convert a snake_case word to CamelCase.

    Each underscore separated part gets its first letter upper-cased,
    the remainder of the part is kept as is, so ``petID`` stays ``PetID``.
    """
    result = "".join(part[:1].upper() + part[1:] for part in word.split("_") if part)
    if lower_first and result:
        result = result[:1].lower() + result[1:]
    return result


def underscore(word: str) -> str:
    """Convert CamelCase to snake_case (``PetAPIResponse`` -> ``pet_api_response``)."""
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    word = word.replace("-", "_").replace(" ", "_")
    return word.lower()


def symbol_name(value: str) -> Optional[str]:
    """Return the word for a value made only of symbols, or None."""
    return SPECIAL_CHAR_REPLACEMENTS.get(value)


def starts_with_digit(name: str) -> bool:
    return bool(name) and name[0].isdigit()


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert an already sanitized name to the target case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return underscore(name)
    elif target_case == NamingCase.CAMEL_CASE:
        return camelize(underscore(name), lower_first=True)
    elif target_case == NamingCase.PASCAL_CASE:
        return camelize(underscore(name))
    elif target_case == NamingCase.SCREAMING_SNAKE:
        return underscore(name).upper()
    else:
        return name


class ReservedWordGuard:
    """
    Immutable reserved word table with its escaping rule.

    The word set is matched case-insensitively, so ``Import`` collides
    with ``import``. Keys of ``mappings`` are reserved too and escape to
    their mapped value.
    """

    def __init__(
        self,
        words: Iterable[str],
        mappings: Optional[Mapping[str, str]] = None,
        suffix: str = "_",
    ):
        """
        Build and verify the table.

        Args:
            words: Reserved words (keywords, builtin types, framework words)
            mappings: Explicit replacement for a reserved name
            suffix: Character appended by escape()

        Raises:
            ConfigError: If the suffix is empty or a reserved word starts or
                ends with the suffix (an escaped name would collide with
                the table again).
            InvalidMappingError: If a replacement is empty.
        """
        if not suffix:
            raise ConfigError("Escape suffix cannot be empty")

        frozen = frozenset(word.lower() for word in words)
        clashing = sorted(w for w in frozen if w.startswith(suffix) or w.endswith(suffix))
        if clashing:
            raise ConfigError(
                f"Reserved words clash with escape suffix '{suffix}': {', '.join(clashing)}"
            )

        for name, mapped in (mappings or {}).items():
            if not mapped:
                raise InvalidMappingError(name, "override value is empty")

        self._words = frozen
        self._mappings: Mapping[str, str] = MappingProxyType(dict(mappings or {}))
        self.suffix = suffix

    @property
    def words(self) -> frozenset:
        return self._words

    @property
    def mappings(self) -> Mapping[str, str]:
        return self._mappings

    def is_reserved(self, name: Optional[str]) -> bool:
        if not name:
            return False
        return name.lower() in self._words or name in self._mappings

    def escape(self, name: str) -> str:
        """Escape a reserved name, the configured replacement winning."""
        if name in self._mappings:
            return self._mappings[name]
        return camelize(name) + self.suffix

    def __contains__(self, name: str) -> bool:
        return self.is_reserved(name)

    def __len__(self) -> int:
        return len(self._words)


def lookup_override(table: Mapping[str, str], key: Optional[str]) -> Optional[str]:
    """
    Return the override for ``key`` or None when there is none.

    Raises:
        InvalidMappingError: If the entry exists but is empty.
    """
    if key is None or key not in table:
        return None
    value = table[key]
    if not value:
        raise InvalidMappingError(key, "override value is empty")
    return value

