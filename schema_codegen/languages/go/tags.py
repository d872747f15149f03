"""
Go struct tag composition.

Builds the tag literal placed after a struct field, e.g.

    `json:"name,omitempty" xml:"name" validate:"regexp=^[a-z]+$"`
"""

import re
from typing import Optional

from ...core.schema import FieldDescriptor

RAW_DELIMITER = "`"

_PATTERN_DELIMITERS = re.compile(r"^/|/$")


def escape_pattern(pattern: str) -> str:
    """Double backslashes and drop the ``/.../`` delimiters of a pattern."""
    return _PATTERN_DELIMITERS.sub("", pattern.replace("\\", "\\\\"))


def pattern_directive(pattern: str) -> str:
    return f'validate:"regexp={escape_pattern(pattern)}"'


def wrap_tag(tag: str) -> str:
    """
    Wrap tag content in a Go string literal.

    A raw string is used unless the content itself holds a backtick, in
    which case an interpreted string is produced with backslashes,
    quotes and newlines escaped.
    """
    if RAW_DELIMITER not in tag:
        return RAW_DELIMITER + tag + RAW_DELIMITER

    escaped = tag.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def compose_tag_content(
    field: FieldDescriptor,
    with_xml: bool = False,
    with_validate: bool = True,
    custom_tag: Optional[str] = None,
) -> str:
    """
    Compose the directives of a field tag, unwrapped.

    Args:
        field: The field to describe
        with_xml: Emit an ``xml`` directive next to ``json``
        with_validate: Emit the pattern ``validate`` directive
        custom_tag: Replaces ``field.custom_tag`` when given

    Returns:
        Space separated directives in fixed order
    """
    tag = f'json:"{field.base_name}'
    if not field.required:
        tag += ",omitempty"
    tag += '"'

    if with_xml:
        tag += f' xml:"{field.base_name}'
        if field.is_xml_attribute:
            tag += ",attr"
        tag += '"'

    if with_validate and field.pattern is not None:
        tag += " " + pattern_directive(field.pattern)

    fragment = custom_tag if custom_tag is not None else field.custom_tag
    if fragment:
        tag += " " + fragment

    return tag


def compose_tag(
    field: FieldDescriptor,
    with_xml: bool = False,
    with_validate: bool = True,
    custom_tag: Optional[str] = None,
) -> str:
    """Compose and wrap the struct tag of a field."""
    return wrap_tag(compose_tag_content(field, with_xml, with_validate, custom_tag))
