"""Utility functions for model generation."""
import re
from typing import List, Optional

from payrex.codegen.errors import SchemaError
from payrex.codegen.types import TypeRef


_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


def parse_type(text: str) -> TypeRef:
    """
    Parse a type written in typing syntax into a TypeRef.

    Args:
        text: Type text such as ``Optional[List[EventType]]``

    Returns:
        Parsed TypeRef

    Raises:
        SchemaError: If the text is not a well-formed type reference
    """
    if not isinstance(text, str) or not text.strip():
        raise SchemaError(f"Invalid type reference: {text!r}")
    text = text.strip()

    bracket = text.find("[")
    if bracket == -1:
        if not _NAME_RE.match(text):
            raise SchemaError(f"Invalid type name: {text!r}")
        return TypeRef(name=text)

    if not text.endswith("]"):
        raise SchemaError(f"Unbalanced brackets in type: {text!r}")
    name = text[:bracket].strip()
    if not _NAME_RE.match(name):
        raise SchemaError(f"Invalid type name: {name!r}")

    args = [parse_type(part) for part in _split_args(text[bracket + 1:-1], text)]
    if not args:
        raise SchemaError(f"Empty type arguments in: {text!r}")
    return TypeRef(name=name, args=tuple(args))


def _split_args(body: str, original: str) -> List[str]:
    """Split a bracket body on top-level commas."""
    parts = []
    depth = 0
    current = []
    for char in body:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                raise SchemaError(f"Unbalanced brackets in type: {original!r}")
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if depth != 0:
        raise SchemaError(f"Unbalanced brackets in type: {original!r}")
    parts.append("".join(current))
    return [part for part in parts if part.strip()]


def is_type(type_ref: TypeRef, name: str) -> bool:
    """Check whether the last segment of a type's name equals `name`."""
    return type_ref.name.rsplit(".", 1)[-1] == name


def get_optional_inner(type_ref: TypeRef) -> Optional[TypeRef]:
    """Return the type inside ``Optional[...]``, or None if not optional."""
    return type_ref.inner


def wrap_optional(type_ref: TypeRef) -> TypeRef:
    """Wrap a type in Optional unless it already is."""
    if type_ref.is_optional:
        return type_ref
    return TypeRef(name="Optional", args=(type_ref,))


def to_enum_member(value: str) -> str:
    """Convert a wire value such as ``in_transit`` to an enum member name."""
    member = re.sub(r"[^A-Za-z0-9]+", "_", value).strip("_").upper()
    if not member or member[0].isdigit():
        member = f"V_{member}"
    return member
