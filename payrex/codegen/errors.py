"""Errors raised while generating model code."""


class CodegenError(Exception):
    """Base class for model generation failures."""


class SchemaError(CodegenError):
    """A schema file or struct definition has an unsupported shape."""


class AnnotationError(CodegenError):
    """A struct's option switches could not be parsed."""


class GenerationError(CodegenError):
    """Builder synthesis hit a field it cannot generate code for."""


def unsupported_struct(struct_name: str) -> str:
    """Return message for a struct without a named field list."""
    return f"Struct '{struct_name}': only structs with named fields are supported"


def setter_on_required_field(struct_name: str, field_name: str, type_text: str) -> str:
    """Return message for a setter-routed field that is not Optional."""
    return (
        f"Struct '{struct_name}': field '{field_name}' has a setter description "
        f"but its type '{type_text}' is not Optional"
    )
