"""Constructor and setter synthesis for builder structs."""
from typing import Sequence, Tuple

from payrex.codegen.errors import GenerationError, setter_on_required_field
from payrex.codegen.types import (
    BuilderMethods,
    ConstructorParam,
    ConstructorSignature,
    ExpandedStruct,
    FieldPartition,
    FieldSpec,
    SetterMethod,
)
from payrex.codegen.utils import get_optional_inner, is_type


PAGINATION_TYPE = "ListParams"
STRING_TYPE = "str"


def classify_fields(fields: Sequence[FieldSpec]) -> FieldPartition:
    """
    Split fields into constructor parameters, setters and pagination fields.

    A field with a description gets a setter. A pagination field is never a
    constructor parameter. Everything else becomes a positional parameter,
    in declaration order.
    """
    required, setters, excluded = [], [], []
    for spec in fields:
        if spec.description:
            setters.append(spec)
        elif is_type(spec.type, PAGINATION_TYPE):
            excluded.append(spec)
        else:
            required.append(spec)
    return FieldPartition(
        required=tuple(required),
        setters=tuple(setters),
        excluded=tuple(excluded),
    )


def build_constructor(struct_name: str, required: Sequence[FieldSpec]) -> ConstructorSignature:
    """Build the ``new(...)`` signature from the constructor-routed fields."""
    params = tuple(
        ConstructorParam(
            name=spec.name,
            type=spec.type,
            # exact `str` only; Optional[str] and str-based IDs pass through
            converts_to_str=not spec.type.args and is_type(spec.type, STRING_TYPE),
        )
        for spec in required
    )
    return ConstructorSignature(
        struct_name=struct_name,
        params=params,
        doc=f"Creates a new `{struct_name}` instance.",
    )


def build_setters(struct_name: str, fields: Sequence[FieldSpec]) -> Tuple[SetterMethod, ...]:
    """
    Build one fluent setter per setter-routed field.

    Raises:
        GenerationError: If a setter-routed field is not Optional
    """
    setters = []
    for spec in fields:
        inner = get_optional_inner(spec.type)
        if inner is None:
            raise GenerationError(setter_on_required_field(struct_name, spec.name, str(spec.type)))
        setters.append(SetterMethod(
            name=spec.name,
            type=inner,
            converts_to_str=not inner.args and is_type(inner, STRING_TYPE),
            doc=spec.description,
        ))
    return tuple(setters)


def synthesize_builder(struct: ExpandedStruct) -> BuilderMethods:
    """Synthesize the constructor and setters for an expanded struct."""
    partition = classify_fields(struct.fields)
    return BuilderMethods(
        constructor=build_constructor(struct.name, partition.required),
        setters=build_setters(struct.name, partition.setters),
    )
