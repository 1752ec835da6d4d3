"""Source rendering for generated model modules (template-free, like the rest of the generators)."""
from typing import Dict, Iterable, List, Optional, Sequence, Set

from payrex.codegen.builders import PAGINATION_TYPE
from payrex.codegen.types import (
    BuilderMethods,
    ConstructorSignature,
    EnumSpec,
    ExpandedStruct,
    FieldSpec,
    ModuleSpec,
    SetterMethod,
    StructSpec,
    TypeRef,
)
from payrex.codegen.utils import is_type, to_enum_member


BANNER = "# Code generated by scripts/generate_models.py from {source}. DO NOT EDIT."
TYPING_NAMES = ("Annotated", "Any", "Dict", "List", "Optional")
BASE_MODULE = "payrex.types.base"
INDENT = "    "


def render_docstring(text: str, indent: str) -> List[str]:
    """Render `text` as a docstring block at the given indentation."""
    if not text:
        return []
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    lines = text.split("\n")
    if len(lines) == 1:
        if text.endswith('"'):
            text = text[:-1] + '\\"'
        return [f'{indent}"""{text}"""']
    out = [f'{indent}"""{lines[0]}']
    for line in lines[1:]:
        out.append(f"{indent}{line}" if line else "")
    out.append(f'{indent}"""')
    return out


def render_annotation(spec: FieldSpec) -> str:
    """Render a field's annotation, including serialization markers."""
    annotation = str(spec.type)
    markers = []
    if spec.omit_if_none:
        markers.append("OmitIfNone()")
    if spec.flatten:
        markers.append("Flatten()")
    if markers:
        return f"Annotated[{annotation}, {', '.join(markers)}]"
    return annotation


def render_default(spec: FieldSpec) -> Optional[str]:
    """Render a field's default, or None when the field is required."""
    if spec.rename:
        if spec.is_optional:
            return f'Field(default=None, alias="{spec.rename}")'
        return f'Field(alias="{spec.rename}")'
    if spec.is_optional:
        return "None"
    if is_type(spec.type, PAGINATION_TYPE):
        return f"Field(default_factory={spec.type})"
    return None


def render_field(spec: FieldSpec) -> List[str]:
    """Render one field declaration followed by its attribute docstring."""
    line = f"{INDENT}{spec.name}: {render_annotation(spec)}"
    default = render_default(spec)
    if default is not None:
        line += f" = {default}"
    return [line] + render_docstring(spec.doc, INDENT)


def render_constructor(struct_name: str, constructor: ConstructorSignature) -> List[str]:
    """Render the ``new(...)`` classmethod."""
    args = ["cls"]
    kwargs = []
    for param in constructor.params:
        if param.converts_to_str:
            args.append(f"{param.name}: object")
            kwargs.append(f"{param.name}=str({param.name})")
        else:
            args.append(f"{param.name}: {param.type}")
            kwargs.append(f"{param.name}={param.name}")
    lines = [
        f"{INDENT}@classmethod",
        f'{INDENT}def new({", ".join(args)}) -> "{struct_name}":',
    ]
    lines += render_docstring(constructor.doc, INDENT * 2)
    lines.append(f"{INDENT * 2}return cls({', '.join(kwargs)})")
    return lines


def render_setter(struct_name: str, setter: SetterMethod) -> List[str]:
    """Render one fluent ``with_<field>`` setter."""
    if setter.converts_to_str:
        param_type = "object"
        value = f"str({setter.name})"
    else:
        param_type = str(setter.type)
        value = setter.name
    lines = [f'{INDENT}def {setter.method_name}(self, {setter.name}: {param_type}) -> "{struct_name}":']
    lines += render_docstring(setter.doc, INDENT * 2)
    lines.append(f"{INDENT * 2}self.{setter.name} = {value}")
    lines.append(f"{INDENT * 2}return self")
    return lines


def render_enum(enum: EnumSpec) -> List[str]:
    """Render a string enum."""
    lines = [f"class {enum.name}(str, Enum):"]
    lines += render_docstring(enum.doc, INDENT)
    if enum.doc:
        lines.append("")
    for value in enum.values:
        lines.append(f'{INDENT}{to_enum_member(value.value)} = "{value.value}"')
        lines += render_docstring(value.doc, INDENT)
    return lines


def render_struct(
    name: str,
    doc: str,
    fields: Sequence[FieldSpec],
    builder: Optional[BuilderMethods] = None,
) -> List[str]:
    """Render a pydantic model class, with builder methods when given."""
    blocks: List[List[str]] = [render_field(spec) for spec in fields]
    if builder is not None:
        blocks.append(render_constructor(name, builder.constructor))
        blocks += [render_setter(name, setter) for setter in builder.setters]

    lines = [f"class {name}(PayrexModel):"]
    lines += render_docstring(doc, INDENT)
    if not blocks:
        if not doc:
            lines.append(f"{INDENT}pass")
        return lines
    for block in blocks:
        if len(lines) > 1:
            lines.append("")
        lines += block
    return lines


def _type_names(type_ref: TypeRef) -> Iterable[str]:
    yield type_ref.name
    for arg in type_ref.args:
        yield from _type_names(arg)


def render_imports(module: ModuleSpec, structs: Sequence[StructSpec]) -> List[str]:
    """Render only the imports the module's generated code uses."""
    names: Set[str] = set()
    omit = flatten = uses_field = False
    for struct in structs:
        for spec in struct.fields:
            names.update(_type_names(spec.type))
            omit = omit or spec.omit_if_none
            flatten = flatten or spec.flatten
            default = render_default(spec) or ""
            uses_field = uses_field or default.startswith("Field(")
    if omit or flatten:
        names.add("Annotated")

    lines = []
    if module.enums:
        lines.append("from enum import Enum")
    typing_names = [name for name in TYPING_NAMES if name in names]
    if typing_names:
        lines.append(f"from typing import {', '.join(typing_names)}")
    if lines:
        lines.append("")

    if uses_field:
        lines.append("from pydantic import Field")
        lines.append("")

    imports = dict(module.imports)
    if structs:
        base_names = []
        if flatten:
            base_names.append("Flatten")
        if omit:
            base_names.append("OmitIfNone")
        base_names.append("PayrexModel")
        imports[BASE_MODULE] = base_names
    for module_name in sorted(imports):
        lines.append(f"from {module_name} import {', '.join(imports[module_name])}")
    return lines


def render_module(
    module: ModuleSpec,
    expanded: Sequence[ExpandedStruct],
    builders: Dict[str, BuilderMethods],
) -> str:
    """
    Render a complete models module.

    Args:
        module: Parsed schema module
        expanded: Expanded structs, in schema order
        builders: Builder methods keyed by struct name (builder structs only)

    Returns:
        Python source text
    """
    rendered_structs: List[StructSpec] = []
    for struct in expanded:
        rendered_structs.append(StructSpec(name=struct.name, doc=struct.doc, fields=struct.fields))
        if struct.mirror is not None:
            rendered_structs.append(struct.mirror)

    lines = [BANNER.format(source=module.source or f"{module.name}.yaml")]
    lines += render_docstring(module.doc or f"{module.name} models.", "")
    lines += render_imports(module, rendered_structs)

    for enum in module.enums:
        lines += ["", ""]
        lines += render_enum(enum)

    for struct in expanded:
        lines += ["", ""]
        lines += render_struct(struct.name, struct.doc, struct.fields, builders.get(struct.name))
        if struct.mirror is not None:
            lines += ["", ""]
            lines += render_struct(struct.mirror.name, struct.mirror.doc, struct.mirror.fields)

    return "\n".join(lines) + "\n"
