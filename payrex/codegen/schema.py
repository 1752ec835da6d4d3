"""Schema file loading for model generation."""
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from payrex.codegen.errors import AnnotationError, SchemaError, unsupported_struct
from payrex.codegen.types import (
    AnnotationOptions,
    EnumSpec,
    EnumValue,
    FieldSpec,
    ModuleSpec,
    StructSpec,
)
from payrex.codegen.utils import parse_type


BOOL_SWITCHES = ("timestamp", "metadata", "amount", "livemode", "currency", "optional")
FIELD_KEYS = {"name", "type", "doc", "description", "omit_if_none", "rename", "flatten"}


def parse_options(raw: Any, struct_name: str = "") -> AnnotationOptions:
    """
    Validate a struct's ``options`` mapping.

    Args:
        raw: Mapping read from the schema file (None means no switches)
        struct_name: Used in error messages

    Returns:
        AnnotationOptions

    Raises:
        AnnotationError: On unknown switch names or wrongly typed values
    """
    if raw is None:
        return AnnotationOptions()
    if not isinstance(raw, Mapping):
        raise AnnotationError(f"Struct '{struct_name}': options must be a mapping, got {type(raw).__name__}")

    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in BOOL_SWITCHES:
            if not isinstance(value, bool):
                raise AnnotationError(f"Struct '{struct_name}': option '{key}' must be true or false, got {value!r}")
            values[key] = value
        elif key == "description":
            if not isinstance(value, str):
                raise AnnotationError(f"Struct '{struct_name}': option 'description' must be a string, got {value!r}")
            values[key] = value
        else:
            raise AnnotationError(f"Struct '{struct_name}': unknown option '{key}'")
    return AnnotationOptions(**values)


def _flag(raw: Mapping[str, Any], key: str, default: bool, where: str) -> bool:
    """Read a boolean key, rejecting strings such as ``"false"``."""
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise SchemaError(f"{where}: '{key}' must be true or false, got {value!r}")
    return value


def _text(raw: Mapping[str, Any], key: str, where: str) -> Optional[str]:
    """Read an optional string key."""
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise SchemaError(f"{where}: '{key}' must be a string, got {value!r}")
    return value


def parse_field(raw: Any, struct_name: str) -> FieldSpec:
    """Parse one field mapping."""
    if not isinstance(raw, Mapping) or not raw.get("name"):
        raise SchemaError(unsupported_struct(struct_name))
    unknown = set(raw) - FIELD_KEYS
    if unknown:
        raise SchemaError(f"Struct '{struct_name}': field '{raw['name']}' has unknown keys {sorted(unknown)}")
    if "type" not in raw:
        raise SchemaError(f"Struct '{struct_name}': field '{raw['name']}' has no type")

    type_ref = parse_type(raw["type"])
    where = f"Struct '{struct_name}': field '{raw['name']}'"
    return FieldSpec(
        name=str(raw["name"]),
        type=type_ref,
        doc=(_text(raw, "doc", where) or "").strip(),
        description=_text(raw, "description", where),
        omit_if_none=_flag(raw, "omit_if_none", type_ref.is_optional, where),
        rename=_text(raw, "rename", where),
        flatten=_flag(raw, "flatten", False, where),
    )


def parse_struct(raw: Mapping[str, Any]) -> StructSpec:
    """Parse one struct mapping; structs without a named field list are rejected."""
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Struct definition must be a mapping, got {raw!r}")
    name = raw.get("name")
    if not name:
        raise SchemaError("Struct definition without a name")
    fields_raw = raw.get("fields", [])
    if not isinstance(fields_raw, list):
        raise SchemaError(unsupported_struct(name))

    fields = tuple(parse_field(item, name) for item in fields_raw)
    seen = set()
    for spec in fields:
        if spec.name in seen:
            raise SchemaError(f"Struct '{name}': duplicate field '{spec.name}'")
        seen.add(spec.name)

    return StructSpec(
        name=name,
        doc=(_text(raw, "doc", f"Struct '{name}'") or "").strip(),
        fields=fields,
        options=parse_options(raw.get("options"), name),
        builder=_flag(raw, "builder", False, f"Struct '{name}'"),
    )


def parse_enum(raw: Mapping[str, Any]) -> EnumSpec:
    """Parse one enum mapping."""
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Enum definition must be a mapping, got {raw!r}")
    name = raw.get("name")
    values_raw = raw.get("values")
    if not name or not isinstance(values_raw, list) or not values_raw:
        raise SchemaError(f"Enum '{name}' needs a name and a non-empty list of values")
    values = []
    for item in values_raw:
        if isinstance(item, str):
            values.append(EnumValue(value=item))
        elif isinstance(item, Mapping) and item.get("value"):
            values.append(EnumValue(value=str(item["value"]), doc=(item.get("doc") or "").strip()))
        else:
            raise SchemaError(f"Enum '{name}': invalid value entry {item!r}")
    return EnumSpec(name=name, doc=(raw.get("doc") or "").strip(), values=tuple(values))


def load_module(path: Path) -> ModuleSpec:
    """
    Load a schema file.

    Args:
        path: Path to a ``.yaml`` schema file

    Returns:
        ModuleSpec for the file
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaError(f"{path.name}: invalid YAML: {e}") from e

    if not isinstance(data, Mapping):
        raise SchemaError(f"{path.name}: expected a mapping at the top level")

    imports = data.get("imports") or {}
    if not isinstance(imports, Mapping) or not all(isinstance(v, list) for v in imports.values()):
        raise SchemaError(f"{path.name}: imports must map module names to lists of names")

    return ModuleSpec(
        name=data.get("module") or path.stem,
        doc=(data.get("doc") or "").strip(),
        imports={str(k): [str(n) for n in v] for k, v in imports.items()},
        enums=tuple(parse_enum(item) for item in data.get("enums") or []),
        structs=tuple(parse_struct(item) for item in data.get("structs") or []),
        source=path.name,
    )


def load_schemas(schema_dir: Path) -> List[ModuleSpec]:
    """Load every schema file in a directory, sorted by file name."""
    return [load_module(path) for path in sorted(schema_dir.glob("*.yaml"))]
