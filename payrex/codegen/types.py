"""Dataclasses for model generation."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TypeRef:
    """A parsed type reference in typing syntax, e.g. ``Optional[List[str]]``."""
    name: str
    args: Tuple["TypeRef", ...] = ()

    @property
    def is_optional(self) -> bool:
        return self.name.rsplit(".", 1)[-1] == "Optional" and len(self.args) == 1

    @property
    def inner(self) -> Optional["TypeRef"]:
        """Type wrapped by ``Optional``, or None for non-optional types."""
        if self.is_optional:
            return self.args[0]
        return None

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}[{', '.join(str(arg) for arg in self.args)}]"


@dataclass(frozen=True)
class FieldSpec:
    """A single struct field as declared in a schema file."""
    name: str
    type: TypeRef
    doc: str = ""
    description: Optional[str] = None  # setter doc; presence routes the field to a setter
    omit_if_none: bool = False
    rename: Optional[str] = None  # wire name when it differs from `name`
    flatten: bool = False

    @property
    def is_optional(self) -> bool:
        return self.type.is_optional


@dataclass(frozen=True)
class AnnotationOptions:
    """Switches that select canonical fields for a struct."""
    timestamp: bool = False
    metadata: bool = False
    amount: bool = False
    livemode: bool = False
    currency: bool = False
    optional: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class StructSpec:
    """Struct definition before expansion."""
    name: str
    doc: str
    fields: Tuple[FieldSpec, ...]
    options: AnnotationOptions = AnnotationOptions()
    builder: bool = False


@dataclass(frozen=True)
class EnumValue:
    value: str
    doc: str = ""


@dataclass(frozen=True)
class EnumSpec:
    """String enum emitted alongside the structs of a module."""
    name: str
    doc: str
    values: Tuple[EnumValue, ...]


@dataclass(frozen=True)
class ModuleSpec:
    """One schema file: everything rendered into a single models module."""
    name: str
    doc: str
    imports: Dict[str, List[str]] = field(default_factory=dict)
    enums: Tuple[EnumSpec, ...] = ()
    structs: Tuple[StructSpec, ...] = ()
    source: str = ""  # schema path, recorded in the generated banner


@dataclass(frozen=True)
class ExpandedStruct:
    """Struct after canonical fields were appended."""
    name: str
    doc: str
    fields: Tuple[FieldSpec, ...]
    builder: bool = False
    mirror: Optional[StructSpec] = None


@dataclass(frozen=True)
class ConstructorParam:
    name: str
    type: TypeRef
    converts_to_str: bool = False


@dataclass(frozen=True)
class ConstructorSignature:
    """Positional parameters of the generated ``new(...)`` classmethod."""
    struct_name: str
    params: Tuple[ConstructorParam, ...]
    doc: str

    @property
    def is_empty(self) -> bool:
        return not self.params


@dataclass(frozen=True)
class SetterMethod:
    """Fluent setter for one optional field."""
    name: str  # field identifier
    type: TypeRef  # unwrapped inner type
    converts_to_str: bool
    doc: str

    @property
    def method_name(self) -> str:
        # Pydantic keeps field values in the instance dict, which would shadow
        # a method of the same name.
        return f"with_{self.name}"


@dataclass(frozen=True)
class FieldPartition:
    required: Tuple[FieldSpec, ...]
    setters: Tuple[FieldSpec, ...]
    excluded: Tuple[FieldSpec, ...]


@dataclass(frozen=True)
class BuilderMethods:
    constructor: ConstructorSignature
    setters: Tuple[SetterMethod, ...]


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
