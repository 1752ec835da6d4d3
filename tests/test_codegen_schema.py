"""Tests for schema file parsing."""
import tempfile
from pathlib import Path

import pytest

from payrex.codegen.errors import AnnotationError, SchemaError
from payrex.codegen.schema import load_module, load_schemas, parse_options, parse_struct
from payrex.codegen.utils import parse_type, to_enum_member

SCHEMA = """\
module: widgets
doc: Widget models.
imports:
  payrex.types.ids: [CustomerId]

enums:
  - name: WidgetStatus
    doc: The status of a Widget.
    values:
      - {value: active, doc: Widget is active.}
      - in_transit

structs:
  - name: Widget
    doc: A widget.
    options: {timestamp: true, optional: true, description: refund}
    fields:
      - name: id
        type: CustomerId
        doc: Unique identifier.
      - name: label
        type: Optional[str]
        doc: Label of the widget.
        description: Sets the label.
      - name: widget_type
        type: str
        rename: type
"""


def write_schema(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_module_parses_structs_enums_and_options():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_schema(Path(temp_dir), "widgets.yaml", SCHEMA)
        module = load_module(path)

    assert module.name == "widgets"
    assert module.source == "widgets.yaml"
    assert module.imports == {"payrex.types.ids": ["CustomerId"]}

    enum = module.enums[0]
    assert [v.value for v in enum.values] == ["active", "in_transit"]
    assert enum.values[1].doc == ""

    struct = module.structs[0]
    assert struct.options.timestamp and struct.options.optional
    assert struct.options.description == "refund"
    assert not struct.options.amount
    assert [f.name for f in struct.fields] == ["id", "label", "widget_type"]

    label = struct.fields[1]
    assert label.is_optional
    assert label.omit_if_none
    assert label.description == "Sets the label."
    assert struct.fields[2].rename == "type"
    assert not struct.fields[2].omit_if_none


def test_load_schemas_is_sorted_by_file_name():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        write_schema(temp_path, "zeta.yaml", "module: zeta\ndoc: Z.\n")
        write_schema(temp_path, "alpha.yaml", "module: alpha\ndoc: A.\n")
        modules = load_schemas(temp_path)
    assert [m.name for m in modules] == ["alpha", "zeta"]


def test_invalid_yaml_is_a_schema_error():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_schema(Path(temp_dir), "broken.yaml", "structs: [\n")
        with pytest.raises(SchemaError):
            load_module(path)


def test_unknown_option_is_rejected():
    with pytest.raises(AnnotationError) as exc_info:
        parse_options({"timestamps": True}, "Widget")
    assert "timestamps" in str(exc_info.value)


def test_non_bool_switch_is_rejected():
    with pytest.raises(AnnotationError):
        parse_options({"metadata": "yes"}, "Widget")


def test_non_string_description_switch_is_rejected():
    with pytest.raises(AnnotationError):
        parse_options({"description": True}, "Widget")


def test_options_must_be_a_mapping():
    with pytest.raises(AnnotationError):
        parse_options(["timestamp"], "Widget")


def test_struct_without_named_fields_is_rejected():
    with pytest.raises(SchemaError) as exc_info:
        parse_struct({"name": "Pair", "fields": {"0": "str"}})
    assert "named fields" in str(exc_info.value)

    with pytest.raises(SchemaError):
        parse_struct({"name": "Pair", "fields": [{"type": "str"}]})


def test_duplicate_field_is_rejected():
    with pytest.raises(SchemaError):
        parse_struct({
            "name": "Widget",
            "fields": [{"name": "id", "type": "str"}, {"name": "id", "type": "int"}],
        })


def test_unknown_field_key_is_rejected():
    with pytest.raises(SchemaError):
        parse_struct({"name": "Widget", "fields": [{"name": "id", "type": "str", "optional": True}]})


@pytest.mark.parametrize("key,value", [("description", 5), ("doc", ["a"]), ("rename", True)])
def test_non_string_field_text_is_rejected(key, value):
    with pytest.raises(SchemaError) as exc_info:
        parse_struct({"name": "Widget", "fields": [{"name": "label", "type": "Optional[str]", key: value}]})
    assert key in str(exc_info.value)


@pytest.mark.parametrize("raw", [
    {"name": "Widget", "builder": "false", "fields": []},
    {"name": "Widget", "fields": [{"name": "label", "type": "Optional[str]", "omit_if_none": "no"}]},
    {"name": "Widget", "fields": [{"name": "page", "type": "ListParams", "flatten": 1}]},
])
def test_non_bool_struct_and_field_flags_are_rejected(raw):
    with pytest.raises(SchemaError) as exc_info:
        parse_struct(raw)
    assert "true or false" in str(exc_info.value)


def test_parse_type_nested():
    type_ref = parse_type("Optional[Dict[str, List[EventType]]]")
    assert type_ref.is_optional
    assert str(type_ref) == "Optional[Dict[str, List[EventType]]]"
    assert str(type_ref.inner.args[1]) == "List[EventType]"


@pytest.mark.parametrize("text", ["", "Optional[", "List[str]]", "Optional[]", "Dict[str,, int", "1abc"])
def test_parse_type_rejects_malformed_text(text):
    with pytest.raises(SchemaError):
        parse_type(text)


def test_enum_member_names():
    assert to_enum_member("in_transit") == "IN_TRANSIT"
    assert to_enum_member("billing_statement.created") == "BILLING_STATEMENT_CREATED"
    assert to_enum_member("PHP") == "PHP"
