"""Tests for rendering model modules and using the rendered code."""
import tempfile
from pathlib import Path

from payrex.codegen.generator import generate_module
from payrex.codegen.render import render_docstring, render_field
from payrex.codegen.schema import load_module
from payrex.codegen.types import FieldSpec
from payrex.codegen.utils import parse_type

SCHEMA = """\
module: gadgets
doc: Gadget models.
imports:
  payrex.types.common: [Currency, Metadata, Timestamp]
  payrex.types.ids: [CustomerId]
  payrex.types.pagination: [ListParams]

enums:
  - name: GadgetStatus
    doc: The status of a Gadget.
    values:
      - {value: active, doc: Gadget is active.}
      - {value: in_transit, doc: Gadget is on its way.}

structs:
  - name: Gadget
    doc: A gadget owned by a customer.
    options: {optional: true, timestamp: true, livemode: true}
    fields:
      - name: id
        type: CustomerId
        doc: Unique identifier.
      - name: email
        type: Optional[str]
        doc: Contact e-mail.
      - name: gadget_type
        type: str
        rename: type
        doc: Kind of gadget.

  - name: CreateGadget
    doc: Query parameters when creating a gadget.
    options: {amount: true, currency: true, metadata: true, description: refund}
    builder: true
    fields:
      - name: name
        type: str
        doc: Name of the gadget.
      - name: status
        type: Optional[GadgetStatus]
        doc: Initial status.
        description: Sets the initial status.

  - name: GadgetListParams
    doc: Query parameters when listing gadgets.
    builder: true
    fields:
      - name: list_params
        type: ListParams
        flatten: true
        doc: Baseline pagination fields.
      - name: name
        type: Optional[str]
        doc: Search by name.
        description: Sets the name filter.
"""


def render_schema() -> str:
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "gadgets.yaml"
        path.write_text(SCHEMA, encoding="utf-8")
        return generate_module(load_module(path)).content


def load_rendered():
    namespace = {}
    exec(compile(render_schema(), "gadgets.py", "exec"), namespace)
    return namespace


def test_rendered_module_layout():
    content = render_schema()
    lines = content.split("\n")

    assert lines[0] == "# Code generated by scripts/generate_models.py from gadgets.yaml. DO NOT EDIT."
    assert lines[1] == '"""Gadget models."""'
    assert "from enum import Enum" in content
    assert "from typing import Annotated, List, Optional" not in content
    assert "from typing import Annotated, Optional" in content
    assert "from pydantic import Field" in content
    assert "from payrex.types.base import Flatten, OmitIfNone, PayrexModel" in content
    assert "class GadgetStatus(str, Enum):" in content
    assert '    IN_TRANSIT = "in_transit"' in content
    assert "class OptionalGadget(PayrexModel):" in content
    assert content.index("class Gadget(PayrexModel):") < content.index("class OptionalGadget(PayrexModel):")
    assert "    email: Annotated[Optional[str], OmitIfNone()] = None" in content
    assert '    gadget_type: str = Field(alias="type")' in content
    assert '    gadget_type: Annotated[Optional[str], OmitIfNone()] = Field(default=None, alias="type")' in content
    assert "    list_params: Annotated[ListParams, Flatten()] = Field(default_factory=ListParams)" in content
    assert content.endswith("\n")


def test_rendered_builder_methods():
    content = render_schema()

    assert '    def new(cls, name: object, amount: int, currency: Currency) -> "CreateGadget":' in content
    assert "        return cls(name=str(name), amount=amount, currency=currency)" in content
    assert '    def with_status(self, status: GadgetStatus) -> "CreateGadget":' in content
    assert '    def with_description(self, description: object) -> "CreateGadget":' in content
    assert "        self.description = str(description)" in content
    assert '    def new(cls) -> "GadgetListParams":' in content
    assert "with_list_params" not in content
    assert "def new" not in content[content.index("class Gadget("):content.index("class CreateGadget(")]


def test_rendered_module_builds_requests():
    ns = load_rendered()
    CreateGadget = ns["CreateGadget"]
    GadgetStatus = ns["GadgetStatus"]

    params = (
        CreateGadget.new("Widget", 2000, "PHP")
        .with_status(GadgetStatus.ACTIVE)
        .with_metadata({"order_id": "o_1"})
    )

    assert params.model_dump(mode="json") == {
        "name": "Widget",
        "status": "active",
        "amount": 2000,
        "metadata": {"order_id": "o_1"},
        "currency": "PHP",
    }


def test_rendered_constructor_converts_to_str():
    ns = load_rendered()
    params = ns["CreateGadget"].new(12345, 2000, "PHP")
    assert params.name == "12345"


def test_rendered_mirror_accepts_partial_payload():
    ns = load_rendered()
    partial = ns["OptionalGadget"].model_validate({"id": "cus_1", "type": "box"})

    assert partial.id == "cus_1"
    assert partial.gadget_type == "box"
    assert partial.created_at is None
    assert partial.model_dump(by_alias=True) == {"id": "cus_1", "type": "box"}


def test_rendered_list_params_flatten_on_the_wire():
    ns = load_rendered()
    params = ns["GadgetListParams"].new().with_name("lamp")
    params.list_params.with_limit(500)

    assert params.model_dump() == {"limit": 100, "name": "lamp"}


def test_render_docstring_multiline_and_quotes():
    assert render_docstring('Ends with "quote"', "    ") == ['    """Ends with "quote\\""""']
    assert render_docstring("First line.\n\nSecond paragraph.", "    ") == [
        '    """First line.',
        "",
        "    Second paragraph.",
        '    """',
    ]
    assert render_docstring("", "    ") == []


def test_render_field_without_doc():
    spec = FieldSpec(name="count", type=parse_type("int"))
    assert render_field(spec) == ["    count: int"]
