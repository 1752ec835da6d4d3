"""Tests for the generation pipeline and the checked-in schema set."""
import tempfile
from pathlib import Path

import pytest

from payrex.codegen.errors import GenerationError, SchemaError
from payrex.codegen.generator import SCHEMA_DIR, generate_models
from payrex.codegen.writer import find_stale_files

SCHEMA = """\
module: gizmos
doc: Gizmo models.
structs:
  - name: Gizmo
    doc: A gizmo.
    options: {timestamp: true}
    fields:
      - name: id
        type: str
"""

EXPECTED_MODULES = [
    "billing_statement_line_items.py",
    "billing_statements.py",
    "checkout_sessions.py",
    "customers.py",
    "events.py",
    "payment_intents.py",
    "payments.py",
    "payouts.py",
    "refunds.py",
    "webhooks.py",
]


def test_generate_models_writes_files_and_check_detects_staleness():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        schema_dir = temp_path / "schemas"
        schema_dir.mkdir()
        (schema_dir / "gizmos.yaml").write_text(SCHEMA, encoding="utf-8")
        out_dir = temp_path / "models"

        files = generate_models(schema_dir, out_dir)

        assert [f.path for f in files] == ["gizmos.py"]
        written = (out_dir / "gizmos.py").read_text(encoding="utf-8")
        assert written == files[0].content
        assert "class Gizmo(PayrexModel):" in written
        assert find_stale_files(files, out_dir) == []

        (out_dir / "gizmos.py").write_text(written + "# edited\n", encoding="utf-8")
        assert find_stale_files(files, out_dir) == ["gizmos.py"]

        (out_dir / "gizmos.py").unlink()
        assert find_stale_files(files, out_dir) == ["gizmos.py"]


def test_generate_models_without_write_leaves_output_untouched():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        schema_dir = temp_path / "schemas"
        schema_dir.mkdir()
        (schema_dir / "gizmos.yaml").write_text(SCHEMA, encoding="utf-8")
        out_dir = temp_path / "models"

        generate_models(schema_dir, out_dir, write=False)

        assert not out_dir.exists()


def test_duplicate_type_names_are_rejected():
    schema = SCHEMA + """\
  - name: OptionalGadget
    doc: Clashes with the mirror below.
    fields: []
  - name: Gadget
    doc: A gadget.
    options: {optional: true}
    fields: []
"""
    with tempfile.TemporaryDirectory() as temp_dir:
        schema_dir = Path(temp_dir)
        (schema_dir / "gizmos.yaml").write_text(schema, encoding="utf-8")
        with pytest.raises(GenerationError) as exc_info:
            generate_models(schema_dir, schema_dir / "out", write=False)
    assert "OptionalGadget" in str(exc_info.value)


@pytest.mark.parametrize("options,declared", [
    ("{amount: true}", "{name: amount, type: int}"),
    ("{description: refund}", "{name: description, type: 'Optional[str]'}"),
])
def test_declared_field_clashing_with_canonical_field_is_rejected(options, declared):
    schema = f"""\
module: things
structs:
  - name: CreateThing
    options: {options}
    builder: true
    fields:
      - {declared}
"""
    with tempfile.TemporaryDirectory() as temp_dir:
        schema_dir = Path(temp_dir)
        (schema_dir / "things.yaml").write_text(schema, encoding="utf-8")
        with pytest.raises(SchemaError) as exc_info:
            generate_models(schema_dir, schema_dir / "out", write=False)
    assert "CreateThing" in str(exc_info.value)
    assert "clashes" in str(exc_info.value)


def test_generation_logs_each_module(caplog):
    with tempfile.TemporaryDirectory() as temp_dir:
        schema_dir = Path(temp_dir)
        (schema_dir / "gizmos.yaml").write_text(SCHEMA, encoding="utf-8")
        with caplog.at_level("INFO", logger="payrex.codegen.generator"):
            generate_models(schema_dir, schema_dir / "out", write=False)
    assert "Generated gizmos.py from gizmos.yaml" in caplog.text


def test_bundled_schemas_render_valid_python():
    files = generate_models(SCHEMA_DIR, write=False)

    assert sorted(f.path for f in files) == EXPECTED_MODULES
    for file in files:
        compile(file.content, file.path, "exec")


def test_bundled_schemas_emit_optional_mirrors():
    files = {f.path: f.content for f in generate_models(SCHEMA_DIR, write=False)}

    assert "class OptionalCustomer(PayrexModel):" in files["customers.py"]
    assert "class OptionalPaymentIntent(PayrexModel):" in files["payment_intents.py"]
    assert "from payrex.models.customers import OptionalCustomer" in files["billing_statements.py"]
