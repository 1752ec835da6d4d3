"""Orchestrator for model generation."""
import logging
from pathlib import Path
from typing import List

from payrex.codegen.builders import synthesize_builder
from payrex.codegen.errors import GenerationError
from payrex.codegen.fields import expand_struct
from payrex.codegen.render import render_module
from payrex.codegen.schema import load_schemas
from payrex.codegen.types import GeneratedFile, ModuleSpec
from payrex.codegen.writer import write_files

log = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schemas"
MODELS_DIR = Path(__file__).parent.parent / "models"


def generate_module(module: ModuleSpec) -> GeneratedFile:
    """Expand, synthesize and render a single schema module."""
    expanded = [expand_struct(struct) for struct in module.structs]

    names = [struct.name for struct in expanded]
    names += [struct.mirror.name for struct in expanded if struct.mirror is not None]
    names += [enum.name for enum in module.enums]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise GenerationError(f"{module.source}: duplicate type names {duplicates}")

    builders = {
        struct.name: synthesize_builder(struct)
        for struct in expanded
        if struct.builder
    }
    log.info(
        "Generated %s.py from %s (%d structs, %d builders)",
        module.name, module.source, len(expanded), len(builders),
    )
    return GeneratedFile(
        path=f"{module.name}.py",
        content=render_module(module, expanded, builders),
    )


def generate_models(
    schema_dir: Path = SCHEMA_DIR,
    out_dir: Path = MODELS_DIR,
    write: bool = True,
) -> List[GeneratedFile]:
    """
    Generate model modules from schema files.

    Args:
        schema_dir: Directory containing ``*.yaml`` schema files
        out_dir: Output directory for generated modules
        write: When False, render only and leave the output directory untouched

    Returns:
        List of GeneratedFile objects
    """
    modules = load_schemas(schema_dir)
    log.debug("Loaded %d schema files from %s", len(modules), schema_dir)

    files = [generate_module(module) for module in modules]

    if write:
        write_files(files, out_dir)
        log.info("Wrote %d model modules to %s", len(files), out_dir)

    return files
