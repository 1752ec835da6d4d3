"""Regenerate payrex/models from the YAML schema files.

Usage:
    python scripts/generate_models.py            # rewrite payrex/models
    python scripts/generate_models.py --check    # exit 1 if any model is stale
"""
import argparse
import logging
import sys
from pathlib import Path

from payrex.codegen.errors import CodegenError
from payrex.codegen.generator import MODELS_DIR, SCHEMA_DIR, generate_models
from payrex.codegen.writer import find_stale_files
from payrex.core.config import settings
from payrex.core.logging import configure_logging

log = logging.getLogger("generate_models")


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate PayRex model modules from schema files.")
    parser.add_argument("--schemas", type=Path, default=SCHEMA_DIR, help="directory of *.yaml schema files")
    parser.add_argument("--out", type=Path, default=MODELS_DIR, help="output directory for model modules")
    parser.add_argument("--check", action="store_true", help="only report stale modules; do not write")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    try:
        files = generate_models(args.schemas, args.out, write=not args.check)
    except CodegenError as e:
        log.error("Model generation failed: %s", e)
        return 2

    if args.check:
        stale = find_stale_files(files, args.out)
        for path in stale:
            log.error("Stale model module: %s", path)
        if stale:
            log.error("Run scripts/generate_models.py to regenerate %d module(s)", len(stale))
            return 1
        log.info("All %d model modules are up to date", len(files))
    return 0


if __name__ == "__main__":
    sys.exit(main())
