"""File writer for model generation."""
from pathlib import Path
from typing import List

from payrex.codegen.types import GeneratedFile


def write_files(files: List[GeneratedFile], out_dir: Path) -> None:
    """
    Write generated files to the output directory.

    Args:
        files: List of GeneratedFile objects to write
        out_dir: Base output directory path
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    for file in files:
        file_path = out_dir / file.path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")


def find_stale_files(files: List[GeneratedFile], out_dir: Path) -> List[str]:
    """Return paths of generated files whose on-disk content differs (or is missing)."""
    stale = []
    for file in files:
        file_path = out_dir / file.path
        if not file_path.exists() or file_path.read_text(encoding="utf-8") != file.content:
            stale.append(file.path)
    return stale
