"""Path helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .errors import OutputError


def document_base_name(document: str | Path, suffixes: Iterable[str] = (".pod",)) -> str:
    """Return the file name of a document without directory or recognized suffix."""
    name = Path(document).name
    for suffix in suffixes:
        if suffix and name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def example_path(example_dir: Path, base_name: str, sequence: int, code_suffix: str) -> Path:
    """Return ``<example_dir>/<base_name>-<sequence><code_suffix>``."""
    return example_dir / f"{base_name}-{sequence}{code_suffix}"


def ensure_example_dir(example_dir: Path) -> Path:
    """Create the example directory if it is missing."""
    try:
        example_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise OutputError(f"cannot create example directory {example_dir}: {error}") from error
    return example_dir


__all__ = ["document_base_name", "example_path", "ensure_example_dir"]
