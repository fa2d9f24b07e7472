"""Example file writer."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import OutputError

EXAMPLE_MODE = 0o644


def write_example(content: str, file_path: Path) -> None:
    """Replace file path with formatted listing text.

    The text goes to a temporary file beside the target, which is then
    renamed over it, so a failed write leaves any previous example intact.
    """
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
        os.chmod(temp_path, EXAMPLE_MODE)
        os.replace(temp_path, file_path)
    except OSError as error:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise OutputError(f"cannot write {file_path}: {error.strerror or error}") from error


__all__ = ["write_example"]
