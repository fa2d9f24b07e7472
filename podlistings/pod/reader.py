"""Stream POD documents as structural signals."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from ..errors import ParseError
from ..logging import get_logger
from .signals import DocumentStart, Signal, classify_line

LOGGER = get_logger(__name__)


def read_signals(path: Path, *, encoding: str = "utf-8") -> Iterator[Signal]:
    """Yield ``DocumentStart`` followed by one signal per line of ``path``."""
    try:
        handle = path.open("r", encoding=encoding, newline="")
    except OSError as error:
        raise ParseError(f"cannot open document: {error.strerror or error}", document=path) from error
    LOGGER.debug("Reading %s", path)
    with handle:
        yield DocumentStart(path=path)
        line_number = 0
        try:
            for line_number, line in enumerate(handle, start=1):
                yield classify_line(line, line_number)
        except UnicodeDecodeError as error:
            raise ParseError(
                f"document is not valid {encoding}: {error.reason}",
                document=path,
                line_number=line_number + 1,
            ) from error
        except OSError as error:
            raise ParseError(f"cannot read document: {error}", document=path) from error


__all__ = ["read_signals"]
