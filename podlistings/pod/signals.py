"""Structural signals recognized in POD documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

_COMMAND_RE = re.compile(r"^=(?P<command>[A-Za-z][A-Za-z0-9_]*)(?:[ \t]+(?P<argument>.*?))?\s*$")


@dataclass(slots=True, frozen=True)
class DocumentStart:
    path: Path


@dataclass(slots=True, frozen=True)
class RegionBegin:
    name: str
    line_number: int


@dataclass(slots=True, frozen=True)
class RegionEnd:
    name: str
    line_number: int


@dataclass(slots=True, frozen=True)
class Text:
    line: str
    line_number: int


@dataclass(slots=True, frozen=True)
class Other:
    command: str
    line_number: int


Signal = Union[DocumentStart, RegionBegin, RegionEnd, Text, Other]


def classify_line(line: str, line_number: int) -> Signal:
    """Classify one raw document line.

    ``=begin NAME`` and ``=end NAME`` become region signals named after the
    first word of their argument. Every other ``=command`` line is
    :class:`Other`, and anything that is not a command is literal
    :class:`Text` with its line terminator intact.
    """
    match = _COMMAND_RE.match(line)
    if match is None:
        return Text(line=line, line_number=line_number)
    command = match.group("command")
    argument = (match.group("argument") or "").split()
    if command in {"begin", "end"} and argument:
        region = RegionBegin if command == "begin" else RegionEnd
        return region(name=argument[0], line_number=line_number)
    return Other(command=command, line_number=line_number)


__all__ = [
    "DocumentStart",
    "RegionBegin",
    "RegionEnd",
    "Text",
    "Other",
    "Signal",
    "classify_line",
]
