"""Shared fixtures for podlistings tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from podlistings.config import ExtractorConfig
from podlistings.errors import FormatError
from podlistings.format.base import SourceFormatter

DATA_DIR = Path(__file__).resolve().parent / "data"


class RecordingFormatter(SourceFormatter):
    """Return listings unchanged and remember every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def format(self, source: str) -> str:
        self.calls.append(source)
        return source


class RejectingFormatter(SourceFormatter):
    def __init__(self, marker: str = "syntax error") -> None:
        self.marker = marker

    def format(self, source: str) -> str:
        if self.marker in source:
            raise FormatError("perltidy found a syntax error")
        return source


@pytest.fixture()
def formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture()
def rejecting_formatter() -> RejectingFormatter:
    return RejectingFormatter()


@pytest.fixture()
def example_dir(tmp_path: Path) -> Path:
    return tmp_path / "eg"


@pytest.fixture()
def config(example_dir: Path) -> ExtractorConfig:
    return ExtractorConfig(example_dir=str(example_dir))


@pytest.fixture()
def events_pod(tmp_path: Path) -> Path:
    target = tmp_path / "docs" / "05-Events.pod"
    target.parent.mkdir(parents=True)
    target.write_text((DATA_DIR / "05-Events.pod").read_text(encoding="utf-8"), encoding="utf-8")
    return target


@pytest.fixture()
def write_pod(tmp_path: Path):
    def _write(name: str, text: str) -> Path:
        path = tmp_path / "docs" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
