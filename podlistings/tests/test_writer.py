"""Example files are replaced whole or not at all."""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from podlistings.config import ExtractorConfig
from podlistings.errors import OutputError
from podlistings.extractor import ListingExtractor
from podlistings.writer import write_example

PREVIOUS = "#!/usr/bin/perl\nprevious_good();\n"


def _fail_replace(*_args: object, **_kwargs: object) -> None:
    raise OSError(errno.ENOSPC, "No space left on device")


def test_write_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "intro-1.pl"
    target.write_text(PREVIOUS, encoding="utf-8")

    write_example("#!/usr/bin/perl\nfresh();\n", target)

    assert target.read_text(encoding="utf-8") == "#!/usr/bin/perl\nfresh();\n"
    assert [path.name for path in tmp_path.iterdir()] == ["intro-1.pl"]
    assert target.stat().st_mode & 0o777 == 0o644


def test_failed_write_keeps_previous_example(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "big-1.pl"
    target.write_text(PREVIOUS, encoding="utf-8")
    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(OutputError, match="No space left on device"):
        write_example("#!/usr/bin/perl\n" + "say 1;\n" * 200, target)

    assert target.read_text(encoding="utf-8") == PREVIOUS
    assert [path.name for path in tmp_path.iterdir()] == ["big-1.pl"]


def test_failed_write_creates_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(OutputError):
        write_example("say 1;\n", tmp_path / "new-1.pl")

    assert list(tmp_path.iterdir()) == []


def test_extractor_write_failure_leaves_previous_example(
    write_pod, formatter, example_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    example_dir.mkdir()
    (example_dir / "big-1.pl").write_text(PREVIOUS, encoding="utf-8")
    document = write_pod("big.pod", "=begin programlisting\n" + "say 1;\n" * 200 + "=end programlisting\n")
    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(OutputError) as excinfo:
        ListingExtractor(formatter, ExtractorConfig(example_dir=str(example_dir))).run([document])

    assert excinfo.value.listing == 1
    assert (example_dir / "big-1.pl").read_text(encoding="utf-8") == PREVIOUS
    assert [path.name for path in example_dir.iterdir()] == ["big-1.pl"]
