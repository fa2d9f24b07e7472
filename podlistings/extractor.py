"""Extract program listings from POD documents into numbered example files."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from .config import ExtractorConfig
from .errors import FormatError, ListingError, OutputError, ParseError
from .format.base import SourceFormatter
from .logging import get_logger
from .paths import document_base_name, ensure_example_dir, example_path
from .pod.reader import read_signals
from .pod.signals import DocumentStart, RegionBegin, RegionEnd, Signal, Text
from .writer import write_example

LOGGER = get_logger(__name__)


class ExtractorState(str, Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


@dataclass(slots=True)
class ListingAccumulator:
    """Text collected for the listing currently open in a document."""

    header: str
    lines: list[str] = field(default_factory=list)
    depth: int = 0

    def reset(self) -> None:
        self.lines.clear()
        self.depth = 0

    def append(self, line: str) -> None:
        self.lines.append(line)

    def source(self) -> str:
        """Return the header followed by the body without its leading whitespace."""
        return self.header + "".join(self.lines).lstrip()


@dataclass(slots=True, frozen=True)
class ExampleFile:
    document: Path
    sequence: int
    path: Path


@dataclass(slots=True)
class ExtractionReport:
    documents: list[Path] = field(default_factory=list)
    examples: list[ExampleFile] = field(default_factory=list)
    failures: list[ListingError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ListingExtractor:
    """Turn ``=begin programlisting`` regions into formatted example files.

    Each document restarts numbering at 1. A listing is flushed when its
    outermost ``=end`` is reached: the body is formatted, written to
    ``<example_dir>/<document>-<n><code_suffix>`` and the counter advances.
    """

    def __init__(self, formatter: SourceFormatter, config: ExtractorConfig | None = None) -> None:
        self.formatter = formatter
        self.config = config or ExtractorConfig()
        self.example_dir = Path(self.config.example_dir)
        self.accumulator = ListingAccumulator(header=self.config.header)
        self.sequence = 1
        self.document: Path | None = None

    @property
    def state(self) -> ExtractorState:
        if self.accumulator.depth > 0:
            return ExtractorState.ACCUMULATING
        return ExtractorState.IDLE

    def run(self, paths: Iterable[str | Path]) -> ExtractionReport:
        """Process documents in order and return what was written."""
        ensure_example_dir(self.example_dir)
        report = ExtractionReport()
        for raw_path in paths:
            path = Path(raw_path)
            written: list[ExampleFile] = []
            try:
                self.process_document(path, written)
            except OutputError:
                raise
            except (ParseError, FormatError) as error:
                if not self.config.keep_going:
                    raise
                LOGGER.error("Skipping %s: %s", path, error)
                report.failures.append(error)
                continue
            finally:
                report.examples.extend(written)
            report.documents.append(path)
        LOGGER.info(
            "Extracted %d example(s) from %d document(s) into %s",
            len(report.examples),
            len(report.documents),
            self.example_dir,
        )
        return report

    def process_document(self, path: Path, written: list[ExampleFile] | None = None) -> list[ExampleFile]:
        """Extract every listing of one document, appending each example to ``written`` as it lands."""
        if written is None:
            written = []
        for signal in read_signals(path):
            example = self.handle(signal)
            if example is not None:
                written.append(example)
        if self.accumulator.depth > 0:
            raise ParseError(
                f"document ended inside an open '{self.config.listing_region}' region",
                document=path,
                listing=self.sequence,
            )
        if not written:
            LOGGER.debug("No listings found in %s", path)
        return written

    def handle(self, signal: Signal) -> ExampleFile | None:
        """Apply one signal, returning the example file when a listing closes."""
        if isinstance(signal, DocumentStart):
            self._start_document(signal.path)
            return None
        if self.document is None:
            raise ParseError(f"{type(signal).__name__} received before any document started")

        accumulator = self.accumulator
        if isinstance(signal, RegionBegin):
            if signal.name == self.config.listing_region:
                accumulator.depth += 1
                LOGGER.debug("%s:%d opens listing (depth %d)", self.document, signal.line_number, accumulator.depth)
        elif isinstance(signal, RegionEnd):
            if signal.name == self.config.listing_region:
                if accumulator.depth == 0:
                    raise ParseError(
                        f"'=end {signal.name}' without a matching '=begin {signal.name}'",
                        document=self.document,
                        line_number=signal.line_number,
                    )
                accumulator.depth -= 1
                if accumulator.depth == 0:
                    return self.flush()
        elif isinstance(signal, Text):
            if self.state is ExtractorState.ACCUMULATING:
                accumulator.append(signal.line)
        return None

    def flush(self) -> ExampleFile:
        """Format and persist the accumulated listing, then start the next one."""
        if self.document is None:
            raise ParseError("listing closed before any document started")
        target = example_path(
            self.example_dir,
            document_base_name(self.document, self.config.document_suffixes),
            self.sequence,
            self.config.code_suffix,
        )
        try:
            formatted = self.formatter.format(self.accumulator.source())
            write_example(formatted, target)
        except ListingError as error:
            if error.document is None:
                error.document = self.document
                error.listing = self.sequence
            raise
        LOGGER.info("Wrote %s", target)
        example = ExampleFile(document=self.document, sequence=self.sequence, path=target)
        self.accumulator.reset()
        self.sequence += 1
        return example

    def _start_document(self, path: Path) -> None:
        self.document = path
        self.sequence = 1
        self.accumulator.reset()


__all__ = [
    "ExampleFile",
    "ExtractionReport",
    "ExtractorState",
    "ListingAccumulator",
    "ListingExtractor",
]
