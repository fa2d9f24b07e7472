"""Error taxonomy for listing extraction."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base error carrying the failing document and listing number."""

    def __init__(
        self,
        message: str,
        *,
        document: Path | None = None,
        listing: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.document = document
        self.listing = listing

    def __str__(self) -> str:
        location = ""
        if self.document is not None:
            location = str(self.document)
            if self.listing is not None:
                location += f"[listing {self.listing}]"
            location += ": "
        return f"{location}{self.message}"


class ParseError(ListingError):
    """Document is unreadable or its listing regions are malformed."""

    def __init__(
        self,
        message: str,
        *,
        document: Path | None = None,
        listing: int | None = None,
        line_number: int | None = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, document=document, listing=listing)
        self.line_number = line_number


class FormatError(ListingError):
    """The source formatter rejected a listing or could not run."""


class OutputError(ListingError, OSError):
    """The example directory or an example file could not be written."""


__all__ = ["ListingError", "ParseError", "FormatError", "OutputError"]
