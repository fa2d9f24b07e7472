"""Formatter interface for extracted listings."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SourceFormatter(ABC):
    """Interface for code beautifiers applied to each listing."""

    @abstractmethod
    def format(self, source: str) -> str:
        """Return ``source`` reformatted, raising ``FormatError`` on failure."""


__all__ = ["SourceFormatter"]
