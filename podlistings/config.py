"""Configuration models for podlistings."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class PerltidyConfig(BaseModel):
    executable: str = "perltidy"
    profile: str | None = ".perltidyrc"
    extra_args: List[str] = Field(default_factory=list)
    timeout_s: float = Field(default=30.0, gt=0)


class ExtractorConfig(BaseModel):
    example_dir: str = "eg"
    listing_region: str = "programlisting"
    header: str = "#!/usr/bin/perl\n"
    document_suffixes: List[str] = Field(default_factory=lambda: [".pod"])
    code_suffix: str = ".pl"
    keep_going: bool = False
    log_level: str = "INFO"
    perltidy: PerltidyConfig = Field(default_factory=PerltidyConfig)

    @field_validator("header")
    @classmethod
    def _header_is_line(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("header must not be empty")
        return value if value.endswith("\n") else value + "\n"

    @field_validator("code_suffix")
    @classmethod
    def _dotted_suffix(cls, value: str) -> str:
        value = value.strip()
        if not value.strip("."):
            raise ValueError("code_suffix must not be empty")
        return value if value.startswith(".") else "." + value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("document_suffixes")
    @classmethod
    def _dotted_suffixes(cls, value: List[str]) -> List[str]:
        return [item if item.startswith(".") else "." + item for item in value if item]


__all__ = ["PerltidyConfig", "ExtractorConfig"]
