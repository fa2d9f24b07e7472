"""Command-line interface for podlistings."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ExtractorConfig
from .errors import ListingError
from .extractor import ListingExtractor
from .format.base import SourceFormatter
from .format.perltidy import PerltidyFormatter
from .logging import configure_logging, get_logger

app = typer.Typer(
    help="Extract program listings from POD documents into runnable example files.",
    add_completion=False,
)
LOGGER = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path("podlistings.yaml")


def _load_yaml_config(config_path: Path, *, required: bool) -> dict[str, object]:
    if not config_path.exists():
        if required:
            raise typer.BadParameter(f"Config file {config_path} does not exist")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise typer.BadParameter(f"Failed to parse {config_path}: {error}") from error
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{config_path} must contain a mapping")
    return data


def _merge_config(config_path: Optional[Path], cli_options: dict[str, object]) -> ExtractorConfig:
    if config_path is None:
        file_overrides = _load_yaml_config(DEFAULT_CONFIG_FILE, required=False)
    else:
        file_overrides = _load_yaml_config(config_path, required=True)
    merged: dict[str, object] = {**file_overrides}
    perltidy_section = merged.get("perltidy") or {}
    if not isinstance(perltidy_section, dict):
        raise typer.BadParameter("perltidy settings must be a mapping")
    perltidy_overrides = dict(perltidy_section)
    for key, value in cli_options.items():
        if value is None:
            continue
        if key == "profile":
            perltidy_overrides["profile"] = value
        else:
            merged[key] = value
    if perltidy_overrides:
        merged["perltidy"] = perltidy_overrides
    try:
        return ExtractorConfig(**merged)
    except ValidationError as error:
        raise typer.BadParameter(f"Invalid configuration: {error}") from error


def _build_formatter(config: ExtractorConfig) -> SourceFormatter:
    return PerltidyFormatter(config.perltidy)


@app.command()
def extract(
    documents: List[Path] = typer.Argument(..., help="POD documents to scan, in order."),
    example_dir: Optional[Path] = typer.Option(None, help="Directory receiving example files [default: eg]."),
    profile: Optional[Path] = typer.Option(None, help="perltidy style profile [default: .perltidyrc]."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file [default: podlistings.yaml]."),
    keep_going: Optional[bool] = typer.Option(
        None,
        "--keep-going/--fail-fast",
        help="Continue with the next document after a parse or format error.",
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level [default: INFO]."),
) -> None:
    cli_options: dict[str, object] = {
        "example_dir": str(example_dir) if example_dir is not None else None,
        "profile": str(profile) if profile is not None else None,
        "keep_going": keep_going,
        "log_level": log_level,
    }
    settings = _merge_config(config, cli_options)
    configure_logging(settings.log_level)

    extractor = ListingExtractor(_build_formatter(settings), settings)
    try:
        report = extractor.run(documents)
    except ListingError as error:
        LOGGER.error("Extraction failed: %s", error)
        raise typer.Exit(code=1) from error

    if not report.ok:
        LOGGER.error("%d document(s) failed", len(report.failures))
        raise typer.Exit(code=1)


__all__ = ["app", "extract"]
