"""Bridge to the external perltidy beautifier."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from ..config import PerltidyConfig
from ..errors import FormatError
from ..logging import get_logger
from .base import SourceFormatter

LOGGER = get_logger(__name__)


class PerltidyFormatter(SourceFormatter):
    """Pipe listings through ``perltidy`` using a fixed style profile."""

    def __init__(self, config: PerltidyConfig | None = None) -> None:
        self.config = config or PerltidyConfig()
        self.executable = shutil.which(self.config.executable)
        self.profile = Path(self.config.profile) if self.config.profile else None

    def command(self) -> list[str]:
        if not self.executable:
            raise FormatError(f"formatter '{self.config.executable}' not found on PATH")
        command = [self.executable, "--standard-output", "--standard-error-output"]
        if self.profile is not None:
            command.append(f"--profile={self.profile}")
        command.extend(self.config.extra_args)
        return command

    def format(self, source: str) -> str:
        command = self.command()
        LOGGER.debug("Running formatter: %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                input=source,
                capture_output=True,
                text=True,
                timeout=self.config.timeout_s,
                check=False,
            )
        except subprocess.TimeoutExpired as error:
            raise FormatError(f"formatter timed out after {self.config.timeout_s:g}s") from error
        except OSError as error:
            raise FormatError(f"cannot run formatter: {error}") from error

        stderr_text = result.stderr.strip()
        if result.returncode != 0:
            detail = f":\n{stderr_text}" if stderr_text else ""
            raise FormatError(f"formatter failed with exit code {result.returncode}{detail}")
        if stderr_text:
            LOGGER.debug("Formatter stderr:\n%s", stderr_text)
        return result.stdout


__all__ = ["PerltidyFormatter"]
