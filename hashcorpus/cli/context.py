"""
Click context extension for the hashcorpus CLI.

Provides CorpusContext, which holds the working directory and loaded
settings passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import CorpusSettings, load_settings


@dataclass
class CorpusContext:
    """Context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Merged settings (init, environment, TOML, defaults)
    """

    cwd: Path
    settings: CorpusSettings

    @classmethod
    def create(cls, cwd: Path | None = None) -> CorpusContext:
        """Create a CorpusContext for the current environment.

        Raises:
            ConfigFileError: If a config file is found but cannot be parsed
            ConfigValidationError: If a configured value is invalid
        """
        if cwd is None:
            cwd = Path.cwd()

        return cls(
            cwd=cwd,
            settings=load_settings(start_dir=str(cwd)),
        )
