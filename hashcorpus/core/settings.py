"""
Pydantic Settings for hashcorpus configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import BlobsConfig, LoggingConfig, WordsConfig

CONFIG_FILE_NAME = ".hashcorpus.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .hashcorpus.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.hashcorpus] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            data = _read_toml(pyproject)
            if "hashcorpus" in data.get("tool", {}):
                return pyproject

    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file: {e}", file_path=str(path), cause=e
        ) from e


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from a TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], config_path: Path | None = None):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        self._data = {}
        path = self._config_path
        if path is None:
            return self._data

        data = _read_toml(path)
        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("hashcorpus", {})

        self._data = data
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class CorpusSettings(BaseSettings):
    """hashcorpus settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (HASHCORPUS_<section>__<field>)
    3. TOML config file (.hashcorpus.toml or pyproject.toml [tool.hashcorpus])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "HASHCORPUS_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    blobs: BlobsConfig = BlobsConfig()
    words: WordsConfig = WordsConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading below the environment.

        The config path cannot be passed through here, so load_settings
        hands it over in a module-level variable.
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSource(settings_cls, config_path=_current_config_path),
        )

    @property
    def config_file(self) -> str | None:
        return self._config_file

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a nested dict keyed by section."""
        result: dict[str, Any] = {
            "blobs": self.blobs.model_dump(),
            "words": self.words.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        return result


# Module-level variable for passing to settings_customise_sources
_current_config_path: Path | None = None


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None, **overrides: Any
) -> CorpusSettings:
    """Load hashcorpus settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Init values taking precedence over every other source

    Returns:
        CorpusSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        ConfigValidationError: If a merged value fails validation
    """
    global _current_config_path

    path = config_path if config_path is not None else find_config_file(start_dir)
    _current_config_path = path

    try:
        settings = CorpusSettings(**overrides)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"])
        raise ConfigValidationError(
            f"Invalid configuration value for {key}: {error['msg']}",
            key=key,
            value=str(error.get("input")),
            context={"config_file": str(path)} if path else None,
            cause=e,
        ) from e
    finally:
        _current_config_path = None

    settings._config_file = str(path) if path else None
    return settings
