"""
Configuration models.

Provides Pydantic models for hashcorpus configuration with validation.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from .base import CorpusBaseModel

# Type aliases
PrngName = Literal["glibc", "python"]
LogLevel = Literal["debug", "info", "warning", "error"]

# glibc srand() takes an unsigned int, but the state recurrence runs on int32
MAX_SEED = 2**31 - 1


class ConfigBaseModel(CorpusBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class BlobsConfig(ConfigBaseModel):
    """Blob corpus configuration section."""

    seed: Annotated[int, Field(ge=0, le=MAX_SEED)] = 1337
    count: Annotated[int, Field(ge=0)] = 2048
    max_length: Annotated[int, Field(ge=1)] = 8192
    prng: PrngName = "glibc"


class WordsConfig(ConfigBaseModel):
    """Word corpus configuration section."""

    chunk_size: Annotated[int, Field(ge=1)] = 65536


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True
