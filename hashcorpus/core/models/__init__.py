"""
Pydantic models for hashcorpus.

All models use Pydantic v2; records are strict and immutable, configuration
sections coerce values read from TOML and the environment.
"""

from .base import CorpusBaseModel, ImmutableModel
from .config import BlobsConfig, LoggingConfig, LogLevel, PrngName, WordsConfig
from .manifest import Blob, ManifestRow

__all__ = [
    "Blob",
    "BlobsConfig",
    "CorpusBaseModel",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "ManifestRow",
    "PrngName",
    "WordsConfig",
]
