"""
Core infrastructure for hashcorpus.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loaded from TOML and the environment
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    CorpusIOError,
    DigestComputationError,
    HashCorpusException,
    HashCorpusValidationError,
    InitializationError,
    InvalidArgumentError,
    ManifestFormatError,
)

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "CorpusIOError",
    "DigestComputationError",
    "HashCorpusException",
    "HashCorpusValidationError",
    "InitializationError",
    "InvalidArgumentError",
    "ManifestFormatError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "reset",
]
