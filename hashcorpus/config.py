"""Configuration lookup for hashcorpus."""

from pathlib import Path
from typing import Any

from .core.settings import load_settings

# Config keys shown by `hashcorpus config list`
CONFIGURABLE_KEYS = {
    "blobs.seed": {
        "type": int,
        "default": 1337,
        "description": "Seed for the blob corpus PRNG (0 to 2147483647)",
    },
    "blobs.count": {
        "type": int,
        "default": 2048,
        "description": "Number of blobs to generate",
    },
    "blobs.max_length": {
        "type": int,
        "default": 8192,
        "description": "Exclusive upper bound on blob length in bytes",
    },
    "blobs.prng": {
        "type": str,
        "default": "glibc",
        "description": "PRNG for blob content (glibc, python)",
    },
    "words.chunk_size": {
        "type": int,
        "default": 65536,
        "description": "Bytes read from the input stream per read call",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Output debug logs to ~/.hashcorpus/hashcorpus.log",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'blobs.seed'."""
    parts = key.split(".")
    for part in parts:
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, start_dir: str | None = None) -> Any:
    """Get the effective value of a config key, or None if unknown."""
    return _get_nested(load_config(start_dir=start_dir), key)


def config_list() -> dict:
    """List all configurable keys with their descriptions."""
    return CONFIGURABLE_KEYS
