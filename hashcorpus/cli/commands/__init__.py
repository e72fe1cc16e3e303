"""
Click command implementations for the hashcorpus CLI.

Each module corresponds to a hashcorpus command (e.g., blobs.py
implements 'hashcorpus blobs').
"""

from .blobs import blobs
from .config import config
from .verify import verify
from .words import words

COMMANDS = [
    blobs,
    config,
    verify,
    words,
]

__all__ = [
    "COMMANDS",
    "blobs",
    "config",
    "verify",
    "words",
]
