"""
Services for hashcorpus: logging and manifest verification.
"""

from .logging import CorpusLogger, NullLogger
from .verification import ManifestVerifier, Mismatch, VerificationReport

__all__ = [
    "CorpusLogger",
    "ManifestVerifier",
    "Mismatch",
    "NullLogger",
    "VerificationReport",
]
