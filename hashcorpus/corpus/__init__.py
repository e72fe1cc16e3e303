"""
Corpus pipelines: seeded blobs and whitespace-delimited words.
"""

from .blobs import BlobCorpusGenerator, blob_identifier
from .random_source import (
    RANDOM_SOURCES,
    GlibcRandom,
    PythonRandom,
    RandomSource,
    create_random_source,
)
from .words import WHITESPACE, WordCorpusProcessor, is_whitespace

__all__ = [
    "RANDOM_SOURCES",
    "WHITESPACE",
    "BlobCorpusGenerator",
    "GlibcRandom",
    "PythonRandom",
    "RandomSource",
    "WordCorpusProcessor",
    "blob_identifier",
    "create_random_source",
    "is_whitespace",
]
