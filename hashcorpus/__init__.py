"""
hashcorpus: deterministic digest fixtures for hash implementation tests.
"""

from .corpus import BlobCorpusGenerator, WordCorpusProcessor
from .hashing import AlgorithmDescriptor, AlgorithmRegistry, create_registry
from .presenters import ManifestReader, ManifestWriter, render_header, render_row

__all__ = [
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "BlobCorpusGenerator",
    "ManifestReader",
    "ManifestWriter",
    "WordCorpusProcessor",
    "create_registry",
    "render_header",
    "render_row",
]
