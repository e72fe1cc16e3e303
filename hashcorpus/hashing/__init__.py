"""
Digest algorithm descriptors and the ordered algorithm registry.
"""

from .descriptors import (
    DEFAULT_ALGORITHMS,
    SHA1,
    SHA224,
    SHA256,
    SHA384,
    SHA512,
    SHA512_224,
    SHA512_256,
    AlgorithmDescriptor,
    hashlib_descriptor,
)
from .registry import AlgorithmRegistry, create_registry

__all__ = [
    "DEFAULT_ALGORITHMS",
    "SHA1",
    "SHA224",
    "SHA256",
    "SHA384",
    "SHA512",
    "SHA512_224",
    "SHA512_256",
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "create_registry",
    "hashlib_descriptor",
]
