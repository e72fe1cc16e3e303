"""
Digest algorithm descriptors.

A descriptor pairs a manifest column name with a hashlib factory and the
digest length that factory must produce.
"""

from __future__ import annotations

import functools
import hashlib
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    An immutable digest algorithm entry.

    Attributes:
        name: Manifest column name (e.g. 'SHA512/224')
        factory: Zero-argument callable returning a fresh hasher with
            update() and digest()
        digest_length: Output length in bytes
    """

    name: str
    factory: Callable[[], Any] = field(repr=False, compare=False)
    digest_length: int

    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        return self.factory()

    def digest(self, data: bytes) -> bytes:
        """Digest data in one shot."""
        hasher = self.create_hasher()
        hasher.update(data)
        return hasher.digest()


def hashlib_descriptor(name: str, hashlib_name: str, digest_length: int) -> AlgorithmDescriptor:
    """Describe an algorithm backed by hashlib.new(hashlib_name)."""
    return AlgorithmDescriptor(
        name=name,
        factory=functools.partial(hashlib.new, hashlib_name),
        digest_length=digest_length,
    )


SHA1 = hashlib_descriptor("SHA1", "sha1", 20)
SHA256 = hashlib_descriptor("SHA256", "sha256", 32)
SHA224 = hashlib_descriptor("SHA224", "sha224", 28)
SHA512 = hashlib_descriptor("SHA512", "sha512", 64)
SHA384 = hashlib_descriptor("SHA384", "sha384", 48)
SHA512_224 = hashlib_descriptor("SHA512/224", "sha512_224", 28)
SHA512_256 = hashlib_descriptor("SHA512/256", "sha512_256", 32)

# Manifest column order. Reordering changes the manifest format.
DEFAULT_ALGORITHMS: tuple[AlgorithmDescriptor, ...] = (
    SHA1,
    SHA256,
    SHA224,
    SHA512,
    SHA384,
    SHA512_224,
    SHA512_256,
)
