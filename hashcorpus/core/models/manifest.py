"""
Corpus item and manifest row models.
"""

from __future__ import annotations

from .base import ImmutableModel


class Blob(ImmutableModel):
    """A pseudorandom byte blob and the file name it is persisted under."""

    identifier: str
    content: bytes


class ManifestRow(ImmutableModel):
    """
    One manifest line: an item identifier and its digest under every algorithm.

    Digests are ordered as the algorithm registry that produced them. The
    identifier is raw bytes because words are emitted exactly as read.
    """

    identifier: bytes
    digests: tuple[tuple[str, bytes], ...]

    @property
    def algorithm_names(self) -> list[str]:
        return [name for name, _ in self.digests]

    def digest_for(self, algorithm: str) -> bytes | None:
        for name, digest in self.digests:
            if name == algorithm:
                return digest
        return None
