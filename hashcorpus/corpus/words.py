"""
Word corpus processing.

Splits a byte stream on C-locale whitespace and digests each word. Words
may be arbitrarily long and may straddle read boundaries.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import BinaryIO

from ..core.di import resolve_or_default
from ..core.exceptions import InvalidArgumentError
from ..core.interfaces.logger import ILogger
from ..core.models.manifest import ManifestRow
from ..hashing.registry import AlgorithmRegistry
from ..services.logging import NullLogger

# isspace() in the C locale: space, \t, \n, \v, \f, \r
WHITESPACE = frozenset(b" \t\n\x0b\x0c\r")
DEFAULT_CHUNK_SIZE = 64 * 1024

_WORD = re.compile(rb"[^ \t\n\x0b\x0c\r]+")


def is_whitespace(byte: int) -> bool:
    return byte in WHITESPACE


class WordCorpusProcessor:
    """
    Digest every whitespace-delimited word of a byte stream.

    Args:
        registry: Algorithms every word is digested under
        chunk_size: Bytes requested per read
        logger: Diagnostics sink; resolved from the container if omitted
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: ILogger | None = None,
    ) -> None:
        if chunk_size < 1:
            raise InvalidArgumentError(
                "Chunk size must be at least 1", argument="chunk_size", value=str(chunk_size)
            )
        self._registry = registry
        self._chunk_size = chunk_size
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def tokenize(self, stream: BinaryIO) -> Iterator[bytes]:
        """Yield the non-empty words of stream in order, reading lazily.

        Buffered streams are read with read1(), which returns whatever is
        available instead of blocking until a full chunk arrives from a pipe.
        """
        read = getattr(stream, "read1", stream.read)
        pending = bytearray()
        while True:
            chunk = read(self._chunk_size)
            if not chunk:
                break

            matched = False
            for match in _WORD.finditer(chunk):
                matched = True
                # whitespace before this match ends the carried-over word
                if pending and match.start() > 0:
                    yield bytes(pending)
                    pending.clear()
                pending += match.group()
                if match.end() < len(chunk):
                    yield bytes(pending)
                    pending.clear()

            if not matched and pending:
                yield bytes(pending)
                pending.clear()

        if pending:
            yield bytes(pending)

    def process(self, stream: BinaryIO) -> Iterator[ManifestRow]:
        """Yield one manifest row per word, identified by the word itself."""
        count = 0
        for word in self.tokenize(stream):
            count += 1
            yield ManifestRow(identifier=word, digests=self._registry.digest_all(word))
        self._logger.info("Processed %d words", count)
