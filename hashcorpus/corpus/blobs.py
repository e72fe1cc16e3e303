"""
Pseudorandom blob corpus generation.

Blobs are drawn from a single seeded source, written to the output
directory one at a time and digested as they are produced, so peak
memory is one blob regardless of corpus size.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..core.di import resolve_or_default
from ..core.exceptions import CorpusIOError, InvalidArgumentError
from ..core.interfaces.logger import ILogger
from ..core.models.config import MAX_SEED
from ..core.models.manifest import Blob, ManifestRow
from ..hashing.registry import AlgorithmRegistry
from ..services.logging import NullLogger
from .random_source import GlibcRandom, RandomSource, create_random_source

DEFAULT_SEED = 1337
DEFAULT_COUNT = 2048
DEFAULT_MAX_LENGTH = 8192


def blob_identifier(index: int) -> str:
    """File name of the blob at index."""
    return f"blob{index}.bin"


class BlobCorpusGenerator:
    """
    Generate, persist and digest a reproducible blob corpus.

    Args:
        registry: Algorithms every blob is digested under
        prng: Name of the random source (see RANDOM_SOURCES)
        logger: Diagnostics sink; resolved from the container if omitted
    """

    def __init__(
        self,
        registry: AlgorithmRegistry,
        prng: str = GlibcRandom.name,
        logger: ILogger | None = None,
    ) -> None:
        self._registry = registry
        self._prng = prng
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def generate(
        self,
        seed: int = DEFAULT_SEED,
        count: int = DEFAULT_COUNT,
        max_length: int = DEFAULT_MAX_LENGTH,
        output_directory: Path | str = ".",
    ) -> Iterator[ManifestRow]:
        """
        Yield one manifest row per blob, writing each blob before its row.

        Args:
            seed: Seed for the random source, applied once (0 to MAX_SEED)
            count: Number of blobs
            max_length: Exclusive upper bound on blob length
            output_directory: Existing directory the blob files go to

        Raises:
            InvalidArgumentError: If seed is out of range, count is negative
                or max_length < 1
            CorpusIOError: If a blob file cannot be written
        """
        if not 0 <= seed <= MAX_SEED:
            raise InvalidArgumentError(
                f"Seed must be between 0 and {MAX_SEED}", argument="seed", value=str(seed)
            )
        if count < 0:
            raise InvalidArgumentError(
                "Blob count must not be negative", argument="count", value=str(count)
            )
        if max_length < 1:
            raise InvalidArgumentError(
                "Maximum blob length must be at least 1",
                argument="max_length",
                value=str(max_length),
            )

        directory = Path(output_directory)
        source = create_random_source(self._prng, seed)
        self._logger.debug(
            "Generating %d blobs (seed=%d, max_length=%d, prng=%s) in %s",
            count,
            seed,
            max_length,
            self._prng,
            directory,
        )

        for index in range(count):
            blob = self._draw_blob(source, index, max_length)
            self._persist(blob, directory)
            yield ManifestRow(
                identifier=blob.identifier.encode("ascii"),
                digests=self._registry.digest_all(blob.content),
            )

        self._logger.info("Generated %d blobs in %s", count, directory)

    @staticmethod
    def _draw_blob(source: RandomSource, index: int, max_length: int) -> Blob:
        length = source.next_below(max_length)
        return Blob(identifier=blob_identifier(index), content=source.randbytes(length))

    def _persist(self, blob: Blob, directory: Path) -> None:
        path = directory / blob.identifier
        try:
            path.write_bytes(blob.content)
        except OSError as e:
            raise CorpusIOError(
                f"Failed to write blob: {e.strerror or e}", path=str(path), cause=e
            ) from e
        self._logger.debug("Wrote %s (%d bytes)", path, len(blob.content))
