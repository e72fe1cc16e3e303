"""
Manifest verification.

Recomputes every digest in a manifest and reports the ones that differ.
Blob manifests are checked against the files they name, word manifests
against the identifier bytes themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from pydantic import Field

from ..core.di import resolve_or_default
from ..core.exceptions import CorpusIOError, ManifestFormatError
from ..core.interfaces.logger import ILogger
from ..core.models.base import ImmutableModel
from ..core.models.manifest import ManifestRow
from ..hashing.registry import AlgorithmRegistry
from ..presenters.manifest import FILENAME_LABEL, ManifestReader
from .logging import NullLogger


class Mismatch(ImmutableModel):
    """A manifest digest that differs from the recomputed one."""

    identifier: bytes
    algorithm: str
    expected: bytes
    actual: bytes

    def describe(self) -> str:
        name = self.identifier.decode("utf-8", errors="backslashreplace")
        return f"{name}\t{self.algorithm}: expected {self.expected.hex()}, got {self.actual.hex()}"


class VerificationReport(ImmutableModel):
    """Outcome of verifying one manifest."""

    label: str
    algorithms: list[str]
    rows_checked: int = 0
    mismatches: list[Mismatch] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


class ManifestVerifier:
    """
    Check manifest digests against the algorithm registry.

    Args:
        registry: Algorithms used to recompute digests
        logger: Diagnostics sink; resolved from the container if omitted
    """

    def __init__(self, registry: AlgorithmRegistry, logger: ILogger | None = None) -> None:
        self._registry = registry
        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def verify(self, stream: BinaryIO, blob_dir: Path | str | None = None) -> VerificationReport:
        """
        Verify every row of a manifest.

        Args:
            stream: Binary manifest stream
            blob_dir: Directory holding the blobs of a 'filename' manifest
                (defaults to the current directory)

        Returns:
            VerificationReport listing every mismatching digest

        Raises:
            ManifestFormatError: If the manifest cannot be parsed or names a
                blob outside blob_dir
            CorpusIOError: If a blob named by the manifest cannot be read
        """
        reader = ManifestReader(stream, self._registry)
        directory = Path(blob_dir) if blob_dir is not None else Path(".")

        rows_checked = 0
        mismatches: list[Mismatch] = []
        for row in reader:
            if reader.label == FILENAME_LABEL:
                content = self._read_blob(directory, row)
            else:
                content = row.identifier
            mismatches.extend(self._check_row(row, content))
            rows_checked += 1

        if mismatches:
            self._logger.warning(
                "Verified %d rows, %d mismatching digests", rows_checked, len(mismatches)
            )
        else:
            self._logger.info("Verified %d rows, all digests match", rows_checked)
        return VerificationReport(
            label=reader.label,
            algorithms=reader.algorithm_names,
            rows_checked=rows_checked,
            mismatches=mismatches,
        )

    def _check_row(self, row: ManifestRow, content: bytes) -> list[Mismatch]:
        mismatches = []
        for name, expected in row.digests:
            actual = self._registry.compute_digest(name, content)
            if actual != expected:
                self._logger.debug("Digest mismatch for %r under %s", row.identifier, name)
                mismatches.append(
                    Mismatch(identifier=row.identifier, algorithm=name, expected=expected, actual=actual)
                )
        return mismatches

    @staticmethod
    def _read_blob(directory: Path, row: ManifestRow) -> bytes:
        name = Path(row.identifier.decode("utf-8", errors="surrogateescape"))
        if name.is_absolute() or ".." in name.parts:
            raise ManifestFormatError(
                "Blob identifier escapes the blob directory",
                context={"identifier": str(name)},
            )
        path = directory / name
        try:
            return path.read_bytes()
        except OSError as e:
            raise CorpusIOError(
                f"Failed to read blob: {e.strerror or e}", path=str(path), cause=e
            ) from e
