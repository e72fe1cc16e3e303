"""
Unit tests for manifest verification.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hashcorpus.core.exceptions import CorpusIOError, ManifestFormatError
from hashcorpus.core.interfaces.logger import ILogger
from hashcorpus.corpus import BlobCorpusGenerator, WordCorpusProcessor
from hashcorpus.hashing import AlgorithmRegistry
from hashcorpus.presenters.manifest import FILENAME_LABEL, WORD_LABEL, ManifestWriter
from hashcorpus.services import ManifestVerifier, Mismatch
from hashcorpus.services.logging import NullLogger


@pytest.fixture
def verifier(registry: AlgorithmRegistry) -> ManifestVerifier:
    return ManifestVerifier(registry, logger=NullLogger())


def _blob_manifest(registry: AlgorithmRegistry, directory: Path, count: int = 5) -> io.BytesIO:
    out = io.BytesIO()
    rows = BlobCorpusGenerator(registry).generate(
        seed=1337, count=count, max_length=64, output_directory=directory
    )
    ManifestWriter(out, FILENAME_LABEL, registry.names).write_all(rows)
    out.seek(0)
    return out


def _word_manifest(registry: AlgorithmRegistry, text: bytes) -> io.BytesIO:
    out = io.BytesIO()
    rows = WordCorpusProcessor(registry).process(io.BytesIO(text))
    ManifestWriter(out, WORD_LABEL, registry.names).write_all(rows)
    out.seek(0)
    return out


class TestBlobManifests:
    """Tests for 'filename' manifests."""

    def test_fresh_corpus_verifies(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry, tmp_path: Path
    ) -> None:
        report = verifier.verify(_blob_manifest(registry, tmp_path), blob_dir=tmp_path)

        assert report.ok
        assert report.label == FILENAME_LABEL
        assert report.rows_checked == 5
        assert report.algorithms == registry.names

    def test_tampered_blob_is_reported(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry, tmp_path: Path
    ) -> None:
        """Changing a blob's bytes mismatches every algorithm for that blob."""
        manifest = _blob_manifest(registry, tmp_path)
        (tmp_path / "blob2.bin").write_bytes(b"tampered")

        report = verifier.verify(manifest, blob_dir=tmp_path)

        assert not report.ok
        assert {m.identifier for m in report.mismatches} == {b"blob2.bin"}
        assert [m.algorithm for m in report.mismatches] == registry.names

    def test_defaults_to_current_directory(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry, tmp_path: Path
    ) -> None:
        """Without blob_dir, blobs are looked up in the working directory."""
        assert verifier.verify(_blob_manifest(registry, tmp_path)).ok

    def test_missing_blob(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry, tmp_path: Path
    ) -> None:
        """A blob named by the manifest but absent on disk is an I/O error."""
        manifest = _blob_manifest(registry, tmp_path)
        (tmp_path / "blob0.bin").unlink()

        with pytest.raises(CorpusIOError) as exc_info:
            verifier.verify(manifest, blob_dir=tmp_path)

        assert exc_info.value.context["path"] == str(tmp_path / "blob0.bin")

    @pytest.mark.parametrize(
        "identifier", [b"../secret.bin", b"sub/../../secret.bin", b"/etc/hostname"]
    )
    def test_identifier_outside_blob_dir_rejected(
        self,
        verifier: ManifestVerifier,
        registry: AlgorithmRegistry,
        tmp_path: Path,
        identifier: bytes,
    ) -> None:
        """Manifest identifiers cannot name files outside the blob directory."""
        blob_dir = tmp_path / "blobs"
        blob_dir.mkdir()
        (tmp_path / "secret.bin").write_bytes(b"outside")
        digest = registry.compute_digest("SHA1", b"outside").hex().encode()
        manifest = io.BytesIO(b"filename\tSHA1\n" + identifier + b"\t" + digest + b"\n")

        with pytest.raises(ManifestFormatError, match="escapes the blob directory"):
            verifier.verify(manifest, blob_dir=blob_dir)

    def test_nested_identifier_allowed(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry, tmp_path: Path
    ) -> None:
        """Relative paths below the blob directory are still read."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "a.bin").write_bytes(b"abc")
        digest = registry.compute_digest("SHA1", b"abc").hex().encode()
        manifest = io.BytesIO(b"filename\tSHA1\nsub/a.bin\t" + digest + b"\n")

        assert verifier.verify(manifest, blob_dir=tmp_path).ok


class TestWordManifests:
    """Tests for 'word' manifests."""

    def test_word_manifest_verifies(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry
    ) -> None:
        report = verifier.verify(_word_manifest(registry, b"adam ignatius\nabc"))

        assert report.ok
        assert report.label == WORD_LABEL
        assert report.rows_checked == 3

    def test_tampered_digest_is_reported(
        self, verifier: ManifestVerifier, registry: AlgorithmRegistry
    ) -> None:
        """A wrong digest column produces one mismatch with both values."""
        sha1_abc = "a9993e364706816aba3e25717850c26c9cd0d89d"
        data = f"word\tSHA1\nabc\t{'0' * 40}\n".encode()

        report = verifier.verify(io.BytesIO(data))

        assert report.mismatches == [
            Mismatch(
                identifier=b"abc",
                algorithm="SHA1",
                expected=bytes(20),
                actual=bytes.fromhex(sha1_abc),
            )
        ]
        assert report.mismatches[0].describe() == f"abc\tSHA1: expected {'0' * 40}, got {sha1_abc}"

    def test_empty_corpus(self, verifier: ManifestVerifier, registry: AlgorithmRegistry) -> None:
        """A header-only manifest checks zero rows and passes."""
        report = verifier.verify(_word_manifest(registry, b"  \n"))

        assert report.ok
        assert report.rows_checked == 0


class TestLogging:
    """Tests for verification diagnostics."""

    def test_mismatches_logged_as_warning(self, registry: AlgorithmRegistry) -> None:
        logger = MagicMock(spec=ILogger)
        verifier = ManifestVerifier(registry, logger=logger)

        verifier.verify(io.BytesIO(f"word\tSHA1\nabc\t{'0' * 40}\n".encode()))

        logger.warning.assert_called_once()
        logger.info.assert_not_called()

    def test_clean_manifest_logged_as_info(self, registry: AlgorithmRegistry) -> None:
        logger = MagicMock(spec=ILogger)
        verifier = ManifestVerifier(registry, logger=logger)

        verifier.verify(_word_manifest(registry, b"abc"))

        logger.info.assert_called_once()
        logger.warning.assert_not_called()
