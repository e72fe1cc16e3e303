"""
Unit tests for the hashcorpus CLI commands.

Tests the CLI behavior through Click's test runner:
- blobs and words write manifests to stdout
- Fatal errors exit non-zero
- verify reports mismatches
- config get and --version
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from hashcorpus.cli import CorpusContext, cli
from hashcorpus.cli.commands.words import words
from hashcorpus.core.exceptions import InitializationError
from hashcorpus.core.settings import load_settings

HEADER_NAMES = b"SHA1\tSHA256\tSHA224\tSHA512\tSHA384\tSHA512/224\tSHA512/256\n"
SHA1_ABC = b"a9993e364706816aba3e25717850c26c9cd0d89d"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def corpus_ctx(tmp_path: Path) -> CorpusContext:
    """A context with a small blob corpus."""
    return CorpusContext(
        cwd=tmp_path,
        settings=load_settings(
            start_dir=str(tmp_path), blobs={"count": 4, "max_length": 32}
        ),
    )


class TestWordsCommand:
    """Tests for 'hashcorpus words'."""

    def test_manifest_of_stdin_words(self, runner, corpus_ctx) -> None:
        """One header and one row per word."""
        result = runner.invoke(cli, ["words"], input=b"abc  def\tghi\n", obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        lines = result.stdout_bytes.split(b"\n")
        assert lines[0] + b"\n" == b"word\t" + HEADER_NAMES
        assert [line.split(b"\t")[0] for line in lines[1:-1]] == [b"abc", b"def", b"ghi"]
        assert lines[1].split(b"\t")[1] == SHA1_ABC
        assert lines[-1] == b""

    def test_empty_input_prints_header_only(self, runner, corpus_ctx) -> None:
        result = runner.invoke(cli, ["words"], input=b"", obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b"word\t" + HEADER_NAMES

    def test_standalone_command(self, runner) -> None:
        """The words command also runs without the group."""
        result = runner.invoke(words, input=b"abc")

        assert result.exit_code == 0, result.output
        assert result.stdout_bytes.startswith(b"word\t")
        assert SHA1_ABC in result.stdout_bytes

    def test_initialization_failure_writes_no_manifest(
        self, runner, corpus_ctx, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An unavailable digest capability aborts before any output."""

        def failing_registry():
            raise InitializationError("Digest capability unavailable", algorithm="SHA512/224")

        monkeypatch.setattr("hashcorpus.hashing.create_registry", failing_registry)

        result = runner.invoke(cli, ["words"], input=b"abc\n", obj=corpus_ctx)

        assert result.exit_code == 1
        assert b"word\t" not in result.stdout_bytes
        assert "Digest capability unavailable" in result.output


class TestBlobsCommand:
    """Tests for 'hashcorpus blobs'."""

    def test_writes_blobs_and_manifest(self, runner, corpus_ctx, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        result = runner.invoke(cli, ["blobs", str(out_dir)], obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        lines = result.stdout_bytes.splitlines()
        assert lines[0] + b"\n" == b"filename\t" + HEADER_NAMES
        assert [line.split(b"\t")[0] for line in lines[1:]] == [
            b"blob0.bin",
            b"blob1.bin",
            b"blob2.bin",
            b"blob3.bin",
        ]
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "blob0.bin",
            "blob1.bin",
            "blob2.bin",
            "blob3.bin",
        ]

    def test_defaults_to_current_directory(self, runner, corpus_ctx, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["blobs"], obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        assert (tmp_path / "blob0.bin").exists()

    def test_reproducible_output(self, runner, corpus_ctx, tmp_path: Path) -> None:
        """Two runs print byte-identical manifests."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()

        a = runner.invoke(cli, ["blobs", str(first)], obj=corpus_ctx)
        b = runner.invoke(cli, ["blobs", str(second)], obj=corpus_ctx)

        assert a.exit_code == 0 and b.exit_code == 0
        assert a.stdout_bytes == b.stdout_bytes

    def test_missing_output_directory(self, runner, corpus_ctx, tmp_path: Path) -> None:
        """A directory that does not exist is fatal."""
        result = runner.invoke(cli, ["blobs", str(tmp_path / "missing")], obj=corpus_ctx)

        assert result.exit_code == 1
        assert "Failed to write blob" in result.output
        assert not (tmp_path / "missing").exists()


class TestVerifyCommand:
    """Tests for 'hashcorpus verify'."""

    def _write_corpus(self, runner, corpus_ctx, directory: Path) -> Path:
        directory.mkdir()
        result = runner.invoke(cli, ["blobs", str(directory)], obj=corpus_ctx)
        assert result.exit_code == 0, result.output
        manifest = directory / "manifest.tsv"
        manifest.write_bytes(result.stdout_bytes)
        return manifest

    def test_fresh_corpus_passes(self, runner, corpus_ctx, tmp_path: Path) -> None:
        manifest = self._write_corpus(runner, corpus_ctx, tmp_path / "corpus")

        result = runner.invoke(cli, ["verify", str(manifest)], obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        assert "Checked 4 blobs under 7 algorithms: 0 mismatches" in result.output

    def test_tampered_blob_fails(self, runner, corpus_ctx, tmp_path: Path) -> None:
        manifest = self._write_corpus(runner, corpus_ctx, tmp_path / "corpus")
        (tmp_path / "corpus" / "blob1.bin").write_bytes(b"tampered")

        result = runner.invoke(cli, ["verify", str(manifest)], obj=corpus_ctx)

        assert result.exit_code == 1
        assert "blob1.bin\tSHA1: expected" in result.output
        assert "7 mismatches" in result.output

    def test_word_manifest_from_stdin(self, runner, corpus_ctx) -> None:
        manifest = runner.invoke(cli, ["words"], input=b"adam ignatius", obj=corpus_ctx)

        result = runner.invoke(cli, ["verify", "-"], input=manifest.stdout_bytes, obj=corpus_ctx)

        assert result.exit_code == 0, result.output
        assert "Checked 2 words" in result.output

    def test_malformed_manifest(self, runner, corpus_ctx) -> None:
        result = runner.invoke(cli, ["verify", "-"], input=b"word\tMD5\n", obj=corpus_ctx)

        assert result.exit_code == 1
        assert "Unknown algorithm column: MD5" in result.output


class TestConfigErrors:
    """Invalid configuration aborts with a one-line diagnostic."""

    def test_invalid_environment_value(self, runner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HASHCORPUS_BLOBS__SEED", "-5")

        result = runner.invoke(cli, ["words"], input=b"abc\n")

        assert result.exit_code == 1
        assert "Error: Invalid configuration value for blobs.seed" in result.output
        assert b"word\t" not in result.stdout_bytes
        assert not isinstance(result.exception, ValueError)

    def test_invalid_file_value(self, runner, tmp_path: Path) -> None:
        (tmp_path / ".hashcorpus.toml").write_text('[blobs]\nprng = "mt"\n')

        result = runner.invoke(cli, ["blobs"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration value for blobs.prng" in result.output
        assert not (tmp_path / "blob0.bin").exists()

    def test_standalone_command_invalid_value(
        self, runner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Console scripts without the group report the error the same way."""
        monkeypatch.setenv("HASHCORPUS_WORDS__CHUNK_SIZE", "0")

        result = runner.invoke(words, input=b"abc\n")

        assert result.exit_code == 1
        assert "Error: Invalid configuration value for words.chunk_size" in result.output

    def test_config_get_invalid_value(self, runner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HASHCORPUS_LOGGING__LEVEL", "loud")

        result = runner.invoke(cli, ["config", "get", "logging.level"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration value for logging.level" in result.output


class TestGroup:
    """Tests for the top-level group."""

    def test_no_command_prints_help(self, runner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "blobs" in result.output
        assert "words" in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "hashcorpus, version" in result.output

    def test_config_get_reads_environment(self, runner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HASHCORPUS_BLOBS__SEED", "7")

        result = runner.invoke(cli, ["config", "get", "blobs.seed"])

        assert result.exit_code == 0, result.output
        assert "blobs.seed: 7" in result.output

    def test_config_get_unknown_key(self, runner) -> None:
        result = runner.invoke(cli, ["config", "get", "blobs.colour"])

        assert result.exit_code == 0
        assert "blobs.colour: (not set)" in result.output

    def test_config_list(self, runner) -> None:
        result = runner.invoke(cli, ["config", "list"])

        assert result.exit_code == 0
        assert "blobs.max_length" in result.output
        assert "Default: 8192" in result.output
