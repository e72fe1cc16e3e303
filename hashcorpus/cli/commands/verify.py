"""
Native Click implementation of the verify command.

Usage: hashcorpus verify MANIFEST [--blob-dir DIR]
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

import click

from ...core.exceptions import HashCorpusException
from ...presenters.manifest import FILENAME_LABEL
from ...services.verification import ManifestVerifier
from ..context import CorpusContext
from ..decorators import pass_corpus_context
from ._services import load_services


@click.command("verify")
@click.argument("manifest", type=click.File("rb"))
@click.option(
    "--blob-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the blobs of a filename manifest "
    "(default: the manifest's directory).",
)
@pass_corpus_context
def verify(ctx: CorpusContext, manifest: BinaryIO, blob_dir: Path | None) -> None:
    """Recompute every digest in MANIFEST and report mismatches.

    \b
    Examples:

        hashcorpus verify corpus/manifest.tsv

        hashcorpus-words < words.txt | hashcorpus verify -
    """
    registry, logger = load_services(ctx)

    if blob_dir is None:
        name = getattr(manifest, "name", "-")
        blob_dir = ctx.cwd if name in ("-", "<stdin>") else Path(name).parent

    try:
        report = ManifestVerifier(registry, logger=logger).verify(manifest, blob_dir=blob_dir)
    except HashCorpusException as e:
        logger.error("Manifest verification failed: %s", e)
        raise click.ClickException(str(e)) from e

    for mismatch in report.mismatches:
        click.echo(mismatch.describe())

    kind = "blobs" if report.label == FILENAME_LABEL else "words"
    click.echo(
        f"Checked {report.rows_checked} {kind} under {len(report.algorithms)} algorithms: "
        f"{len(report.mismatches)} mismatches"
    )
    if not report.ok:
        raise SystemExit(1)
