"""
Native Click implementation of the blobs command.

Usage: hashcorpus blobs [OUTPUT_DIR]
       hashcorpus-blobs [OUTPUT_DIR]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.exceptions import HashCorpusException
from ...corpus.blobs import BlobCorpusGenerator
from ...presenters.manifest import FILENAME_LABEL, ManifestWriter
from ..context import CorpusContext
from ..decorators import pass_corpus_context
from ._services import load_services


@click.command("blobs")
@click.argument(
    "output_dir",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@pass_corpus_context
def blobs(ctx: CorpusContext, output_dir: Path) -> None:
    """Write the blob corpus to OUTPUT_DIR and print its manifest.

    OUTPUT_DIR must exist and defaults to the current directory. Seed,
    count, maximum length and PRNG come from the [blobs] config section.
    """
    registry, logger = load_services(ctx)
    config = ctx.settings.blobs

    generator = BlobCorpusGenerator(registry, prng=config.prng, logger=logger)
    writer = ManifestWriter(click.get_binary_stream("stdout"), FILENAME_LABEL, registry.names)

    try:
        writer.write_all(
            generator.generate(
                seed=config.seed,
                count=config.count,
                max_length=config.max_length,
                output_directory=output_dir,
            )
        )
    except HashCorpusException as e:
        logger.error("Blob corpus generation failed after %d rows: %s", writer.rows_written, e)
        raise click.ClickException(str(e)) from e
