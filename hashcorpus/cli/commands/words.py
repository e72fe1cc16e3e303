"""
Native Click implementation of the words command.

Usage: hashcorpus words < input
       hashcorpus-words < input
"""

from __future__ import annotations

import click

from ...core.exceptions import HashCorpusException
from ...corpus.words import WordCorpusProcessor
from ...presenters.manifest import WORD_LABEL, ManifestWriter
from ..context import CorpusContext
from ..decorators import pass_corpus_context
from ._services import load_services


@click.command("words")
@pass_corpus_context
def words(ctx: CorpusContext) -> None:
    """Print a manifest of every whitespace-delimited word on stdin."""
    registry, logger = load_services(ctx)

    processor = WordCorpusProcessor(
        registry, chunk_size=ctx.settings.words.chunk_size, logger=logger
    )
    writer = ManifestWriter(click.get_binary_stream("stdout"), WORD_LABEL, registry.names)

    try:
        writer.write_all(processor.process(click.get_binary_stream("stdin")))
    except HashCorpusException as e:
        logger.error("Word corpus processing failed after %d rows: %s", writer.rows_written, e)
        raise click.ClickException(str(e)) from e
