"""
Click-based CLI for hashcorpus.

Usage:
    from hashcorpus.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import HashCorpusException
from .context import CorpusContext

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hashcorpus")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashcorpus")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """hashcorpus - digest fixture corpora for hash implementations

    Emits tab-separated manifests of SHA-1 and SHA-2 digests for a
    seeded blob corpus or for the words of a text.

    \b
    Corpora:
        hashcorpus blobs [DIR]     Write blobs to DIR, manifest to stdout
        hashcorpus words           Manifest of the words on stdin

    \b
    Checking:
        hashcorpus verify FILE     Recompute and compare a manifest

    \b
    Configuration:
        hashcorpus config          View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif not isinstance(ctx.obj, CorpusContext):
        try:
            ctx.obj = CorpusContext.create()
        except HashCorpusException as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "CorpusContext",
    "__version__",
    "cli",
    "register_commands",
]
