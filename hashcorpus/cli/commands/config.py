"""
Native Click implementation of the config command.

Usage: hashcorpus config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ...core.exceptions import HashCorpusException


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .hashcorpus.toml, [tool.hashcorpus] in
    pyproject.toml, and HASHCORPUS_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        hashcorpus config list               # List all options

        hashcorpus config get blobs.seed     # Get the effective value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")

    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
def config_get_cmd(key: str) -> None:
    """Get the effective value of a config key.

    Arguments:

        KEY    The config key to get (e.g. blobs.count)
    """
    try:
        value = config_get(key)
    except HashCorpusException as e:
        raise click.ClickException(str(e)) from e

    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
