"""
Shared service lookup for corpus commands.
"""

from __future__ import annotations

import click

from ...core.bootstrap import bootstrap
from ...core.exceptions import HashCorpusException
from ...core.interfaces.logger import ILogger
from ...hashing.registry import AlgorithmRegistry
from ..context import CorpusContext


def load_services(ctx: CorpusContext) -> tuple[AlgorithmRegistry, ILogger]:
    """Bootstrap the container and resolve the verified registry and logger.

    Resolution happens before any output is written, so a missing digest
    capability aborts with no manifest at all.
    """
    container = bootstrap(ctx.settings)
    logger = container.resolve(ILogger)  # type: ignore[type-abstract]
    try:
        registry = container.resolve(AlgorithmRegistry)
    except HashCorpusException as e:
        logger.error("Algorithm registry initialization failed: %s", e)
        raise click.ClickException(str(e)) from e
    return registry, logger
