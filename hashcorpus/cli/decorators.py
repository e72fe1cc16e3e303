"""
Click decorators for hashcorpus CLI commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import HashCorpusException
from .context import CorpusContext

F = TypeVar("F", bound=Callable[..., Any])


def pass_corpus_context(f: F) -> F:
    """Pass the CorpusContext as the first argument, creating it if needed.

    Commands run under the `hashcorpus` group get the context the group
    created. Commands run as standalone console scripts (hashcorpus-blobs,
    hashcorpus-words) have no group, so the context is created here.

    Usage:
        @click.command()
        @pass_corpus_context
        def words(ctx: CorpusContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        click_ctx = click.get_current_context()
        if not isinstance(click_ctx.obj, CorpusContext):
            try:
                click_ctx.obj = CorpusContext.create()
            except HashCorpusException as e:
                raise click.ClickException(str(e)) from e
        return f(click_ctx.obj, *args, **kwargs)

    return wrapper  # type: ignore[return-value]
