"""
Application bootstrap for hashcorpus.

Registers the logger and the algorithm registry with the DI container.
Call once at CLI startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

if TYPE_CHECKING:
    from .settings import CorpusSettings

_initialized = False


def bootstrap(settings: CorpusSettings) -> ServiceContainer:
    """
    Bootstrap the hashcorpus application.

    Both services are lazy singletons: the algorithm registry is built and
    verified on first resolution, so an unavailable digest capability
    surfaces as InitializationError before any output is written.

    Args:
        settings: Loaded settings (logging section is used here)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    from ..hashing import AlgorithmRegistry, create_registry
    from ..services.logging import CorpusLogger

    logging_config = settings.logging
    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: CorpusLogger.from_config(logging_config),
    )
    container.register_singleton(AlgorithmRegistry, factory=create_registry)

    _initialized = True
    return container


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False

