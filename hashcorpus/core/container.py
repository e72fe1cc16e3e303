"""
Dependency injection container for hashcorpus.

Uses dependency-injector providers keyed by interface type. The container
holds the logger and the verified algorithm registry for the CLI.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Process-wide registry of service providers."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the global container (for testing)."""
        cls._instance = None

    def register_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        """
        Register a lazily created singleton service.

        The factory runs on first resolution. If it raises, the exception
        propagates to the caller of resolve() and nothing is cached.

        Args:
            interface: The interface type
            factory: Zero-argument callable building the service
        """
        self._providers[interface] = providers.Singleton(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, returning None if not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()

