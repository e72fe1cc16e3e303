"""
Digest algorithm registry.

Holds the ordered set of algorithms every manifest is computed under.
Insertion order is column order.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..core.exceptions import DigestComputationError, InitializationError
from .descriptors import DEFAULT_ALGORITHMS, AlgorithmDescriptor


class AlgorithmRegistry:
    """
    Ordered registry of digest algorithm descriptors.

    Example:
        registry = create_registry()

        digest = registry.compute_digest("SHA256", b"adam")
        for name, digest in registry.digest_all(b"adam"):
            ...
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register the seven SHA-1/SHA-2 variants
        """
        self._algorithms: dict[str, AlgorithmDescriptor] = {}
        if register_defaults:
            for descriptor in DEFAULT_ALGORITHMS:
                self.register(descriptor)

    def register(self, descriptor: AlgorithmDescriptor) -> None:
        """
        Append an algorithm after those already registered.

        Raises:
            ValueError: If the name is already registered
        """
        if descriptor.name in self._algorithms:
            raise ValueError(f"Hash algorithm already registered: {descriptor.name}")
        self._algorithms[descriptor.name] = descriptor

    def get(self, algorithm: str) -> AlgorithmDescriptor | None:
        """Get a descriptor by name, or None if not registered."""
        return self._algorithms.get(algorithm)

    def verify(self) -> None:
        """
        Construct every digest capability once and check its output length.

        Raises:
            InitializationError: If any algorithm is unavailable or
                produces a digest of the wrong length
        """
        for descriptor in self:
            try:
                digest = descriptor.digest(b"")
            except ValueError as e:
                # hashlib raises ValueError for digests OpenSSL does not provide
                raise InitializationError(
                    f"Digest capability unavailable: {descriptor.name}",
                    algorithm=descriptor.name,
                    cause=e,
                ) from e
            if len(digest) != descriptor.digest_length:
                raise InitializationError(
                    f"Digest capability for {descriptor.name} produced "
                    f"{len(digest)} bytes, expected {descriptor.digest_length}",
                    algorithm=descriptor.name,
                )

    def compute_digest(self, algorithm: AlgorithmDescriptor | str, data: bytes) -> bytes:
        """
        Compute the digest of data under one algorithm.

        Args:
            algorithm: Descriptor or registered algorithm name
            data: Bytes to digest

        Returns:
            Exactly algorithm.digest_length bytes

        Raises:
            ValueError: If the algorithm name is not registered
            DigestComputationError: If the capability fails or returns
                the wrong number of bytes
        """
        descriptor = self._resolve(algorithm)
        try:
            digest = descriptor.digest(data)
        except Exception as e:
            raise DigestComputationError(
                f"Digest computation failed for {descriptor.name}",
                algorithm=descriptor.name,
                cause=e,
            ) from e

        if len(digest) != descriptor.digest_length:
            raise DigestComputationError(
                f"Digest for {descriptor.name} has the wrong length",
                algorithm=descriptor.name,
                expected_length=descriptor.digest_length,
                actual_length=len(digest),
            )
        return digest

    def digest_all(self, data: bytes) -> tuple[tuple[str, bytes], ...]:
        """Digest data under every algorithm, in registry order."""
        return tuple((descriptor.name, self.compute_digest(descriptor, data)) for descriptor in self)

    def _resolve(self, algorithm: AlgorithmDescriptor | str) -> AlgorithmDescriptor:
        if isinstance(algorithm, AlgorithmDescriptor):
            return algorithm
        descriptor = self.get(algorithm)
        if descriptor is None:
            raise ValueError(f"Unknown hash algorithm: {algorithm}")
        return descriptor

    @property
    def names(self) -> list[str]:
        """Algorithm names in column order."""
        return list(self._algorithms.keys())

    def __iter__(self) -> Iterator[AlgorithmDescriptor]:
        return iter(self._algorithms.values())

    def __len__(self) -> int:
        return len(self._algorithms)

    def __contains__(self, algorithm: str) -> bool:
        return algorithm in self._algorithms


def create_registry() -> AlgorithmRegistry:
    """
    Build the default registry and verify every algorithm is usable.

    Raises:
        InitializationError: If a digest capability is unavailable
    """
    registry = AlgorithmRegistry()
    registry.verify()
    return registry
