"""
Digest algorithm registry.

Maps canonical algorithm names to strategies and validates the names a run
asks for before any entity is read.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.exceptions import InvalidConfigurationError, UnknownAlgorithmError
from .strategies import HashStrategy, default_strategies


def normalize_algorithm_name(name: str) -> str:
    """Lookup key for an algorithm name: case-insensitive, dashes/underscores ignored."""
    return name.strip().upper().replace("-", "").replace("_", "")


class HashAlgorithmRegistry:
    """
    Registry for digest algorithm strategies.

    Lookups accept any spelling that normalizes to a registered name, so
    'sha256', 'sha-256' and 'SHA-256' all resolve to the 'SHA-256' strategy.

    Example:
        registry = HashAlgorithmRegistry()
        strategy = registry.resolve("sha-256")
        strategy.algorithm_name  # 'SHA-256'

        registry.register(MyCustomStrategy())
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._strategies: dict[str, HashStrategy] = {}
        if register_defaults:
            for strategy in default_strategies():
                self.register(strategy)

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a digest strategy, replacing any with the same name.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[normalize_algorithm_name(strategy.algorithm_name)] = strategy

    def get(self, algorithm: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        Args:
            algorithm: Algorithm name in any accepted spelling

        Returns:
            HashStrategy or None if not registered
        """
        return self._strategies.get(normalize_algorithm_name(algorithm))

    def resolve(self, algorithm: str) -> HashStrategy:
        """
        Resolve an algorithm name to a usable strategy.

        Args:
            algorithm: Algorithm name

        Returns:
            The registered strategy

        Raises:
            UnknownAlgorithmError: If the name is not registered, or the
                interpreter cannot compute it
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnknownAlgorithmError(algorithm, available=self.available_algorithms)
        if not strategy.is_available():
            raise UnknownAlgorithmError(
                algorithm,
                reason="not provided by this Python/OpenSSL build",
                available=self.available_algorithms,
            )
        return strategy

    def resolve_all(self, algorithms: Iterable[str]) -> list[HashStrategy]:
        """
        Resolve a list of algorithm names, preserving order.

        Raises:
            InvalidConfigurationError: If the list is empty or names an
                algorithm twice
            UnknownAlgorithmError: If any name cannot be resolved
        """
        strategies: list[HashStrategy] = []
        seen: set[str] = set()
        for name in algorithms:
            strategy = self.resolve(name)
            if strategy.algorithm_name in seen:
                raise InvalidConfigurationError(
                    f"Algorithm listed more than once: {strategy.algorithm_name}",
                    key="algorithms",
                    value=name,
                )
            seen.add(strategy.algorithm_name)
            strategies.append(strategy)
        if not strategies:
            raise InvalidConfigurationError("No digest algorithm configured", key="algorithms")
        return strategies

    def compute_hash(self, algorithm: str, data: bytes) -> str:
        """
        Compute the digest of in-memory data.

        Args:
            algorithm: Algorithm name
            data: Data to hash

        Returns:
            Lowercase hex digest
        """
        strategy = self.resolve(algorithm)
        hasher: Any = strategy.create_hasher()
        strategy.update(hasher, data)
        return strategy.hexdigest(hasher)

    @property
    def available_algorithms(self) -> list[str]:
        """Canonical names this interpreter can compute, in registration order."""
        return [s.algorithm_name for s in self._strategies.values() if s.is_available()]

    @property
    def registered_algorithms(self) -> list[str]:
        """All registered canonical names, whether or not they are available."""
        return [s.algorithm_name for s in self._strategies.values()]

    def __contains__(self, algorithm: str) -> bool:
        """Check if algorithm is registered."""
        return normalize_algorithm_name(algorithm) in self._strategies
