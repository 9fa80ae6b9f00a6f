"""
Digest algorithm strategy implementations.

Each strategy encapsulates the logic for a specific hash algorithm,
following the Strategy pattern for extensibility.
"""

from __future__ import annotations

import hashlib
import zlib
from abc import ABC, abstractmethod
from typing import Any

import blake3


def extension_for(algorithm_name: str) -> str:
    """Digest file extension for an algorithm: 'SHA-256' -> 'sha256'."""
    return algorithm_name.lower().replace("-", "")


class HashStrategy(ABC):
    """
    Abstract base class for digest algorithm strategies.

    Implementations must provide:
    - algorithm_name: Canonical identifier for the algorithm (e.g. 'SHA-256')
    - create_hasher(): Factory method for incremental hasher instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return canonical algorithm name (e.g., 'MD5', 'SHA-256')."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    @property
    def extension(self) -> str:
        """File extension used for per-entity digest files (e.g. 'sha256')."""
        return extension_for(self.algorithm_name)

    def is_available(self) -> bool:
        """Whether this interpreter can compute the algorithm."""
        return True

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def hexdigest(self, hasher: Any) -> str:
        """Get lowercase hex digest from hasher."""
        return hasher.hexdigest().lower()


class HashlibStrategy(HashStrategy):
    """Strategy backed by a hashlib (OpenSSL) digest constructor."""

    def __init__(self, algorithm_name: str, hashlib_name: str) -> None:
        self._algorithm_name = algorithm_name
        self._hashlib_name = hashlib_name

    @property
    def algorithm_name(self) -> str:
        return self._algorithm_name

    def is_available(self) -> bool:
        # md4 and ripemd160 depend on the OpenSSL build / legacy provider
        if self._hashlib_name not in hashlib.algorithms_available:
            return False
        try:
            hashlib.new(self._hashlib_name)
        except ValueError:
            return False
        return True

    def create_hasher(self) -> Any:
        return hashlib.new(self._hashlib_name)

    def __repr__(self) -> str:
        return f"HashlibStrategy({self._algorithm_name!r}, {self._hashlib_name!r})"


class _Crc32Hasher:
    """Incremental CRC32 with the hashlib update/hexdigest surface."""

    def __init__(self) -> None:
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def hexdigest(self) -> str:
        return f"{self._value & 0xFFFFFFFF:08x}"


class Crc32Strategy(HashStrategy):
    """CRC32 checksum - not cryptographic, cheap integrity check."""

    @property
    def algorithm_name(self) -> str:
        return "CRC32"

    def create_hasher(self) -> Any:
        return _Crc32Hasher()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - fast cryptographic hash."""

    @property
    def algorithm_name(self) -> str:
        return "BLAKE3"

    def create_hasher(self) -> Any:
        return blake3.blake3()


def default_strategies() -> list[HashStrategy]:
    """Built-in strategies, in the order they are listed to users."""
    return [
        Crc32Strategy(),
        HashlibStrategy("MD4", "md4"),
        HashlibStrategy("MD5", "md5"),
        HashlibStrategy("SHA-1", "sha1"),
        HashlibStrategy("SHA-224", "sha224"),
        HashlibStrategy("SHA-256", "sha256"),
        HashlibStrategy("SHA-384", "sha384"),
        HashlibStrategy("SHA-512", "sha512"),
        HashlibStrategy("SHA3-256", "sha3_256"),
        HashlibStrategy("SHA3-512", "sha3_512"),
        HashlibStrategy("RIPEMD160", "ripemd160"),
        HashlibStrategy("BLAKE2b", "blake2b"),
        HashlibStrategy("BLAKE2s", "blake2s"),
        Blake3Strategy(),
    ]
