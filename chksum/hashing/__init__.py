"""
Digest algorithm strategies and registry.

New algorithms are added by registering a HashStrategy; nothing else in the
engine needs to change.
"""

from .registry import HashAlgorithmRegistry, normalize_algorithm_name
from .strategies import (
    Blake3Strategy,
    Crc32Strategy,
    HashlibStrategy,
    HashStrategy,
    default_strategies,
    extension_for,
)

__all__ = [
    "Blake3Strategy",
    "Crc32Strategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "HashlibStrategy",
    "default_strategies",
    "extension_for",
    "normalize_algorithm_name",
]
