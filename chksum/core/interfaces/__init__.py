"""
Interface definitions shared between the engine and its collaborators.
"""

from .logger import ILogger
from .presenter import IPresenter
from .sink import DigestSink

__all__ = [
    "DigestSink",
    "ILogger",
    "IPresenter",
]
