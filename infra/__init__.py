"""Infrastructure adapters – concrete implementations of domain ports."""

from .concurrency import SynchronizedConfigStore
from .config import KeyValueFileError, KeyValueFileSource
from .runtime import StructuredLogger, SystemClock

__all__ = [
    "SynchronizedConfigStore",
    "KeyValueFileSource",
    "KeyValueFileError",
    "StructuredLogger",
    "SystemClock",
]
