"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_config_repository import InMemoryConfigRepository, ProbingConfigRepository
from .fake_runtime import FixedClock, InMemoryLogger

__all__ = [
    "InMemoryConfigRepository",
    "ProbingConfigRepository",
    "FixedClock",
    "InMemoryLogger",
]
