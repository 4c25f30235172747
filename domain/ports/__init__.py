from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ConfigRepositoryPort(Protocol):
    """Point lookups and point updates of string configuration values."""

    @abstractmethod
    def has(self, key: str) -> bool:
        ...

    @abstractmethod
    def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def all(self) -> Mapping[str, str]:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source for deterministic and easily testable code."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "ConfigRepositoryPort",
    "ClockPort",
    "LoggerPort",
]
