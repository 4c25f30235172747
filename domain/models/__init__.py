from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"config {name} must be str, got {type(value).__name__}")
    return value


class ConfigStore:
    """
    In-memory mapping of configuration keys to values.

    The store owns its entries: the initial mapping is copied on
    construction, so later changes to the caller's mapping never show up
    here. Looking up a missing key returns ``None`` rather than raising.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._entries[_require_str("key", key)] = _require_str("value", value)

    def has(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        self._entries[_require_str("key", key)] = _require_str("value", value)

    def all(self) -> Mapping[str, str]:
        """Read-only live view of every entry."""
        return MappingProxyType(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        # Values may be secrets.
        return f"ConfigStore(entries={len(self._entries)})"


__all__ = ["ConfigStore"]
