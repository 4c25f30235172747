from __future__ import annotations

import threading
from typing import Mapping

from domain import ConfigRepositoryPort


class SynchronizedConfigStore:
    """Wraps a ``ConfigRepositoryPort`` so every call runs under one lock.

    ``all()`` returns a snapshot copied while the lock is held; a live view
    would let readers race with writers.
    """

    def __init__(self, inner: ConfigRepositoryPort) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    def has(self, key: str) -> bool:
        with self._lock:
            return self._inner.has(key)

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._inner.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._inner.set(key, value)

    def all(self) -> Mapping[str, str]:
        with self._lock:
            return dict(self._inner.all())
