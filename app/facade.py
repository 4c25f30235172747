from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from domain.ports import ConfigRepositoryPort, LoggerPort

_SECRET_SEGMENTS = frozenset({"token", "secret", "password", "passwd", "apikey", "credentials"})
_SECRET_KEY_QUALIFIERS = frozenset({"api", "secret", "private", "access", "signing", "encryption"})
_SEGMENT_SPLIT = re.compile(r"[_.\-]+")


@dataclass(frozen=True)
class ConfigEntryView:
    key: str
    value: str
    masked: bool = False


class ConfigFacade:
    """
    UI-facing facade over a config store: lookups, updates and listings.
    """

    def __init__(
        self,
        *,
        config_repo: ConfigRepositoryPort,
        logger: LoggerPort,
    ) -> None:
        self._config_repo = config_repo
        self._logger = logger

    def has_value(self, key: str) -> bool:
        return self._config_repo.has(key)

    def get_value(self, key: str) -> str | None:
        return self._config_repo.get(key)

    def update_value(self, key: str, value: str) -> None:
        existed = self._config_repo.has(key)
        self._config_repo.set(key, value)
        # Never log the value itself.
        self._logger.info("config value updated", key=key, overwritten=existed)

    def list_entries(self, *, reveal_secrets: bool = False) -> Sequence[ConfigEntryView]:
        items = []
        for key, value in sorted(self._config_repo.all().items()):
            if not reveal_secrets and self.is_secret_key(key):
                items.append(ConfigEntryView(key=key, value=self._mask_secret(value), masked=True))
            else:
                items.append(ConfigEntryView(key=key, value=value))
        return items

    @staticmethod
    def is_secret_key(key: str) -> bool:
        segments = [s for s in _SEGMENT_SPLIT.split(key.lower()) if s]
        if any(s in _SECRET_SEGMENTS for s in segments):
            return True
        # api_key, secret_key, ... but not key or primary_key.
        return len(segments) >= 2 and segments[-1] == "key" and segments[-2] in _SECRET_KEY_QUALIFIERS

    @staticmethod
    def _mask_secret(value: str) -> str:
        if not value:
            return ""
        if len(value) <= 3:
            return "*" * len(value)
        return value[0] + ("*" * (len(value) - 2)) + value[-1]
