"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from domain import ConfigStore


@dataclass
class StoreContext:
    """Holds mutable state shared across BDD steps."""

    store: ConfigStore = field(default_factory=ConfigStore)
    other: ConfigStore | None = None
    seed_path: Path | None = None
    result: str | None = None


@pytest.fixture()
def ctx() -> StoreContext:
    return StoreContext()
