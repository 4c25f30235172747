from __future__ import annotations


def split_assignment(raw: str) -> tuple[str, str] | None:
    """Split ``key=value`` on the first ``=``; ``None`` when there is no ``=`` or no key."""
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()
