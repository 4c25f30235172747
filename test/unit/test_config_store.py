from __future__ import annotations

import pytest

from domain import ConfigStore


def test_get_returns_initial_value() -> None:
    assert ConfigStore({"key": "value"}).get("key") == "value"


def test_get_missing_key_returns_none() -> None:
    assert ConfigStore({"key": "value"}).get("missing") is None


def test_set_overwrites_initial_value() -> None:
    store = ConfigStore({"key": "value"})
    store.set("key", "new_value")
    assert store.get("key") == "new_value"


def test_set_inserts_into_empty_store() -> None:
    store = ConfigStore({})
    store.set("a", "1")
    assert store.get("a") == "1"


def test_empty_store_has_nothing() -> None:
    store = ConfigStore({})
    assert store.get("a") is None
    assert len(store) == 0


def test_default_construction_is_empty() -> None:
    assert len(ConfigStore()) == 0
    assert len(ConfigStore(None)) == 0


def test_every_initial_entry_is_readable() -> None:
    initial = {"host": "localhost", "port": "5432", "empty": ""}
    store = ConfigStore(initial)
    for key, value in initial.items():
        assert store.get(key) == value


def test_set_same_value_twice_is_idempotent() -> None:
    store = ConfigStore()
    store.set("k", "v")
    store.set("k", "v")
    assert store.get("k") == "v"
    assert len(store) == 1


def test_last_write_wins() -> None:
    store = ConfigStore({"k": "v0"})
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    assert len(store) == 1


def test_stores_from_same_mapping_are_isolated() -> None:
    initial = {"shared": "original"}
    first = ConfigStore(initial)
    second = ConfigStore(initial)

    first.set("shared", "changed")
    first.set("extra", "1")

    assert second.get("shared") == "original"
    assert second.get("extra") is None
    assert initial == {"shared": "original"}


def test_caller_mapping_does_not_alias_store() -> None:
    initial = {"key": "value"}
    store = ConfigStore(initial)

    initial["key"] = "mutated"
    initial["added"] = "later"

    assert store.get("key") == "value"
    assert store.get("added") is None


def test_has_and_contains() -> None:
    store = ConfigStore({"foo": "bar"})
    assert store.has("foo") is True
    assert store.has("missing") is False
    assert "foo" in store
    assert "missing" not in store


def test_has_is_true_for_empty_string_value() -> None:
    store = ConfigStore({"blank": ""})
    assert store.has("blank")
    assert store.get("blank") == ""


def test_all_reflects_entries_and_later_updates() -> None:
    store = ConfigStore({"foo": "bar"})
    view = store.all()
    assert dict(view) == {"foo": "bar"}

    store.set("baz", "qux")
    assert view["baz"] == "qux"


def test_all_is_read_only() -> None:
    store = ConfigStore({"foo": "bar"})
    with pytest.raises(TypeError):
        store.all()["foo"] = "hacked"  # type: ignore[index]
    assert store.get("foo") == "bar"


def test_iteration_yields_keys() -> None:
    store = ConfigStore({"a": "1", "b": "2"})
    assert sorted(store) == ["a", "b"]


def test_repr_hides_values() -> None:
    store = ConfigStore({"api_token": "very-secret"})
    assert "very-secret" not in repr(store)
    assert "entries=1" in repr(store)


@pytest.mark.parametrize(
    "initial",
    [
        {"port": 5432},
        {1: "one"},
        {"flag": None},
    ],
)
def test_non_string_initial_entries_are_rejected(initial: dict) -> None:
    with pytest.raises(TypeError):
        ConfigStore(initial)


def test_set_rejects_non_string_value() -> None:
    store = ConfigStore()
    with pytest.raises(TypeError, match="value must be str"):
        store.set("port", 5432)  # type: ignore[arg-type]
    assert store.get("port") is None


def test_set_rejects_non_string_key() -> None:
    store = ConfigStore()
    with pytest.raises(TypeError, match="key must be str"):
        store.set(1, "one")  # type: ignore[arg-type]
