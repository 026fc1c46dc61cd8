"""
Tests for environment stores and the env proxy.
"""

import pytest

from envkit.store import MemoryStore, ProcessStore, env, get_store


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_set_get_contains(self):
        store = MemoryStore()
        store.set("A", 1)
        assert "A" in store
        assert store["A"] == 1
        assert store.get("B", "default") == "default"
        assert len(store) == 1

    def test_initial_values_copied(self):
        initial = {"A": "x"}
        store = MemoryStore(initial)
        store.set("B", "y")
        assert initial == {"A": "x"}
        assert store.as_dict() == {"A": "x", "B": "y"}

    def test_case_sensitive(self):
        store = MemoryStore({"TEST": 1})
        assert "test" not in store


class TestProcessStore:
    """Tests for the process-wide store."""

    def test_instances_share_state(self):
        ProcessStore().set("SHARED", True)
        assert get_store()["SHARED"] is True
        assert "SHARED" in ProcessStore()

    def test_reset(self):
        get_store().set("A", 1)
        ProcessStore.reset()
        assert len(get_store()) == 0


class TestEnvProxy:
    """Tests for the env proxy."""

    def test_getitem(self):
        get_store().set("PORT", 8080)
        assert env["PORT"] == 8080
        assert "PORT" in env

    def test_missing_raises_key_error(self):
        with pytest.raises(KeyError, match="NOPE"):
            _ = env["NOPE"]

    def test_get_default(self):
        assert env.get("NOPE", 5) == 5

    def test_iteration(self):
        get_store().set("A", 1)
        get_store().set("B", 2)
        assert sorted(env) == ["A", "B"]
        assert sorted(env.keys()) == ["A", "B"]
        assert dict(env.items()) == {"A": 1, "B": 2}
        assert len(env) == 2
