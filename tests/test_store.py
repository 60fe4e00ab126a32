"""Tests for the sqlite preference store."""

import pytest

from folio.store import PreferenceStore


class TestPreferenceStore:
    def test_missing_key(self, store):
        assert store.get("theme") is None

    def test_set_and_get(self, store):
        store.set("theme", "dark")
        assert store.get("theme") == "dark"

    def test_upsert(self, store):
        store.set("theme", "dark")
        store.set("theme", "light")
        assert store.get("theme") == "light"
        assert store.conn.execute("SELECT COUNT(*) FROM preferences").fetchone()[0] == 1

    def test_delete(self, store):
        store.set("theme", "dark")
        assert store.delete("theme") is True
        assert store.delete("theme") is False
        assert store.get("theme") is None

    def test_persists_across_connections(self, config):
        first = PreferenceStore(config)
        first.init_db()
        first.set("theme", "dark")
        first.close()

        second = PreferenceStore(config)
        second.init_db()
        try:
            assert second.get("theme") == "dark"
        finally:
            second.close()

    def test_uninitialized_raises(self, config):
        with pytest.raises(RuntimeError, match="init_db"):
            PreferenceStore(config).get("theme")

    def test_closed_raises(self, config):
        s = PreferenceStore(config)
        s.init_db()
        s.close()
        with pytest.raises(RuntimeError):
            s.set("theme", "dark")
