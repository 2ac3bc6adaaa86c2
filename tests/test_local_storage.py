"""Tests for the SQLite-backed local storage."""
import sqlite3

import pytest

from common.local_storage import LocalStorage


class TestLocalStorage:

    def test_get_missing_key_returns_default(self, storage):
        assert storage.get_item("nope") is None
        assert storage.get_item("nope", {"x": 1}) == {"x": 1}

    def test_set_and_get_round_trips_json(self, storage):
        storage.set_item("pms_user", {"name": "Sarah", "tags": ["a", "b"], "active": True})
        assert storage.get_item("pms_user") == {"name": "Sarah", "tags": ["a", "b"], "active": True}

    def test_set_overwrites_existing_value(self, storage):
        storage.set_item("k", 1)
        storage.set_item("k", 2)
        assert storage.get_item("k") == 2
        assert storage.keys() == ["k"]

    def test_remove_item(self, storage):
        storage.set_item("a", "x")
        storage.set_item("b", "y")
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert storage.keys() == ["b"]
        # removing something that is not there is fine
        storage.remove_item("a")

    def test_clear(self, storage):
        storage.set_item("a", 1)
        storage.set_item("b", 2)
        storage.clear()
        assert storage.keys() == []

    def test_values_survive_a_new_instance(self, tmp_path):
        db = tmp_path / "shared.db"
        LocalStorage(db).set_item("pms-auth-store", {"is_authenticated": True})
        assert LocalStorage(db).get_item("pms-auth-store") == {"is_authenticated": True}

    def test_unreadable_payload_falls_back_to_default(self, storage, caplog):
        conn = sqlite3.connect(storage.db_file)
        with conn:
            conn.execute("INSERT INTO local_storage (storage_key, payload) VALUES (?, ?)", ("bad", "{not json"))
        conn.close()

        assert storage.get_item("bad", "fallback") == "fallback"
        assert "bad" in caplog.text


class TestScopedStorage:

    def test_browsers_do_not_see_each_other(self, storage):
        a, b = storage.scoped("browser-aaaa"), storage.scoped("browser-bbbb")
        a.set_item("pms_token", "token-a")
        b.set_item("pms_token", "token-b")
        assert a.get_item("pms_token") == "token-a"
        assert b.get_item("pms_token") == "token-b"
        assert storage.get_item("pms_token") is None

    def test_keys_and_clear_stay_in_scope(self, storage):
        a, b = storage.scoped("browser-aaaa"), storage.scoped("browser-bbbb")
        storage.set_item("pms-settings-goals", {"max_goals_per_employee": 8})
        a.set_item("pms_user", {"name": "A"})
        b.set_item("pms_user", {"name": "B"})

        assert a.keys() == ["pms_user"]
        assert storage.keys() == ["pms-settings-goals"]

        a.clear()
        assert a.keys() == []
        assert b.get_item("pms_user") == {"name": "B"}
        assert storage.get_item("pms-settings-goals") == {"max_goals_per_employee": 8}

    def test_scoped_view_shares_the_file(self, storage):
        assert storage.scoped("browser-aaaa").db_file == storage.db_file

    def test_namespace_may_not_contain_separator(self, storage):
        with pytest.raises(ValueError):
            storage.scoped("a/b")
