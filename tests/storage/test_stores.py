import json

import pytest

from src.shopkeeper.shopkeeper.storage.json_store import JsonFileStore
from src.shopkeeper.shopkeeper.storage.mysql_store import MySQLStore
from src.shopkeeper.shopkeeper.storage.store import InMemoryStore


def test_in_memory_store_returns_copies():
    store = InMemoryStore()
    store.put("k", [{"a": 1}])

    got = store.get("k")
    got[0]["a"] = 2

    assert store.get("k") == [{"a": 1}]
    assert store.get("missing") is None


def test_json_store_roundtrip(tmp_path):
    store = JsonFileStore(tmp_path / "data")

    assert store.get("shopkeeper_attendance") is None
    store.put("shopkeeper_attendance", [{"id": "1", "date": "2025-03-01"}])

    assert store.get("shopkeeper_attendance") == [{"id": "1", "date": "2025-03-01"}]
    assert store.keys() == ["shopkeeper_attendance"]
    assert json.loads((tmp_path / "data" / "shopkeeper_attendance.json").read_text(encoding="utf-8"))


def test_json_store_corrupted_file_reads_as_empty(tmp_path):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    assert JsonFileStore(tmp_path).get("broken") == []


def test_json_store_rejects_path_like_keys(tmp_path):
    with pytest.raises(ValueError):
        JsonFileStore(tmp_path).put("../escape", [])


class FakeCursor:
    def __init__(self, db):
        self._db = db
        self._result = []

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        if sql.startswith("SELECT payload"):
            key = params[0]
            self._result = [{"payload": self._db[key]}] if key in self._db else []
        elif sql.startswith("INSERT INTO kv_store"):
            self._db[params[0]] = params[1]
        elif sql.startswith("SELECT collection_key"):
            self._result = [{"collection_key": k} for k in sorted(self._db)]

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db):
        self._db = db
        self.committed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self._db)

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.db = {}

    def connect(self):
        return FakeConnection(self.db)


def test_mysql_store_upserts_json_payload():
    factory = FakeConnFactory()
    store = MySQLStore(factory)

    assert store.get("shopkeeper_employees") is None
    store.put("shopkeeper_employees", [{"id": "1", "name": "Rahul"}])
    store.put("shopkeeper_employees", [{"id": "2", "name": "Priya"}])

    assert store.get("shopkeeper_employees") == [{"id": "2", "name": "Priya"}]
    assert store.keys() == ["shopkeeper_employees"]
    assert json.loads(factory.db["shopkeeper_employees"])[0]["name"] == "Priya"
