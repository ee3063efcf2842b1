from __future__ import annotations

from pathlib import Path

from src.absence_tracker.absence_tracker.database import bootstrap
from src.absence_tracker.absence_tracker.database.connection import DatabaseConnection

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_schema_statements_skip_create_database_and_use():
    sql = bootstrap._strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))

    statements = list(bootstrap._iter_sql_statements(sql))

    assert len(statements) == 1
    assert "CREATE TABLE IF NOT EXISTS kv_store" in statements[0]
    assert "CREATE DATABASE" not in sql
    assert "USE absence_db" not in sql


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO kv_store (k, v) VALUES ('a;b', \"c;d\");\nSELECT 'it\\'s;';\n  \n"

    assert list(bootstrap._iter_sql_statements(sql)) == [
        "INSERT INTO kv_store (k, v) VALUES ('a;b', \"c;d\")",
        "SELECT 'it\\'s;'",
    ]


class FakeCursor:
    def __init__(self, log):
        self._log = log

    def execute(self, sql):
        self._log.append(sql)


class FakeConnection:
    def __init__(self, log):
        self._log = log
        self.committed = False

    def cursor(self):
        return FakeCursor(self._log)

    def commit(self):
        self.committed = True

    def close(self):
        pass


def test_apply_schema_executes_each_statement(monkeypatch):
    log: list[str] = []
    connects: list[bool] = []

    def fake_connect(target, *, with_database=True):
        connects.append(with_database)
        return FakeConnection(log)

    monkeypatch.setattr(bootstrap, "_connect", fake_connect)

    bootstrap.apply_schema({"database": "faltas_db"}, schema_path=SCHEMA)

    assert connects == [False, True]
    assert log[0].startswith("CREATE DATABASE IF NOT EXISTS `faltas_db`")
    assert len(log) == 2
    assert "CREATE TABLE IF NOT EXISTS kv_store" in log[1]


def test_from_dict_builds_independent_connections():
    base = {"host": "localhost", "user": "root", "password": "", "database": "one"}

    first = DatabaseConnection.from_dict(base)
    second = DatabaseConnection.from_dict({**base, "database": "two", "port": "3307"})

    assert first is not second
    assert first.config.database == "one"
    assert first.config.port == 3306
    assert second.config.database == "two"
    assert second.config.port == 3307
